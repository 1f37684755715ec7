[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data-structure and algorithm routines: string search, graphs, backtracking, containers, expression evaluation, sorting and hashing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "kmp",
    "boyer-moore",
    "radix-sort",
    "backtracking",
    "linked-list",
    "hash-map",
    "postfix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-strings = "dsakit.strings:main"
dsakit-graphs = "dsakit.graphs:main"
dsakit-backtracking = "dsakit.backtracking:main"
dsakit-linked = "dsakit.linked:main"
dsakit-containers = "dsakit.containers:main"
dsakit-expression = "dsakit.expression:main"
dsakit-sorting = "dsakit.sorting:main"
dsakit-hashing = "dsakit.hashing:main"
dsakit-guess = "dsakit.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
