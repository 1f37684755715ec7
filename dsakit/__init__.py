"""Classic data-structure and algorithm routines: string search, graphs,
backtracking, linked lists, containers, expression evaluation, sorting,
hashing and a number-guessing game."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "containers",
    "expression",
    "game",
    "graphs",
    "hashing",
    "linked",
    "sorting",
    "strings",
]