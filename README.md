# dsakit

A small collection of classic data-structure and algorithm routines, written
as plain Python with no third-party dependencies.

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `dsakit.strings`      | Naive search (`find_pattern`), Knuth–Morris–Pratt (`compute_lps`, `kmp_search`), Boyer–Moore with the bad-character rule (`build_bad_char_table`, `boyer_moore_search`, `search_patterns`), rolling hashes and palindromic substrings (`polynomial_hash`, `reverse_hash`, `find_palindromes`) |
| `dsakit.graphs`       | Island counting on a 0/1 grid with 8-way connectivity (`count_islands`), undirected adjacency lists (`adjacency_list`) |
| `dsakit.backtracking` | Rat-in-a-maze path finding (`solve_maze`), maximum non-attacking flags on an `n × n` board (`max_flags`) |
| `dsakit.linked`       | A singly linked list (`LinkedList`) and a priority-ordered task list (`Task`, `TaskQueue`) |
| `dsakit.containers`   | A fixed-capacity stack (`Stack`), a palindrome check built on it (`is_palindrome`), a bounded FIFO queue (`BoundedQueue`), and their errors (`EmptyError`, `FullError`) |
| `dsakit.expression`   | Infix to postfix conversion and evaluation (`precedence`, `infix_to_postfix`, `evaluate_postfix`, `evaluate`, `format_number`) |
| `dsakit.sorting`      | LSD radix sort both ways (`radix_sort_ascending`, `radix_sort_descending`), total of a jagged array (`jagged_sum`) |
| `dsakit.hashing`      | An open-addressing hash map with linear probing (`ProbingHashMap`), pair-sum counting (`count_pairs_with_sum`), zero-sum triplet detection (`has_zero_sum_triplet`) |
| `dsakit.game`         | A number-guessing game (`Outcome`, `judge_guess`, `play`) |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsakit.strings import find_pattern, kmp_search, find_palindromes
from dsakit.graphs import count_islands, adjacency_list
from dsakit.expression import evaluate, infix_to_postfix
from dsakit.sorting import radix_sort_ascending
from dsakit.linked import LinkedList, TaskQueue

find_pattern("ABABABA", "ABA")          # overlapping matches: [0, 2, 4]
kmp_search("Data Structures", "data")   # ASCII case-insensitive: [0]
find_palindromes("ABCBAB")              # shortest first

count_islands([[0, 1], [1, 0], [1, 1], [1, 0]])  # diagonal cells connect: 1
adjacency_list(3, [(0, 1), (1, 2)])              # [[1], [0, 2], [1]]

infix_to_postfix("12+13-5*(0.5+0.5)+1")
evaluate("12+13-5*(0.5+0.5)+1")         # 21.0

radix_sort_ascending([170, 45, 75, 90, 802, 24, 2, 66])

numbers = LinkedList([1, 9, 1, 2, 5, 4, 3])
len(numbers)   # 7
5 in numbers   # True

tasks = TaskQueue()
tasks.insert(1, 3)
tasks.insert(2, 7)
tasks.execute()  # Task(id=2, priority=7): highest priority first, lower id on ties
```

Some behaviour worth knowing:

- `Stack(capacity)` and `BoundedQueue(capacity)` raise `FullError` when adding
  past capacity and `EmptyError` when taking from an empty container.
  `BoundedQueue` reuses freed slots only once it has been emptied completely.
- `kmp_search` raises `ValueError` for an empty pattern.
- `evaluate` treats `^` as left-associative, skips characters that are not
  operands, operators or parentheses, rounds every intermediate value to six
  significant digits (the form `format_number` prints), and raises
  `ValueError` for unbalanced parentheses or malformed expressions.
- The radix sorts accept non-negative integers only and raise `ValueError`
  otherwise.
- `ProbingHashMap(size=1000)` stores integer counts; `insert` adds to the
  count under a key and raises `OverflowError` when the table is full, `get`
  returns 0 for a missing key.
- `solve_maze` returns a grid marking the path with 1, or `None` when there is
  no path.
- `play(secret, guesses, turns=5)` yields `(Outcome, turns_left)` after each
  guess and stops on a win or when the turns run out.

## Command-line demos

Each module installs a small demonstration command. Arguments are optional;
without them the commands use built-in sample data.

```
dsakit-strings find [TEXT] [PATTERN]
dsakit-strings kmp [TEXT] [PATTERN]
dsakit-strings bm [TEXT] [PATTERN ...]
dsakit-strings palindromes [TEXT]

dsakit-graphs islands [ROW ...]              # rows such as 01 10 11 10
dsakit-graphs adjacency [--vertices N] [U-V ...]

dsakit-backtracking maze [ROW ...]           # rows such as 10101 11111 ...
dsakit-backtracking flags [--size N]

dsakit-linked length
dsakit-linked search [NUMBER]
dsakit-linked schedule [COUNT] [--seed SEED]

dsakit-containers palindrome [TEXT]
dsakit-containers checkout [ID ...]

dsakit-expression [EXPRESSION]

dsakit-sorting radix [VALUE ...]
dsakit-sorting jagged

dsakit-hashing pairs [VALUE ...] [--target N]
dsakit-hashing triplet [VALUE ...]

dsakit-guess [--turns N] [--seed SEED] [--secret N]
```

Where a needed value is not given on the command line (`search`, `schedule`,
`radix`, `pairs`, `triplet`), the command asks for it on standard input.
`dsakit-guess` draws a secret number between 1 and 100 (or uses `--secret`)
and reads guesses from standard input, hinting "too low" or "too high" after
each wrong one.

## What it does not do

Everything lives in memory for the length of one call or command: nothing is
saved to disk, and the commands are demonstrations rather than tools for
processing files.