"""Backtracking searches: a rat-in-a-maze path and a flag-placement puzzle."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

# Down, left, up, right: the order in which moves are tried.
_MOVES = ((1, 0), (0, -1), (-1, 0), (0, 1))

_DEMO_MAZE = ("10101", "11111", "01011", "10011", "11101")


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of 1-cells from the top-left to the bottom-right corner.

    Returns a grid marking the path with 1, or None when no path exists.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        return None
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")
    path = [[0] * cols for _ in range(rows)]
    goal = (rows - 1, cols - 1)

    def safe(x: int, y: int) -> bool:
        return 0 <= x < rows and 0 <= y < cols and grid[x][y] == 1 and path[x][y] != 1

    def walk(x: int, y: int) -> bool:
        if (x, y) == goal and grid[x][y] == 1:
            path[x][y] = 1
            return True
        if not safe(x, y):
            return False
        path[x][y] = 1
        if any(walk(x + dx, y + dy) for dx, dy in _MOVES):
            return True
        path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def max_flags(n: int) -> int:
    """Largest number of non-attacking flags on an n-by-n board.

    Flags attack along rows and diagonals; a column may be left empty.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    best = 0

    def place(col: int, count: int) -> None:
        nonlocal best
        if col == n:
            best = max(best, count)
            return
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(col + 1, count + 1)
            used_rows.remove(row)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)
        place(col + 1, count)

    place(0, 0)
    return best


def _parse_row(text: str) -> list[int]:
    if not set(text) <= {"0", "1"}:
        raise argparse.ArgumentTypeError(f"row must contain only 0 and 1, got {text!r}")
    return [int(ch) for ch in text]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-backtracking", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    maze = commands.add_parser("maze", help="solve a 0/1 maze")
    maze.add_argument(
        "rows", nargs="*", type=_parse_row, default=[_parse_row(r) for r in _DEMO_MAZE]
    )

    flags = commands.add_parser("flags", help="maximum flags on a square board")
    flags.add_argument("--size", type=int, default=4)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "maze":
            solution = solve_maze(args.rows)
            if solution is None:
                print("no solution exist")
            else:
                print("solution exist")
                for row in solution:
                    print(" ".join(map(str, row)))
        else:
            print(f"Maximum number of flags that can be placed: {max_flags(args.size)}")
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())