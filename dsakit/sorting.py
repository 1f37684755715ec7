"""LSD radix sort in both directions, and the total of a jagged array."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

_DEMO_JAGGED = ((1, 7, 9, 7, 6), (10, 70, 90), (19, 7), (7, 9, 7, 3), (1,))


def _radix_sort(values: Iterable[int], descending: bool) -> list[int]:
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return []
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        ordered = reversed(buckets) if descending else buckets
        items = [value for bucket in ordered for value in bucket]
        exp *= 10
    return items


def radix_sort_ascending(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``values`` in ascending order."""
    return _radix_sort(values, descending=False)


def radix_sort_descending(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ``values`` in descending order."""
    return _radix_sort(values, descending=True)


def jagged_sum(rows: Iterable[Iterable[int]]) -> int:
    """Sum every element of a list of rows of differing lengths."""
    return sum(sum(row) for row in rows)


def _read_values() -> list[int]:
    size = int(input("Enter size: "))
    print("Enter Elements:")
    values: list[int] = []
    while len(values) < size:
        values.extend(int(token) for token in input().split())
    return values[:size]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-sorting", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    radix = commands.add_parser("radix", help="radix sort integers both ways")
    radix.add_argument("values", nargs="*", type=int)
    commands.add_parser("jagged", help="sum the sample jagged array")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "jagged":
        print("Jagged array: ")
        for row in _DEMO_JAGGED:
            print(" ".join(map(str, row)))
        print(f"Total sum of the elements: {jagged_sum(_DEMO_JAGGED)}")
        return 0
    values = args.values or _read_values()
    try:
        ascending = radix_sort_ascending(values)
        descending = radix_sort_descending(values)
    except ValueError as error:
        parser.error(str(error))
    print("Original: " + " ".join(map(str, values)))
    print("Sorted in Ascending: " + " ".join(map(str, ascending)))
    print("Sorted in Descending: " + " ".join(map(str, descending)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())