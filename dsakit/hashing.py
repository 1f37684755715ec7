"""An open-addressing hash map and the pair- and triplet-sum searches built on it."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEFAULT_SIZE = 1000


class ProbingHashMap:
    """Integer keys to integer counts, with linear probing in a fixed table."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._keys: list[int | None] = [None] * size
        self._values = [0] * size

    def _slot(self, key: int) -> int | None:
        """Index holding ``key``, else the first free index on its probe path."""
        size = len(self._keys)
        start = key % size
        for offset in range(size):
            index = (start + offset) % size
            stored = self._keys[index]
            if stored is None or stored == key:
                return index
        return None

    def insert(self, key: int, value: int = 1) -> None:
        """Add ``value`` to the amount stored under ``key``."""
        index = self._slot(key)
        if index is None:
            raise OverflowError("hash table is full")
        if self._keys[index] is None:
            self._keys[index] = key
        self._values[index] += value

    def get(self, key: int) -> int:
        """Return the amount stored under ``key``, or 0 when it is absent."""
        index = self._slot(key)
        if index is None or self._keys[index] is None:
            return 0
        return self._values[index]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        index = self._slot(key)
        return index is not None and self._keys[index] is not None


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count index pairs i < j whose values add up to ``target``."""
    items = list(values)
    seen = ProbingHashMap(max(DEFAULT_SIZE, len(items)))
    pairs = 0
    for value in items:
        pairs += seen.get(target - value)
        seen.insert(value, 1)
    return pairs


def has_zero_sum_triplet(values: Iterable[int]) -> bool:
    """Tell whether three distinct positions hold values that sum to zero."""
    items = list(values)
    size = max(DEFAULT_SIZE, len(items))
    for i, first in enumerate(items[:-1]):
        seen = ProbingHashMap(size)
        for second in items[i + 1 :]:
            if -(first + second) in seen:
                return True
            seen.insert(second)
    return False


def _read_array() -> list[int]:
    size = int(input("Enter the size of the array: "))
    values: list[int] = []
    prompt = "Enter the elements of the array: "
    while len(values) < size:
        values.extend(int(token) for token in input(prompt).split())
        prompt = ""
    return values[:size]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-hashing", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    pairs = commands.add_parser("pairs", help="count pairs with a given sum")
    pairs.add_argument("values", nargs="*", type=int)
    pairs.add_argument("--target", type=int)
    triplet = commands.add_parser("triplet", help="look for a zero-sum triplet")
    triplet.add_argument("values", nargs="*", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    values = args.values or _read_array()
    if args.command == "pairs":
        target = args.target
        if target is None:
            target = int(input("Enter the target sum: "))
        print(f"Number of pairs with sum {target}: {count_pairs_with_sum(values, target)}")
        return 0
    if len(values) < 3:
        print("An array must have at least three elements to check for a triplet.")
    elif has_zero_sum_triplet(values):
        print("The array contains a triplet with a sum of zero.")
    else:
        print("No triplet with a sum of zero was found in the array.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())