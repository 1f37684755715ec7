"""A fixed-capacity stack with a palindrome check, and a bounded FIFO queue."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Any

_DEMO_WORD = "BORROWROB"
_DEMO_IDS = (13, 7, 4, 1, 6, 8, 10)


class EmptyError(IndexError):
    """Raised when taking from an empty container."""


class FullError(OverflowError):
    """Raised when adding to a container that has no room left."""


class Stack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise FullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards, by unwinding a stack."""
    stack = Stack(len(text))
    for char in text:
        stack.push(char)
    return all(char == stack.pop() for char in text)


class BoundedQueue:
    """A first-in first-out queue over a fixed array of ``capacity`` slots.

    Slots freed by dequeuing are only reused once the queue has been emptied.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise FullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self._capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front :])

    def __len__(self) -> int:
        return len(self._slots) - self._front


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-containers", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    palindrome = commands.add_parser("palindrome", help="check a word with a stack")
    palindrome.add_argument("text", nargs="?", default=_DEMO_WORD)
    checkout = commands.add_parser("checkout", help="queue customers and check them out")
    checkout.add_argument("ids", nargs="*", type=int, default=list(_DEMO_IDS))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "palindrome":
        if is_palindrome(args.text):
            print("It is palindrome")
        else:
            print("It is not a palindrome")
        return 0
    queue = BoundedQueue(len(args.ids))
    for customer in args.ids:
        queue.enqueue(customer)
    print(" ".join(map(str, queue)) if len(queue) else "Empty")
    print("Checkouts")
    while not queue.is_empty():
        print(f"Checking out ID:{queue.dequeue()}")
    print("All checked out")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())