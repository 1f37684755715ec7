"""Singly linked list and a priority-ordered task queue built on linked nodes."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

_DEMO_VALUES = (1, 9, 1, 2, 5, 4, 3)


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list with tail appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, target: object) -> bool:
        return any(value == target for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


@dataclass(frozen=True)
class Task:
    """A schedulable task."""

    id: int
    priority: int


def _goes_before(existing: Task, new: Task) -> bool:
    return existing.priority > new.priority or (
        existing.priority == new.priority and existing.id < new.id
    )


class TaskQueue:
    """Tasks kept in a linked list, highest priority first, lower id first on ties."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def insert(self, task_id: int, priority: int) -> Task:
        """Insert a task at its place in the order and return it."""
        task = Task(task_id, priority)
        head = self._head
        if head is None or not _goes_before(head.value, task) and not (
            head.value.priority == priority and head.value.id == task_id
        ):
            self._head = _Node(task, head)
            return task
        current = head
        while current.next is not None and _goes_before(current.next.value, task):
            current = current.next
        current.next = _Node(task, current.next)
        return task

    def execute(self) -> Task | None:
        """Remove and return the first task, or None when the queue is empty."""
        if self._head is None:
            return None
        task = self._head.value
        self._head = self._head.next
        return task

    def __iter__(self) -> Iterator[Task]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-linked", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("length", help="length of the sample list")
    search = commands.add_parser("search", help="search the sample list")
    search.add_argument("number", nargs="?", type=int)
    schedule = commands.add_parser("schedule", help="schedule random-priority tasks")
    schedule.add_argument("count", nargs="?", type=int)
    schedule.add_argument("--seed", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "length":
        print(f"Length of LinkList is {len(LinkedList(_DEMO_VALUES))}")
    elif args.command == "search":
        number = args.number
        if number is None:
            print("enter number to search")
            number = int(input())
        found = number in LinkedList(_DEMO_VALUES)
        print(f"Number {number} {'found' if found else 'not found'}")
    else:
        count = args.count
        if count is None:
            count = int(input("Enter the number of tasks to schedule: "))
        rng = random.Random(args.seed)
        queue = TaskQueue()
        print("\nGenerated tasks with their priorities:")
        for task_id in range(1, count + 1):
            priority = rng.randint(1, 10)
            queue.insert(task_id, priority)
            print(f"Task {task_id} has Priority: {priority}")
        print("\nTask Execution Order (Highest Priority First):")
        while (task := queue.execute()) is not None:
            print(f"Executing Task {task.id} with Priority {task.priority}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())