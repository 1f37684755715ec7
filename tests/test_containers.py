import pytest

from dsakit.containers import (
    BoundedQueue,
    EmptyError,
    FullError,
    Stack,
    is_palindrome,
    main,
)


def test_stack_is_last_in_first_out():
    stack = Stack(3)
    for item in "xyz":
        stack.push(item)
    assert [stack.pop() for _ in range(3)] == list("zyx")
    assert stack.is_empty()


def test_stack_peek_does_not_remove():
    stack = Stack(2)
    stack.push("q")
    assert stack.peek() == "q"
    assert len(stack) == 1


def test_stack_full_raises():
    stack = Stack(1)
    stack.push("a")
    assert stack.is_full()
    with pytest.raises(FullError):
        stack.push("b")


def test_stack_empty_pop_and_peek_raise():
    stack = Stack(2)
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.peek()


def test_stack_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


def test_source_word_is_not_palindrome():
    assert is_palindrome("BORROWROB") is False


@pytest.mark.parametrize("half", ["", "a", "ab", "BORROW", "xyz1"])
def test_mirrored_strings_are_palindromes(half):
    assert is_palindrome(half + half[::-1])
    assert is_palindrome(half + "m" + half[::-1])


def test_queue_is_first_in_first_out():
    ids = [13, 7, 4, 1, 6, 8, 10]
    queue = BoundedQueue(len(ids))
    for value in ids:
        queue.enqueue(value)
    assert list(queue) == ids
    assert len(queue) == len(ids)
    assert [queue.dequeue() for _ in ids] == ids
    assert queue.is_empty()


def test_queue_does_not_reuse_slots_until_emptied():
    queue = BoundedQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    assert queue.is_full()
    with pytest.raises(FullError):
        queue.enqueue(3)
    assert queue.dequeue() == 2
    queue.enqueue(3)
    assert list(queue) == [3]


def test_queue_empty_dequeue_raises():
    with pytest.raises(EmptyError):
        BoundedQueue(3).dequeue()


def test_main_palindrome(capsys):
    assert main(["palindrome"]) == 0
    assert capsys.readouterr().out.strip() == "It is not a palindrome"


def test_main_checkout(capsys):
    main(["checkout", "5", "9"])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "5 9",
        "Checkouts",
        "Checking out ID:5",
        "Checking out ID:9",
        "All checked out",
    ]