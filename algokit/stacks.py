"""Stack and queue structures, and problems solved with a stack."""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

_OPENING = {")": "(", "]": "[", "}": "{"}


class MinStack:
    """A stack that reports its minimum in constant time and constant extra space.

    While a value below the current minimum is pushed, ``2 * value - minimum``
    is stored in its place, so the previous minimum can be recovered on pop.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._min = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if not self._items:
            self._min = value
            self._items.append(value)
        elif value < self._min:
            self._items.append(2 * value - self._min)
            self._min = value
        else:
            self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        stored = self._items.pop()
        if stored < self._min:
            value = self._min
            self._min = 2 * self._min - stored
            return value
        return stored

    def peek(self) -> int:
        """The top value, left in place."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        stored = self._items[-1]
        return self._min if stored < self._min else stored

    def minimum(self) -> int:
        """The smallest value currently on the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._min

    def __len__(self) -> int:
        return len(self._items)


class QueueUsingStacks:
    """A first-in first-out queue built from two stacks; pushing is the costly step."""

    def __init__(self) -> None:
        self._main: list[int] = []
        self._spare: list[int] = []

    def push(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._main:
            raise IndexError("pop from an empty queue")
        return self._main.pop()

    def is_empty(self) -> bool:
        """True if the queue holds nothing."""
        return not self._main

    def __len__(self) -> int:
        return len(self._main)


class StackUsingQueues:
    """A last-in first-out stack built from two queues; pushing is the costly step."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        while self._main:
            self._spare.append(self._main.popleft())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.popleft())

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._main:
            raise IndexError("pop from an empty stack")
        return self._main.popleft()

    def is_empty(self) -> bool:
        """True if the stack holds nothing."""
        return not self._main

    def __len__(self) -> int:
        return len(self._main)


def next_larger_elements(values: Sequence[int]) -> list[Optional[int]]:
    """For each value, the first strictly larger value to its right, or None."""
    result: list[Optional[int]] = [None] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def is_balanced_parentheses(text: str) -> bool:
    """True if every (), [] and {} in ``text`` is closed in the right order.

    Other characters are ignored.
    """
    open_brackets: list[str] = []
    for char in text:
        if char in "([{":
            open_brackets.append(char)
        elif char in _OPENING:
            if not open_brackets or open_brackets[-1] != _OPENING[char]:
                return False
            open_brackets.pop()
    return not open_brackets