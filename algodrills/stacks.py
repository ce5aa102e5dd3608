"""Stacks built on a bounded array and on pairs of queues, plus recursive reversal."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List


class ArrayStack:
    """A stack held in a fixed-capacity array."""

    def __init__(self, capacity: int = 100) -> None:
        self._capacity = capacity
        self._items: List[Any] = []

    def push(self, value: Any) -> None:
        """Push a value; raise OverflowError when the stack is full."""
        if len(self._items) == self._capacity:
            raise OverflowError("Stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("No element to pop")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("No element to pop")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class PushHeavyStack:
    """A stack on two queues where push does the reordering."""

    def __init__(self) -> None:
        self._main: Deque[Any] = deque()
        self._spare: Deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Push a value, keeping the newest element at the front of the queue."""
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._main:
            raise IndexError("No element to pop")
        return self._main.popleft()

    def top(self) -> Any:
        """Return the top value; raise IndexError when empty."""
        if not self._main:
            raise IndexError("No element to pop")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


class PopHeavyStack:
    """A stack on two queues where pop and top do the reordering."""

    def __init__(self) -> None:
        self._main: Deque[Any] = deque()
        self._spare: Deque[Any] = deque()

    def _drain_to_last(self) -> Any:
        while len(self._main) != 1:
            self._spare.append(self._main.popleft())
        return self._main.popleft()

    def push(self, value: Any) -> None:
        """Push a value."""
        self._main.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._main:
            raise IndexError("No element to pop")
        value = self._drain_to_last()
        self._main, self._spare = self._spare, self._main
        return value

    def top(self) -> Any:
        """Return the top value; raise IndexError when empty."""
        if not self._main:
            raise IndexError("No element to pop")
        value = self._drain_to_last()
        self._spare.append(value)
        self._main, self._spare = self._spare, self._main
        return value

    def __len__(self) -> int:
        return len(self._main)


def insert_at_bottom(stack: List[Any], value: Any) -> None:
    """Place ``value`` beneath every element of ``stack`` (top is the list's end)."""
    if not stack:
        stack.append(value)
        return
    top = stack.pop()
    insert_at_bottom(stack, value)
    stack.append(top)


def reverse_stack(stack: List[Any]) -> None:
    """Reverse ``stack`` in place using only push, pop and recursion."""
    if not stack:
        return
    top = stack.pop()
    reverse_stack(stack)
    insert_at_bottom(stack, top)