"""Queues built on a bounded array, linked nodes and stacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


class ArrayQueue:
    """A queue in a fixed array whose slots are never reused once consumed."""

    def __init__(self, capacity: int = 20) -> None:
        self._capacity = capacity
        self._slots: List[Any] = []
        self._front = 0

    def push(self, value: Any) -> None:
        """Enqueue a value; raise OverflowError once every slot has been used."""
        if len(self._slots) == self._capacity:
            raise OverflowError("Queue is full")
        self._slots.append(value)

    def pop(self) -> Any:
        """Dequeue and return the front value; raise IndexError when empty."""
        if not len(self):
            raise IndexError("Queue is empty.")
        value = self._slots[self._front]
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the front value; raise IndexError when empty."""
        if not len(self):
            raise IndexError("Queue is empty.")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedQueue:
    """A queue on singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Enqueue a value at the back."""
        node = _Node(value)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._size += 1

    def pop(self) -> Any:
        """Dequeue and return the front value; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("NO element to pop")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the front value; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("NO element to peek")
        return self._front.data

    def __len__(self) -> int:
        return self._size


class TwoStackQueue:
    """A queue on an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: List[Any] = []
        self._outbox: List[Any] = []

    def push(self, value: Any) -> None:
        """Enqueue a value."""
        self._inbox.append(value)

    def pop(self) -> Any:
        """Dequeue and return the oldest value; raise IndexError when empty."""
        if not self._outbox:
            if not self._inbox:
                raise IndexError("Queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class RecursiveStackQueue:
    """A queue on one stack, reaching the bottom element by recursion."""

    def __init__(self) -> None:
        self._stack: List[Any] = []

    def push(self, value: Any) -> None:
        """Enqueue a value."""
        self._stack.append(value)

    def pop(self) -> Any:
        """Dequeue and return the oldest value; raise IndexError when empty."""
        if not self._stack:
            raise IndexError("No element in Queue")
        return self._take_bottom()

    def _take_bottom(self) -> Any:
        top = self._stack.pop()
        if not self._stack:
            return top
        bottom = self._take_bottom()
        self._stack.append(top)
        return bottom

    def __len__(self) -> int:
        return len(self._stack)