"""Singly and doubly linked lists of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


@dataclass(eq=False)
class _DoubleNode:
    data: Any
    next: Optional[_DoubleNode] = None
    prev: Optional[_DoubleNode] = None


def _render(values: Iterable[Any]) -> str:
    return "".join(f"{value}->" for value in values) + "NULL"


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_tail(self, value: Any) -> None:
        """Append a value after the last node."""
        node = _Node(value)
        self._size += 1
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_at_head(self, value: Any) -> None:
        """Put a value in front of the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None and node.data != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1

    def display(self) -> str:
        """Return the list drawn as ``a->b->...->NULL``."""
        return _render(self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_tail(self, value: Any) -> None:
        """Append a value after the last node."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_head(self, value: Any) -> None:
        """Put a value in front of the first node."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        node = self._head
        while node is not None and node.data != value:
            node = node.next
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def display(self) -> str:
        """Return the list drawn as ``a->b->...->NULL``."""
        return _render(self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"