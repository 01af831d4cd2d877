"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Node:
    """One link: a value and the node after it."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Node | None = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """A singly linked list with insertion and removal at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, data: Any) -> Node:
        """Insert a value at the head and return its node."""
        self.head = Node(data, self.head)
        self._size += 1
        return self.head

    def push_back(self, data: Any) -> Node:
        """Append a value at the tail and return its node."""
        node = Node(data)
        last = self._last()
        if last is None:
            self.head = node
        else:
            last.next = node
        self._size += 1
        return node

    def find(self, data: Any) -> Node:
        """Return the first node holding the value."""
        if self.head is None:
            raise ValueError("list is empty")
        for node in self._nodes():
            if node.data == data:
                return node
        raise ValueError(f"Node with data {data!r} is not in a list")

    def insert_after(self, target: Node, data: Any) -> Node:
        """Insert a value right after a node of this list and return the new node."""
        self._check_member(target)
        node = Node(data, target.next)
        target.next = node
        self._size += 1
        return node

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("no node to delete")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("no node to delete")
        if self.head.next is None:
            return self.pop_front()
        before = self.head
        while before.next is not None and before.next.next is not None:
            before = before.next
        node = before.next
        before.next = None
        self._size -= 1
        return node.data

    def remove_after(self, target: Node) -> Any:
        """Remove the node that follows a node of this list and return its value."""
        self._check_member(target)
        node = target.next
        if node is None:
            raise ValueError("no node after the given node")
        target.next = node.next
        self._size -= 1
        return node.data

    def clear(self) -> None:
        """Remove every node."""
        self.head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> Node | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def _check_member(self, target: Node | None) -> None:
        if target is None or not any(node is target for node in self._nodes()):
            raise ValueError("node is not in this list")