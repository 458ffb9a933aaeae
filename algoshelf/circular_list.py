"""Circular doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class CircularDoublyLinkedList:
    """Doubly linked ring of values; positions are counted from 1."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def _link_before(self, node: _Node, successor: _Node) -> None:
        node.next = successor
        node.prev = successor.prev
        successor.prev.next = node
        successor.prev = node
        self._size += 1

    def _link_first_node(self, value: Any) -> _Node:
        node = _Node(value)
        self._head = node
        self._size = 1
        return node

    def _unlink(self, node: _Node) -> Any:
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return node.value

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` at the beginning."""
        if self._head is None:
            self._link_first_node(value)
            return
        node = _Node(value)
        self._link_before(node, self._head)
        self._head = node

    def insert_last(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        if self._head is None:
            self._link_first_node(value)
            return
        self._link_before(_Node(value), self._head)

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Valid positions run from 1 to one past the current length.
        """
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"cannot insert at position {position} in a list of {self._size}"
            )
        if position == 1:
            self.insert_first(value)
        elif position == self._size + 1:
            self.insert_last(value)
        else:
            self._link_before(_Node(value), self._node_at(position))

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if self._head is None:
            raise IndexError("cannot delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(
                f"cannot delete position {position} in a list of {self._size}"
            )
        return self._unlink(self._node_at(position))

    def delete_first(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("cannot delete from an empty list")
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("cannot delete from an empty list")
        return self._unlink(self._head.prev)

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.value = value

    def update(self, old: Any, new: Any) -> int:
        """Replace every ``old`` with ``new`` and return how many were replaced.

        Raises ``ValueError`` when ``old`` does not occur.
        """
        count = 0
        for node in self._nodes():
            if node.value == old:
                node.value = new
                count += 1
        if count == 0:
            raise ValueError(f"{old!r} is not in the list")
        return count

    def search(self, key: Any) -> list[int]:
        """The 1-based positions at which ``key`` occurs."""
        return [position for position, value in enumerate(self, 1) if value == key]

    def __iter__(self) -> Iterator:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"