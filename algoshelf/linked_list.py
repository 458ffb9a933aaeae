"""Singly linked list with even/odd segregation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, following: _Node | None = None) -> None:
        self.value = value
        self.next = following


class LinkedList:
    """Singly linked list of values."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def segregate_even_odd(self) -> None:
        """Relink the nodes so even values come before odd ones.

        The relative order inside each group is kept.
        """
        even_head = even_tail = None
        odd_head = odd_tail = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            if node.value % 2 == 0:
                if even_tail is None:
                    even_head = node
                else:
                    even_tail.next = node
                even_tail = node
            else:
                if odd_tail is None:
                    odd_head = node
                else:
                    odd_tail.next = node
                odd_tail = node
            node = following
        if even_tail is None:
            self._head, self._tail = odd_head, odd_tail
        else:
            even_tail.next = odd_head
            self._head = even_head
            self._tail = odd_tail if odd_tail is not None else even_tail

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"