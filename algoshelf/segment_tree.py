"""Segment tree over integer sums with point updates."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Range-sum segment tree supporting point assignment."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        data = list(values)
        self._size = len(data)
        self._tree = [0] * (4 * max(self._size, 1))
        if data:
            self._build(data, 1, 0, self._size - 1)

    def _build(self, data: list[int], node: int, low: int, high: int) -> None:
        if low == high:
            self._tree[node] = data[low]
            return
        mid = (low + high) // 2
        self._build(data, 2 * node, low, mid)
        self._build(data, 2 * node + 1, mid + 1, high)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def update(self, position: int, value: int) -> None:
        """Set the element at ``position`` to ``value``."""
        if not 0 <= position < self._size:
            raise IndexError("segment tree position out of range")
        node, low, high = 1, 0, self._size - 1
        path = []
        while low != high:
            path.append(node)
            mid = (low + high) // 2
            if position <= mid:
                node, high = 2 * node, mid
            else:
                node, low = 2 * node + 1, mid + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = self._tree[2 * parent] + self._tree[2 * parent + 1]

    def query(self, left: int, right: int) -> int:
        """Sum of the elements with indices in ``[left, right]``."""
        return self._query(left, right, 1, 0, self._size - 1)

    def _query(self, left: int, right: int, node: int, low: int, high: int) -> int:
        if low > right or high < left or low > high:
            return 0
        if left <= low and high <= right:
            return self._tree[node]
        mid = (low + high) // 2
        return self._query(left, right, 2 * node, low, mid) + self._query(
            left, right, 2 * node + 1, mid + 1, high
        )

    def __len__(self) -> int:
        return self._size