"""Searching in sequences: binary, linear and k-closest."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def binary_search(values: Sequence, item) -> int | None:
    """Index of ``item`` in sorted ``values``, or ``None`` if absent."""
    if not values:
        return None
    last = len(values) - 1
    start, end = 0, last
    while True:
        if item > values[end] or item < values[start]:
            return None
        mid = start + (end - start + 1) // 2
        if mid <= end and item == values[mid]:
            return mid
        if item == values[start]:
            return start
        if item == values[end]:
            return end
        if mid >= end:
            return None
        if item > values[mid]:
            start, end = mid, last
        else:
            end = mid


def find_sequence(values: Sequence, sequence: Sequence) -> tuple[int, int] | None:
    """Locate ``sequence`` as a run in sorted ``values``.

    The first element is found by binary search; returns ``(start, end)``
    with ``end`` exclusive, or ``None`` when the run is not there.
    """
    if not sequence:
        raise ValueError("sequence must not be empty")
    start = binary_search(values, sequence[0])
    if start is None:
        return None
    end = start + len(sequence)
    if list(values[start:end]) != list(sequence):
        return None
    return start, end


def linear_search(values: Sequence, value) -> int | None:
    """Index of the first occurrence of ``value``, or ``None``."""
    for index, element in enumerate(values):
        if element == value:
            return index
    return None


def k_closest(values: Sequence, x, k: int) -> list:
    """The ``k`` elements closest to ``x``, farthest first.

    Ties in distance favour later elements when replacing, and elements
    of equal distance come out latest first.
    """
    if k < 0 or k > len(values):
        raise ValueError("k must be between 0 and the number of values")
    if k == 0:
        return []
    heap = [(-abs(value - x), -index) for index, value in enumerate(values[:k])]
    heapq.heapify(heap)
    for index in range(k, len(values)):
        diff = abs(values[index] - x)
        if diff > -heap[0][0]:
            continue
        heapq.heapreplace(heap, (-diff, -index))
    result = []
    while heap:
        _, negative_index = heapq.heappop(heap)
        result.append(values[-negative_index])
    return result