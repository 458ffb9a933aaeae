"""Hash table with separate chaining that doubles when it fills up."""

from __future__ import annotations

from typing import Any


class ChainedHashTable:
    """Integer-keyed hash table; each bucket is a chain in insertion order.

    A key goes to bucket ``key % capacity``. When the number of keys
    reaches three quarters of the capacity the table doubles and every
    entry is reinserted, bucket by bucket.
    """

    LOAD_FACTOR = 0.75

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._buckets: list[list[tuple[int, Any]]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _bucket(self, key: int) -> list[tuple[int, Any]]:
        return self._buckets[key % len(self._buckets)]

    def insert(self, key: int, value: Any) -> None:
        """Add ``key`` with ``value``, replacing the value of an existing key."""
        bucket = self._bucket(key)
        for index, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[index] = (key, value)
                break
        else:
            bucket.append((key, value))
            self._size += 1
        if self._size / len(self._buckets) >= self.LOAD_FACTOR:
            self._rehash()

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for bucket in old:
            for key, value in bucket:
                self._bucket(key).append((key, value))

    def remove(self, key: int) -> Any:
        """Remove ``key`` and return its value; ``KeyError`` if absent."""
        bucket = self._bucket(key)
        for index, (existing, value) in enumerate(bucket):
            if existing == key:
                del bucket[index]
                self._size -= 1
                return value
        raise KeyError(key)

    def get(self, key: int) -> Any:
        """The value stored for ``key``, or ``None`` if absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        return None

    def buckets(self) -> list[list[tuple[int, Any]]]:
        """A copy of every bucket's chain as ``(key, value)`` pairs."""
        return [list(bucket) for bucket in self._buckets]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return any(existing == key for existing, _ in self._bucket(key))