"""A fixed-bucket hash table keyed by unsigned integers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_MAX_KEY = 0xFFFFFFFF


class Hashtable:
    """Maps unsigned 32-bit integer keys to values using chained buckets.

    Iteration visits buckets in order, and within a bucket the entries in
    the order they were first inserted. An owning table disposes of values
    it drops, so ``remove`` gives nothing back.
    """

    def __init__(self, size: int, owner: bool) -> None:
        if size <= 0:
            raise ValueError("hashtable size must be positive")
        self.size = size
        self.owner = owner
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: int) -> list[list[Any]]:
        if not 0 <= key <= _MAX_KEY:
            raise ValueError(f"key out of range: {key}")
        return self._buckets[key % self.size]

    def put(self, key: int, value: Any) -> None:
        """Store value under key, replacing any value already there."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._count += 1

    def get(self, key: int) -> Any:
        """Return the value under key, or None when absent."""
        for entry_key, value in self._bucket(key):
            if entry_key == key:
                return value
        return None

    def remove(self, key: int) -> Any:
        """Drop key; return its value unless the table owns its values."""
        bucket = self._bucket(key)
        for position, (entry_key, value) in enumerate(bucket):
            if entry_key == key:
                del bucket[position]
                self._count -= 1
                return None if self.owner else value
        return None

    def items(self) -> Iterator[tuple[int, Any]]:
        """Yield (key, value) pairs bucket by bucket."""
        for bucket in self._buckets:
            for key, value in list(bucket):
                yield key, value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int) or not 0 <= key <= _MAX_KEY:
            return False
        return any(entry[0] == key for entry in self._buckets[key % self.size])

    def __len__(self) -> int:
        return self._count