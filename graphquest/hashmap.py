"""Open-addressing hash table with linear probing and string keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_MASK = (1 << 64) - 1


def hash_key(key: str, capacity: int) -> int:
    """Return the bucket index of ``key`` in a table of ``capacity`` buckets.

    The hash ignores ASCII letter case.
    """
    value = 0
    for byte in key.encode("utf-8"):
        code = byte - 256 if byte >= 128 else byte
        if 65 <= code <= 90:
            code += 32
        value = (value * 33 + code) & _MASK
    return value % capacity


@dataclass
class Pair:
    """A key and the value stored with it."""

    key: str
    value: Any


class _Deleted:
    """Marker left in a bucket whose entry was erased."""


_DELETED = _Deleted()


class HashMap:
    """Hash table that doubles its capacity when full.

    Inserting a key that is already present leaves the stored value as it is.
    Erased entries leave a marker behind so that probing past them still
    finds later keys.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._buckets: list[Pair | _Deleted | None] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of buckets in the table."""
        return len(self._buckets)

    def _probe(self, key: str) -> Iterator[int]:
        capacity = len(self._buckets)
        start = hash_key(key, capacity)
        for step in range(capacity):
            yield (start + step) % capacity

    def _enlarge(self) -> None:
        old = self._buckets
        self._buckets = [None] * (len(old) * 2)
        self._size = 0
        for slot in old:
            if isinstance(slot, Pair):
                self.insert(slot.key, slot.value)

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` unless the key is already present."""
        if self._size == len(self._buckets):
            self._enlarge()
        while True:
            for index in self._probe(key):
                slot = self._buckets[index]
                if slot is None:
                    self._buckets[index] = Pair(key, value)
                    self._size += 1
                    return
                if isinstance(slot, Pair) and slot.key == key:
                    return
            # Every bucket is taken by entries or erase markers.
            self._enlarge()

    def erase(self, key: str) -> None:
        """Remove ``key`` if it is present."""
        for index in self._probe(key):
            slot = self._buckets[index]
            if slot is None:
                return
            if isinstance(slot, Pair) and slot.key == key:
                self._buckets[index] = _DELETED
                self._size -= 1
                return

    def search(self, key: str) -> Pair | None:
        """Return the pair stored under ``key``, or ``None``."""
        for index in self._probe(key):
            slot = self._buckets[index]
            if slot is None:
                return None
            if isinstance(slot, Pair) and slot.key == key:
                return slot
        return None

    def items(self) -> Iterator[Pair]:
        """Yield the stored pairs in bucket order."""
        for slot in self._buckets:
            if isinstance(slot, Pair):
                yield slot

    def __iter__(self) -> Iterator[str]:
        return (pair.key for pair in self.items())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None