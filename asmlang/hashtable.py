"""A string-keyed hash table with separate chaining and djb2 hashing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_DJB2_SEED = 0x1505
_WORD_MASK = 0xFFFFFFFFFFFFFFFF


def djb2_hash(text: str | bytes | None, size: int) -> int:
    """Return the djb2 hash of ``text`` reduced modulo ``size``.

    Bytes are taken as signed characters and the running value wraps at
    64 bits. ``None`` hashes to 0.
    """
    if text is None:
        return 0
    if size <= 0:
        raise ValueError("size must be positive")
    data = text.encode() if isinstance(text, str) else bytes(text)
    value = _DJB2_SEED
    for byte in data:
        char = byte - 256 if byte >= 128 else byte
        value = (value * 33 + char) & _WORD_MASK
    return value % size


class HashTable:
    """A hash table mapping string keys to non-``None`` values.

    Entries are chained per bucket; the bucket array doubles once the
    number of entries reaches the capacity.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._buckets: list[list[list[Any]]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of buckets currently allocated."""
        return self._capacity

    def _bucket(self, key: str) -> list[list[Any]]:
        return self._buckets[djb2_hash(key, self._capacity)]

    def _find(self, key: str) -> list[Any] | None:
        return next((entry for entry in self._bucket(key) if entry[0] == key), None)

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if key is None:
            raise TypeError("key must not be None")
        if value is None:
            raise ValueError("value must not be None")
        entry = self._find(key)
        if entry is not None:
            entry[1] = value
            return
        self._bucket(key).append([key, value])
        self._size += 1
        if self._size >= self._capacity:
            self._grow()

    def _grow(self) -> None:
        entries = [entry for bucket in self._buckets for entry in bucket]
        self._capacity *= 2
        self._buckets = [[] for _ in range(self._capacity)]
        for entry in entries:
            self._bucket(entry[0]).append(entry)

    def get(self, key: str | None) -> Any:
        """Return the value stored under ``key``, or ``None`` if absent."""
        if key is None:
            return None
        entry = self._find(key)
        return None if entry is None else entry[1]

    def remove(self, key: str | None) -> Any:
        """Remove ``key`` and return its value, or ``None`` if it was absent."""
        if key is None:
            return None
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return entry[1]
        return None

    def update(self, key: str, value: Any) -> None:
        """Replace the value of an existing key; absent keys are left alone."""
        if key is None or value is None:
            return
        entry = self._find(key)
        if entry is not None:
            entry[1] = value

    def contains(self, key: str | None) -> bool:
        """Tell whether ``key`` is stored in the table."""
        if key is None:
            return False
        return self._find(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def format(self) -> str:
        """Return one ``Key: ..., Value: ...`` line per entry."""
        return "".join(f"Key: {key}, Value: {value!r}\n" for key, value in self.items())