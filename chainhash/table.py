from dataclasses import dataclass
import math
from numbers import Real
from typing import Any, Iterable, Iterator, Mapping

from .shared import printf


INITIAL_CAPACITY = 16
TABLE_MAX_LOAD = 0.75
HASH_MULTIPLIER = 31
HASH_MASK = 0xFFFFFFFF


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass
class Entry:
    key: str
    value: Any


Bucket = list[Entry]


class HashTable:
    """String-keyed map using separate chaining.

    Each bucket is a list of entries in insertion order. The bucket array
    doubles once `length` reaches `capacity * max_load`, and never shrinks.
    """

    def __init__(
        self, capacity: int = INITIAL_CAPACITY, max_load: float = TABLE_MAX_LOAD
    ) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError("capacity must be a positive int", capacity)
        if (
            not isinstance(max_load, Real)
            or isinstance(max_load, bool)
            or not math.isfinite(max_load)
            or max_load <= 0
        ):
            raise ValueError("max_load must be a positive finite number", max_load)

        self._capacity = capacity
        self._max_load = max_load
        self._length = 0
        self._buckets: list[Bucket] = new_buckets(capacity)

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def max_load(self) -> float:
        return self._max_load

    def set(self, key: str, value: Any) -> None:
        index = self.bucket_index(key)
        if self._length >= self._capacity * self._max_load:
            self._grow()
            index = self.bucket_index(key)

        bucket = self._buckets[index]
        entry = find_entry(bucket, key)
        if entry is not None:
            entry.value = value
            return

        bucket.append(Entry(key, value))
        self._length += 1

    def get(self, key: str, default: Any = None) -> Any:
        entry = find_entry(self._bucket_for(key), key)
        if entry is None:
            return default
        return entry.value

    def has(self, key: str) -> bool:
        return find_entry(self._bucket_for(key), key) is not None

    def remove(self, key: str) -> Any:
        bucket = self._bucket_for(key)
        for i, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[i]
                self._length -= 1
                return entry.value
        return None

    def clear(self) -> None:
        self._buckets = new_buckets(self._capacity)
        self._length = 0

    def keys(self) -> list[str]:
        return [entry.key for entry in self._scan()]

    def values(self) -> list[Any]:
        return [entry.value for entry in self._scan()]

    def entries(self) -> list[tuple[str, Any]]:
        return [(entry.key, entry.value) for entry in self._scan()]

    def buckets(self) -> tuple[tuple[tuple[str, Any], ...], ...]:
        return tuple(
            tuple((entry.key, entry.value) for entry in bucket)
            for bucket in self._buckets
        )

    def update(self, other: "HashTable | Mapping[str, Any] | Iterable[tuple[str, Any]]"):
        if isinstance(other, HashTable):
            pairs: Iterable[tuple[str, Any]] = other.entries()
        elif isinstance(other, Mapping):
            pairs = other.items()
        else:
            pairs = other

        for key, value in pairs:
            self.set(key, value)

    def bucket_index(self, key: str) -> int:
        if not isinstance(key, str):
            raise TypeError("key must be str", key)
        return hash_string(key) % self._capacity

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __getitem__(self, key: str) -> Any:
        entry = find_entry(self._bucket_for(key), key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: Any):
        self.set(key, value)

    def __delitem__(self, key: str):
        if not self.has(key):
            raise KeyError(key)
        self.remove(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return "HashTable({0!r})".format(self.entries())

    def _bucket_for(self, key: str) -> Bucket:
        return self._buckets[self.bucket_index(key)]

    def _scan(self) -> Iterator[Entry]:
        for bucket in self._buckets:
            yield from bucket

    def _grow(self):
        old_capacity = self._capacity
        old_buckets = self._buckets

        self._capacity = old_capacity * 2
        self._buckets = new_buckets(self._capacity)
        for bucket in old_buckets:
            for entry in bucket:
                self._buckets[hash_string(entry.key) % self._capacity].append(entry)

        if _debug_trace_resize:
            printf(
                "-- grow {0:d} -> {1:d} ({2:d} entries)\n",
                old_capacity,
                self._capacity,
                self._length,
            )


def new_buckets(capacity: int) -> list[Bucket]:
    return [[] for _ in range(capacity)]


def find_entry(bucket: Bucket, key: str) -> Entry | None:
    for entry in bucket:
        if entry.key == key:
            return entry
    return None


def hash_string(key: str) -> int:
    # Masked every step so the result is an unsigned 32-bit word.
    hash = 0
    for c in key:
        hash = (HASH_MULTIPLIER * hash + ord(c)) & HASH_MASK
    return hash
