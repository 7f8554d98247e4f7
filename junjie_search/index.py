"""A fixed-size chained hash table mapping keys to sentence postings."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence

HashFunction = Callable[[Hashable, int], int]

_LOAD_FACTOR = 0.75


def table_size(count: int) -> int:
    """Return the bucket count used for ``count`` entries: 75% of it, forced odd."""
    size = int(count * _LOAD_FACTOR)
    if size % 2 == 0:
        size += 1
    return size


def intersect(postings: Iterable[Iterable[int]]) -> list[int]:
    """Return the sorted values common to every posting list.

    An empty input, or an empty intersection, gives an empty list.
    """
    common: set[int] | None = None
    for posting in postings:
        current = set(posting)
        common = current if common is None else common & current
        if not common:
            return []
    return sorted(common) if common else []


class ChainedIndex:
    """Hash table with separate chaining; each key holds the ordered, distinct
    sentence numbers it was inserted with."""

    def __init__(self, size: int, hash_fn: HashFunction) -> None:
        if size < 1:
            raise ValueError(f"index size must be positive, got {size}")
        self.size = size
        self._hash = hash_fn
        self._buckets: list[list[tuple[Hashable, list[int]]]] = [[] for _ in range(size)]

    def _bucket(self, key: Hashable) -> list[tuple[Hashable, list[int]]]:
        return self._buckets[self._hash(key, self.size)]

    def insert(self, entries: Iterable[tuple[Hashable, int]]) -> None:
        """Add ``(key, sentence_number)`` pairs, skipping numbers already held."""
        for key, position in entries:
            bucket = self._bucket(key)
            for existing, positions in bucket:
                if existing == key:
                    if position not in positions:
                        positions.append(position)
                    break
            else:
                bucket.append((key, [position]))

    def lookup(self, key: Hashable) -> list[int]:
        """Return the sentence numbers stored for ``key``, or an empty list."""
        for existing, positions in self._bucket(key):
            if existing == key:
                return list(positions)
        return []

    def __contains__(self, key: object) -> bool:
        return any(existing == key for existing, _ in self._bucket(key))  # type: ignore[arg-type]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def buckets(self) -> Sequence[Sequence[tuple[Hashable, list[int]]]]:
        """Return the chains, for inspection."""
        return tuple(tuple(bucket) for bucket in self._buckets)