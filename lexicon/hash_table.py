"""
hash_table.py — Chained Hash Table
===================================
Separate-chaining hash table keyed by string, sitting beside the trie
as the exact-key index of a database.

    h = (h * 31 + ord(ch)) % capacity      for each character

Capacity starts at 16 and doubles, rehashing every entry, as soon as
count / capacity exceeds 0.75 after an insertion.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from lexicon.entry import HashTableStats

logger = logging.getLogger(__name__)


DEFAULT_CAPACITY = 16
MAX_LOAD_FACTOR  = 0.75
HASH_MULTIPLIER  = 31


@dataclass
class HashEntry:
    key:       str
    value:     Any
    frequency: int = 1


class HashTable:
    """
    Attributes:
        buckets : List of chains; each chain is a list of HashEntry.
        count   : Number of distinct keys stored.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.buckets: List[List[HashEntry]] = [[] for _ in range(capacity)]
        self.count:   int                   = 0

    # ------------------------------------------------------------------
    # Hashing
    # ------------------------------------------------------------------
    def _hash(self, key: str) -> int:
        h = 0
        size = len(self.buckets)
        for ch in key:
            h = (h * HASH_MULTIPLIER + ord(ch)) % size
        return h

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def insert(self, key: str, value: Any, frequency: int = 1) -> None:
        """Add `frequency` to an existing key and replace its value, or append a new entry."""
        bucket = self.buckets[self._hash(key)]
        for entry in bucket:
            if entry.key == key:
                entry.frequency += frequency
                entry.value      = value
                return

        bucket.append(HashEntry(key, value, frequency))
        self.count += 1
        if self.load_factor > MAX_LOAD_FACTOR:
            self._resize(len(self.buckets) * 2)

    def search(self, key: str) -> Optional[Tuple[Any, int]]:
        """(value, frequency) for `key`, or None."""
        for entry in self.buckets[self._hash(key)]:
            if entry.key == key:
                return entry.value, entry.frequency
        return None

    def items(self) -> Iterator[HashEntry]:
        for bucket in self.buckets:
            yield from bucket

    def get_stats(self) -> HashTableStats:
        return HashTableStats(
            capacity=self.capacity,
            count=self.count,
            load_factor=self.load_factor,
            collisions=sum(1 for b in self.buckets if len(b) > 1),
        )

    # ------------------------------------------------------------------
    # Properties / dunder
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return len(self.buckets)

    @property
    def load_factor(self) -> float:
        return self.count / len(self.buckets)

    def __contains__(self, key: str) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self.count

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _resize(self, new_capacity: int) -> None:
        old = list(self.items())
        self.buckets = [[] for _ in range(new_capacity)]
        # keys are already unique, so entries go straight into their new chains
        for entry in old:
            self.buckets[self._hash(entry.key)].append(entry)
        logger.debug("hash table resized to %d buckets (%d entries)", new_capacity, self.count)
