"""
entry.py — Lexicon Records
===========================
Plain dataclasses passed in and out of the trie, the hash table and
the database manager.  None of them hold references back into the
index structures, so callers can keep them after the index changes.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

DEFAULT_CATEGORY = "general"


@dataclass
class WordMetadata:
    category:      str           = DEFAULT_CATEGORY
    last_accessed: float         = field(default_factory=time.time)   # epoch seconds
    description:   Optional[str] = None


@dataclass
class WordEntry:
    """One row of an exact search or a full listing."""
    word:      str
    frequency: int
    metadata:  Optional[WordMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word":      self.word,
            "frequency": self.frequency,
            "metadata":  asdict(self.metadata) if self.metadata else None,
        }


@dataclass
class FuzzyMatch:
    """One row of a fuzzy search: a WordEntry plus its edit distance."""
    word:      str
    frequency: int
    distance:  int
    metadata:  Optional[WordMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word":      self.word,
            "frequency": self.frequency,
            "distance":  self.distance,
            "metadata":  asdict(self.metadata) if self.metadata else None,
        }


@dataclass
class EntryData:
    """Payload the manager stores as the hash-table value of a key."""
    frequency:   int = 100
    category:    str = DEFAULT_CATEGORY
    description: str = ""


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------
@dataclass
class TrieStats:
    total_words: int = 0      # distinct words
    max_depth:   int = 0      # longest word inserted
    node_count:  int = 0      # includes the root


@dataclass
class HashTableStats:
    capacity:    int   = 0
    count:       int   = 0
    load_factor: float = 0.0
    collisions:  int   = 0    # buckets holding more than one entry
