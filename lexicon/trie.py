"""
trie.py — Prefix Trie with Ranking & Fuzzy Lookup
==================================================
Character trie over lowercased words.  Every terminal node carries an
accumulated frequency, the word it spells and a WordMetadata record.

Operations:
  1. insert          (walk / create one child per character)
  2. search_exact    (prefix walk + subtree collect, top 10 by frequency)
  3. search_fuzzy    (whole-trie scan + Levenshtein, top 8)
  4. get_all_words / get_stats   (read-only traversals)

Design decisions:
  - Fuzzy search scans every word: O(total words) edit-distance tables.
  - Ties are broken by the word itself so results are deterministic.
"""

import logging
import time
from typing import Dict, Iterator, List, Optional

from lexicon.entry import (
    DEFAULT_CATEGORY,
    FuzzyMatch,
    TrieStats,
    WordEntry,
    WordMetadata,
)

logger = logging.getLogger(__name__)


EXACT_LIMIT          = 10
FUZZY_LIMIT          = 8
DEFAULT_MAX_DISTANCE = 2


# ---------------------------------------------------------------------------
# Edit distance
# ---------------------------------------------------------------------------
def levenshtein(a: str, b: str) -> int:
    """
    Classic full-table edit distance.  Insert, delete and substitute all
    cost 1; matching characters cost 0.
    """
    rows = len(b) + 1
    cols = len(a) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(cols):
        table[0][i] = i
    for j in range(rows):
        table[j][0] = j

    for j in range(1, rows):
        for i in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[j][i] = min(
                table[j][i - 1] + 1,          # insertion
                table[j - 1][i] + 1,          # deletion
                table[j - 1][i - 1] + cost,   # substitution
            )

    return table[rows - 1][cols - 1]


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class TrieNode:
    __slots__ = ("children", "is_end_of_word", "frequency", "word", "metadata")

    def __init__(self):
        self.children:       Dict[str, "TrieNode"]  = {}
        self.is_end_of_word: bool                   = False
        self.frequency:      int                    = 0
        self.word:           Optional[str]          = None
        self.metadata:       Optional[WordMetadata] = None


# ---------------------------------------------------------------------------
# Trie
# ---------------------------------------------------------------------------
class Trie:
    """
    Attributes:
        root        : Empty-prefix node.  Never a word end.
        total_words : Number of distinct words inserted.
        max_depth   : Length of the longest word inserted.
    """

    def __init__(self):
        self.root:        TrieNode = TrieNode()
        self.total_words: int      = 0
        self.max_depth:   int      = 0

    # ------------------------------------------------------------------
    # Insert
    # ------------------------------------------------------------------
    def insert(
        self,
        word: str,
        frequency: int = 1,
        metadata: Optional[WordMetadata] = None,
    ) -> bool:
        """
        Add `frequency` to `word` (case-insensitive).  Repeat inserts
        accumulate frequency and overwrite the metadata.  Returns False
        for the empty string.
        """
        word = word.lower()
        if not word:
            logger.debug("refused empty word")
            return False

        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())

        if not node.is_end_of_word:
            self.total_words += 1

        node.is_end_of_word = True
        node.frequency     += frequency
        node.word           = word
        node.metadata       = WordMetadata(
            category=(metadata.category if metadata and metadata.category else DEFAULT_CATEGORY),
            last_accessed=time.time(),
            description=metadata.description if metadata else None,
        )
        self.max_depth = max(self.max_depth, len(word))
        return True

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search_exact(self, prefix: str) -> List[WordEntry]:
        """Up to 10 words starting with `prefix`, most frequent first."""
        node = self._find(prefix.lower())
        if node is None:
            return []
        entries = list(self._collect(node))
        entries.sort(key=lambda e: (-e.frequency, e.word))
        return entries[:EXACT_LIMIT]

    def search_fuzzy(self, query: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> List[FuzzyMatch]:
        """Up to 8 words within `max_distance` edits of `query`, closest first."""
        query = query.lower()
        matches = []
        for entry in self._collect(self.root):
            distance = levenshtein(query, entry.word)
            if distance <= max_distance:
                matches.append(FuzzyMatch(entry.word, entry.frequency, distance, entry.metadata))
        matches.sort(key=lambda m: (m.distance, -m.frequency, m.word))
        return matches[:FUZZY_LIMIT]

    def get_all_words(self) -> List[WordEntry]:
        return list(self._collect(self.root))

    def get_stats(self) -> TrieStats:
        return TrieStats(
            total_words=self.total_words,
            max_depth=self.max_depth,
            node_count=self._count_nodes(),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __contains__(self, word: str) -> bool:
        node = self._find(word.lower())
        return node is not None and node.is_end_of_word

    def __len__(self) -> int:
        return self.total_words

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _collect(self, node: TrieNode) -> Iterator[WordEntry]:
        # iterative; order is unspecified, callers sort
        stack = [node]
        while stack:
            cur = stack.pop()
            if cur.is_end_of_word and cur.word:
                yield WordEntry(cur.word, cur.frequency, cur.metadata)
            stack.extend(cur.children.values())

    def _count_nodes(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            cur = stack.pop()
            count += 1
            stack.extend(cur.children.values())
        return count
