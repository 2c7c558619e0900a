"""
search.py — Search Facade
==========================
One entry point over a Database's trie for both search modes, with
timing and a rough operation count for the stats panel.

    outcome = perform_search(mgr.get_active_database(), "happ", mode="fuzzy")
    outcome.results, outcome.stats.search_time_ms
"""

import math
import time
from dataclasses import dataclass, field
from typing import List, Union

from lexicon.database import Database
from lexicon.entry import FuzzyMatch, WordEntry
from lexicon.trie import DEFAULT_MAX_DISTANCE

SEARCH_MODES = ("exact", "fuzzy")


@dataclass
class SearchStats:
    search_time_ms:  float = 0.0
    operation_count: int   = 0      # results × query length
    results_found:   int   = 0


@dataclass
class SearchOutcome:
    results: List[Union[WordEntry, FuzzyMatch]] = field(default_factory=list)
    stats:   SearchStats                        = field(default_factory=SearchStats)


def fuzzy_distance_for(query: str) -> int:
    """Edit budget scales with query length, capped at 2."""
    return min(DEFAULT_MAX_DISTANCE, math.ceil(len(query) * 0.3))


def perform_search(database: Database, query: str, mode: str = "exact") -> SearchOutcome:
    if mode not in SEARCH_MODES:
        raise ValueError(f"Unknown search mode: {mode}")
    if not query.strip():
        return SearchOutcome()

    t0 = time.monotonic()
    if mode == "exact":
        results = database.trie.search_exact(query)
    else:
        results = database.trie.search_fuzzy(query, fuzzy_distance_for(query))
    elapsed_ms = (time.monotonic() - t0) * 1000

    return SearchOutcome(
        results=list(results),
        stats=SearchStats(
            search_time_ms=elapsed_ms,
            operation_count=len(results) * len(query),
            results_found=len(results),
        ),
    )
