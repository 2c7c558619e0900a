from __future__ import annotations

import pytest

from lexicon.database import DatabaseManager
from lexicon.entry import FuzzyMatch, WordEntry
from lexicon.search import fuzzy_distance_for, perform_search


@pytest.mark.parametrize("query, budget", [("a", 1), ("abc", 1), ("abcd", 2), ("abcdefghij", 2)])
def test_fuzzy_budget_scales_with_query(query: str, budget: int) -> None:
    assert fuzzy_distance_for(query) == budget


def test_blank_query_returns_nothing(manager: DatabaseManager) -> None:
    outcome = perform_search(manager.get_active_database(), "   ", "fuzzy")
    assert outcome.results == []
    assert outcome.stats.results_found == 0
    assert outcome.stats.operation_count == 0


def test_exact_mode(manager: DatabaseManager) -> None:
    outcome = perform_search(manager.get_active_database(), "tr")
    words = [r.word for r in outcome.results]

    assert all(isinstance(r, WordEntry) for r in outcome.results)
    assert words == ["transformation", "triumph", "tremendous", "treasure", "tranquility"]
    assert outcome.stats.results_found == 5
    assert outcome.stats.operation_count == 5 * 2
    assert outcome.stats.search_time_ms >= 0


def test_fuzzy_mode_tolerates_typos(manager: DatabaseManager) -> None:
    outcome = perform_search(manager.get_active_database(), "sucess", "fuzzy")

    assert all(isinstance(r, FuzzyMatch) for r in outcome.results)
    assert outcome.results[0].word == "success"
    assert outcome.results[0].distance == 1


def test_unknown_mode_raises(manager: DatabaseManager) -> None:
    with pytest.raises(ValueError):
        perform_search(manager.get_active_database(), "a", "regex")
