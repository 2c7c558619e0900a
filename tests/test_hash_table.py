from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lexicon.hash_table import DEFAULT_CAPACITY, HashTable


def test_insert_and_search() -> None:
    table = HashTable()
    table.insert("apple", {"n": 1}, 3)

    assert table.search("apple") == ({"n": 1}, 3)
    assert table.search("pear") is None
    assert "apple" in table
    assert len(table) == 1


def test_repeat_insert_adds_frequency_and_replaces_value() -> None:
    table = HashTable()
    table.insert("apple", "old", 2)
    table.insert("apple", "new", 5)

    assert table.search("apple") == ("new", 7)
    assert len(table) == 1


def test_hash_matches_polynomial_rule() -> None:
    table = HashTable(capacity=16)
    expected = 0
    for ch in "ab":
        expected = (expected * 31 + ord(ch)) % 16
    assert table._hash("ab") == expected
    assert table._hash("") == 0


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        HashTable(capacity=0)


def test_resize_doubles_once_load_factor_exceeded() -> None:
    table = HashTable()
    for i in range(12):
        table.insert(f"k{i}", i)
    # 12 / 16 == 0.75 is not above the limit
    assert table.capacity == DEFAULT_CAPACITY

    table.insert("k12", 12)
    assert table.capacity == DEFAULT_CAPACITY * 2
    assert table.load_factor == pytest.approx(13 / 32)


@settings(max_examples=40, deadline=None)
@given(st.lists(st.tuples(st.text(min_size=1, max_size=6), st.integers(1, 9)), max_size=80))
def test_keys_stay_unique_and_retrievable_through_growth(pairs: list) -> None:
    table = HashTable()
    totals: Counter = Counter()
    for key, freq in pairs:
        table.insert(key, key.upper(), freq)
        totals[key] += freq

    keys = [e.key for e in table.items()]
    assert len(keys) == len(set(keys)) == len(totals) == len(table)
    for key, freq in totals.items():
        assert table.search(key) == (key.upper(), freq)
    assert table.load_factor <= 0.75


def test_stats_report_collisions() -> None:
    table = HashTable(capacity=1)
    table.insert("a", 1)
    stats = table.get_stats()
    assert stats.capacity == 2          # 1 / 1 exceeded the limit and doubled
    assert stats.count == 1
    assert stats.collisions == 0

    crowded = HashTable(capacity=64)
    # single-char keys hash to ord(ch) % 64, so "a" (97) and "\u00a1" (161) share a bucket
    for key in ["a", "\u00a1", "b"]:
        crowded.insert(key, None)
    assert crowded.get_stats().collisions == 1
    assert crowded.search("\u00a1") == (None, 1)
