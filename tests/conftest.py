"""Pytest configuration: repo-root path setup and shared fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))

from grid import Grid  # noqa: E402
from lexicon import DatabaseManager, Trie  # noqa: E402


class FakeClock:
    """Monotonic stand-in for time.time, advancing one second per call."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        self.now += 1.0
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def manager(clock: FakeClock) -> DatabaseManager:
    return DatabaseManager(clock=clock)


@pytest.fixture
def empty_manager(clock: FakeClock) -> DatabaseManager:
    return DatabaseManager(seed=False, clock=clock)


@pytest.fixture
def small_trie() -> Trie:
    trie = Trie()
    for word, freq in [("car", 5), ("cart", 3), ("care", 9), ("cat", 1), ("dog", 4)]:
        trie.insert(word, freq)
    return trie


@pytest.fixture
def open_3x3() -> Grid:
    return Grid(rows=3, cols=3, start=(0, 0), end=(2, 2))
