"""
algorithms/ — Grid Search Registry
===================================
Every grid search the engine can record, keyed by the short name that
`engine.run()` accepts:

    from algorithms import get_algorithm
    info = get_algorithm("astar")
    for step in info.fn(grid):
        ...

Each `fn` takes a Grid and yields Steps.  A new search plugs in with
one register() call at the bottom of this file.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generator, List, Optional

from grid import Grid
from algorithms.step import Step
from algorithms import astar, bfs, dfs, dijkstra

SearchFn = Callable[[Grid], Generator[Step, None, None]]


@dataclass
class AlgoInfo:
    """
    Attributes:
        key                 : Registry key ("bfs").
        label               : Display name.
        fn                  : Step generator.
        pseudocode          : One string per displayed line.
        tags                : Free-form grouping ("shortest-path", "heuristic", …).
        has_heuristic       : Orders its frontier with a distance-to-end estimate.
        guarantees_shortest : Its path always has the fewest moves.
        frontier_kind       : "heap", "queue" or "stack".
        visit_rule          : When a cell joins the visited set.
        complexity_time     : Big-O over cells V and adjacencies E.
        complexity_space    : Big-O extra memory.
        description         : One-line summary.
    """

    key:                 str
    label:               str
    fn:                  SearchFn
    pseudocode:          List[str]
    tags:                List[str] = field(default_factory=list)
    has_heuristic:       bool      = False
    guarantees_shortest: bool      = True
    frontier_kind:       str       = "heap"
    visit_rule:          str       = ""
    complexity_time:     str       = ""
    complexity_space:    str       = "O(V)"
    description:         str       = ""


REGISTRY: Dict[str, AlgoInfo] = {}


def register(info: AlgoInfo) -> AlgoInfo:
    if info.key in REGISTRY:
        raise ValueError(f"algorithm {info.key!r} is already registered")
    REGISTRY[info.key] = info
    return info


def get_algorithm(key: str) -> Optional[AlgoInfo]:
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Registered searches, in registration order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    return [info for info in REGISTRY.values() if tag in info.tags]


# ---------------------------------------------------------------------------
# Built-in grid searches
# ---------------------------------------------------------------------------
register(AlgoInfo(
    key="dijkstra",
    label="Dijkstra",
    fn=dijkstra.dijkstra,
    pseudocode=dijkstra.PSEUDOCODE,
    tags=["shortest-path", "weighted"],
    visit_rule="when selected as the closest unvisited cell",
    complexity_time="O(V log V)",
    description="Expands cells in order of distance from the start; every move costs 1.",
))

register(AlgoInfo(
    key="astar",
    label="A*",
    fn=astar.astar,
    pseudocode=astar.PSEUDOCODE,
    tags=["shortest-path", "weighted", "heuristic"],
    has_heuristic=True,
    visit_rule="when moved from the open set to the closed set",
    complexity_time="O(V log V)",
    description="Dijkstra ordered by g + Manhattan distance to the end.",
))

register(AlgoInfo(
    key="bfs",
    label="Breadth-First Search",
    fn=bfs.bfs,
    pseudocode=bfs.PSEUDOCODE,
    tags=["shortest-path", "unweighted"],
    frontier_kind="queue",
    visit_rule="when enqueued",
    complexity_time="O(V)",
    description="Grows the search one ring of moves at a time.",
))

register(AlgoInfo(
    key="dfs",
    label="Depth-First Search",
    fn=dfs.dfs,
    pseudocode=dfs.PSEUDOCODE,
    tags=["unweighted"],
    guarantees_shortest=False,
    frontier_kind="stack",
    visit_rule="when popped",
    complexity_time="O(V)",
    description="Follows one corridor until it dead-ends, then backtracks; paths can be long.",
))


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SearchFn",
    "register",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
