from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algorithms import REGISTRY, algorithms_by_tag, get_algorithm, list_algorithms, register
from algorithms.astar import manhattan
from engine import run
from grid import CellType, Grid

ALGORITHMS = ["dijkstra", "astar", "bfs", "dfs"]
SHORTEST = ["dijkstra", "astar", "bfs"]

WALLED_OFF = """
S.#..
..#.E
..#..
"""


def test_registry_lists_the_four_algorithms() -> None:
    assert [a.key for a in list_algorithms()] == ALGORITHMS
    assert get_algorithm("dfs").guarantees_shortest is False
    assert get_algorithm("astar").has_heuristic is True
    assert get_algorithm("nope") is None
    assert {a.key for a in algorithms_by_tag("shortest-path")} == set(SHORTEST)
    assert all(info.pseudocode for info in REGISTRY.values())
    assert [a.frontier_kind for a in list_algorithms()] == ["heap", "heap", "queue", "stack"]


def test_register_refuses_duplicate_keys() -> None:
    with pytest.raises(ValueError):
        register(get_algorithm("bfs"))


def test_manhattan() -> None:
    assert manhattan((0, 0), (2, 3)) == 5
    assert manhattan((4, 1), (1, 4)) == 6


@pytest.mark.parametrize("algo", SHORTEST)
def test_open_grid_corner_to_corner(algo: str, open_3x3: Grid) -> None:
    result = run(algo, open_3x3)
    assert result.success
    assert result.path_length == 4
    assert result.path[0] == (0, 0)
    assert result.path[-1] == (2, 2)


def test_dfs_takes_a_detour_where_bfs_does_not() -> None:
    g = Grid(3, 3, start=(0, 0), end=(0, 2))
    dfs = run("dfs", g)
    bfs = run("bfs", g)
    dijkstra = run("dijkstra", g)

    assert dfs.path == [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1), (0, 2)]
    assert dfs.path_length == 6
    assert bfs.path_length == dijkstra.path_length == 2
    assert dfs.path_length > bfs.path_length


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_walled_off_goal_explores_only_the_reachable_cells(algo: str) -> None:
    g = Grid.from_text(WALLED_OFF)
    result = run(algo, g)

    assert result.success is False
    assert result.path == []
    assert result.path_length == 0
    assert result.efficiency == 0.0
    assert set(result.steps[-1].visited) == g.reachable_from(*g.start)
    assert result.cells_explored == 6


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_step_log_shape(algo: str, open_3x3: Grid) -> None:
    steps = run(algo, open_3x3).steps

    assert [s.step_number for s in steps] == list(range(len(steps)))
    assert steps[0].current is None
    assert [s.is_final for s in steps] == [False] * (len(steps) - 1) + [True]
    assert all(not s.path for s in steps[:-1])
    assert steps[-1].current == (2, 2)

    # visited only ever grows, and in order
    for before, after in zip(steps, steps[1:]):
        assert after.visited[: len(before.visited)] == before.visited
    assert steps[-1].distances[(2, 2)] == len(steps[-1].path) - 1


def test_dijkstra_breaks_ties_by_lowest_index(open_3x3: Grid) -> None:
    steps = run("dijkstra", open_3x3).steps
    # (0,1) and (1,0) are both at distance 1; (0,1) has the lower flat index
    assert [s.current for s in steps[1:4]] == [(0, 0), (0, 1), (1, 0)]


def test_bfs_reports_queue_and_dfs_reports_stack(open_3x3: Grid) -> None:
    bfs_steps = run("bfs", open_3x3).steps
    assert bfs_steps[0].overlay["queue"] == [(0, 0)]
    assert bfs_steps[1].overlay["queue"] == [(1, 0), (0, 1)]
    assert bfs_steps[1].frontier == ((1, 0), (0, 1))

    dfs_steps = run("dfs", open_3x3).steps
    assert dfs_steps[0].overlay["stack"] == [(0, 0)]


def test_astar_exposes_scores(open_3x3: Grid) -> None:
    steps = run("astar", open_3x3).steps
    assert steps[1].overlay["scores"] == {"g": 0, "h": 4, "f": 4}


def test_run_paints_transient_cell_types(open_3x3: Grid) -> None:
    run("bfs", open_3x3)
    assert open_3x3.cell(0, 0).type is CellType.START
    assert open_3x3.cell(2, 2).type is CellType.END
    path_types = {open_3x3.cell(*c).type for c in run("bfs", open_3x3).path[1:-1]}
    assert path_types == {CellType.PATH}

    open_3x3.reset_algo_state()
    assert {c.type for c in open_3x3.cells} == {CellType.EMPTY, CellType.START, CellType.END}


grids = st.builds(
    Grid.generate_random,
    rows=st.integers(2, 8),
    cols=st.integers(2, 8),
    wall_prob=st.floats(0.0, 0.5),
    seed=st.integers(0, 10_000),
)


@settings(max_examples=60, deadline=None)
@given(grids)
def test_shortest_path_algorithms_agree(g: Grid) -> None:
    reachable = g.end in g.reachable_from(*g.start)
    lengths = set()
    for algo in ALGORITHMS:
        result = run(algo, g)
        assert result.success == reachable
        if algo in SHORTEST:
            lengths.add(result.path_length)
        if result.success:
            assert 0 <= result.efficiency <= 1
            assert result.path[0] == g.start
            assert result.path[-1] == g.end
            for (r1, c1), (r2, c2) in zip(result.path, result.path[1:]):
                assert abs(r1 - r2) + abs(c1 - c2) == 1
            assert not set(result.path) & set(g.walls())
        else:
            assert set(result.steps[-1].visited) == g.reachable_from(*g.start)
    assert len(lengths) == 1
