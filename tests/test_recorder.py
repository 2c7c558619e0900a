from __future__ import annotations

import json

import pytest

from engine import AlgorithmResult, Recorder, compare, run
from grid import Grid


def test_run_moves_endpoints_before_searching(open_3x3: Grid) -> None:
    result = run("bfs", open_3x3, start=(2, 0), end=(0, 2))
    assert (open_3x3.start, open_3x3.end) == ((2, 0), (0, 2))
    assert result.path[0] == (2, 0)
    assert result.path[-1] == (0, 2)
    assert result.path_length == 4


def test_run_with_only_end_keeps_start(open_3x3: Grid) -> None:
    result = run("dijkstra", open_3x3, end=(0, 1))
    assert open_3x3.start == (0, 0)
    assert result.path == [(0, 0), (0, 1)]


@pytest.mark.parametrize(
    "start, end",
    [((0, 0), (0, 0)), ((5, 5), (2, 2)), ((1, 1), (2, 2))],
)
def test_run_rejects_invalid_endpoints(open_3x3: Grid, start, end) -> None:
    open_3x3.set_wall(1, 1)
    with pytest.raises(ValueError):
        run("bfs", open_3x3, start=start, end=end)


def test_run_rejects_unknown_algorithm(open_3x3: Grid) -> None:
    with pytest.raises(ValueError):
        run("bogosearch", open_3x3)


def test_run_to_completion_requires_start() -> None:
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_result_metrics(open_3x3: Grid) -> None:
    result = run("dijkstra", open_3x3)
    assert result.cells_explored == len(result.steps[-1].visited)
    assert result.efficiency == pytest.approx(result.path_length / result.cells_explored)
    assert result.total_steps == len(result.steps)
    assert result.execution_time_ms >= 0


def test_efficiency_is_zero_without_a_path() -> None:
    assert AlgorithmResult().efficiency == 0.0
    assert AlgorithmResult(success=True, path_length=3, cells_explored=0).efficiency == 0.0


def test_export_is_json_serialisable(open_3x3: Grid) -> None:
    rec = Recorder()
    rec.start("astar", open_3x3)
    rec.run_to_completion()

    data = json.loads(json.dumps(rec.export()))
    assert data["algo_key"] == "astar"
    assert data["grid"]["rows"] == 3
    assert data["result"]["success"] is True
    assert "steps" not in data["result"]
    assert len(data["steps"]) == len(rec.steps)
    assert data["steps"][-1]["path"][-1] == [2, 2]


def test_result_to_dict_can_skip_steps(open_3x3: Grid) -> None:
    result = run("bfs", open_3x3)
    assert "steps" not in result.to_dict(include_steps=False)
    assert len(result.to_dict()["steps"]) == result.total_steps


def test_compare_picks_winners() -> None:
    g = Grid(3, 3, start=(0, 0), end=(0, 2))
    left, right = Recorder(), Recorder()
    left.start("dfs", g)
    left.run_to_completion()
    right.start("bfs", g)
    right.run_to_completion()

    outcome = compare(left, right)
    assert outcome.winner_path == "bfs"
    assert outcome.left.algo_key == "dfs"
    assert outcome.winner_time in ("dfs", "bfs", "tie")


def test_compare_treats_failure_as_longest_path() -> None:
    left = Recorder()
    left.result = AlgorithmResult(algo_key="a", success=False, cells_explored=3)
    right = Recorder()
    right.result = AlgorithmResult(algo_key="b", success=True, path_length=9, cells_explored=3)

    outcome = compare(left, right)
    assert outcome.winner_path == "b"
    assert outcome.winner_explored == "tie"
