from __future__ import annotations

import pytest

from grid import CellType, Grid
from grid.grid import DEFAULT_COLS, DEFAULT_ROWS

MAZE = """
S.#..
..#.E
..#..
"""


def test_default_grid_layout() -> None:
    g = Grid()
    assert (g.rows, g.cols) == (DEFAULT_ROWS, DEFAULT_COLS)
    assert g.start == (12, 12)
    assert g.end == (12, 37)
    assert g.cell(*g.start).type is CellType.START
    assert g.cell(*g.end).type is CellType.END


def test_flat_index_round_trip(open_3x3: Grid) -> None:
    assert open_3x3.index(1, 2) == 5
    assert open_3x3.coord_of(5) == (1, 2)
    assert open_3x3.cell_at(5) is open_3x3.cell(1, 2)


def test_constructor_rejects_bad_endpoints() -> None:
    with pytest.raises(ValueError):
        Grid(3, 3, start=(0, 0), end=(0, 0))
    with pytest.raises(ValueError):
        Grid(3, 3, start=(0, 0), end=(5, 5))
    with pytest.raises(ValueError):
        Grid(1, 1)


def test_neighbours_are_ordered_and_skip_walls(open_3x3: Grid) -> None:
    centre = open_3x3.index(1, 1)
    assert [open_3x3.coord_of(i) for i in open_3x3.neighbours(centre)] == [
        (0, 1), (2, 1), (1, 0), (1, 2),
    ]
    open_3x3.set_wall(0, 1)
    assert open_3x3.index(0, 1) not in open_3x3.neighbours(centre)
    assert [open_3x3.coord_of(i) for i in open_3x3.neighbours(0)] == [(1, 0)]


def test_endpoints_refuse_walls_and_each_other(open_3x3: Grid) -> None:
    open_3x3.set_wall(1, 1)
    assert open_3x3.set_start(1, 1) is False
    assert open_3x3.set_start(2, 2) is False
    assert open_3x3.set_end(9, 9) is False
    assert open_3x3.set_wall(0, 0) is False

    assert open_3x3.set_start(0, 1) is True
    assert open_3x3.cell(0, 0).type is CellType.EMPTY
    assert open_3x3.cell(0, 1).type is CellType.START


def test_place_endpoints_can_swap(open_3x3: Grid) -> None:
    assert open_3x3.place_endpoints((2, 2), (0, 0))
    assert (open_3x3.start, open_3x3.end) == ((2, 2), (0, 0))
    assert open_3x3.cell(2, 2).type is CellType.START
    assert open_3x3.place_endpoints((1, 1), (1, 1)) is False


def test_toggle_and_clear_walls(open_3x3: Grid) -> None:
    assert open_3x3.toggle_wall(1, 1)
    assert open_3x3.walls() == [(1, 1)]
    assert open_3x3.toggle_wall(1, 1)
    assert open_3x3.walls() == []

    open_3x3.set_wall(0, 2)
    open_3x3.clear_walls()
    assert open_3x3.walls() == []


def test_from_text_and_back() -> None:
    g = Grid.from_text(MAZE)
    assert (g.rows, g.cols) == (3, 5)
    assert g.start == (0, 0)
    assert g.end == (1, 4)
    assert g.walls() == [(0, 2), (1, 2), (2, 2)]
    assert g.to_text() == MAZE.strip("\n")


@pytest.mark.parametrize(
    "text",
    ["", "S..\n...", "S.E\n.E.", "S.E\n..", "S?E"],
)
def test_from_text_rejects_malformed_maps(text: str) -> None:
    with pytest.raises(ValueError):
        Grid.from_text(text)


def test_dict_round_trip() -> None:
    g = Grid.from_text(MAZE)
    clone = Grid.from_dict(g.to_dict())
    assert clone.to_text() == g.to_text()


def test_generate_random_is_seeded_and_keeps_endpoints_open() -> None:
    a = Grid.generate_random(10, 10, wall_prob=0.9, seed=7)
    b = Grid.generate_random(10, 10, wall_prob=0.9, seed=7)
    assert a.walls() == b.walls()
    assert a.start not in a.walls()
    assert a.end not in a.walls()
    assert len(a.walls()) > 50


def test_reachable_from() -> None:
    g = Grid.from_text(MAZE)
    assert g.reachable_from(0, 0) == {(r, c) for r in range(3) for c in range(2)}
    assert g.reachable_from(0, 2) == set()


def test_reset_algo_state_keeps_the_map(open_3x3: Grid) -> None:
    open_3x3.set_wall(1, 1)
    cell = open_3x3.cell(0, 1)
    cell.type = CellType.VISITED
    cell.distance = 3
    cell.previous = 0
    cell.visited = True

    open_3x3.reset_algo_state()
    assert cell.type is CellType.EMPTY
    assert cell.distance == float("inf")
    assert cell.previous is None
    assert not cell.visited
    assert open_3x3.walls() == [(1, 1)]
    assert open_3x3.cell(0, 0).type is CellType.START
