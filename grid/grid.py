"""
grid.py — Grid Container & Generator
=====================================
Single source of truth for the occupancy grid.  Algorithms and the
recorder both talk to this object.

Responsibilities:
  1. Cell storage & lookup                  (arena of Cells, flat indices)
  2. Map editing                            (start / end / walls)
  3. Adjacency queries                      (4-directional neighbours)
  4. Path reconstruction                    (predecessor indices → coords)
  5. Factories & import                     (random walls, ASCII maps)
  6. Serialisation round-trip               (to_dict / from_dict)
  7. Reset helpers                          (wipe algo state, keep the map)

Design decisions:
  - Cells live in ONE flat list indexed by `row * cols + col`.  A cell's
    predecessor is stored as such an index, never as a Cell reference,
    so paths are rebuilt by index lookups into the arena.
  - Exactly one start and one end exist at all times.  Editing methods
    return False instead of breaking that invariant.
"""

import logging
import random
from collections import deque
from typing import Dict, List, Optional, Set

from grid.cell import Cell, CellType, Coord

logger = logging.getLogger(__name__)


DEFAULT_ROWS = 25
DEFAULT_COLS = 50

# up, down, left, right; the order every algorithm sees neighbours in
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

_TEXT_WALL  = "#"
_TEXT_START = "S"
_TEXT_END   = "E"
_TEXT_EMPTY = "."


class Grid:
    """
    Attributes:
        rows, cols : Fixed dimensions.
        cells      : Flat list of Cells (the arena).
        start      : (row, col) of the start cell.
        end        : (row, col) of the end cell.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ):
        if rows < 1 or cols < 1 or rows * cols < 2:
            raise ValueError(f"Grid needs room for a start and an end cell, got {rows}x{cols}")

        self.rows:  int        = rows
        self.cols:  int        = cols
        self.cells: List[Cell] = [Cell(r, c) for r in range(rows) for c in range(cols)]

        start = start if start is not None else self._default_start()
        end   = end   if end   is not None else self._default_end(start)
        if not self.in_bounds(*start) or not self.in_bounds(*end):
            raise ValueError(f"start {start} / end {end} outside a {rows}x{cols} grid")
        if start == end:
            raise ValueError("start and end must be different cells")

        self._start: Coord = start
        self._end:   Coord = end
        self.cell(*start).type = CellType.START
        self.cell(*end).type   = CellType.END

    def _default_start(self) -> Coord:
        return (self.rows // 2, self.cols // 4)

    def _default_end(self, start: Coord) -> Coord:
        end = (self.rows // 2, (3 * self.cols) // 4)
        if end == start:
            end = (self.rows - 1, self.cols - 1)
        if end == start:
            end = (0, 0)
        return end

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def coord_of(self, index: int) -> Coord:
        return divmod(index, self.cols)

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[self.index(row, col)]

    def cell_at(self, index: int) -> Cell:
        return self.cells[index]

    @property
    def start(self) -> Coord:
        return self._start

    @property
    def end(self) -> Coord:
        return self._end

    @property
    def start_index(self) -> int:
        return self.index(*self._start)

    @property
    def end_index(self) -> int:
        return self.index(*self._end)

    # ==================================================================
    # MAP EDITING
    # ==================================================================
    def set_start(self, row: int, col: int) -> bool:
        """Move the start marker.  Refused on walls, on the end, out of bounds."""
        if not self._can_place(row, col) or (row, col) == self._end:
            logger.debug("refused start placement at (%d, %d)", row, col)
            return False
        self.cell(*self._start).type = CellType.EMPTY
        self._start = (row, col)
        self.cell(row, col).type = CellType.START
        return True

    def set_end(self, row: int, col: int) -> bool:
        """Move the end marker.  Refused on walls, on the start, out of bounds."""
        if not self._can_place(row, col) or (row, col) == self._start:
            logger.debug("refused end placement at (%d, %d)", row, col)
            return False
        self.cell(*self._end).type = CellType.EMPTY
        self._end = (row, col)
        self.cell(row, col).type = CellType.END
        return True

    def place_endpoints(self, start: Coord, end: Coord) -> bool:
        """Move start and end together (also allows swapping them)."""
        if start == end or not self._can_place(*start) or not self._can_place(*end):
            logger.debug("refused endpoints start=%s end=%s", start, end)
            return False
        self.cell(*self._start).type = CellType.EMPTY
        self.cell(*self._end).type   = CellType.EMPTY
        self._start, self._end = tuple(start), tuple(end)
        self.cell(*start).type = CellType.START
        self.cell(*end).type   = CellType.END
        return True

    def set_wall(self, row: int, col: int, wall: bool = True) -> bool:
        if not self.in_bounds(row, col) or (row, col) in (self._start, self._end):
            return False
        self.cell(row, col).type = CellType.WALL if wall else CellType.EMPTY
        return True

    def toggle_wall(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        return self.set_wall(row, col, not self.cell(row, col).is_wall)

    def clear_walls(self) -> None:
        for cell in self.cells:
            if cell.is_wall:
                cell.type = CellType.EMPTY

    def walls(self) -> List[Coord]:
        return [c.coord for c in self.cells if c.is_wall]

    def _can_place(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and not self.cell(row, col).is_wall

    # ==================================================================
    # ADJACENCY
    # ==================================================================
    def neighbours(self, index: int) -> List[int]:
        """Flat indices of the open 4-neighbours, in up/down/left/right order."""
        row, col = self.coord_of(index)
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if not self.in_bounds(nr, nc):
                continue
            nbr = self.index(nr, nc)
            if self.cells[nbr].is_wall:
                continue
            result.append(nbr)
        return result

    def reachable_from(self, row: int, col: int) -> Set[Coord]:
        """Every coordinate connected to (row, col) through open cells."""
        origin = self.index(row, col)
        if self.cells[origin].is_wall:
            return set()
        seen = {origin}
        queue = deque([origin])
        while queue:
            for nbr in self.neighbours(queue.popleft()):
                if nbr not in seen:
                    seen.add(nbr)
                    queue.append(nbr)
        return {self.coord_of(i) for i in seen}

    # ==================================================================
    # PATHS
    # ==================================================================
    def reconstruct_path(self, end_index: int) -> List[Coord]:
        """Walk `previous` indices back from end_index, then reverse."""
        path: List[Coord] = []
        cur: Optional[int] = end_index
        while cur is not None:
            path.append(self.coord_of(cur))
            cur = self.cells[cur].previous
        path.reverse()
        return path

    # ==================================================================
    # RESET (keep the map, wipe algo state)
    # ==================================================================
    def reset_algo_state(self) -> None:
        for cell in self.cells:
            cell.reset_algo_state()

    def distance_snapshot(self) -> Dict[Coord, float]:
        """{coord: distance} for every cell reached so far."""
        return {c.coord: c.distance for c in self.cells if c.distance != float("inf")}

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "start": list(self._start),
            "end":   list(self._end),
            "walls": [list(w) for w in self.walls()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Grid":
        g = cls(
            rows=data["rows"],
            cols=data["cols"],
            start=tuple(data["start"]),
            end=tuple(data["end"]),
        )
        for r, c in data.get("walls", []):
            g.set_wall(r, c)
        return g

    def to_text(self) -> str:
        symbols = {
            CellType.WALL:  _TEXT_WALL,
            CellType.START: _TEXT_START,
            CellType.END:   _TEXT_END,
        }
        lines = []
        for r in range(self.rows):
            row_cells = self.cells[r * self.cols:(r + 1) * self.cols]
            lines.append("".join(symbols.get(c.type, _TEXT_EMPTY) for c in row_cells))
        return "\n".join(lines)

    # ==================================================================
    # GENERATORS: Factory class-methods
    # ==================================================================
    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Parse an ASCII map, one grid row per line:

            S..#....
            .#.#.##.
            .#...#.E

        '#' = wall, 'S' = start, 'E' = end, '.' or ' ' = empty.
        Blank leading / trailing lines are ignored.
        """
        lines = [line.rstrip("\n") for line in text.strip("\n").splitlines()]
        if not lines:
            raise ValueError("empty grid text")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("grid rows must all have the same width")

        starts, ends, walls = [], [], []
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == _TEXT_START:
                    starts.append((r, c))
                elif ch == _TEXT_END:
                    ends.append((r, c))
                elif ch == _TEXT_WALL:
                    walls.append((r, c))
                elif ch not in (_TEXT_EMPTY, " "):
                    raise ValueError(f"unknown grid symbol {ch!r} at ({r}, {c})")

        if len(starts) != 1 or len(ends) != 1:
            raise ValueError("grid text needs exactly one 'S' and one 'E'")

        g = cls(rows=len(lines), cols=width, start=starts[0], end=ends[0])
        for r, c in walls:
            g.set_wall(r, c)
        return g

    @classmethod
    def generate_random(
        cls,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        wall_prob: float = 0.25,
        seed: Optional[int] = None,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ) -> "Grid":
        """Random obstacle field.  Start and end are never walled."""
        rng = random.Random(seed)
        g = cls(rows=rows, cols=cols, start=start, end=end)
        for cell in g.cells:
            if cell.type is CellType.EMPTY and rng.random() < wall_prob:
                cell.type = CellType.WALL
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def cell_count(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, "
            f"end={self._end}, walls={len(self.walls())})"
        )
