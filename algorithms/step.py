"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • Which cell is being processed right now
    • Every cell visited so far (cumulative, in visit order)
    • Which cells were newly discovered / improved this iteration
    • The reconstructed path (terminal success step only)
    • The distance map (for the live distance panel)
    • A plain-English description of what happened

Design decisions:
  - Step is a frozen dataclass.  It is a SNAPSHOT: the algorithm generator
    is the only writer, the recorder / stepper are pure readers.  The log
    of Steps is append-only and is the authoritative animation script.
  - Coordinates are (row, col) tuples so a Step never holds a reference
    into the live grid.
  - `distances` only lists cells with a finite distance; a missing key
    means "still infinity".
  - `overlay` is a free-form dict so different algorithms can push
    whatever extra info they want (queue contents, A* scores, …).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from grid import CellType, Coord, Grid


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the run.
        description : Human-readable text for this iteration.
        current     : Cell being processed (None on the initial / failure steps).
        visited     : Cumulative visited coordinates, in visit order.
        frontier    : Cells discovered or improved during THIS iteration.
        path        : Start → end coordinates; filled only on a successful final step.
        distances   : {coord: tentative distance} for every reached cell.
        overlay     : Algorithm-specific extras:
                        • "queue"  – BFS queue contents
                        • "stack"  – DFS stack contents
                        • "scores" – A* {g, h, f} of the current cell
        is_final    : True on the very last step (path found or exhausted).
    """

    step_number: int                          = 0
    description: str                          = ""
    current:     Optional[Coord]              = None
    visited:     Tuple[Coord, ...]            = ()
    frontier:    Tuple[Coord, ...]            = ()
    path:        Tuple[Coord, ...]            = ()
    distances:   Dict[Coord, float]           = field(default_factory=dict)
    overlay:     Dict[str, Any]               = field(default_factory=dict)
    is_final:    bool                         = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number": self.step_number,
            "description": self.description,
            "current":     list(self.current) if self.current else None,
            "visited":     [list(c) for c in self.visited],
            "frontier":    [list(c) for c in self.frontier],
            "path":        [list(c) for c in self.path],
            "distances":   [[r, c, d] for (r, c), d in sorted(self.distances.items())],
            "overlay":     self.overlay,
            "is_final":    self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Scratch-pad that algorithms use to construct Steps cleanly.

    The visited list is cumulative for the whole run; everything else is
    per-step scratch and is cleared by every build().  The builder also
    paints the transient cell types onto the grid as it goes.

    Usage inside an algorithm generator:
        sb = StepBuilder(grid)
        sb.set_current(idx)
        sb.visit(idx)
        sb.discover(nbr_idx)
        sb.description = "Visiting (3, 4) at distance 7"
        yield sb.build()
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.step_number: int = 0
        self.visited:     List[Coord] = []
        self._seen:       Set[Coord]  = set()
        self._current_idx: Optional[int] = None
        self.reset()

    def reset(self) -> None:
        self.current:     Optional[Coord]     = None
        self.frontier:    List[Coord]         = []
        self.path:        List[Coord]         = []
        self.description: str                 = ""
        self.overlay:     Dict[str, Any]      = {}

    # -- helpers --
    def visit(self, index: int) -> None:
        coord = self.grid.coord_of(index)
        if coord not in self._seen:
            self._seen.add(coord)
            self.visited.append(coord)

    def set_current(self, index: int) -> None:
        self._retire_current()
        self._current_idx = index
        self.current = self.grid.coord_of(index)
        self.grid.cell_at(index).mark(CellType.CURRENT)

    def discover(self, index: int) -> None:
        coord = self.grid.coord_of(index)
        if coord not in self.frontier:
            self.frontier.append(coord)
        cell = self.grid.cell_at(index)
        if cell.type in (CellType.EMPTY, CellType.FRONTIER):
            cell.mark(CellType.FRONTIER)

    def _retire_current(self) -> None:
        if self._current_idx is None:
            return
        cell = self.grid.cell_at(self._current_idx)
        if cell.type is CellType.CURRENT:
            cell.type = CellType.VISITED

    def set_path(self, path: List[Coord]) -> None:
        self.path = list(path)
        for r, c in path:
            self.grid.cell(r, c).mark(CellType.PATH)

    @property
    def visited_count(self) -> int:
        return len(self.visited)

    def build(self, is_final: bool = False) -> Step:
        if is_final:
            self._retire_current()
        step = Step(
            step_number=self.step_number,
            description=self.description,
            current=self.current,
            visited=tuple(self.visited),
            frontier=tuple(self.frontier),
            path=tuple(self.path),
            distances=self.grid.distance_snapshot(),
            overlay=dict(self.overlay),
            is_final=is_final,
        )
        self.step_number += 1
        self.reset()
        return step
