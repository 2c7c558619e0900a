from enum import Enum
from typing import Optional, Tuple


Coord = Tuple[int, int]


# ---------------------------------------------------------------------------
# Cell Type Enum: durable map tags plus the transient visualisation states
# ---------------------------------------------------------------------------
class CellType(Enum):
    EMPTY    = "empty"      # open floor
    WALL     = "wall"       # user-placed obstacle
    START    = "start"      # exactly one per grid
    END      = "end"        # exactly one per grid
    VISITED  = "visited"    # transient: fully processed by the running algorithm
    FRONTIER = "frontier"   # transient: discovered, not yet processed
    CURRENT  = "current"    # transient: the cell being expanded RIGHT NOW
    PATH     = "path"       # transient: on the reconstructed path

    @property
    def is_transient(self) -> bool:
        return self in _TRANSIENT


_TRANSIENT = frozenset({CellType.VISITED, CellType.FRONTIER, CellType.CURRENT, CellType.PATH})


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell:
    """
    One square of the grid.  Position is fixed; everything else is either
    the durable map tag or per-run algorithm state.

    Attributes:
        row, col  : Position inside the grid.
        type      : Current CellType for visual encoding.
        distance  : Tentative distance from start (inf until reached).
        heuristic : Manhattan estimate to the end (A* only, 0 otherwise).
        previous  : Flat index of the predecessor on the best-known path.
        visited   : Algorithm visited flag (meaning depends on the algorithm).
    """

    __slots__ = ("row", "col", "type", "distance", "heuristic", "previous", "visited")

    def __init__(self, row: int, col: int, cell_type: CellType = CellType.EMPTY):
        self.row:       int              = row
        self.col:       int              = col
        self.type:      CellType         = cell_type
        self.distance:  float            = float("inf")
        self.heuristic: float            = 0.0
        self.previous:  Optional[int]    = None
        self.visited:   bool             = False

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    def reset_algo_state(self) -> None:
        """Clear per-run data, keep the durable tag (walls / start / end)."""
        if self.type.is_transient:
            self.type = CellType.EMPTY
        self.distance  = float("inf")
        self.heuristic = 0.0
        self.previous  = None
        self.visited   = False

    def mark(self, cell_type: CellType) -> None:
        """Apply a transient state without clobbering start / end tags."""
        if self.type in (CellType.START, CellType.END, CellType.WALL):
            return
        self.type = cell_type

    @property
    def score(self) -> float:
        """Combined score used by A*: distance + heuristic."""
        return self.distance + self.heuristic

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_wall(self) -> bool:
        return self.type is CellType.WALL

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, type={self.type.value}, distance={self.distance})"
