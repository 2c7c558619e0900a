"""
grid/
-----
Core data layer.  Public API:

    from grid import Grid, Cell, CellType
"""

from grid.cell import Cell, CellType, Coord
from grid.grid import Grid, DEFAULT_ROWS, DEFAULT_COLS

__all__ = [
    "Cell",  "CellType", "Coord",
    "Grid",  "DEFAULT_ROWS", "DEFAULT_COLS",
]
