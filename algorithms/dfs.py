"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Push start onto the stack
  2. Pop an unvisited cell  →  CURRENT, with the neighbours it pushed
  3. End popped  →  reconstruct via predecessor indices
  4. Stack empty  →  NOT FOUND

Neighbours are pushed in reverse up/down/left/right order so the stack
pops them in that order.  DFS does NOT guarantee the shortest path.

The overlay exposes the full stack at every step so the UI can render
the "stack" panel.
"""

from typing import Generator, List

from grid import Grid
from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(grid, start, end):",               # 0
    "    stack ← [start]",                      # 1
    "    visited ← {}",                         # 2
    "    while stack is not empty:",             # 3
    "        cell ← stack.pop()",               # 4
    "        if cell in visited: continue",     # 5
    "        visited.add(cell)",                # 6
    "        if cell == end: return path",      # 7
    "        for nbr in reversed(adj(cell)):",  # 8
    "            if nbr not visited:",           # 9
    "                prev[nbr] ← cell",         # 10
    "                stack.push(nbr)",          # 11
    "    return NOT FOUND",                     # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(grid: Grid) -> Generator[Step, None, None]:
    """
    Iterative DFS with predecessor tracking for path reconstruction.

    Uses "mark on pop": a cell can be pushed several times before it is
    popped.  Each push overwrites its predecessor, and because the most
    recent push is popped first, the predecessor a cell is visited with
    is always the cell that pushed that copy.
    """

    grid.reset_algo_state()
    sb    = StepBuilder(grid)
    src   = grid.start_index
    dst   = grid.end_index
    stack = [src]

    grid.cell_at(src).distance = 0

    # --- init step ---
    sb.description = (
        f"Starting DFS: push {grid.start} onto the stack. "
        f"DFS dives as deep as possible before backtracking."
    )
    sb.overlay["stack"] = [grid.coord_of(i) for i in stack]
    yield sb.build()

    # --- main loop ---
    while stack:
        idx  = stack.pop()
        cell = grid.cell_at(idx)

        if cell.visited:
            continue

        cell.visited = True
        sb.set_current(idx)
        sb.visit(idx)

        # -- target check --
        if idx == dst:
            sb.description = f"Popped {cell.coord} — this is the end cell."
            sb.overlay["stack"] = [grid.coord_of(i) for i in stack]
            yield sb.build()

            path = grid.reconstruct_path(dst)
            sb.current = cell.coord
            sb.set_path(path)
            sb.description = (
                f"🎯 Found the end at {cell.coord}! Path has {len(path) - 1} move(s) "
                f"(not necessarily the shortest)."
            )
            yield sb.build(is_final=True)
            return

        # -- push unvisited neighbours --
        fresh = [n for n in grid.neighbours(idx) if not grid.cell_at(n).visited]
        for nbr in reversed(fresh):
            nbr_cell = grid.cell_at(nbr)
            nbr_cell.previous = idx
            nbr_cell.distance = cell.distance + 1
            stack.append(nbr)
            sb.discover(nbr)

        sb.description = (
            f"Popped {cell.coord} and marked it visited. "
            f"Pushed {len(fresh)} unvisited neighbour(s)."
        )
        sb.overlay["stack"] = [grid.coord_of(i) for i in stack]
        yield sb.build()

    # --- not found ---
    sb.description = f"Stack empty. {grid.end} is not reachable from {grid.start}."
    sb.overlay["stack"] = []
    yield sb.build(is_final=True)
