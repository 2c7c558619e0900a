"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Seed the queue with the start cell
  2. Dequeue a cell  →  CURRENT, with the neighbours it enqueued
  3. End dequeued  →  reconstruct & highlight the shortest (hop-count) path
  4. Queue empty  →  NOT FOUND

Cells are marked visited when they are ENQUEUED, not when dequeued, so
no cell can sit in the queue twice.  The visited set reported by each
Step is therefore "everything ever enqueued".
"""

from collections import deque
from typing import Deque, Generator, List

from grid import Grid
from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",               # 0
    "    queue ← [start]",                      # 1
    "    visited ← {start}",                    # 2
    "    while queue is not empty:",             # 3
    "        cell ← queue.dequeue()",           # 4
    "        if cell == end: return path",      # 5
    "        for nbr in adj(cell):",            # 6
    "            if nbr not visited:",           # 7
    "                visited.add(nbr)",         # 8
    "                prev[nbr] ← cell",         # 9
    "                queue.enqueue(nbr)",       # 10
    "    return NOT FOUND",                     # 11
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(grid: Grid) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for a BFS from grid.start to grid.end.

    Args:
        grid : The grid to search.  Its algorithm state is reset first.

    Yields:
        Step – initial, one per dequeued cell, and a final step.
    """

    grid.reset_algo_state()
    sb  = StepBuilder(grid)
    src = grid.start_index
    dst = grid.end_index

    src_cell = grid.cell_at(src)
    src_cell.distance = 0
    src_cell.visited  = True
    queue: Deque[int] = deque([src])
    sb.visit(src)

    # --- initialisation step ---
    sb.description = (
        f"Starting BFS: {grid.start} is placed in the queue and marked visited. "
        f"BFS explores layer by layer from here."
    )
    sb.overlay["queue"] = [grid.coord_of(i) for i in queue]
    yield sb.build()

    # --- main loop ---
    while queue:
        idx  = queue.popleft()
        cell = grid.cell_at(idx)
        sb.set_current(idx)

        # -- target check --
        if idx == dst:
            sb.description = f"Dequeued {cell.coord} at distance {cell.distance:g} — this is the end cell."
            sb.overlay["queue"] = [grid.coord_of(i) for i in queue]
            yield sb.build()

            path = grid.reconstruct_path(dst)
            sb.current = cell.coord
            sb.set_path(path)
            sb.description = (
                f"🎯 Found the end at {cell.coord}! "
                f"The shortest path has {len(path) - 1} move(s)."
            )
            yield sb.build(is_final=True)
            return

        # -- explore neighbours --
        for nbr in grid.neighbours(idx):
            nbr_cell = grid.cell_at(nbr)
            if nbr_cell.visited:
                continue
            nbr_cell.visited  = True
            nbr_cell.previous = idx
            nbr_cell.distance = cell.distance + 1
            queue.append(nbr)
            sb.visit(nbr)
            sb.discover(nbr)

        sb.description = (
            f"Dequeued {cell.coord} at distance {cell.distance:g} (FIFO). "
            f"Enqueued {len(sb.frontier)} new neighbour(s)."
        )
        sb.overlay["queue"] = [grid.coord_of(i) for i in queue]
        yield sb.build()

    # --- exhausted without finding the end ---
    sb.description = (
        f"Queue is empty. {grid.end} is NOT reachable from {grid.start}."
    )
    sb.overlay["queue"] = []
    yield sb.build(is_final=True)
