"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra over the grid's 4-connected cells (every move
costs 1).

Yields a Step at:
  1. Initialise distances (start = 0, everything else = ∞)
  2. Every cell selected as CURRENT, with the neighbours it improved
  3. End selected  →  path found, reconstruct
  4. Nothing left below ∞  →  NOT REACHABLE

Selection rule: the unvisited cell with the smallest distance; ties go
to the lowest flat index.  A heapq keyed by (distance, index) with
stale-entry skipping picks exactly the cell a linear scan would.
"""

import heapq
from typing import Generator, List, Tuple

from grid import Grid
from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(grid, start, end):",              # 0
    "    dist ← {c: ∞ for c in grid}",              # 1
    "    dist[start] ← 0",                          # 2
    "    while some unvisited cell has dist < ∞:",  # 3
    "        cell ← unvisited cell with min dist",  # 4
    "        visited.add(cell)",                    # 5
    "        if cell == end: return path",          # 6
    "        for nbr in adj(cell):",                # 7
    "            if dist[cell] + 1 < dist[nbr]:",   # 8
    "                dist[nbr] ← dist[cell] + 1",   # 9
    "                prev[nbr] ← cell",             # 10
    "    return NOT FOUND",                         # 11
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(grid: Grid) -> Generator[Step, None, None]:
    """Run Dijkstra from grid.start to grid.end, yielding one Step per visit."""

    grid.reset_algo_state()
    sb  = StepBuilder(grid)
    src = grid.start_index
    dst = grid.end_index

    grid.cell_at(src).distance = 0
    pq: List[Tuple[float, int]] = [(0, src)]

    # --- init step ---
    sb.description = (
        f"Starting Dijkstra at {grid.start}: every distance is ∞ except the start, which is 0."
    )
    yield sb.build()

    # --- main loop ---
    while pq:
        d, idx = heapq.heappop(pq)
        cell = grid.cell_at(idx)

        # stale entry
        if cell.visited or d > cell.distance:
            continue

        cell.visited = True
        sb.set_current(idx)
        sb.visit(idx)

        # -- target check --
        if idx == dst:
            sb.description = f"Visiting {cell.coord} at distance {d:g} — this is the end cell."
            yield sb.build()

            path = grid.reconstruct_path(dst)
            sb.current = cell.coord
            sb.set_path(path)
            sb.description = (
                f"🎯 Found the end at {cell.coord}! Shortest distance = {d:g}, "
                f"{sb.visited_count} cell(s) explored."
            )
            yield sb.build(is_final=True)
            return

        # -- relax neighbours --
        for nbr in grid.neighbours(idx):
            nbr_cell = grid.cell_at(nbr)
            if nbr_cell.visited:
                continue
            new_dist = cell.distance + 1
            if new_dist < nbr_cell.distance:
                nbr_cell.distance = new_dist
                nbr_cell.previous = idx
                heapq.heappush(pq, (new_dist, nbr))
                sb.discover(nbr)

        sb.description = (
            f"Visiting {cell.coord} at distance {d:g} (smallest unvisited). "
            f"Updated {len(sb.frontier)} neighbour(s)."
        )
        yield sb.build()

    # --- not found ---
    sb.description = (
        f"No unvisited cell has a finite distance left. {grid.end} is not reachable "
        f"({sb.visited_count} cell(s) explored)."
    )
    yield sb.build(is_final=True)
