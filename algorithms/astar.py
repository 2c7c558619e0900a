"""
astar.py — A* Search
=====================
Generator-based A* on the grid.  Same relax / terminate logic as
Dijkstra, but cells are ordered by f = g + h where h is the Manhattan
distance to the end (admissible on a 4-connected grid).

Works over an explicit open set (heap of (f, index)) and closed set.
Ties on f go to the lowest flat index.

The overlay exposes g, h, f for the current cell, which the
Heuristic panel uses to teach admissibility.
"""

import heapq
from typing import Generator, List, Set, Tuple

from grid import Coord, Grid
from algorithms.step import Step, StepBuilder


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(grid, start, end):",                 # 0
    "    g[start] ← 0",                             # 1
    "    f[start] ← h(start)",                      # 2
    "    open_set ← {start}",                       # 3
    "    closed ← {}",                              # 4
    "    while open_set:",                          # 5
    "        cell ← open_set.pop_min_f()",          # 6
    "        if cell == end: return path",          # 7
    "        closed.add(cell)",                     # 8
    "        for nbr in adj(cell):",                # 9
    "            tentative_g ← g[cell] + 1",        # 10
    "            if tentative_g < g[nbr]:",         # 11
    "                prev[nbr] ← cell",             # 12
    "                g[nbr] ← tentative_g",         # 13
    "                f[nbr] ← g[nbr] + h(nbr)",     # 14
    "                open_set.push(nbr)",           # 15
    "    return NOT FOUND",                         # 16
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(grid: Grid) -> Generator[Step, None, None]:
    grid.reset_algo_state()
    sb     = StepBuilder(grid)
    src    = grid.start_index
    dst    = grid.end_index
    target = grid.end

    src_cell = grid.cell_at(src)
    src_cell.distance  = 0
    src_cell.heuristic = manhattan(src_cell.coord, target)

    open_set: List[Tuple[float, int]] = [(src_cell.score, src)]
    closed:   Set[int]                = set()

    # --- init step ---
    sb.description = (
        f"Starting A* at {grid.start}: g=0, h={src_cell.heuristic:g} (Manhattan), "
        f"f={src_cell.score:g}."
    )
    sb.overlay["open_set_size"] = len(open_set)
    yield sb.build()

    # --- main loop ---
    while open_set:
        f, idx = heapq.heappop(open_set)
        cell = grid.cell_at(idx)

        if idx in closed or f > cell.score:
            continue

        closed.add(idx)
        cell.visited = True
        sb.set_current(idx)
        sb.visit(idx)
        scores = {"g": cell.distance, "h": cell.heuristic, "f": cell.score}

        # -- target check --
        if idx == dst:
            sb.description = f"Visiting {cell.coord}: g={cell.distance:g}, h=0 — this is the end cell."
            sb.overlay["scores"] = scores
            yield sb.build()

            path = grid.reconstruct_path(dst)
            sb.current = cell.coord
            sb.set_path(path)
            sb.description = (
                f"🎯 Found the end at {cell.coord}! Optimal cost = {cell.distance:g}, "
                f"{sb.visited_count} cell(s) explored."
            )
            sb.overlay["scores"] = scores
            yield sb.build(is_final=True)
            return

        # -- relax neighbours --
        for nbr in grid.neighbours(idx):
            if nbr in closed:
                continue
            nbr_cell = grid.cell_at(nbr)
            tentative_g = cell.distance + 1
            if tentative_g < nbr_cell.distance:
                nbr_cell.previous  = idx
                nbr_cell.distance  = tentative_g
                nbr_cell.heuristic = manhattan(nbr_cell.coord, target)
                heapq.heappush(open_set, (nbr_cell.score, nbr))
                sb.discover(nbr)

        sb.description = (
            f"Visiting {cell.coord}: g={scores['g']:g}, h={scores['h']:g}, f={scores['f']:g} "
            f"(lowest f in the open set). Updated {len(sb.frontier)} neighbour(s)."
        )
        sb.overlay["scores"]        = scores
        sb.overlay["open_set_size"] = len({i for _, i in open_set if i not in closed})
        yield sb.build()

    # --- not found ---
    sb.description = (
        f"Open set empty. {grid.end} is not reachable ({sb.visited_count} cell(s) explored)."
    )
    yield sb.build(is_final=True)
