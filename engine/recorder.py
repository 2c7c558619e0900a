"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then builds the
AlgorithmResult the UI needs for its summary panel and Comparison Mode.

Usage:
    result = run("dijkstra", grid)            # one-shot
    # or, keeping the recorder around:
    rec = Recorder()
    rec.start(algo_key="astar", grid=g, start=(0, 0), end=(9, 9))
    result = rec.run_to_completion()          # exhausts the generator
    rec.export()                              # JSON-ready snapshot for save/replay

Comparison Mode:
    Run two Recorders on the SAME grid layout one after the other (a run
    mutates cell state in place, so never interleave them), then call
    compare(rec1, rec2) → ComparisonResult.

A run never raises because the end is unreachable: that outcome is a
complete AlgorithmResult with success=False and the exhaustive step log.
"""

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, List, Optional

from grid import Coord, Grid
from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AlgorithmResult: what the summary panel renders
# ---------------------------------------------------------------------------
@dataclass
class AlgorithmResult:
    algo_key:          str          = ""
    steps:             List[Step]   = field(default_factory=list)
    path:              List[Coord]  = field(default_factory=list)
    path_length:       int          = 0        # number of moves on the final path
    cells_explored:    int          = 0        # size of the final visited set
    success:           bool         = False
    execution_time_ms: float        = 0.0      # wall-clock time to run to completion

    @property
    def efficiency(self) -> float:
        """path_length / cells_explored, 0 when nothing was found or explored."""
        if not self.success or self.cells_explored == 0:
            return 0.0
        return self.path_length / self.cells_explored

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def to_dict(self, include_steps: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "algo_key":          self.algo_key,
            "path":              [list(c) for c in self.path],
            "path_length":       self.path_length,
            "cells_explored":    self.cells_explored,
            "success":           self.success,
            "execution_time_ms": self.execution_time_ms,
            "efficiency":        self.efficiency,
            "total_steps":       self.total_steps,
        }
        if include_steps:
            data["steps"] = [s.to_dict() for s in self.steps]
        return data


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  AlgorithmResult = field(default_factory=AlgorithmResult)
    right: AlgorithmResult = field(default_factory=AlgorithmResult)
    # derived
    winner_explored: str = ""   # which algo explored fewer cells
    winner_path:     str = ""   # which algo found the shorter path
    winner_time:     str = ""   # which algo finished faster


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps  : Full list of Steps from the run.
        result : AlgorithmResult (available after run_to_completion).
    """

    def __init__(self):
        self.steps:  List[Step]                = []
        self.result: Optional[AlgorithmResult] = None

        self._algo_info: Optional[AlgoInfo]                   = None
        self._grid:      Optional[Grid]                       = None
        self._generator: Optional[Generator[Step, None, None]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        grid: Grid,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ) -> None:
        """Place the endpoints and initialise the generator for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        grid.reset_algo_state()
        if start is not None or end is not None:
            new_start = start if start is not None else grid.start
            new_end   = end   if end   is not None else grid.end
            if (new_start, new_end) != (grid.start, grid.end):
                if not grid.place_endpoints(new_start, new_end):
                    raise ValueError(f"Cannot place start {new_start} / end {new_end}")

        self._algo_info = info
        self._grid      = grid
        self.steps      = []
        self.result     = None
        self._generator = info.fn(grid)

    def run_to_completion(self) -> AlgorithmResult:
        """Exhaust the generator, record every step, build the result."""
        if self._generator is None or self._algo_info is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        for step in self._generator:
            self.record_step(step)
        wall_ms = (time.monotonic() - t0) * 1000
        self._generator = None

        self.result = self._build_result(wall_ms)
        logger.info(
            "%s on %dx%d grid: success=%s path_length=%d explored=%d steps=%d in %.2f ms",
            self._algo_info.key,
            self._grid.rows,
            self._grid.cols,
            self.result.success,
            self.result.path_length,
            self.result.cells_explored,
            len(self.steps),
            wall_ms,
        )
        return self.result

    def record_step(self, step: Step) -> None:
        self.steps.append(step)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        """JSON-ready dump of the run.  Infinite distances never appear."""
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "grid":     self._grid.to_dict() if self._grid else {},
            "result":   self.result.to_dict(include_steps=False) if self.result else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _build_result(self, wall_ms: float) -> AlgorithmResult:
        last = self.steps[-1] if self.steps else None
        path = list(last.path) if last else []
        success = bool(path)

        return AlgorithmResult(
            algo_key=self._algo_info.key if self._algo_info else "",
            steps=list(self.steps),
            path=path,
            path_length=len(path) - 1 if success else 0,
            cells_explored=len(last.visited) if last else 0,
            success=success,
            execution_time_ms=round(wall_ms, 3),
        )


# ---------------------------------------------------------------------------
# One-shot entry point
# ---------------------------------------------------------------------------
def run(
    algorithm: str,
    grid: Grid,
    start: Optional[Coord] = None,
    end: Optional[Coord] = None,
) -> AlgorithmResult:
    """Run `algorithm` on `grid` (optionally moving start / end first)."""
    rec = Recorder()
    rec.start(algo_key=algorithm, grid=grid, start=start, end=end)
    return rec.run_to_completion()


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.result  or AlgorithmResult()
    r = right.result or AlgorithmResult()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_key if l_val < r_val else r.algo_key

    # an unsuccessful run never wins on path length
    l_len = l.path_length if l.success else math.inf
    r_len = r.path_length if r.success else math.inf

    return ComparisonResult(
        left=l,
        right=r,
        winner_explored=winner(l.cells_explored, r.cells_explored),
        winner_path=winner(l_len, r_len),
        winner_time=winner(l.execution_time_ms, r.execution_time_ms),
    )
