"""
stepper.py — Step-Log Replay Cursor
====================================
Walks forward and backward through the Steps of a finished run.  The
log itself is never modified: the Stepper only moves an index over it
and tells an optional callback which Step is now showing.

State machine:
    EMPTY     (no steps loaded)
    READY     →  next_step()      →  STEPPING
    STEPPING  →  (last step)      →  FINISHED
    any       →  rewind()         →  READY
    any       →  load(steps)      →  READY

Usage:
    result  = run("bfs", grid)
    stepper = Stepper(result.steps, on_step=render)
    while stepper.next_step():
        ...
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence

from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    EMPTY    = "empty"
    READY    = "ready"
    STEPPING = "stepping"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The step log being replayed (a private copy).
        current_idx : Index into `steps` that is currently displayed.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(
        self,
        steps: Optional[Sequence[Step]] = None,
        on_step: Optional[Callable[[Step], None]] = None,
    ):
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.EMPTY
        self.on_step:     Optional[Callable[[Step], None]] = on_step
        if steps:
            self.load(steps)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> None:
        """Replace the log and show step 0."""
        self.steps       = list(steps)
        self.current_idx = -1
        if not self.steps:
            self.state = StepperState.EMPTY
            return
        self._goto(0)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        if self.current_idx + 1 >= len(self.steps):
            return False
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.steps:
            self._goto(0)

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)

    def replay(self) -> List[Step]:
        """Rewind, then walk to the end; returns every Step shown, in order."""
        if not self.steps:
            return []
        self.rewind()
        shown = [self.steps[0]]
        while self.next_step():
            shown.append(self.steps[self.current_idx])
        return shown

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        elif idx == 0:
            self.state = StepperState.READY
        else:
            self.state = StepperState.STEPPING
        self._notify(self.steps[idx])

    def _notify(self, step: Step) -> None:
        if self.on_step is not None:
            self.on_step(step)
