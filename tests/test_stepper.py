from __future__ import annotations

from engine import Stepper, StepperState, run
from grid import Grid


def _steps(grid: Grid):
    return run("bfs", grid).steps


def test_empty_stepper() -> None:
    stepper = Stepper()
    assert stepper.state is StepperState.EMPTY
    assert stepper.current_step is None
    assert stepper.next_step() is False
    assert stepper.prev_step() is False
    assert stepper.replay() == []


def test_replay_reproduces_the_log_in_order(open_3x3: Grid) -> None:
    steps = _steps(open_3x3)
    seen = []
    stepper = Stepper(steps, on_step=seen.append)

    assert stepper.current_step is steps[0]
    while stepper.next_step():
        pass
    assert seen == steps
    assert stepper.is_finished
    assert stepper.replay() == steps


def test_navigation(open_3x3: Grid) -> None:
    steps = _steps(open_3x3)
    stepper = Stepper(steps)

    assert stepper.prev_step() is False
    assert stepper.state is StepperState.READY
    assert stepper.next_step()
    assert stepper.state is StepperState.STEPPING
    assert stepper.prev_step()
    assert stepper.current_idx == 0

    assert stepper.goto_step(3)
    assert stepper.current_step is steps[3]
    assert stepper.goto_step(len(steps)) is False
    assert stepper.goto_step(-1) is False

    stepper.jump_to_end()
    assert stepper.current_step.is_final
    assert stepper.next_step() is False

    stepper.rewind()
    assert stepper.current_step is steps[0]
    assert not stepper.is_finished


def test_stepper_does_not_alias_the_log(open_3x3: Grid) -> None:
    steps = _steps(open_3x3)
    stepper = Stepper(steps)
    steps.clear()
    assert stepper.total_steps > 0


def test_load_replaces_the_log(open_3x3: Grid) -> None:
    stepper = Stepper(_steps(open_3x3))
    stepper.jump_to_end()
    stepper.load([])
    assert stepper.state is StepperState.EMPTY
    assert stepper.current_step is None
