"""
engine/
-------
Recording & replay layer.

    from engine import run, Recorder, Stepper, compare
"""

from engine.stepper  import Stepper, StepperState
from engine.recorder import AlgorithmResult, ComparisonResult, Recorder, compare, run

__all__ = [
    "Stepper",
    "StepperState",
    "AlgorithmResult",
    "ComparisonResult",
    "Recorder",
    "compare",
    "run",
]
