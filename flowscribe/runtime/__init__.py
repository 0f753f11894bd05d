"""Runtime contract of generated templates."""

from flowscribe.runtime.executor import StepRecord, inject_input, run_steps
from flowscribe.runtime.types import CompletedStep, FailedStep, RunResult, RuntimeInput

__all__ = [
    "CompletedStep",
    "FailedStep",
    "RunResult",
    "RuntimeInput",
    "StepRecord",
    "inject_input",
    "run_steps",
]
