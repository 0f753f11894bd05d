"""Sequential step execution loop, as embedded in every generated template."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Sequence

from flowscribe.config import INPUT_PLACEHOLDER
from flowscribe.runtime.types import CompletedStep, FailedStep, RunResult, RuntimeInput

logger = logging.getLogger(__name__)


@dataclass
class StepRecord:
    name: str
    action: str
    execute: Callable[[], Awaitable[Any]]
    selector: str | None = None
    output: str | None = None
    hint: str | None = None


async def run_steps(steps: Sequence[StepRecord], start_from_step: int = 0) -> RunResult:
    """
    Run *steps* one after another starting at ``start_from_step``.

    A step that raises stops the loop: it is recorded as ``failed_step`` and
    no later step runs. Failed steps are never retried; resuming is done by
    calling again with ``start_from_step=result.resume_from``.

    A step result of None is not recorded as output. None stands in for JS
    ``undefined`` here: the generated loop only skips ``undefined``, so a JS
    step returning ``null`` is still recorded, while a Python step cannot
    record None.
    """
    if start_from_step < 0:
        raise ValueError(f"start_from_step must be >= 0, got {start_from_step}")

    results = RunResult()

    for i in range(start_from_step, len(steps)):
        step = steps[i]
        try:
            logger.info(f"Step {i}: {step.name}...")
            step_result = await step.execute()
        except Exception as exc:
            results.success = False
            results.failed_step = FailedStep(
                index=i,
                name=step.name,
                error=str(exc),
                selector=step.selector,
                hint=step.hint,
            )
            logger.warning(f"Step {i} ({step.name}) failed: {exc}")
            break

        results.completed_steps.append(CompletedStep(index=i, name=step.name))
        if step.output and step_result is not None:
            results.output[step.output] = step_result

    return results


def inject_input(
    program: str,
    runtime_input: RuntimeInput | Mapping[str, Any] | None = None,
) -> str:
    """Substitute the runtime input object into a generated template."""
    if INPUT_PLACEHOLDER not in program:
        raise ValueError(f"Program has no {INPUT_PLACEHOLDER} placeholder")

    if runtime_input is None:
        runtime_input = RuntimeInput()
    data = runtime_input.to_dict() if isinstance(runtime_input, RuntimeInput) else dict(runtime_input)
    return program.replace(INPUT_PLACEHOLDER, json.dumps(data, separators=(",", ":")), 1)
