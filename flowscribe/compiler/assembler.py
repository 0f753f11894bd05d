"""Program assembler: workflow definition → complete template text."""

from __future__ import annotations

from typing import Any, Mapping

from flowscribe.compiler.ir import Program, render_program
from flowscribe.compiler.steps import build_step
from flowscribe.compiler.types import WorkflowDefinition
from flowscribe.config import WORKFLOWS_DIR


def default_source(name: str) -> str:
    return f"{WORKFLOWS_DIR}/{name}.yaml"


def build_program(
    workflow: WorkflowDefinition | Mapping[str, Any],
    source: str | None = None,
) -> Program:
    if not isinstance(workflow, WorkflowDefinition):
        workflow = WorkflowDefinition.from_dict(workflow)

    return Program(
        name=workflow.name,
        source=source or default_source(workflow.name),
        steps=tuple(build_step(step, i) for i, step in enumerate(workflow.steps)),
        description=workflow.description,
    )


def assemble(
    workflow: WorkflowDefinition | Mapping[str, Any],
    source: str | None = None,
) -> str:
    """
    Generate the full template: header, input prologue, steps array,
    results accumulator and the sequential execution loop.

    The output depends only on *workflow* and *source*, so compiling the
    same definition twice yields identical text.
    """
    return render_program(build_program(workflow, source))
