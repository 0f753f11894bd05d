"""Workflow compiler entry point: validate → parse → assemble → write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from flowscribe import config
from flowscribe.compiler.assembler import assemble
from flowscribe.compiler.types import CompiledWorkflow, WorkflowDefinition
from flowscribe.errors import WorkflowValidationError
from flowscribe.loader import load_workflow
from flowscribe.validator import ValidationResult, WorkflowValidator

logger = logging.getLogger(__name__)


def default_output_path(name: str) -> Path:
    return Path(config.GENERATED_DIR) / f"{name}{config.TEMPLATE_SUFFIX}"


def write_program(program: str, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(program, encoding="utf-8")
    return path


class WorkflowCompiler:
    """
    Compiles workflow definitions into Playwright JS templates.

    Usage:
        compiler = WorkflowCompiler()
        program = compiler.compile(definition)
        compiled = compiler.compile_file("workflows/login.yaml")
    """

    def __init__(self, validator: WorkflowValidator | None = None) -> None:
        self._validator = validator or WorkflowValidator.from_file()

    @property
    def validator(self) -> WorkflowValidator:
        return self._validator

    def validate(self, definition: Any) -> ValidationResult:
        return self._validator.validate(definition)

    def compile(self, definition: Any, source: str | None = None) -> str:
        """
        Validate *definition* and return the generated template.

        Raises
        ------
        WorkflowValidationError
            The definition violates the schema; ``errors`` lists every violation.
        GenerationError
            The definition passed validation but cannot be generated.
        """
        result = self.validate(definition)
        if not result.valid:
            raise WorkflowValidationError(list(result.errors))

        workflow = WorkflowDefinition.from_dict(definition)
        program = assemble(workflow, source)
        logger.debug(f"Compiled workflow {workflow.name!r} ({len(workflow.steps)} steps)")
        return program

    def compile_file(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
        write: bool = True,
    ) -> CompiledWorkflow:
        """
        Load, compile and (optionally) write a workflow file.

        The output goes to ``output_path`` or, by default, to
        ``<GENERATED_DIR>/<workflow-name>.template.js``. Nothing is written
        unless validation and generation both succeed.
        """
        definition = load_workflow(input_path)
        program = self.compile(definition)
        name = definition["name"]

        written = None
        if write:
            dest = Path(output_path) if output_path else default_output_path(name)
            written = str(write_program(program, dest))
            logger.debug(f"Wrote {written}")

        return CompiledWorkflow(
            name=name,
            program=program,
            step_count=len(definition["steps"]),
            source_path=str(input_path),
            output_path=written,
        )
