from flowscribe.compiler import (
    ActionType,
    CompiledWorkflow,
    StepDefinition,
    WorkflowCompiler,
    WorkflowDefinition,
    assemble,
)
from flowscribe.errors import (
    FlowscribeError,
    GenerationError,
    InvalidWhenClauseError,
    UnknownActionError,
    WorkflowLoadError,
    WorkflowValidationError,
)
from flowscribe.loader import load_workflow, parse_workflow
from flowscribe.runtime import RunResult, RuntimeInput, inject_input, run_steps
from flowscribe.validator import ValidationError, ValidationResult, WorkflowValidator

__all__ = [
    "ActionType",
    "CompiledWorkflow",
    "StepDefinition",
    "WorkflowCompiler",
    "WorkflowDefinition",
    "assemble",
    # Errors
    "FlowscribeError",
    "GenerationError",
    "InvalidWhenClauseError",
    "UnknownActionError",
    "WorkflowLoadError",
    "WorkflowValidationError",
    # Loading
    "load_workflow",
    "parse_workflow",
    # Runtime contract
    "RunResult",
    "RuntimeInput",
    "inject_input",
    "run_steps",
    # Validation
    "ValidationError",
    "ValidationResult",
    "WorkflowValidator",
]
