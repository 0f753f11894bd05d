"""Workflow compiler public API."""

from flowscribe.compiler.assembler import assemble, build_program
from flowscribe.compiler.compiler import WorkflowCompiler, default_output_path, write_program
from flowscribe.compiler.conditions import compile_condition, compile_when
from flowscribe.compiler.formatting import format_value, map_operator, quote_string
from flowscribe.compiler.interpolation import has_variables, translate
from flowscribe.compiler.steps import build_step, generate_step
from flowscribe.compiler.types import (
    ActionType,
    Click,
    CompiledWorkflow,
    CompoundCondition,
    Condition,
    Fill,
    Navigate,
    Press,
    RawCode,
    StepDefinition,
    Wait,
    WorkflowDefinition,
    parse_when,
)

__all__ = [
    "ActionType",
    "Click",
    "CompiledWorkflow",
    "CompoundCondition",
    "Condition",
    "Fill",
    "Navigate",
    "Press",
    "RawCode",
    "StepDefinition",
    "Wait",
    "WorkflowCompiler",
    "WorkflowDefinition",
    "assemble",
    "build_program",
    "build_step",
    "compile_condition",
    "compile_when",
    "default_output_path",
    "format_value",
    "generate_step",
    "has_variables",
    "map_operator",
    "parse_when",
    "quote_string",
    "translate",
    "write_program",
]
