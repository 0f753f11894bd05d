"""
Intermediate representation of a generated template and its renderer.

The step generator and assembler only build these nodes; all indentation and
punctuation of the emitted JavaScript is decided here, in one pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from flowscribe.compiler.formatting import format_value
from flowscribe.config import INDENT, INPUT_PLACEHOLDER


@dataclass(frozen=True)
class Line:
    text: str
    depth: int = 0  # indentation levels relative to the enclosing block


def indent(lines: Iterable[Line], levels: int = 1) -> list[Line]:
    return [Line(line.text, line.depth + levels) for line in lines]


@dataclass(frozen=True)
class StepBlock:
    index: int
    name: str
    action: str
    body: tuple[Line, ...]
    selector: str | None = None
    guard: str | None = None  # compiled `when` expression
    output: str | None = None
    hint: str | None = None


@dataclass(frozen=True)
class Program:
    name: str
    source: str
    steps: tuple[StepBlock, ...]
    description: str | None = None


# Depth of step records inside `const steps = [ ... ]`
_STEP_DEPTH = 2

_PROLOGUE = (
    Line("async (page) => {"),
    Line(f"const inputData = {INPUT_PLACEHOLDER};", 1),
    Line("const { extract = {}, constants = {}, input = {}, startFromStep = 0 } = inputData;", 1),
    Line(""),
)

_RUNTIME_LOOP = (
    Line("const results = { success: true, completedSteps: [], failedStep: null, output: {} };", 1),
    Line(""),
    Line("for (let i = startFromStep; i < steps.length; i++) {", 1),
    Line("const step = steps[i];", 2),
    Line("try {", 2),
    Line("console.log(`Step ${i}: ${step.name}...`);", 3),
    Line("const stepResult = await step.execute();", 3),
    Line("results.completedSteps.push({ index: i, name: step.name, success: true });", 3),
    Line(""),
    Line("if (step.output && stepResult !== undefined) {", 3),
    Line("results.output[step.output] = stepResult;", 4),
    Line("}", 3),
    Line("} catch (error) {", 2),
    Line("results.success = false;", 3),
    Line("results.failedStep = {", 3),
    Line("index: i,", 4),
    Line("name: step.name,", 4),
    Line("selector: step.selector,", 4),
    Line("hint: step.hint,", 4),
    Line("error: error.message", 4),
    Line("};", 3),
    Line("break;", 3),
    Line("}", 2),
    Line("}", 1),
    Line(""),
    Line("return results;", 1),
    Line("}"),
)


def _comment(text: str) -> str:
    return " ".join(str(text).splitlines())


def step_lines(step: StepBlock, is_last: bool) -> list[Line]:
    """Lines of one step record, at depth 0."""
    lines = [
        Line(f"// Step {step.index}: {_comment(step.name)}"),
        Line("{"),
        Line(f"name: {format_value(step.name)},", 1),
        Line(f"action: {format_value(step.action)},", 1),
    ]
    if step.selector:
        lines.append(Line(f"selector: {format_value(step.selector)},", 1))

    lines.append(Line("execute: async () => {", 1))
    if step.guard is not None:
        lines.append(Line(f"if ({step.guard}) {{", 2))
        lines.extend(indent(step.body, 3))
        lines.append(Line("}", 2))
    else:
        lines.extend(indent(step.body, 2))
    lines.append(Line("},", 1))

    if step.output:
        lines.append(Line(f"output: {format_value(step.output)},", 1))
    if step.hint:
        lines.append(Line(f"hint: {format_value(step.hint)}", 1))

    lines.append(Line("}" if is_last else "},"))
    return lines


def program_lines(program: Program) -> list[Line]:
    lines = [
        Line(f"// {program.name} - Auto-generated template"),
        Line(f"// Generated from: {program.source}"),
    ]
    if program.description:
        lines.extend(Line(f"// {text}") for text in str(program.description).splitlines())
    lines.append(Line(""))

    lines.extend(_PROLOGUE)
    lines.append(Line("const steps = [", 1))
    last = len(program.steps) - 1
    for position, step in enumerate(program.steps):
        lines.extend(indent(step_lines(step, position == last), _STEP_DEPTH))
        lines.append(Line(""))
    lines.append(Line("];", 1))
    lines.append(Line(""))
    lines.extend(_RUNTIME_LOOP)
    return lines


def render(lines: Iterable[Line]) -> str:
    return "\n".join(INDENT * line.depth + line.text for line in lines)


def render_step(step: StepBlock, is_last: bool) -> str:
    """Render one step record as it appears inside the steps array."""
    return render(indent(step_lines(step, is_last), _STEP_DEPTH))


def render_program(program: Program) -> str:
    return render(program_lines(program))
