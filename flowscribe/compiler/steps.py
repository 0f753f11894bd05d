"""Step code generator: one step record per workflow step."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from flowscribe.compiler.conditions import compile_when
from flowscribe.compiler.formatting import format_value
from flowscribe.compiler.interpolation import translate
from flowscribe.compiler.ir import Line, StepBlock, render_step
from flowscribe.compiler.types import (
    ACTION_VARIANTS,
    Action,
    Click,
    Fill,
    Navigate,
    Press,
    RawCode,
    StepDefinition,
    Wait,
)
from flowscribe.config import DEFAULT_WAIT_TIMEOUT_MS
from flowscribe.errors import UnknownActionError

_EMITTERS: dict[type, Callable[[Any], list[Line]]] = {}


def _emits(variant: type):
    def register(fn):
        _EMITTERS[variant] = fn
        return fn
    return register


@_emits(Navigate)
def _navigate(action: Navigate) -> list[Line]:
    return [
        Line(f"await page.goto({format_value(action.url)});"),
        Line("await page.waitForLoadState('domcontentloaded');"),
    ]


@_emits(Fill)
def _fill(action: Fill) -> list[Line]:
    return [Line(f"await page.fill({format_value(action.selector)}, {translate(action.value)});")]


@_emits(Click)
def _click(action: Click) -> list[Line]:
    return [Line(f"await page.click({format_value(action.selector)});")]


@_emits(Press)
def _press(action: Press) -> list[Line]:
    return [Line(f"await page.press({format_value(action.selector)}, {format_value(action.key)});")]


@_emits(Wait)
def _wait(action: Wait) -> list[Line]:
    timeout = action.timeout or DEFAULT_WAIT_TIMEOUT_MS
    return [
        Line(
            f"await page.waitForSelector({format_value(action.selector)}, "
            f"{{ timeout: {format_value(timeout)} }});"
        )
    ]


@_emits(RawCode)
def _raw_code(action: RawCode) -> list[Line]:
    # Trusted user code: copied line by line, only re-indented
    return [Line(line) for line in str(action.code).split("\n")]


_unhandled = [kind.value for kind, cls in ACTION_VARIANTS.items() if cls not in _EMITTERS]
if _unhandled:
    raise RuntimeError(f"No code emitter registered for action(s): {_unhandled}")


def execute_body(action: Action) -> list[Line]:
    """Lines of the execute() body for *action*, before any guard."""
    emitter = _EMITTERS.get(type(action))
    if emitter is None:
        raise UnknownActionError(getattr(action, "kind", action))
    return emitter(action)


def build_step(step: StepDefinition | Mapping[str, Any], index: int) -> StepBlock:
    if not isinstance(step, StepDefinition):
        step = StepDefinition.from_dict(step)

    return StepBlock(
        index=index,
        name=step.name,
        action=step.kind.value,
        body=tuple(execute_body(step.action)),
        selector=step.selector,
        guard=compile_when(step.when) if step.when is not None else None,
        output=step.output,
        hint=step.hint,
    )


def generate_step(step: StepDefinition | Mapping[str, Any], index: int, is_last: bool) -> str:
    """Return the JS step record for *step*; ``is_last`` drops the trailing comma."""
    return render_step(build_step(step, index), is_last)
