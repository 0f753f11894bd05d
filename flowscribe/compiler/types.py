"""Compiler type definitions: workflow, step actions and guards."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import MISSING, dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

from flowscribe.errors import GenerationError, InvalidWhenClauseError, UnknownActionError

logger = logging.getLogger(__name__)


class ActionType(str, Enum):
    NAVIGATE = "navigate"
    FILL = "fill"
    CLICK = "click"
    PRESS = "press"
    WAIT = "wait"
    PLAYWRIGHT_CODE = "playwright_code"


# ---------------------------------------------------------------------------
# Actions: one variant per ActionType, each with exactly its own fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Navigate:
    kind: ClassVar[ActionType] = ActionType.NAVIGATE
    url: str


@dataclass(frozen=True)
class Fill:
    kind: ClassVar[ActionType] = ActionType.FILL
    selector: str
    value: str


@dataclass(frozen=True)
class Click:
    kind: ClassVar[ActionType] = ActionType.CLICK
    selector: str


@dataclass(frozen=True)
class Press:
    kind: ClassVar[ActionType] = ActionType.PRESS
    selector: str
    key: str


@dataclass(frozen=True)
class Wait:
    kind: ClassVar[ActionType] = ActionType.WAIT
    selector: str
    timeout: int | None = None


@dataclass(frozen=True)
class RawCode:
    """Verbatim Playwright code, copied into the template unchecked."""

    kind: ClassVar[ActionType] = ActionType.PLAYWRIGHT_CODE
    code: str


Action = Union[Navigate, Fill, Click, Press, Wait, RawCode]

ACTION_VARIANTS: dict[ActionType, type] = {
    cls.kind: cls for cls in (Navigate, Fill, Click, Press, Wait, RawCode)
}


# ---------------------------------------------------------------------------
# Guards
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Condition:
    field: str
    op: str
    value: Any

    @classmethod
    def from_dict(cls, data: Any) -> Condition:
        if not isinstance(data, Mapping):
            raise InvalidWhenClauseError("Condition must be a mapping")
        missing = [k for k in ("field", "op", "value") if k not in data]
        if missing:
            raise InvalidWhenClauseError(
                f"Condition is missing {', '.join(missing)}"
            )
        return cls(field=data["field"], op=data["op"], value=data["value"])


@dataclass(frozen=True)
class CompoundCondition:
    conditions: tuple[Condition, ...]
    match: str | None = None  # "all" → AND, anything else → OR


WhenClause = Union[Condition, CompoundCondition]


def parse_when(data: Any) -> WhenClause:
    """Classify a raw when-clause as a simple or compound guard."""
    if not isinstance(data, Mapping):
        raise InvalidWhenClauseError("When clause must be a mapping")

    is_simple = bool(data.get("field")) and bool(data.get("op"))
    is_compound = "conditions" in data

    if is_simple and is_compound:
        raise InvalidWhenClauseError(
            "When clause cannot mix field/op with a conditions list"
        )
    if is_simple:
        return Condition.from_dict(data)
    if is_compound:
        raw = data["conditions"]
        if not isinstance(raw, list) or not raw:
            raise InvalidWhenClauseError(
                "When clause 'conditions' must be a non-empty list"
            )
        return CompoundCondition(
            conditions=tuple(Condition.from_dict(c) for c in raw),
            match=data.get("match"),
        )
    raise InvalidWhenClauseError()


# ---------------------------------------------------------------------------
# Steps and workflows
# ---------------------------------------------------------------------------


def _build_action(data: Mapping[str, Any], step_name: str) -> Action:
    raw_action = data.get("action")
    try:
        kind = ActionType(raw_action)
    except (ValueError, TypeError):
        raise UnknownActionError(raw_action) from None

    cls = ACTION_VARIANTS[kind]
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in data:
            kwargs[f.name] = data[f.name]
        elif f.default is MISSING:
            raise GenerationError(
                f"Step {step_name!r}: action '{kind.value}' requires '{f.name}'"
            )
    return cls(**kwargs)


@dataclass(frozen=True)
class StepDefinition:
    name: str
    action: Action
    when: WhenClause | None = None
    output: str | None = None
    hint: str | None = None  # read by humans / fallback agents only
    # Reported in failedStep for any action; defaults to the action's own target
    selector: str | None = None

    def __post_init__(self):
        if self.selector is None:
            object.__setattr__(self, "selector", getattr(self.action, "selector", None))

    @property
    def kind(self) -> ActionType:
        return self.action.kind

    @classmethod
    def from_dict(cls, data: Any) -> StepDefinition:
        if not isinstance(data, Mapping):
            raise GenerationError("Each step must be a mapping")
        name = data.get("name", "")
        when = data.get("when")
        return cls(
            name=name,
            action=_build_action(data, name),
            when=parse_when(when) if when is not None else None,
            output=data.get("output"),
            hint=data.get("hint"),
            selector=data.get("selector"),
        )


@dataclass(frozen=True)
class WorkflowDefinition:
    name: str
    steps: tuple[StepDefinition, ...]
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> WorkflowDefinition:
        """
        Build a definition from the plain structure a YAML loader produces.

        Raises
        ------
        GenerationError (or a subclass) if the structure cannot be compiled.
        Callers are expected to run schema validation first, which reports
        every structural problem at once.
        """
        if not isinstance(data, Mapping):
            raise GenerationError("Workflow definition must be a mapping")
        if not data.get("name"):
            raise GenerationError("Workflow definition requires a 'name'")

        raw_steps = data.get("steps")
        if not isinstance(raw_steps, list) or not raw_steps:
            raise GenerationError("Workflow definition requires a non-empty 'steps' list")

        steps = tuple(StepDefinition.from_dict(s) for s in raw_steps)

        duplicates = [n for n, count in Counter(s.name for s in steps).items() if count > 1]
        if duplicates:
            logger.debug(f"Workflow {data['name']!r} reuses step names: {duplicates}")

        return cls(
            name=data["name"],
            steps=steps,
            description=data.get("description"),
        )



@dataclass
class CompiledWorkflow:
    name: str
    program: str
    step_count: int
    source_path: str | None = None
    output_path: str | None = None  # None when nothing was written
