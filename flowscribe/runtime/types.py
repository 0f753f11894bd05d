"""Runtime contract of generated templates: input and result shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RuntimeInput:
    """The object a host substitutes for the template's input placeholder."""

    extract: dict[str, Any] = field(default_factory=dict)
    constants: dict[str, Any] = field(default_factory=dict)
    input: dict[str, Any] = field(default_factory=dict)
    start_from_step: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "extract": self.extract,
            "constants": self.constants,
            "input": self.input,
            "startFromStep": self.start_from_step,
        }


@dataclass
class CompletedStep:
    index: int
    name: str
    success: bool = True


@dataclass
class FailedStep:
    index: int
    name: str
    error: str
    selector: str | None = None
    hint: str | None = None


@dataclass
class RunResult:
    success: bool = True
    completed_steps: list[CompletedStep] = field(default_factory=list)
    failed_step: FailedStep | None = None
    output: dict[str, Any] = field(default_factory=dict)

    @property
    def resume_from(self) -> int | None:
        """Index to pass as ``startFromStep`` when re-invoking, or None if done."""
        return self.failed_step.index if self.failed_step is not None else None

    @classmethod
    def from_dict(cls, d: dict) -> RunResult:
        """Read the object returned by a generated template."""
        failed = d.get("failedStep")
        return cls(
            success=bool(d.get("success", False)),
            completed_steps=[
                CompletedStep(
                    index=s["index"],
                    name=s["name"],
                    success=s.get("success", True),
                )
                for s in d.get("completedSteps", [])
            ],
            failed_step=FailedStep(
                index=failed["index"],
                name=failed["name"],
                error=failed.get("error", ""),
                selector=failed.get("selector"),
                hint=failed.get("hint"),
            ) if failed else None,
            output=dict(d.get("output", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        failed = None
        if self.failed_step is not None:
            failed = {
                "index": self.failed_step.index,
                "name": self.failed_step.name,
                "selector": self.failed_step.selector,
                "hint": self.failed_step.hint,
                "error": self.failed_step.error,
            }
        return {
            "success": self.success,
            "completedSteps": [
                {"index": s.index, "name": s.name, "success": s.success}
                for s in self.completed_steps
            ],
            "failedStep": failed,
            "output": self.output,
        }
