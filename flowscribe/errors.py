"""Exception taxonomy for workflow compilation."""

from __future__ import annotations

from typing import Any


class FlowscribeError(Exception):
    """Base class for every compiler-level failure."""


class WorkflowLoadError(FlowscribeError):
    """The workflow file could not be read or deserialized."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class WorkflowValidationError(FlowscribeError):
    """The definition does not conform to the workflow schema."""

    def __init__(self, errors: list[Any]) -> None:
        super().__init__(f"Schema validation failed with {len(errors)} error(s)")
        self.errors = errors


class GenerationError(FlowscribeError):
    """A validated definition could not be turned into program text."""


class UnknownActionError(GenerationError):
    def __init__(self, action: Any) -> None:
        super().__init__(f"Unknown action type: {action}")
        self.action = action


class InvalidWhenClauseError(GenerationError):
    def __init__(self, message: str = "Invalid when clause structure") -> None:
        super().__init__(message)
