"""Validator result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    path: str  # JSON pointer from the document root, or "(root)"
    message: str
    keyword: str  # violated schema keyword: required, enum, type, ...
    params: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "message": self.message,
            "keyword": self.keyword,
            "params": self.params,
        }


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[ValidationError, ...] = ()
