"""Workflow schema validation public API."""

from flowscribe.validator.schema_validator import (
    WorkflowValidator,
    format_validation_errors,
)
from flowscribe.validator.types import ValidationError, ValidationResult

__all__ = [
    "ValidationError",
    "ValidationResult",
    "WorkflowValidator",
    "format_validation_errors",
]
