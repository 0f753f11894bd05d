"""JSON Schema validation for workflow definitions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as JSONSchemaValidationError

from flowscribe.config import SCHEMA_PATH
from flowscribe.validator.types import ValidationError, ValidationResult

logger = logging.getLogger(__name__)

ROOT_PATH = "(root)"

# Keywords whose schema value is itself a schema (too noisy to echo back)
_COMBINATORS = {"oneOf", "anyOf", "allOf", "not", "if", "then", "else", "$ref"}


def _instance_path(error: JSONSchemaValidationError) -> str:
    if not error.absolute_path:
        return ROOT_PATH
    return "/" + "/".join(str(part) for part in error.absolute_path)


def _missing_property(error: JSONSchemaValidationError) -> str | None:
    # jsonschema yields one `required` error per missing property, naming it
    # first in the message
    instance = error.instance if isinstance(error.instance, Mapping) else {}
    for prop in error.validator_value:
        if prop not in instance and error.message.startswith(repr(prop)):
            return prop
    return None


def _params(error: JSONSchemaValidationError) -> dict[str, Any]:
    keyword = error.validator
    value = error.validator_value

    if keyword == "required":
        return {"missingProperty": _missing_property(error)}
    if keyword == "enum":
        return {"allowedValues": list(value)}
    if keyword == "const":
        return {"allowedValue": value}
    if keyword == "type":
        return {"type": value}
    if keyword == "additionalProperties":
        known = error.schema.get("properties", {})
        instance = error.instance if isinstance(error.instance, Mapping) else {}
        return {"additionalProperties": [k for k in instance if k not in known]}
    if keyword == "pattern":
        return {"pattern": value}
    if keyword in _COMBINATORS:
        return {}
    return {"limit": value}


class WorkflowValidator:
    """
    Validates workflow definitions against the workflow JSON Schema.

    Build one per process (``WorkflowValidator.from_file()``) and hand it to
    whatever compiles workflows; the compiled schema is never mutated.
    """

    def __init__(self, schema: Mapping[str, Any]) -> None:
        Draft7Validator.check_schema(schema)
        self._schema = schema
        self._validator = Draft7Validator(schema)

    @classmethod
    def from_file(cls, schema_path: str | Path | None = None) -> WorkflowValidator:
        path = Path(schema_path) if schema_path is not None else SCHEMA_PATH
        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)
        logger.debug(f"Workflow schema loaded from {path}")
        return cls(schema)

    @property
    def schema(self) -> Mapping[str, Any]:
        return self._schema

    def validate(self, definition: Any) -> ValidationResult:
        """
        Check *definition* and report every violation, not just the first.

        Returns
        -------
        ValidationResult with ``valid=True`` and no errors, or ``valid=False``
        and one ValidationError per violation.
        """
        errors = tuple(
            ValidationError(
                path=_instance_path(err),
                message=err.message,
                keyword=err.validator,
                params=_params(err),
            )
            for err in self._validator.iter_errors(definition)
        )
        if errors:
            logger.debug(f"Schema validation found {len(errors)} error(s)")
        return ValidationResult(valid=not errors, errors=errors)


def format_validation_errors(errors: Any) -> str:
    """Render validation errors for the CLI, one block per error."""
    blocks = []
    for err in errors:
        lines = [
            f"  - Path: {err.path}",
            f"    Error: {err.message}",
        ]
        if err.params:
            lines.append(f"    Details: {json.dumps(err.params, default=str)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
