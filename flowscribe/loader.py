"""
Workflow loader.

Reads workflow YAML files into the plain nested structure the validator and
compiler consume.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from flowscribe.errors import WorkflowLoadError


def parse_workflow(text: str, source: str = "<string>") -> Any:
    """
    Parse workflow YAML text.

    Raises
    ------
    WorkflowLoadError: if the text is not valid YAML
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WorkflowLoadError(source, f"Failed to parse YAML: {e}") from e


def load_workflow(file_path: str | Path) -> Any:
    """
    Load a workflow definition from a YAML file.

    Args:
        file_path: Path to the workflow YAML file

    Returns:
        The deserialized document (normally a dict); structure is checked
        later by the schema validator

    Raises:
        WorkflowLoadError: If the file is missing, unreadable or not YAML
    """
    path = Path(file_path)

    if not path.exists():
        raise WorkflowLoadError(str(path), "Input file not found")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise WorkflowLoadError(str(path), f"Failed to read file: {e}") from e

    return parse_workflow(text, source=str(path))
