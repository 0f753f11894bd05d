"""
Configuration settings for the workflow compiler.
"""

import os
from pathlib import Path

# Directory generated templates are written to when no output path is given
GENERATED_DIR = Path(os.environ.get("FLOWSCRIBE_GENERATED_DIR", "generated"))

# Directory workflow sources conventionally live in (shown in template headers)
WORKFLOWS_DIR = "workflows"

# Suffix of generated template files: <workflow-name>.template.js
TEMPLATE_SUFFIX = ".template.js"

# JSON Schema every workflow definition is validated against
SCHEMA_PATH = Path(
    os.environ.get(
        "FLOWSCRIBE_SCHEMA_PATH",
        Path(__file__).parent / "validator" / "workflow.schema.json",
    )
)

# Timeout for `wait` steps that do not set one (milliseconds)
DEFAULT_WAIT_TIMEOUT_MS = 30000

# Placeholder the host replaces with the runtime input object
INPUT_PLACEHOLDER = "__INPUT_DATA__"

# One indentation level of generated code
INDENT = "  "
