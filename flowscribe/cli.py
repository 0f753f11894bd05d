"""
Command-line workflow compiler.

Usage:
    flowscribe workflows/amazon-product-search.yaml
    flowscribe workflows/my-workflow.yaml generated/custom-output.js
"""

from __future__ import annotations

import argparse
import logging
import sys

from flowscribe.compiler import WorkflowCompiler
from flowscribe.errors import GenerationError, WorkflowLoadError, WorkflowValidationError
from flowscribe.validator import format_validation_errors

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowscribe",
        description="Compile a workflow YAML file into an executable Playwright template.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  flowscribe workflows/amazon-product-search.yaml
  flowscribe workflows/my-workflow.yaml generated/custom-output.js
  flowscribe --check workflows/my-workflow.yaml
        """,
    )
    parser.add_argument("input", help="Path to the workflow YAML file")
    parser.add_argument(
        "output",
        nargs="?",
        help="Output path (default: generated/<workflow-name>.template.js)",
    )
    parser.add_argument("--check", action="store_true",
                        help="Validate and compile without writing any output")
    parser.add_argument("--stdout", action="store_true",
                        help="Print the generated template instead of writing it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    compiler = WorkflowCompiler()
    write = not (args.check or args.stdout)

    try:
        compiled = compiler.compile_file(args.input, args.output, write=write)
    except WorkflowLoadError as e:
        logger.error(str(e))
        return 1
    except WorkflowValidationError as e:
        print("Schema validation failed:\n", file=sys.stderr)
        print(format_validation_errors(e.errors), file=sys.stderr)
        return 1
    except GenerationError as e:
        logger.error(f"Conversion failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1

    if args.stdout:
        print(compiled.program)
    elif args.check:
        logger.info(f"✓ {args.input} is valid ({compiled.step_count} steps)")
    else:
        logger.info(f"Generated: {compiled.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
