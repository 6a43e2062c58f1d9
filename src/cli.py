"""
polycut CLI - Main entry point.

Reads a cut task (JSON, cut_task contract), cuts the polygon by every line
in order and prints the area of the largest resulting piece.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
import pydantic

from src.core.contracts import load_cut_task
from src.core.domain import CutTask
from src.core.geometry import InvalidLine, is_convex
from src.cutting import CutConfig, largest_piece_area

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

# Unit square cut by its diagonal and then by x = 0.5
SAMPLE_TASK: Dict[str, Any] = {
    "schema_version": "1",
    "polygon": [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]],
    "lines": [
        [[0.0, 0.0], [1.0, 1.0]],
        [[0.5, 0.0], [0.5, 1.0]],
    ],
}


def load_task_file(task_path: str) -> Dict[str, Any]:
    """
    Load cut task JSON file.

    Args:
        task_path: Path to JSON file

    Returns:
        Task payload dictionary

    Raises:
        FileNotFoundError: If task file doesn't exist
        ValueError: If JSON is invalid
    """
    path = Path(task_path)

    if not path.exists():
        raise FileNotFoundError(f"Task file not found: {task_path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {task_path}: {e}")


def build_task(payload: Dict[str, Any], eps_side: float) -> CutTask:
    """
    Validate payload against the contract and check convexity.

    Raises:
        jsonschema.ValidationError: Payload violates cut_task contract
        pydantic.ValidationError: Payload violates domain invariants
        ValueError: Polygon is not convex
    """
    task = load_cut_task(payload)

    if not is_convex(task.polygon, eps=eps_side):
        raise ValueError("Polygon must be convex and non-degenerate")

    return task


def format_area(area: float, precision: int) -> str:
    """Fixed-point area with trailing zeros removed (0.375, 1.0)."""
    if precision <= 0:
        return f"{area:.0f}"
    text = f"{area:.{precision}f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="polycut - Cut a convex polygon by lines and report the largest piece area",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in sample (unit square, two lines) -> 0.375
  polycut

  # Task from JSON file (cut_task contract)
  polycut task.json

  # Looser side tolerance and debug logging
  polycut task.json --eps 1e-8 --verbose
        """,
    )
    parser.add_argument("task", nargs="?", help="Path to cut task JSON file")
    parser.add_argument(
        "--eps",
        type=float,
        default=CutConfig().eps_side,
        help="Side classification tolerance (default: %(default)s)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=7,
        help="Decimal places of printed area (default: %(default)s)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = CutConfig(eps_side=args.eps)
        payload = load_task_file(args.task) if args.task else SAMPLE_TASK
        task = build_task(payload, config.eps_side)
        area = largest_piece_area(task.polygon, task.lines, config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except jsonschema.ValidationError as e:
        print(f"Error: task violates cut_task contract: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except pydantic.ValidationError as e:
        print(f"Error: invalid task data: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except InvalidLine as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logger.debug("Task: %d vertices, %d lines", task.polygon.vertex_count, len(task.lines))
    print(format_area(area, args.precision))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
