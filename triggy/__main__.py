import argparse
import logging
import sys
from typing import List, Optional, Sequence

from triggy import (
    ValidationError,
    format_errors,
    parse_measure,
    result_lines,
    solve,
    TriangleSolver,
    validate_values,
)

logger = logging.getLogger(__name__)

_SLOTS = (
    ("angle_a", "angle at vertex A (degrees)"),
    ("side_a", "side a, opposite A"),
    ("angle_b", "angle at vertex B (degrees)"),
    ("side_b", "side b, opposite B"),
    ("angle_c", "angle at vertex C (degrees)"),
    ("side_c", "side c, opposite C"),
)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="triggy",
        description="Solve a triangle from any sufficient mix of angles and sides",
    )
    for name, help_text in _SLOTS:
        parser.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            default="",
            help=f"{help_text}; blank or 0 means unknown",
        )
    parser.add_argument(
        "--scale",
        type=float,
        help="Scale the solved side lengths by this factor",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    values: List[float] = [parse_measure(getattr(args, name)) for name, _ in _SLOTS]
    try:
        validate_values(values)
    except ValidationError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    triangle = TriangleSolver.from_values(*values)
    if not triangle.is_sufficient:
        print("Not enough values: give any three, or at least two angles.", file=sys.stderr)
        return 1

    result = solve(triangle)
    if result.errors:
        print("Warnings:", file=sys.stderr)
        print(format_errors(result.errors), file=sys.stderr)

    if result.success and args.scale is not None:
        try:
            triangle.scale(args.scale)
        except ValueError as exc:
            print(f"Invalid input: {exc}", file=sys.stderr)
            return 2

    if result.success:
        print(f"Solved ({result.strategy.value})")
    else:
        print("Unsolved")
    for line in result_lines(triangle):
        print(line)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
