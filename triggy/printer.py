from typing import TYPE_CHECKING, Iterable, List, Sequence

from .errors import ErrorKind
from .numbers import format_measure

if TYPE_CHECKING:  # pragma: no cover
    from .solver.triangle import TriangleSolver

MAIN_LABELS = ("A", "B", "C")
ALT_LABELS = ("D", "E", "F")


def pair_lines(triangle: "TriangleSolver", labels: Sequence[str], *, precision: int = 2) -> List[str]:
    lines = []
    for label, pair in zip(labels, triangle.pairs):
        lines.append(f"{label}° {format_measure(pair.angle.degrees, precision)}")
        lines.append(f"{label.lower()}  {format_measure(pair.side.value, precision)}")
    return lines


def result_lines(triangle: "TriangleSolver", *, precision: int = 2) -> List[str]:
    """Six solved values of the triangle, then a blank line and the six values
    of the auxiliary right triangle when there is one."""

    lines = pair_lines(triangle, MAIN_LABELS, precision=precision)
    if triangle.alt_triangle is not None:
        lines.append("")
        lines.extend(pair_lines(triangle.alt_triangle, ALT_LABELS, precision=precision))
    return lines


def format_errors(errors: Iterable[ErrorKind]) -> str:
    return "\n".join(kind.message for kind in errors)
