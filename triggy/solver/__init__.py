"""Solver façade: pick the first strategy that fits the supplied values."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..errors import ErrorSet
from ..measures import Number
from ..validate import validate_values
from .config import SolverConfig, get_solver_config, set_solver_config
from .triangle import TriangleSolver

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    SSA = "SSA"
    ASA = "ASA"
    SAS = "SAS"
    SSS = "SSS"


@dataclass
class SolveResult:
    success: bool
    strategy: Optional[Strategy] = None
    errors: ErrorSet = field(default_factory=ErrorSet)

    @property
    def messages(self) -> List[str]:
        return self.errors.messages()


def solve(
    triangle: TriangleSolver,
    errors: Optional[ErrorSet] = None,
    config: Optional[SolverConfig] = None,
) -> SolveResult:
    """Solve ``triangle`` in place.

    Strategies are attempted in ``config.strategy_order`` and the first one to
    succeed wins.  Every message produced along the way, including those of
    strategies that failed before the winner, is collected in ``errors``.
    A ``config`` given here replaces the triangle's own for this and later
    solves.
    """

    errors = errors if errors is not None else ErrorSet()
    if config is not None:
        triangle.config = config
    config = triangle.config

    if not triangle.is_sufficient:
        logger.info(
            "Insufficient values: %d angle(s), %d side(s)",
            triangle.known_angle_count,
            triangle.known_side_count,
        )
        return SolveResult(False, None, errors)

    if not triangle.check_angles(errors):
        logger.info("Angle check failed: %s", errors)
        return SolveResult(False, None, errors)

    for name in config.strategy_order:
        strategy = Strategy(name)
        if getattr(triangle, f"solve_{strategy.value.lower()}")(errors):
            logger.info("Solved with %s: %s", strategy.value, triangle)
            return SolveResult(True, strategy, errors)
        logger.debug("Strategy %s did not apply", strategy.value)

    logger.info("No strategy solved %s (errors=%s)", triangle, errors)
    return SolveResult(False, None, errors)


def solve_values(
    angle_a: Optional[Number] = None,
    side_a: Optional[Number] = None,
    angle_b: Optional[Number] = None,
    side_b: Optional[Number] = None,
    angle_c: Optional[Number] = None,
    side_c: Optional[Number] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> Tuple[TriangleSolver, SolveResult]:
    """Validate six raw values, build a solver and solve it."""

    values = (angle_a, side_a, angle_b, side_b, angle_c, side_c)
    validate_values(values)
    triangle = TriangleSolver.from_values(*values, config=config)
    return triangle, solve(triangle, config=config)


__all__ = [
    "SolveResult",
    "SolverConfig",
    "Strategy",
    "TriangleSolver",
    "get_solver_config",
    "set_solver_config",
    "solve",
    "solve_values",
]
