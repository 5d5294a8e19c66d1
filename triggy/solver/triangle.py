"""Triangle state, the four classical solving strategies and scaling."""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import List, Optional, Tuple, Union

import numpy as np

from ..errors import ErrorKind, ErrorSet
from ..logging_utils import apply_debug_logging
from ..measures import Angle, Number
from ..pair import OpposingPair, PairStatus
from ..printer import result_lines
from .config import SolverConfig, get_solver_config

logger = logging.getLogger(__name__)

# Slot indices of the three pairs.  Pair A is the angle at vertex A and the
# side opposite it (``a``); likewise for B and C.
A, B, C = 0, 1, 2
LABELS = ("A", "B", "C")

# (first side, included angle, second side) combinations tried by SAS, in order.
_SAS_LAYOUTS: Tuple[Tuple[int, int, int], ...] = ((A, B, C), (A, C, B), (B, A, C))


class TriangleSolver:
    """Three :class:`OpposingPair` slots plus an optional auxiliary right triangle.

    The solver mutates its pairs in place.  It is not thread-safe: callers run
    at most one solve or scale call per instance at a time.
    """

    def __init__(
        self,
        a: Optional[OpposingPair] = None,
        b: Optional[OpposingPair] = None,
        c: Optional[OpposingPair] = None,
        *,
        config: Optional[SolverConfig] = None,
    ) -> None:
        self._pairs: List[OpposingPair] = [
            a if a is not None else OpposingPair(),
            b if b is not None else OpposingPair(),
            c if c is not None else OpposingPair(),
        ]
        self.config = config if config is not None else get_solver_config()
        self.alt_triangle: Optional[TriangleSolver] = None
        self._original_sides = np.zeros(3)
        self.capture_original_sides()

    @classmethod
    def from_values(
        cls,
        angle_a: Optional[Number] = None,
        side_a: Optional[Number] = None,
        angle_b: Optional[Number] = None,
        side_b: Optional[Number] = None,
        angle_c: Optional[Number] = None,
        side_c: Optional[Number] = None,
        *,
        config: Optional[SolverConfig] = None,
    ) -> "TriangleSolver":
        return cls(
            OpposingPair(angle_a, side_a),
            OpposingPair(angle_b, side_b),
            OpposingPair(angle_c, side_c),
            config=config,
        )

    # -- accessors ---------------------------------------------------------

    @property
    def a(self) -> OpposingPair:
        return self._pairs[A]

    @property
    def b(self) -> OpposingPair:
        return self._pairs[B]

    @property
    def c(self) -> OpposingPair:
        return self._pairs[C]

    @property
    def pairs(self) -> Tuple[OpposingPair, OpposingPair, OpposingPair]:
        return self._pairs[A], self._pairs[B], self._pairs[C]

    def pair(self, key: Union[int, str]) -> OpposingPair:
        if isinstance(key, str):
            key = LABELS.index(key.upper())
        return self._pairs[key]

    @property
    def original_sides(self) -> np.ndarray:
        return self._original_sides.copy()

    def angles(self) -> np.ndarray:
        return np.array([pair.angle.degrees for pair in self._pairs])

    def sides(self) -> np.ndarray:
        return np.array([pair.side.value for pair in self._pairs])

    def statuses(self) -> Tuple[PairStatus, PairStatus, PairStatus]:
        return self.a.status, self.b.status, self.c.status

    # -- lifecycle ---------------------------------------------------------

    def read_values(
        self,
        angle_a: Optional[Number],
        side_a: Optional[Number],
        angle_b: Optional[Number],
        side_b: Optional[Number],
        angle_c: Optional[Number],
        side_c: Optional[Number],
    ) -> None:
        """Overwrite all six slots, e.g. after the user edited the inputs."""

        self.a.set_values(angle_a, side_a)
        self.b.set_values(angle_b, side_b)
        self.c.set_values(angle_c, side_c)
        self.alt_triangle = None
        self.capture_original_sides()

    def capture_original_sides(self) -> None:
        self._original_sides = self.sides()

    def clear(self) -> None:
        for pair in self._pairs:
            pair.clear()
        self.alt_triangle = None
        self._original_sides = np.zeros(3)

    def clone(self) -> "TriangleSolver":
        copy = TriangleSolver(*(pair.copy() for pair in self._pairs), config=self.config)
        copy._original_sides = self._original_sides.copy()
        if self.alt_triangle is not None:
            copy.alt_triangle = self.alt_triangle.clone()
        return copy

    def scale(self, factor: float) -> None:
        """Set every side to ``original side * factor`` (angles are unchanged)."""

        if not math.isfinite(factor) or factor <= 0:
            raise ValueError(f"scale factor must be a positive finite number, got {factor!r}")
        if not np.all(self._original_sides > 0):
            # a failed solve can leave sides unknown; nothing sensible to scale
            logger.debug("Skipping scale: original sides %s incomplete", self._original_sides)
            return
        for pair, value in zip(self._pairs, self._original_sides * factor):
            pair.side.value = float(value)
        if self.alt_triangle is not None:
            self.alt_triangle.scale(factor)

    # -- status ------------------------------------------------------------

    @property
    def known_angle_count(self) -> int:
        return sum(1 for pair in self._pairs if pair.is_angle_known)

    @property
    def known_side_count(self) -> int:
        return sum(1 for pair in self._pairs if pair.is_side_known)

    @property
    def is_sufficient(self) -> bool:
        """Cheap pre-check: enough values are present to attempt a solve.

        Any three values, or any two angles, qualify.  Whether the values are
        consistent is only discovered by the strategies themselves.
        """

        angles = self.known_angle_count
        return angles + self.known_side_count > 2 or angles > 1

    @property
    def is_complete(self) -> bool:
        return all(pair.status == PairStatus.BOTH for pair in self._pairs)

    def check_angles(self, errors: ErrorSet) -> bool:
        known = [pair.angle for pair in self._pairs if pair.is_angle_known]
        if any(angle >= 180 for angle in known):
            errors.add(ErrorKind.ONE_ANGLE_180)
            return False
        if any(first.add_degrees(second) >= 180 for first, second in combinations(known, 2)):
            errors.add(ErrorKind.TWO_ANGLE_180)
            return False
        return True

    # -- strategies --------------------------------------------------------

    def solve_sss(self, errors: ErrorSet) -> bool:
        """Three sides: law of cosines for every angle."""

        a, b, c = self._pairs
        if not (a.is_side_known and b.is_side_known and c.is_side_known):
            return False
        if not (
            a.check_against_other_sides(b.side, c.side, errors)
            and b.check_against_other_sides(a.side, c.side, errors)
            and c.check_against_other_sides(a.side, b.side, errors)
        ):
            return False
        if (
            a.deduce_angle_from_adjacent_sides(b.side, c.side)
            and b.deduce_angle_from_adjacent_sides(a.side, c.side)
            and c.deduce_angle_from_adjacent_sides(a.side, b.side)
        ):
            self._finish_solve(errors)
            return True
        return False

    def solve_asa(self, errors: ErrorSet) -> bool:
        """Two angles and at most one side (ASA and AAS)."""

        if not self._complete_angles(errors):
            return False

        if self.known_side_count == 0:
            # angles alone fix the shape, not the size
            self.c.side.value = self.config.nominal_side

        for idx, known in enumerate(self._pairs):
            if known.status != PairStatus.BOTH:
                continue
            others = [pair for pos, pair in enumerate(self._pairs) if pos != idx]
            if all(pair.deduce_side_from_pair(known, errors) for pair in others):
                self._finish_solve(errors)
                return True
            return False
        return False

    def solve_sas(self, errors: ErrorSet) -> bool:
        """Two sides and the angle between them."""

        for first, vertex, second in _SAS_LAYOUTS:
            side1, angle_pair, side2 = self._pairs[first], self._pairs[vertex], self._pairs[second]
            if side1.is_side_known and angle_pair.is_angle_known and side2.is_side_known:
                if self._solve_sas(side1, angle_pair, side2, errors):
                    self._finish_solve(errors)
                    return True
                return False
        return False

    @staticmethod
    def _solve_sas(
        side1: OpposingPair, angle_pair: OpposingPair, side2: OpposingPair, errors: ErrorSet
    ) -> bool:
        if not angle_pair.deduce_side_from_adjacent_sides(side1.side, side2.side, errors):
            return False
        # asin cannot tell an angle from its supplement; the angle opposite the
        # shorter side is always acute.
        if side1.side <= side2.side:
            shorter, longer = side1, side2
        else:
            shorter, longer = side2, side1
        return shorter.deduce_angle_from_pair(angle_pair, errors) and longer.deduce_angle_from_others(
            angle_pair.angle, shorter.angle, errors
        )

    def solve_ssa(self, errors: ErrorSet) -> bool:
        """Two sides and an angle that is not between them.

        Of the two triangles the ambiguous case may admit, only the one built
        from the principal value of ``asin`` is returned.
        """

        roles = self._ssa_roles()
        if roles is None:
            return False
        complete, incomplete, empty = roles
        if (
            incomplete.deduce_angle_from_pair(complete, errors)
            and empty.deduce_angle_from_others(complete.angle, incomplete.angle, errors)
            and empty.deduce_side_from_pair(complete, errors)
        ):
            self._finish_solve(errors)
            return True
        return False

    def _ssa_roles(self) -> Optional[Tuple[OpposingPair, OpposingPair, OpposingPair]]:
        for idx, complete in enumerate(self._pairs):
            if complete.status != PairStatus.BOTH:
                continue
            others = [pair for pos, pair in enumerate(self._pairs) if pos != idx]
            for incomplete, empty in (others, others[::-1]):
                if incomplete.status == PairStatus.SIDE_ONLY and empty.status == PairStatus.NEITHER:
                    return complete, incomplete, empty
            return None
        return None

    def _complete_angles(self, errors: ErrorSet) -> bool:
        if any(
            first.angle.add_degrees(second.angle) >= 180 for first, second in combinations(self._pairs, 2)
        ):
            errors.add(ErrorKind.TWO_ANGLE_180)
            return False
        a, b, c = self._pairs
        return (
            c.deduce_angle_from_others(a.angle, b.angle, errors)
            or b.deduce_angle_from_others(a.angle, c.angle, errors)
            or a.deduce_angle_from_others(b.angle, c.angle, errors)
        )

    # -- alt triangle ------------------------------------------------------

    def _finish_solve(self, errors: ErrorSet) -> None:
        self._derive_alt_triangle(errors)
        self.capture_original_sides()

    def _is_right(self, angle: Angle) -> bool:
        return abs(angle.degrees - 90.0) <= self.config.right_angle_tol

    def _derive_alt_triangle(self, errors: ErrorSet) -> None:
        """Build the right triangle formed by the altitude onto side ``c``.

        Right-angled triangles already carry their own height and get no
        auxiliary triangle.
        """

        if any(self._is_right(pair.angle) for pair in self._pairs):
            self.alt_triangle = None
            return

        a, b = self.a, self.b
        right, other, rest = OpposingPair(angle=90.0), OpposingPair(), OpposingPair()
        if a.angle <= 90 and b.angle <= 90:
            # altitude falls inside the base
            other.angle.degrees = b.angle.degrees
            right.side.value = a.side.value
        elif a.angle > b.angle:
            right.side.value = b.side.value
            other.angle.degrees = 180 - a.angle.degrees
        else:
            right.side.value = a.side.value
            other.angle.degrees = 180 - b.angle.degrees

        alt = TriangleSolver(right, other, rest, config=self.config)
        if not alt.solve_asa(errors):
            logger.warning("Auxiliary right triangle could not be solved: %s", alt)
        self.alt_triangle = alt

    # -- presentation ------------------------------------------------------

    def results(self) -> List[str]:
        return result_lines(self, precision=self.config.precision)

    def __str__(self) -> str:
        return f"A: {self.a}  B: {self.b}  C: {self.c}"

    def __repr__(self) -> str:
        return (
            f"TriangleSolver(a={self.a!r}, b={self.b!r}, c={self.c!r}, "
            f"alt={self.alt_triangle is not None})"
        )


apply_debug_logging(globals(), logger=logger)
