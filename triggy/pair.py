"""Angle/opposite-side pairs and the per-pair trigonometric deductions."""

from __future__ import annotations

import logging
import math
from enum import IntEnum
from typing import Optional

from .errors import ErrorKind, ErrorSet
from .logging_utils import apply_debug_logging
from .measures import Angle, Length, Number

logger = logging.getLogger(__name__)


class PairStatus(IntEnum):
    """Which halves of an :class:`OpposingPair` are known."""

    NEITHER = 0
    SIDE_ONLY = 1
    ANGLE_ONLY = 2
    BOTH = 3


class OpposingPair:
    """A vertex angle together with the length of the side opposite it.

    Every ``deduce_*`` method overwrites one half of the pair, returns ``True``
    on success and, on failure, adds at most one :class:`ErrorKind` to the
    caller-supplied ``errors`` set.
    """

    __slots__ = ("angle", "side")

    def __init__(self, angle: Optional[Number] = None, side: Optional[Number] = None) -> None:
        self.angle = Angle(angle)
        self.side = Length(side)

    @property
    def status(self) -> PairStatus:
        result = PairStatus.NEITHER.value
        if not self.side.is_empty:
            result += PairStatus.SIDE_ONLY.value
        if not self.angle.is_empty:
            result += PairStatus.ANGLE_ONLY.value
        return PairStatus(result)

    @property
    def is_side_known(self) -> bool:
        return not self.side.is_empty

    @property
    def is_angle_known(self) -> bool:
        return not self.angle.is_empty

    def set_values(self, angle: Optional[Number], side: Optional[Number]) -> None:
        self.angle.degrees = angle or 0.0
        self.side.value = side or 0.0

    def clear(self) -> None:
        self.angle.clear()
        self.side.clear()

    def copy(self) -> "OpposingPair":
        return OpposingPair(self.angle.degrees, self.side.value)

    def deduce_angle_from_others(self, angle_a: Angle, angle_b: Angle, errors: ErrorSet) -> bool:
        """Third angle of the triangle: ``180 - angle_a - angle_b``."""

        if angle_a.is_empty or angle_b.is_empty:
            return False
        if angle_a.add_degrees(angle_b) >= 180:
            errors.add(ErrorKind.TWO_ANGLE_180)
            return False
        self.angle.degrees = 180 - angle_a.degrees - angle_b.degrees
        return True

    def deduce_angle_from_pair(self, other: "OpposingPair", errors: ErrorSet) -> bool:
        """Law of sines, angle form.

        ``asin`` yields the principal value only; the supplementary solution
        of the ambiguous case is never returned.
        """

        if self.side.is_empty or other.status != PairStatus.BOTH:
            return False
        ratio = self.side.value * math.sin(other.angle.radians) / other.side.value
        if not -1 <= ratio <= 1:
            logger.debug("asin argument %.6g outside [-1, 1]", ratio)
            errors.add(ErrorKind.ANGLE_TOO_LARGE)
            return False
        self.angle.radians = math.asin(ratio)
        if not 0 < self.angle.degrees < 180:
            errors.add(ErrorKind.ANGLE_TOO_LARGE)
            return False
        return True

    def deduce_angle_from_adjacent_sides(self, side_b: Length, side_c: Length) -> bool:
        """Law of cosines, angle form."""

        if self.side.is_empty or side_b.is_empty or side_c.is_empty:
            return False
        cosine = (side_b.squared + side_c.squared - self.side.squared) / (2 * side_b.value * side_c.value)
        self.angle.radians = math.acos(min(1.0, max(-1.0, cosine)))
        return True

    def deduce_side_from_pair(self, other: "OpposingPair", errors: ErrorSet) -> bool:
        """Law of sines, side form."""

        if self.angle.is_empty or other.status != PairStatus.BOTH:
            return False
        if self.angle >= 180:
            errors.add(ErrorKind.ONE_ANGLE_180)
            return False
        self.side.value = other.side.value * math.sin(self.angle.radians) / math.sin(other.angle.radians)
        return True

    def deduce_side_from_adjacent_sides(self, side_b: Length, side_c: Length, errors: ErrorSet) -> bool:
        """Law of cosines, side form."""

        if self.angle.is_empty or side_b.is_empty or side_c.is_empty:
            return False
        if self.angle >= 180:
            errors.add(ErrorKind.ONE_ANGLE_180)
            return False
        self.side.squared = (
            side_b.squared + side_c.squared - 2 * side_b.value * side_c.value * math.cos(self.angle.radians)
        )
        return True

    def check_against_other_sides(self, side_b: Length, side_c: Length, errors: ErrorSet) -> bool:
        # a degenerate (flat) triangle is rejected too
        if self.side.value >= side_b.add(side_c):
            errors.add(ErrorKind.ONE_SIDE)
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpposingPair):
            return NotImplemented
        return self.angle == other.angle and self.side == other.side

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Side: {self.side} Angle: {self.angle}"

    def __repr__(self) -> str:
        return f"OpposingPair(angle={self.angle.degrees!r}, side={self.side.value!r})"


apply_debug_logging(globals(), logger=logger)
