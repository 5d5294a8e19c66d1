"""Expected solver failures and the set that collects them."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Set


class ErrorKind(Enum):
    """Expected validation failures raised while solving a triangle."""

    ONE_ANGLE_180 = "One angle cannot be 180 degrees or more."
    TWO_ANGLE_180 = "Two angles cannot total 180 degrees or more."
    ONE_SIDE = "One side cannot be as long as the other two sides combined."
    ANGLE_TOO_LARGE = "Angle is too large. No intersection could be found."

    @property
    def message(self) -> str:
        return self.value


_ORDER = {kind: idx for idx, kind in enumerate(ErrorKind)}


class ErrorSet:
    """Duplicate-free collection of :class:`ErrorKind` owned by the caller.

    Iteration follows the declaration order of :class:`ErrorKind` so the
    aggregated report of one solve attempt is stable regardless of the order
    in which the deduction steps failed.
    """

    def __init__(self, kinds: Iterable[ErrorKind] = ()) -> None:
        self._kinds: Set[ErrorKind] = set()
        self.update(kinds)

    def add(self, kind: ErrorKind) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError(f"expected ErrorKind, got {type(kind).__name__}")
        self._kinds.add(kind)

    def update(self, kinds: Iterable[ErrorKind]) -> None:
        for kind in kinds:
            self.add(kind)

    def clear(self) -> None:
        self._kinds.clear()

    def messages(self) -> List[str]:
        return [kind.message for kind in self]

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def __iter__(self) -> Iterator[ErrorKind]:
        return iter(sorted(self._kinds, key=_ORDER.__getitem__))

    def __len__(self) -> int:
        return len(self._kinds)

    def __bool__(self) -> bool:
        return bool(self._kinds)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorSet):
            return self._kinds == other._kinds
        if isinstance(other, (set, frozenset)):
            return self._kinds == other
        return NotImplemented

    def __repr__(self) -> str:
        return "ErrorSet({" + ", ".join(kind.name for kind in self) + "})"


__all__ = ["ErrorKind", "ErrorSet"]
