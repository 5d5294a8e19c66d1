import math
from typing import Optional, Sequence

from .measures import Number

SLOT_NAMES = ("angle A", "side a", "angle B", "side b", "angle C", "side c")


class ValidationError(Exception):
    pass


def validate_values(values: Sequence[Optional[Number]]) -> None:
    """Check the six raw input slots before they reach the solver.

    Angle magnitudes are left to the solver, which reports them as
    ``ErrorKind`` values rather than exceptions.
    """

    if len(values) != len(SLOT_NAMES):
        raise ValidationError(f'expected {len(SLOT_NAMES)} values, got {len(values)}')
    for name, value in zip(SLOT_NAMES, values):
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f'{name} must be a number, got {value!r}')
        if not math.isfinite(value):
            raise ValidationError(f'{name} must be finite, got {value!r}')
        if value < 0:
            kind = 'length' if name.startswith('side') else 'angle'
            raise ValidationError(f'{name} must be a non-negative {kind}, got {value!r}')
