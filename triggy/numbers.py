from __future__ import annotations

import math
from typing import Optional, Union


def parse_measure(text: Optional[Union[str, float, int]]) -> float:
    """Read one raw input slot.

    Blank or unparseable text reads as ``0.0``, which the solver treats as an
    unknown value.
    """

    if text is None:
        return 0.0
    if isinstance(text, (int, float)):
        return float(text)
    stripped = text.strip()
    if not stripped:
        return 0.0
    try:
        value = float(stripped)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def format_measure(value: float, precision: int = 2) -> str:
    return f"{value:.{precision}f}"


def format_input(value: float, precision: int = 2) -> str:
    """Text to show back in an input slot: empty for unknown values."""

    return "" if value == 0 else format_measure(value, precision)
