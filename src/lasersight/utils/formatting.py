"""Display helpers for calculator results."""

import math
from typing import Optional

NOT_AVAILABLE = "N/A"


def format_number(value: float) -> str:
    """
    Shortest text for a number used inside a note.

    Whole numbers drop their fractional part (8.0 -> "8"); other values use
    the shortest round-trip representation (7.5 -> "7.5").
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_scan_rate(estimate) -> str:
    """Render an estimate as ``"<kpps>K points/sec (<note>)"``, without parentheses for an empty note."""
    rate = f"{format_number(estimate.kpps)}K points/sec"
    if not estimate.note:
        return rate
    return f"{rate} ({estimate.note})"


def format_angle(value: Optional[float], precision: int = 2) -> str:
    """Angle in degrees with fixed decimals, or "N/A" when missing."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{precision}f}°"


def format_length(value: Optional[float], unit: str = "m", precision: int = 2) -> str:
    """Distance or width with fixed decimals and unit, or "N/A" when missing."""
    if value is None:
        return NOT_AVAILABLE
    if math.isinf(value):
        return f"∞ {unit}"
    return f"{value:.{precision}f} {unit}"
