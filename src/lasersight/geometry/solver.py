"""
Solve for the missing quantity of a scan setup.

A calculation mode names the quantity to compute; the other two are the
authoritative inputs.
"""

from enum import Enum
from typing import Optional, Union

from .conversions import convert_to_angle, convert_to_distance, convert_to_width


class CalculationMode(Enum):
    """Which quantity of the scan setup is computed from the other two."""
    WIDTH = "width"
    DISTANCE = "distance"
    ANGLE = "angle"


def solve_missing_quantity(
    mode: Union[CalculationMode, str],
    angle: Optional[float] = None,
    distance: Optional[float] = None,
    width: Optional[float] = None,
) -> Optional[float]:
    """
    Compute the quantity selected by ``mode`` from the two others.

    Args:
        mode: The quantity to compute, as a CalculationMode or its value.
        angle: Scan angle in degrees (ignored in ANGLE mode).
        distance: Projection distance (ignored in DISTANCE mode).
        width: Projection width (ignored in WIDTH mode).

    Returns:
        The computed quantity, or None when one of the two required inputs
        is missing.

    Raises:
        ValueError: If ``mode`` is not a known calculation mode.
    """
    mode = CalculationMode(mode)

    if mode is CalculationMode.WIDTH:
        if angle is None or distance is None:
            return None
        return convert_to_width(angle, distance)
    if mode is CalculationMode.DISTANCE:
        if angle is None or width is None:
            return None
        return convert_to_distance(angle, width)
    if distance is None or width is None:
        return None
    return convert_to_angle(distance, width)
