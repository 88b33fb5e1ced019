"""
Conversions between scan angle, projection distance and projection width.

The projection cone is modelled as an isosceles triangle:

    width = 2 * distance * tan(angle / 2)

All functions sanitize their inputs instead of rejecting them: missing, NaN
or negative lengths become 0 and angles are clamped to [0, MAX_ANGLE].
Distance and width only need to share a unit (both meters or both feet).
"""

import math
import numpy as np
from typing import Optional

from .constants import MAX_ANGLE


def sanitize_length(value: Optional[float]) -> float:
    """
    Clamp a distance or width to [0, inf).

    Args:
        value: Raw length, possibly None, NaN or negative.

    Returns:
        float: The sanitized length.
    """
    if value is None:
        return 0.0
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, value)


def clamp_angle(angle: Optional[float]) -> float:
    """
    Clamp a scan angle to [0, MAX_ANGLE] degrees.

    Args:
        angle: Raw angle in degrees, possibly None, NaN or out of range.

    Returns:
        float: The clamped angle in degrees.
    """
    if angle is None:
        return 0.0
    angle = float(angle)
    if math.isnan(angle):
        return 0.0
    return float(np.clip(angle, 0.0, MAX_ANGLE))


def _half_angle_tangent(angle_deg: float) -> float:
    """tan(angle/2) for an already clamped angle in degrees."""
    return float(np.tan(np.radians(angle_deg / 2)))


def convert_to_width(angle: Optional[float], distance: Optional[float]) -> float:
    """
    Projection width produced by a scan angle at a given distance.

    Args:
        angle: Full scan angle in degrees.
        distance: Distance from scanner to projection surface.

    Returns:
        float: Projection width, in the unit of ``distance``. Exactly 0 when
        the sanitized angle or distance is 0.
    """
    safe_angle = clamp_angle(angle)
    safe_distance = sanitize_length(distance)
    if safe_angle == 0.0 or safe_distance == 0.0:
        return 0.0
    return safe_distance * _half_angle_tangent(safe_angle) * 2


def convert_to_distance(angle: Optional[float], width: Optional[float]) -> float:
    """
    Distance at which a scan angle produces the given projection width.

    A zero angle never reaches any width, so the distance is reported as
    ``math.inf`` instead of raising.
    """
    safe_angle = clamp_angle(angle)
    safe_width = sanitize_length(width)
    divisor = 2 * _half_angle_tangent(safe_angle)
    if divisor == 0.0:
        return math.inf
    return safe_width / divisor


def convert_to_angle(distance: Optional[float], width: Optional[float]) -> float:
    """
    Scan angle needed to cover a projection width at a given distance.

    Zero distance with a positive width saturates: atan(inf) = pi/2 gives a
    raw angle of 180 degrees, which is then clamped to exactly MAX_ANGLE.

    Returns:
        float: Scan angle in degrees, within [0, MAX_ANGLE].
    """
    safe_distance = sanitize_length(distance)
    safe_width = sanitize_length(width)
    if safe_width == 0.0:
        return 0.0
    if safe_distance == 0.0:
        half_ratio = math.inf
    else:
        half_ratio = safe_width / (2 * safe_distance)
    raw = float(np.degrees(2 * np.arctan(half_ratio)))
    return min(raw, MAX_ANGLE)
