"""
Scan-rate estimation from a scanner's sparse specification table.

Given a target scan angle the estimator answers with the best available
sustainable point rate and a note describing where the number came from:
an exact calibration point, an interpolation between two points, an
extrapolation beyond the table, a device cap, or one of the two sentinels
("Unknown", "Exceeds max angle") paired with a rate of 0.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from ..config.scanner_config import ScannerModel, ScanSpecPoint
from ..geometry.constants import (
    BELOW_RANGE_RATIO_CAP,
    MIN_KPPS,
    NO_ESTIMATE_KPPS,
    NOTE_ABOVE_RANGE,
    NOTE_BELOW_RANGE,
    NOTE_EXCEEDS_MAX_ANGLE,
    NOTE_INTERPOLATED,
    NOTE_MAX_KPPS,
    NOTE_UNKNOWN,
)
from ..geometry.conversions import clamp_angle
from ..utils.formatting import format_number
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScanRateEstimate:
    """Estimated point rate (KPPS) and its provenance note."""
    kpps: float
    note: str

    @property
    def is_estimate(self) -> bool:
        """False for the "Unknown" and "Exceeds max angle" sentinels."""
        return self.kpps != NO_ESTIMATE_KPPS


def _round_half_up(value: float) -> Optional[int]:
    """Round to the nearest integer, halves away from -inf. None if not finite."""
    if not math.isfinite(value):
        return None
    return int(math.floor(value + 0.5))


def _is_finite_spec(spec: ScanSpecPoint) -> bool:
    return math.isfinite(spec.angle) and math.isfinite(spec.kpps)


def _max_kpps_estimate(max_kpps: float) -> ScanRateEstimate:
    return ScanRateEstimate(max_kpps, NOTE_MAX_KPPS.format(max_kpps=format_number(max_kpps)))


def angle_exceeds_device_limit(scanner: Optional[ScannerModel], angle: Optional[float]) -> bool:
    """
    Check a raw (unclamped) angle against the scanner's hard angle ceiling.

    Returns:
        bool: True only when the scanner defines ``max_angle`` and the angle
        is strictly above it.
    """
    if scanner is None or scanner.max_angle is None or angle is None:
        return False
    # NaN compares False, which is what we want
    return float(angle) > scanner.max_angle


def _extrapolate_below(smallest: ScanSpecPoint, angle: float,
                       max_kpps: Optional[float]) -> Optional[ScanRateEstimate]:
    """Scale up the smallest-angle rate by smallest/target, capped."""
    ratio = smallest.angle / angle if angle > 0 else math.inf
    capped_ratio = min(ratio, BELOW_RANGE_RATIO_CAP)
    kpps = _round_half_up(smallest.kpps * capped_ratio)
    if kpps is None:
        return None

    if max_kpps is not None and kpps > max_kpps:
        return _max_kpps_estimate(max_kpps)
    return ScanRateEstimate(kpps, NOTE_BELOW_RANGE.format(angle=format_number(smallest.angle)))


def _extrapolate_above(largest: ScanSpecPoint, angle: float) -> Optional[ScanRateEstimate]:
    """Quadratic falloff of the largest-angle rate; no max_kpps cap."""
    if largest.angle > 0:
        ratio = angle / largest.angle
        kpps = _round_half_up(largest.kpps / ratio ** 2)
        if kpps is None:
            return None
        kpps = max(MIN_KPPS, kpps)
    else:
        # Ratio is unbounded, the rate falls to the floor
        kpps = MIN_KPPS
    return ScanRateEstimate(kpps, NOTE_ABOVE_RANGE.format(angle=format_number(largest.angle)))


def _interpolate(lower: ScanSpecPoint, upper: ScanSpecPoint, angle: float,
                 max_kpps: Optional[float]) -> Optional[ScanRateEstimate]:
    """
    Weighted blend of two bracketing points.

    The weight of the smaller-angle endpoint is

        (1 - t) * (1 + (lower_angle / upper_angle) ** 2)

    where t is the normalized position of the target between the two angles.
    The squared angle ratio favours the (usually faster) smaller-angle point
    more when the two angles are close together.
    """
    ratio = (angle - lower.angle) / (upper.angle - lower.angle)
    angle_ratio = lower.angle / upper.angle
    weight = (1 - ratio) * (1 + angle_ratio ** 2)

    if lower.angle <= upper.angle:
        smaller, larger = lower, upper
    else:
        smaller, larger = upper, lower

    interpolated = _round_half_up(smaller.kpps * weight + larger.kpps * (1 - weight))
    if interpolated is None:
        return None

    ceiling = max(smaller.kpps, larger.kpps)
    if interpolated > ceiling or interpolated < 0:
        interpolated = ceiling

    final_kpps = max(MIN_KPPS, interpolated)

    if max_kpps is not None and final_kpps > max_kpps:
        return _max_kpps_estimate(max_kpps)
    return ScanRateEstimate(
        final_kpps,
        NOTE_INTERPOLATED.format(lower=format_number(lower.angle), upper=format_number(upper.angle)),
    )


def _estimate_from_table(scanner: ScannerModel, specs: List[ScanSpecPoint],
                         a: float) -> Optional[ScanRateEstimate]:
    """Steps 4-7 on a sorted, finite table. None when no estimate is computable."""
    for spec in specs:
        if spec.angle == a:
            logger.debug(f"{scanner.name}: exact specification at {a}°")
            return ScanRateEstimate(spec.kpps, spec.note)

    smallest, largest = specs[0], specs[-1]

    if a < smallest.angle:
        logger.debug(f"{scanner.name}: {a}° below specified range, extrapolating")
        return _extrapolate_below(smallest, a, scanner.max_kpps)

    if a > largest.angle:
        logger.debug(f"{scanner.name}: {a}° above specified range, extrapolating")
        return _extrapolate_above(largest, a)

    for lower, upper in zip(specs, specs[1:]):
        if lower.angle <= a <= upper.angle:
            logger.debug(f"{scanner.name}: interpolating {a}° between {lower.angle}° and {upper.angle}°")
            return _interpolate(lower, upper, a, scanner.max_kpps)

    # Unreachable for a clamped angle inside a sorted table
    return None


def estimate_scan_rate(scanner: Optional[ScannerModel], angle: Optional[float]) -> ScanRateEstimate:
    """
    Estimate the maximum sustainable point rate at a scan angle.

    The decision procedure, in order:

    1. No scanner, an empty table or a table with non-finite values
       -> (0, "Unknown").
    2. Raw angle above the scanner's ``max_angle`` -> (0, "Exceeds max angle (N°)").
    3. Clamp the angle to [0, MAX_ANGLE] and sort the table by angle (stable).
    4. Exact match -> that point's rate and note, verbatim and uncapped.
    5. Below the table -> smallest rate scaled by smallest/target (<= 1.5x),
       capped by ``max_kpps``.
    6. Above the table -> largest rate divided by (target/largest)**2, >= 1.
    7. Between two points -> weighted interpolation, >= 1, capped by ``max_kpps``.

    Args:
        scanner: The scanner model, or None when no scanner is selected.
        angle: Target full scan angle in degrees.

    Returns:
        ScanRateEstimate: Always a concrete result; this function never raises.
    """
    if scanner is None or not scanner.specs:
        logger.debug("No scanner or empty specification table")
        return ScanRateEstimate(NO_ESTIMATE_KPPS, NOTE_UNKNOWN)

    if not all(_is_finite_spec(spec) for spec in scanner.specs):
        logger.warning(f"{scanner.name}: specification table has non-finite values")
        return ScanRateEstimate(NO_ESTIMATE_KPPS, NOTE_UNKNOWN)

    if angle_exceeds_device_limit(scanner, angle):
        logger.debug(f"{scanner.name}: angle {angle} exceeds max angle {scanner.max_angle}")
        return ScanRateEstimate(
            NO_ESTIMATE_KPPS,
            NOTE_EXCEEDS_MAX_ANGLE.format(max_angle=format_number(scanner.max_angle)),
        )

    a = clamp_angle(angle)
    specs: List[ScanSpecPoint] = sorted(scanner.specs, key=lambda s: s.angle)

    estimate = _estimate_from_table(scanner, specs, a)
    if estimate is None:
        logger.warning(f"{scanner.name}: no finite estimate for {a}°")
        return ScanRateEstimate(NO_ESTIMATE_KPPS, NOTE_UNKNOWN)
    return estimate


class ScanRateEstimator:
    """Scan-rate estimation bound to one selected scanner model."""

    def __init__(self, scanner: Optional[ScannerModel]):
        self.scanner = scanner

    def estimate(self, angle: Optional[float]) -> ScanRateEstimate:
        return estimate_scan_rate(self.scanner, angle)

    def exceeds_device_limit(self, angle: Optional[float]) -> bool:
        return angle_exceeds_device_limit(self.scanner, angle)
