"""
Tests for scan geometry conversions.
"""
import math

import pytest

from lasersight.geometry.constants import MAX_ANGLE
from lasersight.geometry.conversions import (
    clamp_angle,
    convert_to_angle,
    convert_to_distance,
    convert_to_width,
    sanitize_length,
)


class TestSanitizeLength:
    def test_positive_unchanged(self) -> None:
        assert sanitize_length(3.5) == 3.5

    def test_negative_becomes_zero(self) -> None:
        assert sanitize_length(-2) == 0.0

    def test_none_becomes_zero(self) -> None:
        assert sanitize_length(None) == 0.0

    def test_nan_becomes_zero(self) -> None:
        assert sanitize_length(float("nan")) == 0.0


class TestClampAngle:
    @pytest.mark.parametrize("raw, expected", [
        (-30, 0.0), (0, 0.0), (45, 45.0), (90, 90.0), (120, 90.0),
        (math.inf, 90.0), (None, 0.0), (float("nan"), 0.0),
    ])
    def test_clamp(self, raw, expected) -> None:
        assert clamp_angle(raw) == expected


class TestConvertToWidth:
    def test_30_degrees_at_10(self) -> None:
        # 10 * tan(15°) * 2
        assert convert_to_width(30, 10) == pytest.approx(5.36, abs=0.01)

    def test_45_degrees_at_5(self) -> None:
        assert convert_to_width(45, 5) == pytest.approx(4.14, abs=0.01)

    def test_60_degrees_at_15(self) -> None:
        assert convert_to_width(60, 15) == pytest.approx(17.32, abs=0.01)

    def test_80_degrees_at_10(self) -> None:
        assert convert_to_width(80, 10) == pytest.approx(16.78, abs=0.01)

    def test_zero_angle_is_exactly_zero(self) -> None:
        for distance in (0, 1, 10, 1e6):
            assert convert_to_width(0, distance) == 0.0

    def test_zero_distance_is_exactly_zero(self) -> None:
        assert convert_to_width(45, 0) == 0.0

    def test_negative_angle_sanitized(self) -> None:
        assert convert_to_width(-30, 10) == 0.0

    def test_negative_distance_sanitized(self) -> None:
        assert convert_to_width(30, -10) == 0.0

    def test_linear_in_distance(self) -> None:
        for angle in (1, 8, 30, 60, 90):
            assert convert_to_width(angle, 10) == pytest.approx(2 * convert_to_width(angle, 5))

    def test_never_negative(self) -> None:
        for angle in range(0, 91, 5):
            assert convert_to_width(angle, 3) >= 0

    def test_angle_clamped_to_max(self) -> None:
        assert convert_to_width(MAX_ANGLE + 10, 10) == pytest.approx(convert_to_width(MAX_ANGLE, 10))

    def test_90_degrees_width_is_twice_distance(self) -> None:
        assert convert_to_width(90, 10) == pytest.approx(20.0)


class TestConvertToDistance:
    def test_inverse_of_width(self) -> None:
        width = convert_to_width(30, 10)
        assert convert_to_distance(30, width) == pytest.approx(10.0)

    def test_negative_angle_matches_zero_angle(self) -> None:
        assert convert_to_distance(-30, 5) == convert_to_distance(0, 5)

    def test_zero_angle_is_infinite(self) -> None:
        assert convert_to_distance(0, 5) == math.inf

    def test_negative_width_sanitized(self) -> None:
        assert convert_to_distance(30, -5) == 0.0

    def test_angle_clamped_to_max(self) -> None:
        assert convert_to_distance(MAX_ANGLE + 10, 5) == pytest.approx(convert_to_distance(MAX_ANGLE, 5))


class TestConvertToAngle:
    def test_inverse_of_width(self) -> None:
        width = convert_to_width(40, 12)
        assert convert_to_angle(12, width) == pytest.approx(40.0)

    def test_negative_distance_saturates_to_max(self) -> None:
        assert convert_to_angle(-10, 5) == MAX_ANGLE

    def test_zero_distance_saturates_to_max(self) -> None:
        assert convert_to_angle(0, 5) == MAX_ANGLE

    def test_large_width_capped_exactly(self) -> None:
        assert convert_to_angle(1, 100) == MAX_ANGLE

    def test_negative_width_sanitized(self) -> None:
        assert convert_to_angle(10, -5) == 0.0

    def test_result_within_domain(self) -> None:
        for distance in (0.1, 1, 10, 100):
            for width in (0, 0.5, 5, 50):
                assert 0 <= convert_to_angle(distance, width) <= MAX_ANGLE


class TestNanInputs:
    def test_width_nan_angle(self) -> None:
        assert convert_to_width(float("nan"), 10) == 0.0

    def test_width_nan_distance(self) -> None:
        assert convert_to_width(30, float("nan")) == 0.0

    def test_distance_nan_angle_is_infinite(self) -> None:
        assert convert_to_distance(float("nan"), 5) == math.inf

    def test_angle_nan_distance_saturates(self) -> None:
        assert convert_to_angle(float("nan"), 5) == MAX_ANGLE

    def test_angle_zero_distance_zero_width(self) -> None:
        # 0/0 would be NaN; an empty projection needs no angle
        assert convert_to_angle(0, 0) == 0.0

    def test_angle_nan_width(self) -> None:
        assert convert_to_angle(10, float("nan")) == 0.0
