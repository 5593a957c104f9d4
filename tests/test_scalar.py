from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from engine_utilities.core.math import scalar
from engine_utilities.core.math.constants import (
    APPROXIMATION,
    DEG_TO_RAD,
    E,
    HALF_PI,
    INF,
    NEG_INF,
    PI,
    QUARTER_PI,
    RAD_TO_DEG,
    TWO_PI,
)


def test_constants_are_consistent() -> None:
    assert np.isclose(PI, 3.14159265, atol=1e-6)
    assert np.isclose(TWO_PI, 2.0 * PI)
    assert np.isclose(HALF_PI, PI / 2.0)
    assert np.isclose(QUARTER_PI, PI / 4.0)
    assert np.isclose(DEG_TO_RAD * RAD_TO_DEG, 1.0)
    assert np.isclose(E, 2.718281828, atol=1e-6)
    assert INF > 1e29
    assert NEG_INF == -INF


def test_approximation_settings_are_read_only() -> None:
    assert APPROXIMATION.sqrt_iterations == 10
    assert APPROXIMATION.cos_terms == 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        APPROXIMATION.sqrt_iterations = 20  # type: ignore[misc]


def test_sqrt() -> None:
    assert scalar.sqrt(25.0) == pytest.approx(5.0, abs=1e-4)
    assert scalar.sqrt(2.0) == pytest.approx(1.41421356, rel=1e-5)
    assert scalar.sqrt(0.25) == pytest.approx(0.5, rel=1e-5)


def test_sqrt_non_positive_is_zero() -> None:
    assert scalar.sqrt(0.0) == 0.0
    assert scalar.sqrt(-4.0) == 0.0


def test_sin_cos_reference_values() -> None:
    assert scalar.sin(0.0) == pytest.approx(0.0, abs=1e-5)
    assert scalar.cos(0.0) == pytest.approx(1.0, abs=1e-5)
    assert scalar.sin(PI / 2.0) == pytest.approx(1.0, abs=1e-5)
    assert scalar.sin(HALF_PI) == pytest.approx(1.0, abs=1e-5)
    assert scalar.sin(PI) == pytest.approx(0.0, abs=1e-5)


def test_sin_matches_numpy_near_zero() -> None:
    angles = np.linspace(-PI, PI, 41)
    for a in angles:
        assert scalar.sin(float(a)) == pytest.approx(np.sin(a), abs=1e-5)
        assert scalar.sin(float(-a)) == pytest.approx(-scalar.sin(float(a)), abs=1e-7)


def test_cos_fixed_terms_accuracy() -> None:
    # five terms after the leading 1 are accurate near zero and lose ~2e-3 at pi
    for a in np.linspace(-1.5, 1.5, 31):
        assert scalar.cos(float(a)) == pytest.approx(np.cos(a), abs=1e-5)
    assert scalar.cos(PI) == pytest.approx(-1.0, abs=5e-3)


def test_cos_wraps_angle_by_whole_turns() -> None:
    assert scalar.cos(TWO_PI + 0.5) == pytest.approx(np.cos(0.5), abs=1e-4)
    assert scalar.cos(-3.0 * TWO_PI + 0.5) == pytest.approx(np.cos(0.5), abs=1e-4)
    assert scalar.cos(1000.0) == pytest.approx(np.cos(1000.0), abs=5e-3)


def test_trig_non_finite_is_nan() -> None:
    assert np.isnan(scalar.sin(float("inf")))
    assert np.isnan(scalar.cos(float("-inf")))
    assert np.isnan(scalar.cos(float("nan")))


def test_sin_wraps_angle_by_whole_turns() -> None:
    for a in (25.0, 50.0, 200.0, -400.0):
        assert scalar.sin(a) == pytest.approx(np.sin(a), abs=1e-4)
    huge = scalar.sin(1e30)
    assert np.isfinite(huge)
    assert abs(huge) <= 1.001


def test_power_counts_loop_iterations() -> None:
    assert scalar.power(2.0, 10) == 1024.0
    assert scalar.power(3.0, 1) == 3.0
    assert scalar.power(2.0, 0) == 1.0
    assert scalar.power(2.0, -3) == 1.0
    # counter values 0, 1 and 2 are all below 2.5
    assert scalar.power(2.0, 2.5) == 8.0


def test_power_non_finite_exponent() -> None:
    assert scalar.power(2.0, float("nan")) == 1.0
    assert scalar.power(2.0, float("inf")) == float("inf")
    assert scalar.power(0.5, float("inf")) == 0.0
    assert scalar.power(1.0, float("inf")) == 1.0
    assert scalar.power(2.0, float("-inf")) == 1.0


def test_power_huge_exponent_saturates() -> None:
    assert scalar.power(2.0, 1e30) == float("inf")
    assert scalar.power(0.5, 1e20) == 0.0
    assert scalar.power(-1.0, 1_000_001) == -1.0
    assert scalar.power(-1.0, 1e9) == 1.0


def test_exp_uses_power_of_e() -> None:
    assert scalar.exp(1) == pytest.approx(E, rel=1e-6)
    assert scalar.exp(2) == pytest.approx(E * E, rel=1e-5)
    assert scalar.exp(-1) == 1.0


def test_factorial() -> None:
    assert scalar.factorial(5) == 120
    assert scalar.factorial(1) == 1
    assert scalar.factorial(0) == 1
    assert scalar.factorial(-3) == 1


def test_rounding_by_truncation() -> None:
    assert scalar.round(2.5) == 3
    assert scalar.round(2.49) == 2
    assert scalar.round(-1.7) == -1
    assert scalar.floor(2.9) == 2
    assert scalar.floor(-1.5) == -1


def test_ceil_always_adds_one() -> None:
    assert scalar.ceil(2.1) == 3
    assert scalar.ceil(2.0) == 3
    assert scalar.ceil(0.0) == 1


def test_rounding_passes_non_finite_through() -> None:
    assert np.isnan(scalar.round(float("nan")))
    assert scalar.floor(float("inf")) == float("inf")
    assert scalar.ceil(float("-inf")) == float("-inf")


def test_mod_is_fraction_of_quotient() -> None:
    assert scalar.mod(5.0, 2.0) == 0.5
    assert scalar.mod(6.0, 3.0) == 0.0
    assert scalar.mod(-5.0, 2.0) == -0.5
    assert scalar.mod(7.0, 0.0) == 0.0


def test_mod_non_finite_quotient_is_nan() -> None:
    assert np.isnan(scalar.mod(1e38, 1e-38))
    assert np.isnan(scalar.mod(float("inf"), 2.0))
    assert np.isnan(scalar.mod(float("nan"), 2.0))
    assert scalar.mod(3.0, float("inf")) == 0.0


def test_abs_min_max() -> None:
    assert scalar.abs_int(-3) == 3
    assert scalar.abs_int(4) == 4
    assert scalar.fabs(-2.5) == 2.5
    assert scalar.maximum(1.0, 2.0) == 2.0
    assert scalar.minimum(1.0, 2.0) == 1.0
    assert scalar.square(3.0) == 9.0
    assert scalar.cube(-2.0) == -8.0


def test_angle_conversion() -> None:
    assert scalar.radians(180.0) == pytest.approx(PI, rel=1e-6)
    assert scalar.degrees(PI) == pytest.approx(180.0, rel=1e-6)


def test_shape_helpers() -> None:
    assert scalar.circle_area(2.0) == pytest.approx(4.0 * PI, rel=1e-6)
    assert scalar.circle_circumference(1.0) == pytest.approx(TWO_PI, rel=1e-6)
    assert scalar.rect_area(3.0, 4.0) == 12.0
    assert scalar.rect_perimeter(3.0, 4.0) == 14.0
    assert scalar.tri_area(4.0, 3.0) == 6.0
    assert scalar.tri_perimeter(3.0, 4.0, 5.0) == 12.0
    assert scalar.equilateral_perimeter(2.0) == 6.0
    assert scalar.distance(0.0, 0.0, 3.0, 4.0) == pytest.approx(5.0, abs=1e-4)


def test_scalar_lerp_is_unclamped() -> None:
    assert scalar.lerp(0.0, 10.0, 0.25) == 2.5
    assert scalar.lerp(0.0, 10.0, 1.5) == 15.0
    assert scalar.clamp01(-0.5) == 0.0
    assert scalar.clamp01(1.5) == 1.0
    assert scalar.clamp01(0.25) == 0.25
