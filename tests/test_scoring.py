from __future__ import annotations

import math

import pytest

from agrosim.errors import ConfigurationError
from agrosim.models.enums import Factor, ScoringFamily, Status
from agrosim.schemas.crop import CropProfile, Range
from agrosim.services.scoring import (
    get_status,
    round_half_up,
    score_factor,
    score_npk_balance,
    score_parameter,
    to_detail,
)

WATER = Range(min=400, optimal=600, max=800)
NITROGEN = Range(min=50, optimal=100, max=150)
PH = Range(min=5.5, optimal=6.5, max=7.5)
TEMPERATURE = Range(min=18, optimal=25, max=32)

FAMILY_RANGES = {
    ScoringFamily.water: WATER,
    ScoringFamily.npk: NITROGEN,
    ScoringFamily.ph: PH,
    ScoringFamily.temperature: TEMPERATURE,
}


def test_water_curve_branches() -> None:
    assert score_parameter(ScoringFamily.water, WATER, 200) == pytest.approx(0.25)
    assert score_parameter(ScoringFamily.water, WATER, 1000) == pytest.approx(0.7)
    assert score_parameter(ScoringFamily.water, WATER, 700) == pytest.approx(0.875)
    assert score_parameter(ScoringFamily.water, WATER, 400) == pytest.approx(0.75)
    assert score_parameter(ScoringFamily.water, WATER, 0) == 0.0


def test_npk_curve_branches() -> None:
    assert score_parameter(ScoringFamily.npk, NITROGEN, 25) == pytest.approx(0.35)
    assert score_parameter(ScoringFamily.npk, NITROGEN, 180) == pytest.approx(0.78)
    assert score_parameter(ScoringFamily.npk, NITROGEN, 150) == pytest.approx(0.8)
    assert score_parameter(ScoringFamily.npk, NITROGEN, 400) == 0.0


def test_ph_curve_uses_unnormalized_distance_outside_range() -> None:
    assert score_parameter(ScoringFamily.ph, PH, 9.0) == pytest.approx(0.55)
    assert score_parameter(ScoringFamily.ph, PH, 4.0) == pytest.approx(0.55)
    assert score_parameter(ScoringFamily.ph, PH, 12.0) == 0.0


def test_ph_curve_inside_range_floors_at_point_six() -> None:
    assert score_parameter(ScoringFamily.ph, PH, 7.0) == pytest.approx(0.75)
    assert score_parameter(ScoringFamily.ph, PH, 7.5) == pytest.approx(0.6)


def test_temperature_curve_uses_fixed_ten_degree_scale() -> None:
    assert score_parameter(ScoringFamily.temperature, TEMPERATURE, 8) == pytest.approx(0.2)
    assert score_parameter(ScoringFamily.temperature, TEMPERATURE, 37) == pytest.approx(0.6)
    assert score_parameter(ScoringFamily.temperature, TEMPERATURE, 32) == pytest.approx(0.8)


def test_factor_dispatch_goes_through_family_table() -> None:
    assert score_factor(Factor.potassium, Range(min=30, optimal=60, max=90), 15) == pytest.approx(
        score_parameter(ScoringFamily.npk, Range(min=30, optimal=60, max=90), 15)
    )
    assert score_factor(Factor.ph, PH, 9.0) == pytest.approx(0.55)


def test_scores_stay_in_unit_interval_for_every_family() -> None:
    for family, bounds in FAMILY_RANGES.items():
        low = bounds.min - 3 * bounds.span - 10
        high = bounds.max + 3 * bounds.span + 10
        steps = 400
        for index in range(steps + 1):
            actual = low + (high - low) * index / steps
            value = score_parameter(family, bounds, actual)
            assert 0.0 <= value <= 1.0, (family, actual, value)


def test_optimum_scores_exactly_one_for_every_family() -> None:
    for family, bounds in FAMILY_RANGES.items():
        assert score_parameter(family, bounds, bounds.optimal) == 1.0


def test_non_finite_input_scores_zero() -> None:
    for family, bounds in FAMILY_RANGES.items():
        assert score_parameter(family, bounds, math.nan) == 0.0
        assert score_parameter(family, bounds, math.inf) == 0.0
        assert score_parameter(family, bounds, -math.inf) == 0.0


def test_degenerate_ranges_do_not_divide_by_zero() -> None:
    point = Range(min=5, optimal=5, max=5)
    assert score_parameter(ScoringFamily.npk, point, 5) == 1.0

    from_zero = Range(min=0, optimal=10, max=20)
    assert score_parameter(ScoringFamily.water, from_zero, -5) == 0.0


def test_status_thresholds() -> None:
    assert get_status(1.0) is Status.excellent
    assert get_status(0.9) is Status.excellent
    assert get_status(0.89) is Status.good
    assert get_status(0.7) is Status.good
    assert get_status(0.5) is Status.fair
    assert get_status(0.3) is Status.poor
    assert get_status(0.29) is Status.critical
    assert get_status(0.0) is Status.critical
    assert get_status(math.nan) is Status.critical


def test_detail_conversion_rounds_half_up() -> None:
    detail = to_detail(0.25)
    assert detail.score == 25
    assert detail.status is Status.critical

    assert to_detail(0.555).score == 56
    assert to_detail(math.nan).score == 0
    assert to_detail(math.nan).status is Status.critical


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(81.25) == 81
    assert round_half_up(99.99999999999999) == 100


def test_npk_balance() -> None:
    optimal = {Factor.nitrogen: 100, Factor.phosphorus: 40, Factor.potassium: 60}

    assert score_npk_balance(optimal, optimal) == 1.0

    skewed = {Factor.nitrogen: 200, Factor.phosphorus: 40, Factor.potassium: 60}
    assert score_npk_balance(skewed, optimal) == pytest.approx(1 - (1 / 3) * 0.5)

    wild = {Factor.nitrogen: 1000, Factor.phosphorus: 900, Factor.potassium: 0}
    assert score_npk_balance(wild, optimal) == 0.5


def test_npk_balance_rejects_zero_optimal() -> None:
    optimal = {Factor.nitrogen: 0, Factor.phosphorus: 40, Factor.potassium: 60}
    with pytest.raises(ConfigurationError, match="nitrogen"):
        score_npk_balance(optimal, optimal)


def test_npk_balance_with_nan_input_is_critical() -> None:
    optimal = {Factor.nitrogen: 100, Factor.phosphorus: 40, Factor.potassium: 60}
    applied = {Factor.nitrogen: math.nan, Factor.phosphorus: 40, Factor.potassium: 60}
    value = score_npk_balance(applied, optimal)
    assert value == 0.0
    assert get_status(value) is Status.critical


def test_range_in_crop_reports_membership(crop: CropProfile) -> None:
    assert crop.is_parameter_in_range(Factor.water, 500) == (True, "In range")
    assert crop.is_parameter_in_range("ph", 9.0) == (False, "Out of range (5.5-7.5)")
    assert crop.is_parameter_in_range("salinity", 1.0) == (False, "Invalid parameter")
