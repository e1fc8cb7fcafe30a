from __future__ import annotations

import pytest

from agrosim.models.enums import Achievement, CompetenceTier, RecommendationUrgency, Skill
from agrosim.schemas.competence import CompetenceGain, CompetenceTotals
from agrosim.schemas.crop import CropProfile
from agrosim.schemas.simulation import (
    ParameterDetail,
    SimulationDetails,
    SimulationInput,
    SimulationResult,
    YieldProjection,
)
from agrosim.services.competence import (
    achievement_bonus,
    base_gain,
    competence_level,
    competence_recommendations,
    compute_competence_gains,
    score_multiplier,
)
from agrosim.services.scoring import get_status
from agrosim.services.simulation_engine import simulate


def _detail(score: int) -> ParameterDetail:
    return ParameterDetail(score=score, status=get_status(score / 100))


def _result(overall: int, level: int = 1, **scores: int) -> SimulationResult:
    values = {
        "water": 100,
        "nitrogen": 100,
        "phosphorus": 100,
        "potassium": 100,
        "ph": 100,
        "temperature": 100,
        "npk_balance": 100,
        **scores,
    }
    return SimulationResult(
        score=overall,
        yield_=YieldProjection(value=1.0, unit="t/ha", percentage=50, optimal=2.0),
        success=overall >= 50,
        details=SimulationDetails(**{name: _detail(value) for name, value in values.items()}),
        feedback=(),
        level=level,
    )


def test_gains_from_all_optimal_simulation(crop: CropProfile, optimal_inputs: SimulationInput) -> None:
    result = simulate(crop, optimal_inputs, 1)

    gains = compute_competence_gains(crop, result, 1)

    assert gains == CompetenceGain(water=16, npk=20, soil=16, rotation=10, nasa=15)


def test_hard_level_gains(crop: CropProfile) -> None:
    gains = compute_competence_gains(crop, _result(100, level=3), 3)

    assert gains.water == 12
    assert gains.npk == 16
    assert gains.soil == 12
    assert gains.rotation == 13
    assert gains.nasa == 18


@pytest.mark.parametrize("unknown", [0, 4, 99])
def test_unknown_level_earns_easy_level_gains_on_every_track(crop: CropProfile, unknown: int) -> None:
    result = _result(100)

    assert compute_competence_gains(crop, result, unknown) == compute_competence_gains(crop, result, 1)
    assert compute_competence_gains(crop, result, unknown).rotation == 10


def test_legume_rotation_bonus(crop: CropProfile) -> None:
    legume = crop.model_copy(update={"category": "legume"})
    assert compute_competence_gains(legume, _result(100, level=2), 2).rotation == 14


def test_poor_performance_penalties(crop: CropProfile) -> None:
    result = _result(40, water=25, ph=55, nitrogen=20, phosphorus=20, potassium=20, npk_balance=50)

    gains = compute_competence_gains(crop, result, 1)

    assert gains.water == 1
    assert gains.soil == 3
    assert gains.npk == 1
    assert gains.rotation == 3
    assert gains.nasa == 2


def test_soil_penalty_is_lighter_than_water_penalty(crop: CropProfile) -> None:
    result = _result(95, water=40, ph=40)
    gains = compute_competence_gains(crop, result, 1)

    # (5 + 0) * 2.0, then * 0.3 for water and * 0.4 for soil
    assert gains.water == 3
    assert gains.soil == 4


def test_nasa_bonus_requires_both_readings(crop: CropProfile) -> None:
    both_high = compute_competence_gains(crop, _result(60, water=85, temperature=85), 1)
    one_low = compute_competence_gains(crop, _result(60, water=85, temperature=45), 1)

    assert both_high.nasa == 8
    assert one_low.nasa == 5


def test_gains_are_integers_of_at_least_one(crop: CropProfile) -> None:
    for level in (1, 2, 3):
        for overall in range(0, 101, 5):
            for detail in (0, 15, 35, 55, 75, 95):
                result = _result(
                    overall,
                    level=level,
                    water=detail,
                    nitrogen=detail,
                    phosphorus=detail,
                    potassium=detail,
                    ph=detail,
                    temperature=detail,
                    npk_balance=detail,
                )
                gains = compute_competence_gains(crop, result, level)
                for value in gains.as_mapping().values():
                    assert isinstance(value, int)
                    assert value >= 1


def test_lookup_tables() -> None:
    assert [base_gain(level) for level in (1, 2, 3, 9)] == [5, 4, 3, 5]
    assert [score_multiplier(score) for score in (95, 90, 75, 55, 35, 10)] == [2.0, 2.0, 1.5, 1.0, 0.5, 0.2]


def test_achievement_bonus() -> None:
    assert achievement_bonus(Achievement.first_win) == {skill: 5 for skill in Skill}
    assert achievement_bonus("master_npk") == {Skill.npk: 20}
    assert achievement_bonus("three_stars_5_crops")[Skill.rotation] == 10
    assert achievement_bonus("unknown") == {}


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (95, CompetenceTier.expert),
        (70, CompetenceTier.advanced),
        (50, CompetenceTier.intermediate),
        (30, CompetenceTier.beginner),
        (29, CompetenceTier.novice),
    ],
)
def test_competence_level(score: int, tier: CompetenceTier) -> None:
    assert competence_level(score) is tier


def test_recommendations_cover_weak_skills_and_summary() -> None:
    totals = CompetenceTotals(water=10, npk=40, soil=60, rotation=80, nasa=95)

    recommendations = competence_recommendations(totals)

    assert [(item.skill, item.level) for item in recommendations] == [
        ("water", RecommendationUrgency.urgent),
        ("npk", RecommendationUrgency.important),
        ("soil", RecommendationUrgency.moderate),
        ("overall", RecommendationUrgency.info),
    ]
    assert recommendations[-1].message == (
        "Your strongest skill is nasa (95/100). Focus on improving water (10/100)."
    )


def test_recommendation_ties_pick_first_skill() -> None:
    recommendations = competence_recommendations(CompetenceTotals(water=80, npk=80, soil=80, rotation=80, nasa=80))

    assert len(recommendations) == 1
    assert "strongest skill is water" in recommendations[0].message
    assert "improving water" in recommendations[0].message
