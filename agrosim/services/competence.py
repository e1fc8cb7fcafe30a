"""Skill-progression deltas derived from a simulation result.

Five independent tracks (water, npk, soil, rotation, nasa). Each gain starts
from the level's base gain, adds performance bonuses, is scaled by the
overall-score multiplier, and is floored at 1 point. Accumulating gains into
capped totals is handled in ``agrosim.services.progress``.
"""

from __future__ import annotations

from collections.abc import Mapping

from agrosim.logging import get_logger
from agrosim.models.enums import (
	Achievement,
	CompetenceTier,
	Level,
	RecommendationUrgency,
	Skill,
)
from agrosim.models.tables import (
	ACHIEVEMENT_BONUSES,
	BALANCE_BONUS_TIERS,
	BASE_GAINS,
	CATEGORY_ROTATION_BONUS,
	COMPETENCE_TIERS,
	DETAIL_BONUS_TIERS,
	NASA_BASE_FACTOR,
	NASA_BONUS_TIERS,
	NASA_LEVEL_MULTIPLIER,
	NPK_PENALTY,
	NPK_PENALTY_BELOW,
	PENALIZED_STATUSES,
	ROTATION_BASE_FACTOR,
	SCORE_MULTIPLIER_FLOOR,
	SCORE_MULTIPLIER_TIERS,
	SOIL_PENALTY,
	WATER_PENALTY,
	first_tier,
)
from agrosim.schemas.competence import CompetenceGain, CompetenceRecommendation, CompetenceTotals
from agrosim.schemas.crop import CropProfile
from agrosim.schemas.simulation import ParameterDetail, SimulationDetails, SimulationResult
from agrosim.services.scoring import round_half_up
from agrosim.services.weights import resolve_level


def base_gain(level: int) -> int:
	return BASE_GAINS[resolve_level(level)]


def score_multiplier(overall_score: float) -> float:
	return first_tier(overall_score, SCORE_MULTIPLIER_TIERS, SCORE_MULTIPLIER_FLOOR)


def _finalize(gain: float) -> int:
	return round_half_up(max(1.0, gain))


def _detail_gain(detail: ParameterDetail, base: int, multiplier: float, penalty: float) -> int:
	gain = base + first_tier(detail.score, DETAIL_BONUS_TIERS, 0)
	gain *= multiplier
	if detail.status in PENALIZED_STATUSES:
		gain *= penalty
	return _finalize(gain)


def water_gain(details: SimulationDetails, base: int, multiplier: float) -> int:
	return _detail_gain(details.water, base, multiplier, WATER_PENALTY)


def soil_gain(details: SimulationDetails, base: int, multiplier: float) -> int:
	return _detail_gain(details.ph, base, multiplier, SOIL_PENALTY)


def npk_gain(details: SimulationDetails, base: int, multiplier: float) -> int:
	avg_score = (details.nitrogen.score + details.phosphorus.score + details.potassium.score) / 3

	gain = base + first_tier(avg_score, DETAIL_BONUS_TIERS, 0)
	gain += first_tier(details.npk_balance.score, BALANCE_BONUS_TIERS, 0)
	gain *= multiplier
	if avg_score < NPK_PENALTY_BELOW:
		gain *= NPK_PENALTY
	return _finalize(gain)


def rotation_gain(crop: CropProfile, level: Level, base: int, multiplier: float) -> int:
	# level stands in for the player's crop history
	gain = base * ROTATION_BASE_FACTOR
	if level >= Level.medium:
		gain += 2
	if level == Level.hard:
		gain += 1
	gain += CATEGORY_ROTATION_BONUS.get(crop.category, 0)
	gain *= multiplier
	return _finalize(gain)


def nasa_gain(details: SimulationDetails, level: Level, base: int, multiplier: float) -> int:
	gain = base * NASA_BASE_FACTOR
	# both readings must clear the same tier
	gain += first_tier(min(details.temperature.score, details.water.score), NASA_BONUS_TIERS, 0)
	gain *= NASA_LEVEL_MULTIPLIER.get(level, 1.0)
	gain *= multiplier
	return _finalize(gain)


def compute_competence_gains(crop: CropProfile, result: SimulationResult, level: int) -> CompetenceGain:
	"""Convert a simulation result into per-skill gains (each an int >= 1).

	Unknown levels count as the easiest tier for every track.
	"""
	tier = resolve_level(level)
	base = base_gain(tier)
	multiplier = score_multiplier(result.score)
	details = result.details

	gains = CompetenceGain(
		water=water_gain(details, base, multiplier),
		npk=npk_gain(details, base, multiplier),
		soil=soil_gain(details, base, multiplier),
		rotation=rotation_gain(crop, tier, base, multiplier),
		nasa=nasa_gain(details, tier, base, multiplier),
	)
	get_logger("competence").debug(
		"competence_gains_computed",
		crop=crop.name,
		level=int(tier),
		score=result.score,
		**gains.model_dump(),
	)
	return gains


def achievement_bonus(kind: Achievement | str) -> dict[Skill, int]:
	"""Flat skill bonus awarded for an achievement; empty for unknown kinds."""
	try:
		bonus = ACHIEVEMENT_BONUSES[Achievement(kind)]
	except ValueError:
		return {}
	return dict(bonus)


def competence_level(score: float) -> CompetenceTier:
	return first_tier(score, COMPETENCE_TIERS, CompetenceTier.novice)


def _skill_recommendation(skill: Skill, score: int) -> CompetenceRecommendation | None:
	if score < 30:
		return CompetenceRecommendation(
			skill=skill.value,
			level=RecommendationUrgency.urgent,
			message=f"Focus on improving {skill.value} competence - currently at novice level.",
			suggested_action="Review basic concepts and practice more games.",
		)
	if score < 50:
		return CompetenceRecommendation(
			skill=skill.value,
			level=RecommendationUrgency.important,
			message=f"Continue developing {skill.value} competence to reach intermediate level.",
			suggested_action="Try higher difficulty levels and study knowledge cards.",
		)
	if score < 70:
		return CompetenceRecommendation(
			skill=skill.value,
			level=RecommendationUrgency.moderate,
			message=f"Good progress in {skill.value}! Keep practicing to reach advanced level.",
			suggested_action="Challenge yourself with expert-level content.",
		)
	return None


def competence_recommendations(
	totals: CompetenceTotals | Mapping[Skill, int],
) -> tuple[CompetenceRecommendation, ...]:
	"""Study advice per weak skill, followed by a strongest/weakest summary."""
	scores = totals.as_mapping() if isinstance(totals, CompetenceTotals) else {
		Skill(skill): value for skill, value in totals.items()
	}
	if not scores:
		return ()

	recommendations: list[CompetenceRecommendation] = []
	for skill, score in scores.items():
		item = _skill_recommendation(skill, score)
		if item is not None:
			recommendations.append(item)

	ordered = list(scores.items())
	strongest = max(ordered, key=lambda entry: entry[1])
	weakest = min(ordered, key=lambda entry: entry[1])
	recommendations.append(
		CompetenceRecommendation(
			skill="overall",
			level=RecommendationUrgency.info,
			message=(
				f"Your strongest skill is {strongest[0].value} ({strongest[1]}/100). "
				f"Focus on improving {weakest[0].value} ({weakest[1]}/100)."
			),
			suggested_action="Balanced competence development leads to better overall performance.",
		)
	)
	return tuple(recommendations)
