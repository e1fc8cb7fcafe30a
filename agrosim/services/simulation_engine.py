"""Simulation entry point: cultivation choices -> score, yield and feedback."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from agrosim.errors import AgroSimError, DomainError
from agrosim.logging import get_logger, simulation_context
from agrosim.models.enums import Factor, Level, SubScore
from agrosim.models.tables import NPK_FACTORS
from agrosim.schemas.crop import CropProfile
from agrosim.schemas.simulation import SimulationDetails, SimulationInput, SimulationResult
from agrosim.services.feedback import generate_feedback
from agrosim.services.scoring import score_factor, score_npk_balance, to_detail
from agrosim.services.weights import aggregate, weights_for_level
from agrosim.services.yield_projection import project_yield


def coerce_crop(crop: CropProfile | Mapping[str, Any]) -> CropProfile:
	if isinstance(crop, CropProfile):
		return crop
	try:
		return CropProfile.model_validate(crop)
	except ValidationError as exc:
		raise DomainError(f"invalid crop profile: {exc}") from exc


def coerce_inputs(inputs: SimulationInput | Mapping[str, Any]) -> SimulationInput:
	if isinstance(inputs, SimulationInput):
		return inputs
	try:
		return SimulationInput.model_validate(inputs)
	except ValidationError as exc:
		raise DomainError(f"invalid simulation input: {exc}") from exc


def coerce_level(level: int | None, default: Level) -> Level:
	if level is None:
		return default
	try:
		return Level(level)
	except ValueError as exc:
		raise DomainError(f"level must be one of 1, 2, 3 (got {level!r})") from exc


def score_inputs(crop: CropProfile, inputs: SimulationInput) -> dict[SubScore, float]:
	"""Compute the seven [0, 1] sub-scores for one set of inputs."""
	sub_scores: dict[SubScore, float] = {}
	for factor in Factor:
		sub_scores[SubScore(factor.value)] = score_factor(
			factor, crop.parameters.range_for(factor), getattr(inputs, factor.value)
		)

	sub_scores[SubScore.balance] = score_npk_balance(
		{nutrient: getattr(inputs, nutrient.value) for nutrient in NPK_FACTORS},
		{nutrient: crop.parameters.range_for(nutrient).optimal for nutrient in NPK_FACTORS},
	)
	return sub_scores


def _crop_label(crop: Any) -> Any:
	if isinstance(crop, Mapping):
		return crop.get("name")
	return getattr(crop, "name", None)


def simulate(
	crop: CropProfile | Mapping[str, Any],
	inputs: SimulationInput | Mapping[str, Any],
	level: int | None = None,
) -> SimulationResult:
	"""Run one growth simulation.

	``level`` overrides ``inputs.level`` when given. Raises DomainError for an
	invalid crop, inputs that cannot be parsed, or a level outside 1-3, and
	ConfigurationError for crop data that cannot be scored.
	"""
	logger = get_logger("engine")
	start = time.perf_counter()

	with simulation_context(crop=_crop_label(crop)):
		try:
			profile = coerce_crop(crop)
			choices = coerce_inputs(inputs)
			effective_level = coerce_level(level, choices.level)

			sub_scores = score_inputs(profile, choices)
			overall, success = aggregate(sub_scores, weights_for_level(effective_level))
		except AgroSimError as exc:
			logger.error("simulation_failed", error=str(exc))
			raise

		result = SimulationResult(
			score=overall,
			yield_=project_yield(profile.yields, overall),
			success=success,
			details=SimulationDetails(
				water=to_detail(sub_scores[SubScore.water]),
				nitrogen=to_detail(sub_scores[SubScore.nitrogen]),
				phosphorus=to_detail(sub_scores[SubScore.phosphorus]),
				potassium=to_detail(sub_scores[SubScore.potassium]),
				ph=to_detail(sub_scores[SubScore.ph]),
				temperature=to_detail(sub_scores[SubScore.temperature]),
				npk_balance=to_detail(sub_scores[SubScore.balance]),
			),
			feedback=generate_feedback(sub_scores, choices, profile.parameters, overall),
			level=effective_level,
		)

		logger.debug(
			"simulation_completed",
			level=int(effective_level),
			score=overall,
			success=success,
			duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
		)
	return result
