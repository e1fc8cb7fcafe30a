"""Quick per-parameter check shown to the player before a simulation runs."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from agrosim.models.enums import CheckStatus, Factor, Priority
from agrosim.models.tables import PRIORITY_RANK
from agrosim.schemas.crop import CropProfile, Range
from agrosim.schemas.progress import ParameterCheck, Recommendation, ValidationReport
from agrosim.schemas.simulation import SimulationInput
from agrosim.services.scoring import round_half_up
from agrosim.services.simulation_engine import coerce_crop, coerce_inputs

TOLERANCE_FRACTION = 0.1
RECOMMEND_BELOW = 90

_LABELS: Mapping[Factor, str] = {
	Factor.water: "Water",
	Factor.nitrogen: "Nitrogen",
	Factor.phosphorus: "Phosphorus",
	Factor.potassium: "Potassium",
	Factor.ph: "pH",
	Factor.temperature: "Temperature",
}


def _ratio_penalty(overshoot: float, bound: float) -> float:
	if bound <= 0:
		return 0.0
	return max(0.0, 100 - overshoot / bound * 100)


def check_parameter(factor: Factor, bounds: Range, actual: float) -> ParameterCheck:
	label = _LABELS[factor]
	distance = abs(actual - bounds.optimal)
	span = bounds.span

	score = 100.0
	status = CheckStatus.optimal
	message = f"{label} is optimal"

	if not math.isfinite(actual):
		score = 0.0
		status = CheckStatus.too_low if actual < 0 else CheckStatus.too_high
		message = f"{label} is not a usable value"
	elif actual < bounds.min:
		score = _ratio_penalty(bounds.min - actual, bounds.min)
		status = CheckStatus.too_low
		message = f"{label} is too low"
	elif actual > bounds.max:
		score = _ratio_penalty(actual - bounds.max, bounds.max)
		status = CheckStatus.too_high
		message = f"{label} is too high"
	elif distance > span * TOLERANCE_FRACTION:
		score = max(70.0, 100 - distance / span * 100)
		if actual < bounds.optimal:
			status = CheckStatus.below_optimal
			message = f"{label} is slightly low"
		else:
			status = CheckStatus.above_optimal
			message = f"{label} is slightly high"

	return ParameterCheck(
		parameter=label,
		actual=actual,
		optimal=bounds.optimal,
		min=bounds.min,
		max=bounds.max,
		score=round_half_up(score),
		status=status,
		message=message,
	)


def _recommend(check: ParameterCheck) -> Recommendation:
	name = check.parameter if check.parameter == "pH" else check.parameter.lower()
	if check.status == CheckStatus.too_low:
		text = f"Increase {name} to at least {check.optimal:g}"
	elif check.status == CheckStatus.too_high:
		text = f"Decrease {name} to around {check.optimal:g}"
	else:
		text = f"Adjust {name} closer to {check.optimal:g} for better results"

	if check.score < 50:
		priority = Priority.high
	elif check.score < 70:
		priority = Priority.medium
	else:
		priority = Priority.low
	return Recommendation(parameter=check.parameter, priority=priority, recommendation=text)


def validate_parameters(
	crop: CropProfile | Mapping[str, Any],
	inputs: SimulationInput | Mapping[str, Any],
) -> ValidationReport:
	profile = coerce_crop(crop)
	choices = coerce_inputs(inputs)

	checks = {
		factor.value: check_parameter(factor, profile.parameters.range_for(factor), getattr(choices, factor.value))
		for factor in Factor
	}
	overall = round_half_up(sum(check.score for check in checks.values()) / len(checks))

	recommendations = [_recommend(check) for check in checks.values() if check.score < RECOMMEND_BELOW]
	recommendations.sort(key=lambda item: -PRIORITY_RANK[item.priority])

	return ValidationReport(
		checks=checks,
		overall_score=overall,
		recommendations=tuple(recommendations),
	)
