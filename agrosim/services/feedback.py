"""Advisory generation from sub-scores below the feedback threshold."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import NamedTuple

from agrosim.models.enums import AdvisoryCategory, Factor, Impact, Priority, SubScore
from agrosim.models.tables import FEEDBACK_THRESHOLD, PRIORITY_RANK
from agrosim.schemas.crop import CropParameters, Range
from agrosim.schemas.simulation import Advisory, SimulationInput


class _Rule(NamedTuple):
	priority: Priority
	impact: Impact
	template: str


_BELOW = "below"
_ABOVE = "above"
_INSIDE = "inside"

_NUTRIENT_RULES: Mapping[str, _Rule] = {
	_BELOW: _Rule(
		Priority.high,
		Impact.severe,
		"{title} deficiency. Increase application to at least {optimal:g} {unit}.",
	),
	_ABOVE: _Rule(
		Priority.medium,
		Impact.moderate,
		"Excess {name} may cause toxicity. Reduce to around {optimal:g} {unit}.",
	),
	_INSIDE: _Rule(
		Priority.medium,
		Impact.moderate,
		"{title} could be brought closer to {optimal:g} {unit}.",
	),
}

_FACTOR_RULES: Mapping[Factor, Mapping[str, _Rule]] = {
	Factor.water: {
		_BELOW: _Rule(
			Priority.high,
			Impact.severe,
			"Water deficit detected. Increase irrigation to meet crop needs.",
		),
		_ABOVE: _Rule(
			Priority.high,
			Impact.severe,
			"Excess water causing waterlogging. Reduce irrigation or improve drainage.",
		),
		_INSIDE: _Rule(
			Priority.medium,
			Impact.moderate,
			"Water level could be optimized for better growth.",
		),
	},
	Factor.nitrogen: _NUTRIENT_RULES,
	Factor.phosphorus: _NUTRIENT_RULES,
	Factor.potassium: _NUTRIENT_RULES,
	Factor.ph: {
		_BELOW: _Rule(Priority.high, Impact.severe, "Soil is too acidic. Add lime to raise pH."),
		_ABOVE: _Rule(
			Priority.high,
			Impact.severe,
			"Soil is too alkaline. Add sulfur or organic matter to lower pH.",
		),
		_INSIDE: _Rule(
			Priority.medium,
			Impact.moderate,
			"Soil pH is drifting away from {optimal:g}. Fine-tune soil amendments.",
		),
	},
	Factor.temperature: {
		_BELOW: _Rule(
			Priority.medium,
			Impact.moderate,
			"Temperature is too low for optimal growth. Consider delaying planting.",
		),
		_ABOVE: _Rule(
			Priority.medium,
			Impact.moderate,
			"Temperature is too high. Consider shade or irrigation to cool plants.",
		),
		_INSIDE: _Rule(
			Priority.medium,
			Impact.moderate,
			"Temperature could be better matched to the crop optimum of {optimal:g} {unit}.",
		),
	},
}

_UNREADABLE_RULE = _Rule(
	Priority.high,
	Impact.severe,
	"The {label} reading is not a number. Enter a measured value to get advice.",
)

_BALANCE_ADVISORY = Advisory(
	category=AdvisoryCategory.balance,
	priority=Priority.medium,
	message="NPK nutrients are imbalanced. Adjust ratios for better nutrient uptake.",
	impact=Impact.moderate,
)

_OVERALL_TIERS: tuple[tuple[int, Advisory], ...] = (
	(
		90,
		Advisory(
			category=AdvisoryCategory.overall,
			priority=Priority.info,
			message="Excellent! All parameters are optimized for maximum yield.",
			impact=Impact.positive,
		),
	),
	(
		70,
		Advisory(
			category=AdvisoryCategory.overall,
			priority=Priority.info,
			message="Good performance. Minor adjustments could further improve yield.",
			impact=Impact.positive,
		),
	),
)

_OVERALL_FAILURE_BELOW = 50
_OVERALL_FAILURE = Advisory(
	category=AdvisoryCategory.overall,
	priority=Priority.critical,
	message="Multiple critical issues detected. Major adjustments needed.",
	impact=Impact.severe,
)


def _direction(bounds: Range, actual: float) -> str:
	if actual < bounds.min:
		return _BELOW
	if actual > bounds.max:
		return _ABOVE
	return _INSIDE


def _factor_advisory(factor: Factor, bounds: Range, actual: float) -> Advisory:
	if math.isfinite(actual):
		rule = _FACTOR_RULES[factor][_direction(bounds, actual)]
	else:
		rule = _UNREADABLE_RULE
	message = rule.template.format(
		label="pH" if factor is Factor.ph else factor.value,
		name=factor.value,
		title=factor.value.capitalize(),
		optimal=bounds.optimal,
		unit=bounds.unit,
	)
	return Advisory(
		category=AdvisoryCategory(factor.value),
		priority=rule.priority,
		# unitless ranges leave a dangling space before the full stop
		message=message.replace(" .", "."),
		impact=rule.impact,
	)


def _overall_advisory(overall_score: int) -> Advisory | None:
	for threshold, advisory in _OVERALL_TIERS:
		if overall_score >= threshold:
			return advisory
	if overall_score < _OVERALL_FAILURE_BELOW:
		return _OVERALL_FAILURE
	return None


def sort_by_priority(advisories: list[Advisory]) -> tuple[Advisory, ...]:
	"""Order by descending priority rank; ties keep generation order."""
	return tuple(sorted(advisories, key=lambda item: -PRIORITY_RANK[item.priority]))


def generate_feedback(
	sub_scores: Mapping[SubScore, float],
	inputs: SimulationInput,
	parameters: CropParameters,
	overall_score: int,
) -> tuple[Advisory, ...]:
	advisories: list[Advisory] = []

	for factor in Factor:
		if sub_scores[SubScore(factor.value)] < FEEDBACK_THRESHOLD:
			advisories.append(
				_factor_advisory(factor, parameters.range_for(factor), getattr(inputs, factor.value))
			)

	if sub_scores[SubScore.balance] < FEEDBACK_THRESHOLD:
		advisories.append(_BALANCE_ADVISORY)

	overall = _overall_advisory(overall_score)
	if overall is not None:
		advisories.append(overall)

	return sort_by_priority(advisories)
