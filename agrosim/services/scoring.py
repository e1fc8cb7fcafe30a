"""Per-factor and NPK-balance scoring curves.

Each factor is scored by the curve of its ``ScoringFamily``; the family is
looked up in ``FACTOR_FAMILY`` and the curve in ``FAMILY_CURVES``. Outside the
optimal range every curve decays linearly towards 0; inside it, scores never
drop below the curve's ``inside_floor``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from agrosim.errors import ConfigurationError
from agrosim.models.enums import Factor, ScoringFamily, Status
from agrosim.models.tables import FACTOR_FAMILY, NPK_FACTORS, STATUS_TIERS, first_tier
from agrosim.schemas.crop import Range
from agrosim.schemas.simulation import ParameterDetail

BALANCE_FLOOR = 0.5
BALANCE_PENALTY = 0.5


def round_half_up(value: float) -> int:
	"""Round to the nearest integer, ties away from zero for non-negative input."""
	return math.floor(value + 0.5)


@dataclass(frozen=True, kw_only=True)
class ScoringCurve:
	inside_floor: float
	inside_penalty: float

	def score(self, bounds: Range, actual: float) -> float:
		if actual < bounds.min:
			return max(0.0, self._below(bounds, bounds.min - actual))
		if actual > bounds.max:
			return max(0.0, self._above(bounds, actual - bounds.max))
		width = self._inside_width(bounds)
		if width <= 0:
			# min == optimal == max, so actual sits exactly on the optimum
			return 1.0
		distance = abs(actual - bounds.optimal)
		return max(self.inside_floor, 1 - distance / width * self.inside_penalty)

	def _inside_width(self, bounds: Range) -> float:
		return bounds.span

	def _below(self, bounds: Range, deficit: float) -> float:
		raise NotImplementedError

	def _above(self, bounds: Range, excess: float) -> float:
		raise NotImplementedError


@dataclass(frozen=True, kw_only=True)
class RelativeCurve(ScoringCurve):
	"""Overshoot measured relative to the violated bound (water, N, P, K)."""

	below_penalty: float
	above_penalty: float

	def _below(self, bounds: Range, deficit: float) -> float:
		if bounds.min <= 0:
			return 0.0
		return 1 - deficit / bounds.min * self.below_penalty

	def _above(self, bounds: Range, excess: float) -> float:
		if bounds.max <= 0:
			return 0.0
		return 1 - excess / bounds.max * self.above_penalty


@dataclass(frozen=True, kw_only=True)
class AbsoluteCurve(ScoringCurve):
	"""Raw, unnormalized overshoot (pH). Inside, distance is measured on the half-range."""

	outside_penalty: float

	def _inside_width(self, bounds: Range) -> float:
		return bounds.span / 2

	def _below(self, bounds: Range, deficit: float) -> float:
		return 1 - deficit * self.outside_penalty

	def _above(self, bounds: Range, excess: float) -> float:
		return 1 - excess * self.outside_penalty


@dataclass(frozen=True, kw_only=True)
class FixedScaleCurve(ScoringCurve):
	"""Overshoot divided by a constant scale (temperature, in 10-degree steps)."""

	scale: float
	outside_penalty: float

	def _below(self, bounds: Range, deficit: float) -> float:
		return 1 - deficit / self.scale * self.outside_penalty

	def _above(self, bounds: Range, excess: float) -> float:
		return 1 - excess / self.scale * self.outside_penalty


FAMILY_CURVES: Mapping[ScoringFamily, ScoringCurve] = MappingProxyType(
	{
		ScoringFamily.water: RelativeCurve(
			below_penalty=1.5, above_penalty=1.2, inside_floor=0.7, inside_penalty=0.5
		),
		ScoringFamily.npk: RelativeCurve(
			below_penalty=1.3, above_penalty=1.1, inside_floor=0.7, inside_penalty=0.4
		),
		ScoringFamily.ph: AbsoluteCurve(outside_penalty=0.3, inside_floor=0.6, inside_penalty=0.5),
		ScoringFamily.temperature: FixedScaleCurve(
			scale=10, outside_penalty=0.8, inside_floor=0.7, inside_penalty=0.4
		),
	}
)


def score_parameter(family: ScoringFamily, bounds: Range, actual: float) -> float:
	"""Score ``actual`` against ``bounds`` with the curve of ``family``; result in [0, 1].

	Non-finite input (or a NaN produced along the way) scores 0.
	"""
	if not math.isfinite(actual):
		return 0.0
	value = FAMILY_CURVES[ScoringFamily(family)].score(bounds, actual)
	if math.isnan(value):
		return 0.0
	return min(1.0, max(0.0, value))


def score_factor(factor: Factor, bounds: Range, actual: float) -> float:
	return score_parameter(FACTOR_FAMILY[Factor(factor)], bounds, actual)


def score_npk_balance(actual: Mapping[Factor, float], optimal: Mapping[Factor, float]) -> float:
	"""Score how closely the N/P/K proportions follow the crop's optimal values.

	Returns a value in [0.5, 1]; 0 when any applied amount is non-finite.
	Raises ConfigurationError when an optimal value cannot be used as a divisor.
	"""
	deviations: list[float] = []
	for nutrient in NPK_FACTORS:
		target = optimal[nutrient]
		if not math.isfinite(target) or target <= 0:
			raise ConfigurationError(
				f"optimal {nutrient.value} must be a positive number to score NPK balance (got {target})"
			)
		applied = actual[nutrient]
		if not math.isfinite(applied):
			return 0.0
		deviations.append(abs(applied - target) / target)

	mean_deviation = sum(deviations) / len(deviations)
	return max(BALANCE_FLOOR, 1 - mean_deviation * BALANCE_PENALTY)


def get_status(score: float) -> Status:
	if math.isnan(score):
		return Status.critical
	return first_tier(score, STATUS_TIERS, Status.critical)


def to_detail(score: float) -> ParameterDetail:
	"""Convert a [0, 1] sub-score into the 0-100 detail record."""
	if math.isnan(score):
		score = 0.0
	return ParameterDetail(score=round_half_up(score * 100), status=get_status(score))
