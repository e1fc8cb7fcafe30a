"""Level weight profiles and overall-score aggregation."""

from __future__ import annotations

from collections.abc import Mapping

from agrosim.models.enums import Level, SubScore
from agrosim.models.tables import DEFAULT_LEVEL, SUCCESS_THRESHOLD, WEIGHT_PROFILES
from agrosim.services.scoring import round_half_up


def resolve_level(level: int | None) -> Level:
	"""Map a raw level to a known ``Level``, falling back to the easiest tier."""
	try:
		return Level(level)
	except ValueError:
		return DEFAULT_LEVEL


def weights_for_level(level: int | None) -> Mapping[SubScore, float]:
	return WEIGHT_PROFILES[resolve_level(level)]


def aggregate(sub_scores: Mapping[SubScore, float], weights: Mapping[SubScore, float]) -> tuple[int, bool]:
	"""Combine weighted sub-scores into ``(overall 0-100, success)``."""
	weighted = sum(weights[name] * sub_scores[name] for name in SubScore)
	overall = min(100, max(0, round_half_up(weighted * 100)))
	return overall, overall >= SUCCESS_THRESHOLD
