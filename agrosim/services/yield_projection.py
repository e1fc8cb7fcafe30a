"""Overall score to harvest yield, interpolated between the crop's yield anchors.

Anchor points: score 0 -> 0, 50 -> min, 70 -> avg, 90 and above -> max.
The 50-70 band runs linearly from min to avg rather than scaling avg by
score / 70, so the curve meets both anchors.
"""

from __future__ import annotations

from agrosim.schemas.crop import YieldAnchors
from agrosim.schemas.simulation import YieldProjection
from agrosim.services.scoring import round_half_up

MAX_YIELD_SCORE = 90
AVG_YIELD_SCORE = 70
MIN_YIELD_SCORE = 50


def yield_value(anchors: YieldAnchors, score: float) -> float:
	if score >= MAX_YIELD_SCORE:
		return anchors.max
	if score >= AVG_YIELD_SCORE:
		return anchors.avg + (score - AVG_YIELD_SCORE) / 20 * (anchors.max - anchors.avg)
	if score >= MIN_YIELD_SCORE:
		return anchors.avg - (AVG_YIELD_SCORE - score) / 20 * (anchors.avg - anchors.min)
	return anchors.min * (max(0.0, score) / MIN_YIELD_SCORE)


def project_yield(anchors: YieldAnchors, score: float) -> YieldProjection:
	value = round(yield_value(anchors, score), 2)
	return YieldProjection(
		value=value,
		unit=anchors.unit,
		percentage=round_half_up(value / anchors.max * 100),
		optimal=anchors.max,
	)
