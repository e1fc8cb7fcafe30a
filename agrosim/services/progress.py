"""Pure progress bookkeeping: stars, success streaks, level unlocks, capped totals.

The record store loads a ``ProgressSnapshot``, passes it through these
functions and persists whatever comes back; nothing here mutates its input.
"""

from __future__ import annotations

from collections.abc import Mapping

from agrosim.config import get_settings
from agrosim.models.enums import Achievement, Level, Skill
from agrosim.models.tables import MAX_LEVEL, STAR_TIERS, STREAK_CAP, STREAK_THRESHOLD, first_tier
from agrosim.schemas.competence import CompetenceGain, CompetenceTotals
from agrosim.schemas.progress import ProgressSnapshot
from agrosim.services.competence import achievement_bonus


def _cap(cap: int | None) -> int:
	return get_settings().competence_cap if cap is None else cap


def add_competences(
	totals: CompetenceTotals,
	gains: CompetenceGain | Mapping[Skill, int],
	cap: int | None = None,
) -> CompetenceTotals:
	"""Add gains skill by skill, never exceeding ``cap``."""
	ceiling = _cap(cap)
	deltas = gains.as_mapping() if isinstance(gains, CompetenceGain) else gains
	current = totals.as_mapping()
	updated = {
		skill.value: min(current[skill] + deltas.get(skill, 0), ceiling)
		for skill in Skill
	}
	return CompetenceTotals(**updated)


def stars_for_score(score: int) -> int:
	return first_tier(score, STAR_TIERS, 0)


def apply_game_result(
	snapshot: ProgressSnapshot,
	score: int,
	gains: CompetenceGain | Mapping[Skill, int] | None = None,
	cap: int | None = None,
) -> ProgressSnapshot:
	if score >= STREAK_THRESHOLD:
		streak = min(snapshot.consecutive_success + 1, STREAK_CAP)
	else:
		streak = 0

	competences = snapshot.competences
	if gains is not None:
		competences = add_competences(competences, gains, cap)

	return snapshot.model_copy(
		update={
			"total_games_played": snapshot.total_games_played + 1,
			"best_score": max(snapshot.best_score, score),
			"stars": max(snapshot.stars, stars_for_score(score)),
			"consecutive_success": streak,
			"competences": competences,
		}
	)


def unlock_next_level(snapshot: ProgressSnapshot) -> tuple[ProgressSnapshot, bool]:
	"""Promote to the next level after ``STREAK_CAP`` consecutive successes."""
	if snapshot.level < MAX_LEVEL and snapshot.consecutive_success >= STREAK_CAP:
		promoted = snapshot.model_copy(
			update={"level": Level(snapshot.level + 1), "consecutive_success": 0}
		)
		return promoted, True
	return snapshot, False


def apply_achievement(
	totals: CompetenceTotals,
	kind: Achievement | str,
	cap: int | None = None,
) -> CompetenceTotals:
	return add_competences(totals, achievement_bonus(kind), cap)
