"""Constant lookup tables for scoring, yield and competence progression.

Every mapping is wrapped in ``MappingProxyType`` so the tables are read-only
after import. Threshold tables are ordered highest-first and read with
``first_tier``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar

from agrosim.models.enums import (
    Achievement,
    CompetenceTier,
    CropCategory,
    Factor,
    Level,
    Priority,
    ScoringFamily,
    Skill,
    Status,
    SubScore,
)

T = TypeVar("T")


def first_tier(value: float, tiers: tuple[tuple[float, T], ...], default: T) -> T:
    """Return the payload of the first ``(threshold, payload)`` with ``value >= threshold``."""
    for threshold, payload in tiers:
        if value >= threshold:
            return payload
    return default


# ── Factor classification ───────────────────────────────────────────────────

FACTOR_FAMILY: Mapping[Factor, ScoringFamily] = MappingProxyType(
    {
        Factor.water: ScoringFamily.water,
        Factor.nitrogen: ScoringFamily.npk,
        Factor.phosphorus: ScoringFamily.npk,
        Factor.potassium: ScoringFamily.npk,
        Factor.ph: ScoringFamily.ph,
        Factor.temperature: ScoringFamily.temperature,
    }
)

NPK_FACTORS: tuple[Factor, ...] = (Factor.nitrogen, Factor.phosphorus, Factor.potassium)

# ── Status labels ───────────────────────────────────────────────────────────

STATUS_TIERS: tuple[tuple[float, Status], ...] = (
    (0.9, Status.excellent),
    (0.7, Status.good),
    (0.5, Status.fair),
    (0.3, Status.poor),
)

# ── Weight profiles ─────────────────────────────────────────────────────────

DEFAULT_LEVEL = Level.easy

WEIGHT_PROFILES: Mapping[Level, Mapping[SubScore, float]] = MappingProxyType(
    {
        Level.easy: MappingProxyType(
            {
                SubScore.water: 0.25,
                SubScore.nitrogen: 0.15,
                SubScore.phosphorus: 0.10,
                SubScore.potassium: 0.10,
                SubScore.ph: 0.15,
                SubScore.temperature: 0.15,
                SubScore.balance: 0.10,
            }
        ),
        Level.medium: MappingProxyType(
            {
                SubScore.water: 0.20,
                SubScore.nitrogen: 0.15,
                SubScore.phosphorus: 0.12,
                SubScore.potassium: 0.12,
                SubScore.ph: 0.13,
                SubScore.temperature: 0.13,
                SubScore.balance: 0.15,
            }
        ),
        Level.hard: MappingProxyType(
            {
                SubScore.water: 0.18,
                SubScore.nitrogen: 0.15,
                SubScore.phosphorus: 0.13,
                SubScore.potassium: 0.13,
                SubScore.ph: 0.13,
                SubScore.temperature: 0.13,
                SubScore.balance: 0.15,
            }
        ),
    }
)

SUCCESS_THRESHOLD = 50

# ── Feedback ────────────────────────────────────────────────────────────────

FEEDBACK_THRESHOLD = 0.7

PRIORITY_RANK: Mapping[Priority, int] = MappingProxyType(
    {
        Priority.critical: 4,
        Priority.high: 3,
        Priority.medium: 2,
        Priority.low: 1,
        Priority.info: 0,
    }
)

# ── Competence gains ────────────────────────────────────────────────────────

BASE_GAINS: Mapping[Level, int] = MappingProxyType(
    {
        Level.easy: 5,
        Level.medium: 4,
        Level.hard: 3,
    }
)

SCORE_MULTIPLIER_TIERS: tuple[tuple[float, float], ...] = (
    (90, 2.0),
    (70, 1.5),
    (50, 1.0),
    (30, 0.5),
)
SCORE_MULTIPLIER_FLOOR = 0.2

DETAIL_BONUS_TIERS: tuple[tuple[float, int], ...] = ((90, 3), (70, 2), (50, 1))
BALANCE_BONUS_TIERS: tuple[tuple[float, int], ...] = ((80, 2), (60, 1))
NASA_BONUS_TIERS: tuple[tuple[float, int], ...] = ((80, 4), (60, 2), (40, 1))

WATER_PENALTY = 0.3
NPK_PENALTY = 0.3
NPK_PENALTY_BELOW = 30
SOIL_PENALTY = 0.4
PENALIZED_STATUSES: frozenset[Status] = frozenset({Status.critical, Status.poor})

ROTATION_BASE_FACTOR = 0.8
NASA_BASE_FACTOR = 0.7

CATEGORY_ROTATION_BONUS: Mapping[CropCategory, int] = MappingProxyType(
    {
        CropCategory.cereale: 1,
        CropCategory.legume: 2,
        CropCategory.tubercule: 1,
        CropCategory.oleagineux: 1,
        CropCategory.fruit: 1,
    }
)

NASA_LEVEL_MULTIPLIER: Mapping[Level, float] = MappingProxyType(
    {
        Level.medium: 1.2,
        Level.hard: 1.5,
    }
)

_ALL_SKILLS = tuple(Skill)


def _uniform(points: int) -> Mapping[Skill, int]:
    return MappingProxyType({skill: points for skill in _ALL_SKILLS})


ACHIEVEMENT_BONUSES: Mapping[Achievement, Mapping[Skill, int]] = MappingProxyType(
    {
        Achievement.first_win: _uniform(5),
        Achievement.perfect_score: _uniform(10),
        Achievement.master_water: MappingProxyType({Skill.water: 20}),
        Achievement.master_npk: MappingProxyType({Skill.npk: 20}),
        Achievement.master_soil: MappingProxyType({Skill.soil: 20}),
        Achievement.master_rotation: MappingProxyType({Skill.rotation: 20}),
        Achievement.master_nasa: MappingProxyType({Skill.nasa: 20}),
        Achievement.three_stars_5_crops: MappingProxyType(
            {
                Skill.water: 5,
                Skill.npk: 5,
                Skill.soil: 5,
                Skill.rotation: 10,
                Skill.nasa: 5,
            }
        ),
        Achievement.win_streak_5: _uniform(3),
        Achievement.win_streak_10: _uniform(5),
    }
)

COMPETENCE_TIERS: tuple[tuple[float, CompetenceTier], ...] = (
    (90, CompetenceTier.expert),
    (70, CompetenceTier.advanced),
    (50, CompetenceTier.intermediate),
    (30, CompetenceTier.beginner),
)

# ── Progress ────────────────────────────────────────────────────────────────

STAR_TIERS: tuple[tuple[float, int], ...] = ((90, 3), (70, 2), (50, 1))
STREAK_THRESHOLD = 70
STREAK_CAP = 3
MAX_LEVEL = Level.hard
