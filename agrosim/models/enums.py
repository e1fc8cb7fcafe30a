"""Vocabulary enums shared by schemas, tables and services.

String values are the wire values callers serialize to JSON, so they keep the
French spelling of the game data (``cereale``, ``oleagineux`` ...).
"""

from enum import IntEnum, StrEnum

# ── Agronomic factors ───────────────────────────────────────────────────────


class Factor(StrEnum):
    """Cultivation parameters chosen by the player."""

    water = "water"
    nitrogen = "nitrogen"
    phosphorus = "phosphorus"
    potassium = "potassium"
    ph = "ph"
    temperature = "temperature"


class SubScore(StrEnum):
    """The seven weighted components of the overall score."""

    water = "water"
    nitrogen = "nitrogen"
    phosphorus = "phosphorus"
    potassium = "potassium"
    ph = "ph"
    temperature = "temperature"
    balance = "balance"


class ScoringFamily(StrEnum):
    """Curve shape used to score a factor against its optimal range."""

    water = "water"
    npk = "npk"
    ph = "ph"
    temperature = "temperature"


class Level(IntEnum):
    """Difficulty tier."""

    easy = 1
    medium = 2
    hard = 3


# ── Crop reference ──────────────────────────────────────────────────────────


class CropCategory(StrEnum):
    cereale = "cereale"
    legume = "legume"
    tubercule = "tubercule"
    oleagineux = "oleagineux"
    fruit = "fruit"


class CropDifficulty(StrEnum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


# ── Simulation output ───────────────────────────────────────────────────────


class Status(StrEnum):
    """Label attached to a [0, 1] sub-score."""

    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"
    critical = "critical"


class Priority(StrEnum):
    critical = "critical"
    high = "high"
    medium = "medium"
    low = "low"
    info = "info"


class Impact(StrEnum):
    severe = "severe"
    moderate = "moderate"
    positive = "positive"


class AdvisoryCategory(StrEnum):
    water = "water"
    nitrogen = "nitrogen"
    phosphorus = "phosphorus"
    potassium = "potassium"
    ph = "ph"
    temperature = "temperature"
    balance = "balance"
    overall = "overall"


# ── Competences ─────────────────────────────────────────────────────────────


class Skill(StrEnum):
    """Persistent player skill tracks."""

    water = "water"
    npk = "npk"
    soil = "soil"
    rotation = "rotation"
    nasa = "nasa"


class CompetenceTier(StrEnum):
    expert = "expert"
    advanced = "advanced"
    intermediate = "intermediate"
    beginner = "beginner"
    novice = "novice"


class RecommendationUrgency(StrEnum):
    urgent = "urgent"
    important = "important"
    moderate = "moderate"
    info = "info"


class Achievement(StrEnum):
    first_win = "first_win"
    perfect_score = "perfect_score"
    master_water = "master_water"
    master_npk = "master_npk"
    master_soil = "master_soil"
    master_rotation = "master_rotation"
    master_nasa = "master_nasa"
    three_stars_5_crops = "three_stars_5_crops"
    win_streak_5 = "win_streak_5"
    win_streak_10 = "win_streak_10"


# ── Parameter validation ────────────────────────────────────────────────────


class CheckStatus(StrEnum):
    """Position of a value relative to its optimal range."""

    optimal = "optimal"
    too_low = "too_low"
    too_high = "too_high"
    below_optimal = "below_optimal"
    above_optimal = "above_optimal"
