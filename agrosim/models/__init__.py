"""Enum and constant-table registry.

Application code can do::

    from agrosim.models import Factor, Level, WEIGHT_PROFILES, ...
"""

# ── Enums ───────────────────────────────────────────────────────────────────
from agrosim.models.enums import (
    Achievement,
    AdvisoryCategory,
    CheckStatus,
    CompetenceTier,
    CropCategory,
    CropDifficulty,
    Factor,
    Impact,
    Level,
    Priority,
    RecommendationUrgency,
    ScoringFamily,
    Skill,
    Status,
    SubScore,
)

# ── Constant tables ─────────────────────────────────────────────────────────
from agrosim.models.tables import (
    ACHIEVEMENT_BONUSES,
    BASE_GAINS,
    CATEGORY_ROTATION_BONUS,
    FACTOR_FAMILY,
    PRIORITY_RANK,
    WEIGHT_PROFILES,
)

__all__ = [
    # Tables
    "ACHIEVEMENT_BONUSES",
    "BASE_GAINS",
    "CATEGORY_ROTATION_BONUS",
    "FACTOR_FAMILY",
    "PRIORITY_RANK",
    "WEIGHT_PROFILES",
    # Enums
    "Achievement",
    "AdvisoryCategory",
    "CheckStatus",
    "CompetenceTier",
    "CropCategory",
    "CropDifficulty",
    "Factor",
    "Impact",
    "Level",
    "Priority",
    "RecommendationUrgency",
    "ScoringFamily",
    "Skill",
    "Status",
    "SubScore",
]
