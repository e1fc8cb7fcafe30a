"""Pydantic schemas for per-crop progress snapshots and parameter checks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agrosim.models.enums import CheckStatus, Level, Priority
from agrosim.schemas.competence import CompetenceTotals


class ProgressSnapshot(BaseModel):
	"""One player's standing on one crop, as handed over by the record store."""

	model_config = ConfigDict(frozen=True, populate_by_name=True)

	level: Level = Level.easy
	stars: int = Field(default=0, ge=0, le=3)
	consecutive_success: int = Field(default=0, ge=0, le=3, alias="consecutiveSuccess")
	total_games_played: int = Field(default=0, ge=0, alias="totalGamesPlayed")
	best_score: int = Field(default=0, ge=0, le=100, alias="bestScore")
	competences: CompetenceTotals = Field(default_factory=CompetenceTotals)


class ParameterCheck(BaseModel):
	model_config = ConfigDict(frozen=True)

	parameter: str
	actual: float
	optimal: float
	min: float
	max: float
	score: int
	status: CheckStatus
	message: str


class Recommendation(BaseModel):
	model_config = ConfigDict(frozen=True)

	parameter: str
	priority: Priority
	recommendation: str


class ValidationReport(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	checks: dict[str, ParameterCheck]
	overall_score: int = Field(alias="overallScore")
	recommendations: tuple[Recommendation, ...] = ()
