"""Pydantic schemas for competence deltas and accumulated skill totals."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agrosim.models.enums import RecommendationUrgency, Skill


class CompetenceGain(BaseModel):
	"""Per-game skill deltas. The caller accumulates them into ``CompetenceTotals``."""

	model_config = ConfigDict(frozen=True)

	water: int = Field(ge=1)
	npk: int = Field(ge=1)
	soil: int = Field(ge=1)
	rotation: int = Field(ge=1)
	nasa: int = Field(ge=1)

	def as_mapping(self) -> dict[Skill, int]:
		return {skill: getattr(self, skill.value) for skill in Skill}


class CompetenceTotals(BaseModel):
	model_config = ConfigDict(frozen=True)

	water: int = Field(default=0, ge=0)
	npk: int = Field(default=0, ge=0)
	soil: int = Field(default=0, ge=0)
	rotation: int = Field(default=0, ge=0)
	nasa: int = Field(default=0, ge=0)

	def as_mapping(self) -> dict[Skill, int]:
		return {skill: getattr(self, skill.value) for skill in Skill}


class CompetenceRecommendation(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	skill: str
	level: RecommendationUrgency
	message: str
	suggested_action: str = Field(alias="suggestedAction")
