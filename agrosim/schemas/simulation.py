"""Pydantic schemas for simulation input and result records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agrosim.models.enums import AdvisoryCategory, Impact, Level, Priority, Status


class SimulationInput(BaseModel):
	"""Player-chosen cultivation parameters (pre-validated upstream)."""

	model_config = ConfigDict(frozen=True)

	water: float
	nitrogen: float
	phosphorus: float
	potassium: float
	ph: float
	temperature: float
	level: Level = Level.easy


class ParameterDetail(BaseModel):
	model_config = ConfigDict(frozen=True)

	score: int = Field(ge=0, le=100)
	status: Status


class YieldProjection(BaseModel):
	model_config = ConfigDict(frozen=True)

	value: float
	unit: str
	percentage: int
	optimal: float


class SimulationDetails(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	water: ParameterDetail
	nitrogen: ParameterDetail
	phosphorus: ParameterDetail
	potassium: ParameterDetail
	ph: ParameterDetail
	temperature: ParameterDetail
	npk_balance: ParameterDetail = Field(alias="npkBalance")


class Advisory(BaseModel):
	model_config = ConfigDict(frozen=True)

	category: AdvisoryCategory
	priority: Priority
	message: str
	impact: Impact


class SimulationResult(BaseModel):
	"""Outcome of one simulation call; immutable once produced."""

	model_config = ConfigDict(frozen=True, populate_by_name=True)

	score: int = Field(ge=0, le=100)
	yield_: YieldProjection = Field(alias="yield")
	success: bool
	details: SimulationDetails
	feedback: tuple[Advisory, ...] = ()
	level: Level
