"""Pydantic schemas for crop reference data (read-only to the engine)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from agrosim.models.enums import CropCategory, CropDifficulty, Factor

_DEFAULT_UNITS: dict[str, str] = {
	Factor.water.value: "mm/saison",
	Factor.nitrogen.value: "kg/ha",
	Factor.phosphorus.value: "kg/ha",
	Factor.potassium.value: "kg/ha",
	Factor.ph.value: "",
	Factor.temperature.value: "°C",
}


class Range(BaseModel):
	"""Numeric bounds for one agronomic factor."""

	model_config = ConfigDict(frozen=True, allow_inf_nan=False)

	min: float
	optimal: float
	max: float
	unit: str = ""

	@model_validator(mode="after")
	def _validate_order(self) -> "Range":
		if not self.min <= self.optimal <= self.max:
			raise ValueError(
				f"range must satisfy min <= optimal <= max (got {self.min}, {self.optimal}, {self.max})"
			)
		return self

	@property
	def span(self) -> float:
		return self.max - self.min

	def contains(self, value: float) -> bool:
		return self.min <= value <= self.max


class YieldAnchors(BaseModel):
	model_config = ConfigDict(frozen=True, allow_inf_nan=False)

	min: float = Field(ge=0)
	avg: float = Field(ge=0)
	max: float = Field(gt=0)
	unit: str = "t/ha"

	@model_validator(mode="after")
	def _validate_order(self) -> "YieldAnchors":
		if not self.min <= self.avg <= self.max:
			raise ValueError("yields must satisfy min <= avg <= max")
		return self


class CropParameters(BaseModel):
	model_config = ConfigDict(frozen=True)

	water: Range
	nitrogen: Range
	phosphorus: Range
	potassium: Range
	ph: Range
	temperature: Range

	@model_validator(mode="before")
	@classmethod
	def _fill_units(cls, data: Any) -> Any:
		if not isinstance(data, dict):
			return data
		filled = dict(data)
		for name, unit in _DEFAULT_UNITS.items():
			raw = filled.get(name)
			if isinstance(raw, dict) and not raw.get("unit"):
				filled[name] = {**raw, "unit": unit}
		return filled

	@model_validator(mode="after")
	def _validate_ph_scale(self) -> "CropParameters":
		if self.ph.min < 0 or self.ph.max > 14:
			raise ValueError("ph range must lie within [0, 14]")
		return self

	def range_for(self, factor: Factor) -> Range:
		return getattr(self, Factor(factor).value)


class CropProfile(BaseModel):
	"""Agronomic reference: optimal ranges, yield anchors and crop category."""

	model_config = ConfigDict(frozen=True, populate_by_name=True)

	name: str | None = None
	parameters: CropParameters
	yields: YieldAnchors
	category: CropCategory
	growth_days: int | None = Field(default=None, ge=1, alias="growthDays")
	difficulty: CropDifficulty = CropDifficulty.medium

	def is_parameter_in_range(self, factor: Factor | str, value: float) -> tuple[bool, str]:
		"""Report whether ``value`` lies within the crop's ``[min, max]`` for ``factor``."""
		try:
			bounds = self.parameters.range_for(Factor(factor))
		except ValueError:
			return False, "Invalid parameter"
		if not bounds.contains(value):
			return False, f"Out of range ({bounds.min:g}-{bounds.max:g})"
		return True, "In range"
