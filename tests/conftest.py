"""Shared pytest fixtures: reference crop, optimal inputs, settings isolation."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from agrosim.config import get_settings
from agrosim.schemas.crop import CropProfile
from agrosim.schemas.simulation import SimulationInput


def reference_crop_data() -> dict[str, Any]:
	return {
		"name": "Blé",
		"category": "cereale",
		"growthDays": 240,
		"parameters": {
			"water": {"min": 400, "optimal": 600, "max": 800},
			"nitrogen": {"min": 50, "optimal": 100, "max": 150},
			"phosphorus": {"min": 20, "optimal": 40, "max": 60},
			"potassium": {"min": 30, "optimal": 60, "max": 90},
			"ph": {"min": 5.5, "optimal": 6.5, "max": 7.5},
			"temperature": {"min": 18, "optimal": 25, "max": 32},
		},
		"yields": {"min": 2, "avg": 5, "max": 8},
	}


@pytest.fixture(autouse=True)
def _isolated_settings() -> Iterator[None]:
	"""Drop the cached settings singleton around every test."""
	get_settings.cache_clear()
	yield
	get_settings.cache_clear()


@pytest.fixture
def crop_data() -> dict[str, Any]:
	return reference_crop_data()


@pytest.fixture
def crop(crop_data: dict[str, Any]) -> CropProfile:
	return CropProfile.model_validate(crop_data)


@pytest.fixture
def optimal_values() -> dict[str, float]:
	return {
		"water": 600,
		"nitrogen": 100,
		"phosphorus": 40,
		"potassium": 60,
		"ph": 6.5,
		"temperature": 25,
	}


@pytest.fixture
def optimal_inputs(optimal_values: dict[str, float]) -> SimulationInput:
	return SimulationInput(**optimal_values, level=1)
