"""Crop catalog loading with load-time validation of reference data."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from agrosim.config import get_settings
from agrosim.errors import ConfigurationError
from agrosim.logging import get_logger
from agrosim.models.tables import NPK_FACTORS
from agrosim.schemas.crop import CropProfile
from agrosim.services.scoring import score_npk_balance


def default_catalog_path() -> Path:
	settings = get_settings()
	repo_root = Path(__file__).resolve().parents[2]
	return (repo_root / settings.crop_catalog_path).resolve()


def _read_source(source: str | Path | Mapping[str, Any] | Sequence[Any]) -> Any:
	if isinstance(source, (str, Path)):
		path = Path(source)
		try:
			return json.loads(path.read_text(encoding="utf-8"))
		except (OSError, json.JSONDecodeError) as exc:
			raise ConfigurationError(f"cannot read crop catalog {path}: {exc}") from exc
	return source


def _entries(raw: Any) -> list[tuple[str, Mapping[str, Any]]]:
	if isinstance(raw, Mapping):
		return [(str(name), {"name": str(name), **dict(entry)}) for name, entry in raw.items()]
	if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes, bytearray)):
		entries: list[tuple[str, Mapping[str, Any]]] = []
		for index, entry in enumerate(raw):
			if not isinstance(entry, Mapping) or not entry.get("name"):
				raise ConfigurationError(f"crop catalog entry #{index} has no name")
			entries.append((str(entry["name"]), entry))
		return entries
	raise ConfigurationError("crop catalog must be an object keyed by crop name or a list of crops")


def ensure_scorable(profile: CropProfile) -> None:
	"""Reject profiles whose optimal NPK values cannot anchor the balance score."""
	optimal = {nutrient: profile.parameters.range_for(nutrient).optimal for nutrient in NPK_FACTORS}
	score_npk_balance(optimal, optimal)


def load_catalog(
	source: str | Path | Mapping[str, Any] | Sequence[Any] | None = None,
) -> dict[str, CropProfile]:
	"""Parse and validate a crop catalog, keyed by crop name.

	``source`` is a JSON file path or already-parsed data; defaults to the
	configured catalog file. Any invalid crop raises ConfigurationError.
	"""
	logger = get_logger("catalog")
	raw = _read_source(default_catalog_path() if source is None else source)

	catalog: dict[str, CropProfile] = {}
	for name, entry in _entries(raw):
		try:
			profile = CropProfile.model_validate(entry)
			ensure_scorable(profile)
		except (ValidationError, ConfigurationError) as exc:
			logger.error("crop_catalog_invalid", crop=name, error=str(exc))
			raise ConfigurationError(f"crop {name!r} is invalid: {exc}") from exc
		if name in catalog:
			raise ConfigurationError(f"crop {name!r} is defined more than once")
		catalog[name] = profile

	logger.info("crop_catalog_loaded", crops=len(catalog))
	return catalog
