"""Structured logging for the engine.

Every event carries ``engine`` and the emitting ``component``; per-run fields
such as the crop name are bound with ``simulation_context`` so nested services
log them without passing them around.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from typing import Any

import structlog

from agrosim.config import LogFormat, get_settings

ENGINE_NAME = "agrosim"

_configured = False


def _add_engine(_: Any, __: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
	event_dict.setdefault("engine", ENGINE_NAME)
	return event_dict


def _renderer(log_format: LogFormat) -> Any:
	if log_format == LogFormat.json:
		return structlog.processors.JSONRenderer(sort_keys=True)
	return structlog.dev.ConsoleRenderer()


def configure_structured_logging() -> None:
	"""Install the engine's processor chain; later calls are no-ops."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	level = logging.getLevelName(settings.log_level.upper())
	if not isinstance(level, int):
		level = logging.INFO
	logging.basicConfig(level=level, format="%(message)s")

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			_add_engine,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			_renderer(settings.log_format),
		],
		wrapper_class=structlog.make_filtering_bound_logger(level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


def get_logger(component: str) -> Any:
	"""Return a logger bound to ``component``, configuring logging on first use."""
	configure_structured_logging()
	return structlog.get_logger().bind(component=component)


@contextmanager
def simulation_context(**fields: Any) -> Iterator[None]:
	"""Bind ``fields`` to every event logged inside the block."""
	with structlog.contextvars.bound_contextvars(**fields):
		yield
