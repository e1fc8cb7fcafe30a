"""Exception taxonomy for the scoring engine."""


class AgroSimError(Exception):
	"""Base class for every error raised by the engine."""


class DomainError(AgroSimError, ValueError):
	"""Raised when reference data or a level handed to an entry point is invalid."""


class ConfigurationError(AgroSimError):
	"""Raised when crop reference data cannot be scored (e.g. a zero optimal)."""
