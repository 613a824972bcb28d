"""
Logging configuration module.

Provides centralized logging setup for the application with
configurable log levels and consistent formatting.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
	"""
	Map a level name to its numeric value.

	Parameters:
		level: Level name such as "info" or "DEBUG".

	Returns:
		The logging level, INFO when the name is unknown.
	"""
	return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level and format.

	Repeated calls adjust the root level without adding handlers.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = resolve_level(level)
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level", "LOG_FORMAT"]
