"""Logger factory shared by the app modules."""

from __future__ import annotations

import logging
import sys


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
	"""Return a logger writing ``[time] LEVEL [name] message`` lines to stdout.

	The handler is attached once per logger name, so repeated calls are safe.
	"""
	logger = logging.getLogger(name)

	if not logger.handlers:
		handler = logging.StreamHandler(sys.stdout)
		handler.setFormatter(
			logging.Formatter(
				"[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
				datefmt="%Y-%m-%d %H:%M:%S",
			)
		)
		logger.addHandler(handler)

	if isinstance(level, str):
		level = level.strip().upper()
	logger.setLevel(level or logging.INFO)
	return logger
