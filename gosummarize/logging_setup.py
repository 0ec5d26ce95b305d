"""Logging setup"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import settings

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
	"""Send package logs to stderr so stdout carries only the digest."""
	logging.basicConfig(
		stream=sys.stderr,
		format=LOG_FORMAT,
		level=(level or settings.log_level).upper(),
	)
