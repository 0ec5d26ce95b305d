from __future__ import annotations


class SummarizerError(Exception):
	"""Base class for errors raised while summarizing a Go tree."""


class DiscoveryError(SummarizerError):
	"""The root could not be traversed. Fatal for the whole run."""

	def __init__(self, path: str, reason: str):
		self.path = path
		self.reason = reason
		super().__init__(f"{path}: {reason}")


class ParseError(SummarizerError):
	"""One file could not be read or is not valid Go."""

	def __init__(self, path: str, cause: str):
		self.path = path
		self.cause = cause
		super().__init__(f"error parsing {path}: {cause}")
