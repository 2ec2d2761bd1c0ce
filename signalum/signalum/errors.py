from __future__ import annotations


class InvalidParameter(ValueError):
	"""Raised when a waveform, grid or settings parameter is out of range."""


class EmptyCollection(LookupError):
	"""Raised when a signal is synthesized with no waveform registered."""
