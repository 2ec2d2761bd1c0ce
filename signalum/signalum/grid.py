from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from .errors import InvalidParameter


def linspace_by_freq(start: float, end: float, freq: float) -> npt.NDArray[np.float64]:
	"""Sampling instants in ``[start, end)`` spaced ``1 / freq`` apart.

	Args:
		start: First instant in seconds (inclusive)
		end: Last instant in seconds (exclusive)
		freq: Sampling frequency in Hz, must be positive
	"""
	if not (math.isfinite(freq) and freq > 0):
		raise InvalidParameter(f"sampling frequency must be positive, got {freq!r}")
	step = 1.0 / freq
	count = max(0, math.floor((end - start) / step))
	return start + np.arange(count, dtype=np.float64) * step
