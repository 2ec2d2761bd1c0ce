import io
import math
from typing import cast

import numpy as np
import numpy.typing as npt
import soundfile as sf

from .errors import InvalidParameter


def normalize(x: npt.ArrayLike) -> npt.NDArray[np.float32]:
	"""Scale samples to a peak of 1.0; NaN and infinities become silence."""
	y = np.nan_to_num(np.asarray(x, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)
	max_abs = float(np.max(np.abs(y))) if y.size else 0.0
	if max_abs > 0.0:
		y = y / max_abs
	return cast(npt.NDArray[np.float32], y.astype(np.float32))


def wav_bytes(x: npt.ArrayLike, sampling_frequency: float, normalize_peak: bool = True) -> bytes:
	"""Encode mono samples as WAV.

	Args:
		x: Sample values
		sampling_frequency: Sampling frequency in Hz, rounded to whole Hz
		normalize_peak: Scale to a peak of 1.0 first; otherwise values outside
			[-1, 1] clip
	"""
	if not math.isfinite(sampling_frequency) or round(sampling_frequency) < 1:
		raise InvalidParameter(f"WAV sample rate must be at least 1 Hz, got {sampling_frequency!r}")
	sr = int(round(sampling_frequency))
	data = normalize(x) if normalize_peak else np.asarray(x, dtype=np.float32)
	buf = io.BytesIO()
	sf.write(buf, data, sr, format="WAV")
	return buf.getvalue()
