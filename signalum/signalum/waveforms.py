from __future__ import annotations

import logging
from typing import Any, List, Optional, Union, cast

import numpy as np
import numpy.typing as npt
from pydantic import TypeAdapter, ValidationError

from .errors import InvalidParameter
from .models import (
	FullWaveRectifiedSine,
	HalfWaveRectifiedSine,
	NormalNoise,
	Rectangular,
	Sample,
	Sine,
	SymmetricRectangular,
	Triangular,
	UniformNoise,
	UnitJump,
	UnitNoise,
	UnitPulse,
	Waveform,
	WaveformKind,
)

logger = logging.getLogger(__name__)

TAU = 2.0 * np.pi

FloatArray = npt.NDArray[np.float64]

_WAVEFORM_ADAPTER: TypeAdapter[Waveform] = TypeAdapter(Waveform)


def make_waveform(kind: WaveformKind, **params: Any) -> Waveform:
	"""Build and validate a waveform descriptor of the given kind.

	Raises:
		InvalidParameter: unknown kind or a parameter outside its allowed range
	"""
	try:
		return _WAVEFORM_ADAPTER.validate_python({"kind": kind, **params})
	except ValidationError as e:
		logger.debug("Rejected %s parameters %r: %s", kind, params, e)
		raise InvalidParameter(f"invalid {kind} waveform: {e}") from e


def _sine(w: Union[Sine, HalfWaveRectifiedSine, FullWaveRectifiedSine], t: FloatArray) -> FloatArray:
	return w.amplitude * np.sin(w.freq * TAU * t + w.phase_shift)


def _symmetric_rectangular(w: Union[SymmetricRectangular, Rectangular], t: FloatArray) -> FloatArray:
	period = 1.0 / w.freq
	flip = period * w.duty_cycle
	# truncated remainder, negative instants keep their sign
	offset = np.fmod(t, period)
	return np.where(offset > flip, -w.amplitude, w.amplitude).astype(np.float64)


def _triangular(w: Triangular, t: FloatArray) -> FloatArray:
	period = 1.0 / w.freq
	flip = period * w.duty_cycle
	offset = np.fmod(t, period)
	# duty_cycle of 0 yields NaN at offset 0; the division by zero at
	# duty_cycle of 1 sits in the discarded branch
	with np.errstate(divide="ignore", invalid="ignore"):
		part = np.where(
			offset > flip,
			(offset - flip) / (period - flip),
			1.0 - offset / flip,
		)
	return part * w.amplitude


def _unit_jump(w: UnitJump, t: FloatArray) -> FloatArray:
	flip = w.start_offset + w.flip_offset
	return np.where(t > flip, w.amplitude, 0.0)


def _unit_pulse(w: UnitPulse, t: FloatArray) -> FloatArray:
	target = w.start_offset + w.time_offset
	y = np.zeros_like(t)
	if t.size:
		# argmin keeps the first of equally close instants
		y[int(np.argmin(np.abs(target - t)))] = w.amplitude
	return y


def _uniform_noise(w: UniformNoise, t: FloatArray, rng: np.random.Generator) -> FloatArray:
	return rng.uniform(-w.amplitude, w.amplitude, size=t.shape)


def _normal_noise(w: NormalNoise, t: FloatArray, rng: np.random.Generator) -> FloatArray:
	return rng.standard_normal(size=t.shape) * w.amplitude


def _unit_noise(w: UnitNoise, t: FloatArray, rng: np.random.Generator) -> FloatArray:
	hits = rng.random(size=t.shape) < w.probability
	return np.where(hits, w.amplitude, 0.0)


def sample_values(
	waveform: Waveform,
	sampling_points: npt.ArrayLike,
	rng: Optional[np.random.Generator] = None,
) -> FloatArray:
	"""Evaluate *waveform* at absolute instants.

	Noise kinds draw one value per instant, in order, from *rng*; a fresh
	unseeded generator is used when none is given.
	"""
	t = np.asarray(sampling_points, dtype=np.float64)
	kind = waveform.kind
	if kind == "sine":
		y = _sine(cast(Sine, waveform), t)
	elif kind == "half_wave_rectified_sine":
		y = np.clip(_sine(cast(HalfWaveRectifiedSine, waveform), t), 0.0, None)
	elif kind == "full_wave_rectified_sine":
		y = np.abs(_sine(cast(FullWaveRectifiedSine, waveform), t))
	elif kind == "symmetric_rectangular":
		y = _symmetric_rectangular(cast(SymmetricRectangular, waveform), t)
	elif kind == "rectangular":
		y = np.clip(_symmetric_rectangular(cast(Rectangular, waveform), t), 0.0, None)
	elif kind == "triangular":
		y = _triangular(cast(Triangular, waveform), t)
	elif kind == "unit_jump":
		y = _unit_jump(cast(UnitJump, waveform), t)
	elif kind == "unit_pulse":
		y = _unit_pulse(cast(UnitPulse, waveform), t)
	elif kind in ("uniform_noise", "normal_noise", "unit_noise"):
		if rng is None:
			rng = np.random.default_rng()
		if kind == "uniform_noise":
			y = _uniform_noise(cast(UniformNoise, waveform), t, rng)
		elif kind == "normal_noise":
			y = _normal_noise(cast(NormalNoise, waveform), t, rng)
		else:
			y = _unit_noise(cast(UnitNoise, waveform), t, rng)
	else:
		raise TypeError(f"unsupported waveform kind: {kind!r}")
	return cast(FloatArray, np.asarray(y, dtype=np.float64))


def calculate_signal(
	waveform: Waveform,
	sampling_points: npt.ArrayLike,
	rng: Optional[np.random.Generator] = None,
) -> List[Sample]:
	t = np.asarray(sampling_points, dtype=np.float64)
	y = sample_values(waveform, t, rng)
	return [Sample(float(x), float(v)) for x, v in zip(t, y)]
