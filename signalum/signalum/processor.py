from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .config import make_rng
from .errors import EmptyCollection, InvalidParameter
from .grid import linspace_by_freq
from .models import ProcessorSettings, Sample, Waveform, WaveformKind
from .waveforms import make_waveform, sample_values

logger = logging.getLogger(__name__)


class SignalProcessor:
	"""Collects waveform descriptors and samples them on a shared time grid.

	Only the first registered waveform is sampled; the others still count
	towards the signal duration.
	"""

	def __init__(
		self,
		sampling_frequency: float,
		starting_time: float = 0.0,
		rng: Optional[np.random.Generator] = None,
	) -> None:
		if not (math.isfinite(sampling_frequency) and sampling_frequency > 0):
			raise InvalidParameter(f"sampling frequency must be positive, got {sampling_frequency!r}")
		if not math.isfinite(starting_time):
			raise InvalidParameter(f"starting time must be finite, got {starting_time!r}")
		# Hz
		self.sampling_frequency = float(sampling_frequency)
		# s
		self.starting_time = float(starting_time)
		self.rng = rng if rng is not None else np.random.default_rng()
		self._waveforms: List[Waveform] = []

	@classmethod
	def from_settings(cls, settings: ProcessorSettings) -> SignalProcessor:
		return cls(settings.sampling_frequency, settings.starting_time, make_rng(settings))

	@property
	def waveforms(self) -> Tuple[Waveform, ...]:
		return tuple(self._waveforms)

	def add(self, waveform: Waveform) -> Waveform:
		self._waveforms.append(waveform)
		logger.debug("Registered %s waveform ending at %.6g s", waveform.kind, waveform.end_time())
		return waveform

	def _add(self, kind: WaveformKind, **params: Any) -> Waveform:
		return self.add(make_waveform(kind, **params))

	def add_sine(self, signal_freq: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0, phase_shift: float = 0.0) -> Waveform:
		return self._add("sine", freq=signal_freq, duration=duration, start_offset=start_offset, amplitude=amplitude, phase_shift=phase_shift)

	def add_half_wave_rectified_sine(self, signal_freq: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0, phase_shift: float = 0.0) -> Waveform:
		return self._add("half_wave_rectified_sine", freq=signal_freq, duration=duration, start_offset=start_offset, amplitude=amplitude, phase_shift=phase_shift)

	def add_full_wave_rectified_sine(self, signal_freq: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0, phase_shift: float = 0.0) -> Waveform:
		return self._add("full_wave_rectified_sine", freq=signal_freq, duration=duration, start_offset=start_offset, amplitude=amplitude, phase_shift=phase_shift)

	def add_uniform_noise(self, duration: float, start_offset: float = 0.0, amplitude: float = 1.0) -> Waveform:
		return self._add("uniform_noise", duration=duration, start_offset=start_offset, amplitude=amplitude)

	def add_normal_noise(self, duration: float, start_offset: float = 0.0, amplitude: float = 1.0) -> Waveform:
		return self._add("normal_noise", duration=duration, start_offset=start_offset, amplitude=amplitude)

	def add_rectangular(self, signal_freq: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0, duty_cycle: float = 0.5) -> Waveform:
		return self._add("rectangular", freq=signal_freq, duration=duration, start_offset=start_offset, amplitude=amplitude, duty_cycle=duty_cycle)

	def add_symmetric_rectangular(self, signal_freq: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0, duty_cycle: float = 0.5) -> Waveform:
		return self._add("symmetric_rectangular", freq=signal_freq, duration=duration, start_offset=start_offset, amplitude=amplitude, duty_cycle=duty_cycle)

	def add_triangular(self, signal_freq: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0, duty_cycle: float = 0.5) -> Waveform:
		return self._add("triangular", freq=signal_freq, duration=duration, start_offset=start_offset, amplitude=amplitude, duty_cycle=duty_cycle)

	def add_unit_jump(self, flip_offset: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0) -> Waveform:
		return self._add("unit_jump", flip_offset=flip_offset, duration=duration, start_offset=start_offset, amplitude=amplitude)

	def add_unit_pulse(self, time_offset: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0) -> Waveform:
		return self._add("unit_pulse", time_offset=time_offset, duration=duration, start_offset=start_offset, amplitude=amplitude)

	def add_unit_noise(self, probability: float, duration: float, start_offset: float = 0.0, amplitude: float = 1.0) -> Waveform:
		return self._add("unit_noise", probability=probability, duration=duration, start_offset=start_offset, amplitude=amplitude)

	def signal_duration(self) -> float:
		if not self._waveforms:
			raise EmptyCollection("no waveform registered")
		return max(w.end_time() for w in self._waveforms)

	def sampling_points(self) -> npt.NDArray[np.float64]:
		ending_point = self.starting_time + self.signal_duration()
		return linspace_by_freq(self.starting_time, ending_point, self.sampling_frequency)

	def signal_arrays(self, rng: Optional[np.random.Generator] = None) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
		"""Sampling instants and values of the first registered waveform."""
		t = self.sampling_points()
		if len(self._waveforms) > 1:
			logger.warning("%d waveforms registered, only the first (%s) is sampled", len(self._waveforms), self._waveforms[0].kind)
		logger.debug("Sampling %d points from %.6g s at %.6g Hz", t.size, self.starting_time, self.sampling_frequency)
		y = sample_values(self._waveforms[0], t, rng if rng is not None else self.rng)
		return t, y

	def synthesize(self, rng: Optional[np.random.Generator] = None) -> List[Sample]:
		t, y = self.signal_arrays(rng)
		return [Sample(float(x), float(v)) for x, v in zip(t, y)]
