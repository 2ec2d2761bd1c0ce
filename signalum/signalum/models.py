from __future__ import annotations

from typing import Annotated, Any, Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidParameter


WaveformKind = Literal[
	"sine",
	"half_wave_rectified_sine",
	"full_wave_rectified_sine",
	"uniform_noise",
	"normal_noise",
	"symmetric_rectangular",
	"rectangular",
	"triangular",
	"unit_jump",
	"unit_pulse",
	"unit_noise",
]


class Sample(NamedTuple):
	time: float
	value: float


class ProcessorSettings(BaseModel):
	sampling_frequency: float = Field(default=10000.0, gt=0, allow_inf_nan=False)
	starting_time: float = Field(default=0.0, allow_inf_nan=False)
	seed: Optional[int] = Field(default=None, ge=0)


class _Waveform(BaseModel):
	model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

	# Duration in s
	duration: float
	# Starting time in s relative to the global starting time
	start_offset: float = 0.0
	amplitude: float = 1.0

	def __init__(self, **data: Any) -> None:
		try:
			super().__init__(**data)
		except ValidationError as e:
			raise InvalidParameter(f"invalid {type(self).__name__} waveform: {e}") from e

	def end_time(self) -> float:
		return self.start_offset + self.duration


class _Periodic(_Waveform):
	# Frequency in Hz
	freq: float = Field(gt=0, allow_inf_nan=False)


class _SineParams(_Periodic):
	# Radians
	phase_shift: float = 0.0


class _DutyCycleParams(_Periodic):
	# Part of each period where the signal is high
	duty_cycle: float = Field(default=0.5, ge=0.0, le=1.0)


class Sine(_SineParams):
	kind: Literal["sine"] = "sine"


class HalfWaveRectifiedSine(_SineParams):
	kind: Literal["half_wave_rectified_sine"] = "half_wave_rectified_sine"


class FullWaveRectifiedSine(_SineParams):
	kind: Literal["full_wave_rectified_sine"] = "full_wave_rectified_sine"


class UniformNoise(_Waveform):
	kind: Literal["uniform_noise"] = "uniform_noise"


class NormalNoise(_Waveform):
	kind: Literal["normal_noise"] = "normal_noise"


class SymmetricRectangular(_DutyCycleParams):
	kind: Literal["symmetric_rectangular"] = "symmetric_rectangular"


class Rectangular(_DutyCycleParams):
	kind: Literal["rectangular"] = "rectangular"


class Triangular(_DutyCycleParams):
	kind: Literal["triangular"] = "triangular"


class UnitJump(_Waveform):
	kind: Literal["unit_jump"] = "unit_jump"
	# Seconds after start_offset at which the signal switches from 0 to amplitude
	flip_offset: float = 0.0


class UnitPulse(_Waveform):
	kind: Literal["unit_pulse"] = "unit_pulse"
	# Seconds after start_offset; snaps to the nearest sampling instant
	time_offset: float = 0.0


class UnitNoise(_Waveform):
	kind: Literal["unit_noise"] = "unit_noise"
	probability: float = Field(default=0.5, ge=0.0, le=1.0)


Waveform = Annotated[
	Union[
		Sine,
		HalfWaveRectifiedSine,
		FullWaveRectifiedSine,
		UniformNoise,
		NormalNoise,
		SymmetricRectangular,
		Rectangular,
		Triangular,
		UnitJump,
		UnitPulse,
		UnitNoise,
	],
	Field(discriminator="kind"),
]
