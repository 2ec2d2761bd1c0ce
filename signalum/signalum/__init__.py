from .errors import EmptyCollection, InvalidParameter
from .grid import linspace_by_freq
from .models import ProcessorSettings, Sample, Waveform
from .processor import SignalProcessor
from .waveforms import calculate_signal, make_waveform, sample_values

__all__ = [
	"EmptyCollection",
	"InvalidParameter",
	"ProcessorSettings",
	"Sample",
	"SignalProcessor",
	"Waveform",
	"calculate_signal",
	"linspace_by_freq",
	"make_waveform",
	"sample_values",
]
