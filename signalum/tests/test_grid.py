import numpy as np
import pytest

from signalum.errors import InvalidParameter
from signalum.grid import linspace_by_freq


def test_grid_excludes_end_point():
	t = linspace_by_freq(0.0, 1.0, 10.0)
	assert len(t) == 10
	assert np.allclose(t, [i / 10 for i in range(10)])
	assert t[-1] < 1.0


def test_grid_length_and_spacing():
	for start, end, freq in [(0.5, 3.0, 1024.0), (1.0, 1.75, 8.0), (-2.0, 0.0, 4.0)]:
		t = linspace_by_freq(start, end, freq)
		assert len(t) == int(np.floor((end - start) * freq))
		assert np.allclose(t, [start + i / freq for i in range(len(t))])
		assert np.all(np.diff(t) > 0)


def test_grid_empty_when_end_not_after_start():
	assert linspace_by_freq(1.0, 1.0, 10.0).size == 0
	assert linspace_by_freq(2.0, 1.0, 10.0).size == 0


def test_grid_rejects_non_positive_frequency():
	for freq in (0.0, -10.0, float("nan")):
		with pytest.raises(InvalidParameter):
			linspace_by_freq(0.0, 1.0, freq)
