import numpy as np
import pytest

from signalum.config import make_rng, settings_from_env
from signalum.errors import InvalidParameter


def test_settings_defaults():
	s = settings_from_env({})
	assert s.sampling_frequency == 10000.0
	assert s.starting_time == 0.0
	assert s.seed is None


def test_settings_from_environment():
	s = settings_from_env({
		"SIGNALUM_SAMPLING_FREQUENCY": "250",
		"SIGNALUM_STARTING_TIME": "-1.5",
		"SIGNALUM_SEED": "7",
		"UNRELATED": "x",
	})
	assert s.sampling_frequency == 250.0
	assert s.starting_time == -1.5
	assert s.seed == 7


def test_blank_variables_are_ignored():
	s = settings_from_env({"SIGNALUM_SEED": "  "})
	assert s.seed is None


def test_invalid_environment_values():
	for env in (
		{"SIGNALUM_SAMPLING_FREQUENCY": "0"},
		{"SIGNALUM_SAMPLING_FREQUENCY": "fast"},
		{"SIGNALUM_SEED": "-1"},
	):
		with pytest.raises(InvalidParameter):
			settings_from_env(env)


def test_make_rng_is_seeded():
	s = settings_from_env({"SIGNALUM_SEED": "3"})
	assert np.array_equal(make_rng(s).random(5), make_rng(s).random(5))
