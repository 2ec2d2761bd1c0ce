from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

import numpy as np
from pydantic import ValidationError

from .errors import InvalidParameter
from .models import ProcessorSettings

ENV_PREFIX = "SIGNALUM_"

_ENV_FIELDS = {
	"sampling_frequency": f"{ENV_PREFIX}SAMPLING_FREQUENCY",
	"starting_time": f"{ENV_PREFIX}STARTING_TIME",
	"seed": f"{ENV_PREFIX}SEED",
}


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> ProcessorSettings:
	"""Default settings overridden by ``SIGNALUM_*`` environment variables."""
	env = os.environ if environ is None else environ
	raw: Dict[str, Any] = {}
	for field, var in _ENV_FIELDS.items():
		value = env.get(var)
		if value is not None and value.strip():
			raw[field] = value.strip()
	try:
		return ProcessorSettings.model_validate(raw)
	except ValidationError as e:
		raise InvalidParameter(f"invalid {ENV_PREFIX}* setting: {e}") from e


def make_rng(settings: ProcessorSettings) -> np.random.Generator:
	return np.random.default_rng(settings.seed)
