import logging
from typing import Any, Dict, List, Tuple

import altair as alt
import pandas as pd
import streamlit as st

from signalum.audio import wav_bytes
from signalum.config import settings_from_env
from signalum.errors import EmptyCollection, InvalidParameter
from signalum.models import ProcessorSettings, WaveformKind
from signalum.processor import SignalProcessor
from signalum.waveforms import make_waveform


st.set_page_config(page_title="Signalum", page_icon=None, layout="wide")
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
alt.data_transformers.disable_max_rows()

KINDS: List[WaveformKind] = [
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

# (field, label, default) per kind, on top of duration/start_offset/amplitude
EXTRA_PARAMS: Dict[str, List[Tuple[str, str, float]]] = {
	"sine": [("freq", "Frequency (Hz)", 5.0), ("phase_shift", "Phase shift (rad)", 0.0)],
	"half_wave_rectified_sine": [("freq", "Frequency (Hz)", 5.0), ("phase_shift", "Phase shift (rad)", 0.0)],
	"full_wave_rectified_sine": [("freq", "Frequency (Hz)", 5.0), ("phase_shift", "Phase shift (rad)", 0.0)],
	"uniform_noise": [],
	"normal_noise": [],
	"symmetric_rectangular": [("freq", "Frequency (Hz)", 5.0), ("duty_cycle", "Duty cycle", 0.5)],
	"rectangular": [("freq", "Frequency (Hz)", 5.0), ("duty_cycle", "Duty cycle", 0.5)],
	"triangular": [("freq", "Frequency (Hz)", 5.0), ("duty_cycle", "Duty cycle", 0.5)],
	"unit_jump": [("flip_offset", "Flip offset (s)", 0.5)],
	"unit_pulse": [("time_offset", "Pulse offset (s)", 0.5)],
	"unit_noise": [("probability", "Probability", 0.9)],
}


def get_state() -> Any:
	if "settings" not in st.session_state:
		try:
			st.session_state.settings = settings_from_env()
		except InvalidParameter as e:
			st.session_state.settings = ProcessorSettings()
			st.warning(f"Ignoring environment settings: {e}")
	if "waveforms" not in st.session_state:
		st.session_state.waveforms = []
	return st.session_state


def sidebar_controls(s: ProcessorSettings) -> ProcessorSettings:
	st.sidebar.header("Sampling")
	sampling_frequency = st.sidebar.number_input("Sampling frequency (Hz)", min_value=1.0, value=float(s.sampling_frequency), step=100.0)
	starting_time = st.sidebar.number_input("Starting time (s)", value=float(s.starting_time), step=0.1)
	seed_str = st.sidebar.text_input("Noise seed (empty for random)", value="" if s.seed is None else str(s.seed))
	seed = int(seed_str) if seed_str.strip().isdigit() else None
	return ProcessorSettings(sampling_frequency=sampling_frequency, starting_time=starting_time, seed=seed)


def waveform_form(state: Any) -> None:
	st.sidebar.header("Add waveform")
	kind: WaveformKind = st.sidebar.selectbox("Kind", KINDS)
	params: Dict[str, float] = {
		"duration": st.sidebar.number_input("Duration (s)", value=1.0, step=0.1),
		"start_offset": st.sidebar.number_input("Start offset (s)", value=0.0, step=0.1),
		"amplitude": st.sidebar.number_input("Amplitude", value=1.0, step=0.1),
	}
	for field, label, default in EXTRA_PARAMS[kind]:
		params[field] = st.sidebar.number_input(label, value=default, key=f"{kind}-{field}")
	cols = st.sidebar.columns(2)
	with cols[0]:
		if st.button("Add", use_container_width=True):
			try:
				state.waveforms.append(make_waveform(kind, **params))
			except InvalidParameter as e:
				st.sidebar.error(str(e))
	with cols[1]:
		if st.button("Clear", use_container_width=True):
			state.waveforms = []


def main() -> None:
	state = get_state()
	state.settings = sidebar_controls(state.settings)
	waveform_form(state)

	st.title("Signalum")

	if state.waveforms:
		st.subheader("Registered waveforms")
		st.dataframe([w.model_dump() for w in state.waveforms], hide_index=True)
		if len(state.waveforms) > 1:
			st.info("Only the first waveform is sampled; the others extend the signal duration.")

	processor = SignalProcessor.from_settings(state.settings)
	for w in state.waveforms:
		processor.add(w)
	try:
		t, y = processor.signal_arrays()
	except EmptyCollection:
		st.write("Add a waveform in the sidebar to synthesize a signal.")
		return
	except InvalidParameter as e:
		st.error(str(e))
		return

	st.write(f"{t.size} samples")
	df = pd.DataFrame({"time": t, "value": y})
	chart = alt.Chart(df).mark_point(size=8, filled=True).encode(
		x=alt.X("time:Q", title="time (s)"),
		y=alt.Y("value:Q"),
		tooltip=["time", "value"],
	).properties(height=400)
	st.altair_chart(chart, use_container_width=True)

	cols = st.columns(2)
	with cols[0]:
		st.download_button("Download CSV", df.to_csv(index=False).encode(), file_name="signal.csv", mime="text/csv")
	with cols[1]:
		try:
			audio = wav_bytes(y, state.settings.sampling_frequency)
		except InvalidParameter as e:
			st.error(str(e))
		else:
			st.audio(audio, format="audio/wav")


if __name__ == "__main__":
	main()
