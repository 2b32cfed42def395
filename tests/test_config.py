import logging
import pathlib
import textwrap

import pytest

import markov
import markov.config
import markov.exceptions


WEATHER_YAML = textwrap.dedent("""\
	seed: 7
	states: [sunny, cloudy, rainy, storm]
	transitions:
	  sunny: {sunny: 6, cloudy: 3, rainy: 1}
	  cloudy: {sunny: 4, rainy: 4}
	  rainy: {cloudy: 5, storm: 1}
""")


def _write (tmp_path: pathlib.Path, text: str) -> str:

	"""Write a YAML definition and return its path."""

	path = tmp_path / "chain.yaml"
	path.write_text(text)

	return str(path)


def test_load_chain (tmp_path: pathlib.Path) -> None:

	chain = markov.load_chain(_write(tmp_path, WEATHER_YAML))

	assert chain.get_all_states() == {"sunny", "cloudy", "rainy", "storm"}
	assert chain.get_total("sunny") == 10
	assert chain.get_transition_probability("sunny", "rainy") == pytest.approx(0.1)
	assert chain.transit("storm") is None


def test_seed_makes_loaded_chains_repeatable (tmp_path: pathlib.Path) -> None:

	path = _write(tmp_path, WEATHER_YAML)

	first = list(markov.load_chain(path).walk("sunny", steps=20))
	second = list(markov.load_chain(path).walk("sunny", steps=20))

	assert first == second


def test_states_named_only_by_transitions_are_added () -> None:

	chain = markov.config.chain_from_config({"transitions": {"a": {"b": 2, "c": 1}}})

	assert chain.get_all_states() == {"a", "b", "c"}
	assert chain.get_transition_weights("b") == {}


def test_missing_file_warns_and_returns_empty (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	path = str(tmp_path / "missing.yaml")

	with caplog.at_level(logging.WARNING, logger="markov.config"):
		config = markov.config.load_config(path)

	assert config == {}
	assert "not found" in caplog.text
	assert len(markov.load_chain(path)) == 0


def test_empty_file_is_empty_chain (tmp_path: pathlib.Path) -> None:

	assert len(markov.load_chain(_write(tmp_path, ""))) == 0


def test_invalid_weight_in_definition_raises () -> None:

	with pytest.raises(markov.exceptions.InvalidWeightError):
		markov.config.chain_from_config({"transitions": {"a": {"b": 0}}})


def test_duplicate_state_in_definition_raises () -> None:

	with pytest.raises(markov.exceptions.AlreadyExistsError):
		markov.config.chain_from_config({"states": ["a", "a"]})


@pytest.mark.parametrize("config", [
	["a", "b"],
	{"states": "a"},
	{"transitions": ["a", "b"]},
	{"transitions": {"a": ["b"]}},
	{"seed": "seven"},
	{"states": ["a", True]},
	{"states": [1]},
	{"transitions": {"a": {2: 1}}},
	{"transitions": {3: {"a": 1}}},
])
def test_malformed_definition_raises (config: object) -> None:

	with pytest.raises(ValueError):
		markov.config.chain_from_config(config)


def test_unquoted_scalar_names_are_rejected (tmp_path: pathlib.Path) -> None:

	"""YAML turns bare yes/1 into non-strings; they are refused rather than renamed."""

	with pytest.raises(ValueError, match="quote"):
		markov.load_chain(_write(tmp_path, "states: [sunny, yes]\n"))

	with pytest.raises(ValueError, match="quote"):
		markov.load_chain(_write(tmp_path, "transitions:\n  sunny: {1: 2}\n"))
