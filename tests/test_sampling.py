import collections
import random

import pytest

import markov.sampling


class FixedRoll:

	"""Stand-in random source that always rolls the same value."""

	def __init__ (self, roll: int) -> None:

		self.roll = roll
		self.calls: list[int] = []

	def randrange (self, stop: int) -> int:

		self.calls.append(stop)

		return self.roll


def test_single_option_always_selected () -> None:

	"""A single option should always be selected."""

	rng = random.Random(1)

	for _ in range(20):
		assert markov.sampling.choose_weighted([("B", 1)], rng) == "B"


def test_roll_boundaries () -> None:

	"""Each option owns the half-open slice of rolls covered by its weight."""

	options = [("a", 1), ("b", 3)]

	assert markov.sampling.choose_weighted(options, FixedRoll(0)) == "a"
	assert markov.sampling.choose_weighted(options, FixedRoll(1)) == "b"
	assert markov.sampling.choose_weighted(options, FixedRoll(3)) == "b"


def test_rolls_over_total_weight () -> None:

	"""The roll range is the sum of all weights."""

	rng = FixedRoll(0)

	markov.sampling.choose_weighted([("a", 2), ("b", 5), ("c", 4)], rng)

	assert rng.calls == [11]


def test_empty_options_raises () -> None:

	with pytest.raises(ValueError):
		markov.sampling.choose_weighted([], random.Random(1))


def test_invalid_weight_raises () -> None:

	"""Non-positive weights are rejected."""

	with pytest.raises(ValueError):
		markov.sampling.choose_weighted([("A", 0)], random.Random(1))

	with pytest.raises(ValueError):
		markov.sampling.choose_weighted([("A", 2), ("B", -1)], random.Random(1))


def test_frequencies_follow_weights () -> None:

	"""
	With more than two options, choices track weight / total.
	"""

	options = [("a", 1), ("b", 2), ("c", 7)]
	rng = random.Random(1234)
	samples = 20000

	counts = collections.Counter(markov.sampling.choose_weighted(options, rng) for _ in range(samples))

	assert counts["a"] / samples == pytest.approx(0.1, abs=0.02)
	assert counts["b"] / samples == pytest.approx(0.2, abs=0.02)
	assert counts["c"] / samples == pytest.approx(0.7, abs=0.02)
