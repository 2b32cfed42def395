import random

import pytest

import markov.chain


EXAMPLE_TRANSITIONS = [
	("s0", "s1", 10),
	("s1", "s2", 2),
	("s1", "s3", 8),
	("s2", "s4", 10),
	("s3", "s4", 1),
	("s3", "s5", 4),
	("s3", "s6", 5),
	("s5", "s6", 4),
	("s5", "s5", 7),
	("s5", "s7", 3),
	("s6", "s7", 7),
]


@pytest.fixture
def example_chain () -> markov.chain.Chain:

	"""Eight states s0..s7 wired as in the package example; s4 and s7 are terminal."""

	chain = markov.chain.Chain(rng=random.Random(1))

	for i in range(8):
		chain.add_state(f"s{i}")

	for outgoing, incoming, weight in EXAMPLE_TRANSITIONS:
		chain.add_transition(outgoing, incoming, weight)

	return chain
