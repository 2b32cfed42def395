"""Build chains from YAML definitions.

A definition lists states and weighted transitions in the same nested shape
the JSON format uses, plus an optional seed for the chain's random source::

	seed: 7
	states: [sunny, cloudy, rainy]
	transitions:
	  sunny: {sunny: 6, cloudy: 3, rainy: 1}
	  cloudy: {sunny: 4, rainy: 4}
	  rainy: {cloudy: 5, rainy: 5}

States that only appear under ``transitions`` are created automatically.
Every transition goes through :meth:`markov.chain.Chain.add_transition`, so
a definition is held to the same rules as code that builds a chain by hand.
"""

import logging
import os
import random
import typing

import yaml

import markov.chain


logger = logging.getLogger(__name__)


def _state_name (name: typing.Any) -> str:

	"""Return a state name, rejecting YAML scalars that are not strings."""

	if not isinstance(name, str):
		raise ValueError(f"State names must be strings, got {name!r}; quote it in the YAML")

	return name


def load_config (config_path: str = 'chain.yaml') -> dict:

	"""
	Load a chain definition from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def chain_from_config (config: typing.Dict[str, typing.Any]) -> markov.chain.Chain:

	"""
	Create a chain from a parsed definition.

	Raises ``ValueError`` if a section has the wrong shape, and the chain's
	own errors (``InvalidWeightError``, ``AlreadyExistsError``) for bad
	transitions or duplicated states.
	"""

	if not isinstance(config, dict):
		raise ValueError("Chain definition must be a mapping")

	seed = config.get('seed')
	states = config.get('states') or []
	transitions = config.get('transitions') or {}

	if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
		raise ValueError("seed must be an integer")

	if not isinstance(states, list):
		raise ValueError("states must be a list of names")

	if not isinstance(transitions, dict):
		raise ValueError("transitions must map each state to its weighted targets")

	chain = markov.chain.Chain(rng=random.Random(seed) if seed is not None else None)

	for state in states:
		chain.add_state(_state_name(state))

	for outgoing, targets in transitions.items():

		if not isinstance(targets, dict):
			raise ValueError(f"Transitions of state {outgoing} must be a mapping")

		# Decision path: YAML may name a state only as an endpoint.
		for name in (outgoing, *targets):
			if not chain.has_state(_state_name(name)):
				chain.add_state(name)

		for incoming, weight in targets.items():
			chain.add_transition(outgoing, incoming, weight)

	logger.info(f"Loaded chain with {len(chain)} states")

	return chain


def load_chain (config_path: str = 'chain.yaml') -> markov.chain.Chain:

	"""
	Load a YAML definition and build the chain it describes.
	"""

	return chain_from_config(load_config(config_path))
