import random
import typing


StateType = typing.TypeVar("StateType")


def choose_weighted (options: typing.List[typing.Tuple[StateType, int]], rng: random.Random) -> StateType:

	"""
	Choose one item from a list of weighted options.

	Draws a single integer roll in ``[0, total)`` and walks the options in the
	order given, returning the first whose cumulative weight exceeds the roll.
	Each option is therefore chosen with probability ``weight / total``.
	"""

	if not options:
		raise ValueError("Options cannot be empty")

	total_weight = 0

	for _, weight in options:
		if weight <= 0:
			raise ValueError("Weights must be positive")
		total_weight += weight

	roll = rng.randrange(total_weight)
	accum = 0

	for option, weight in options:
		accum += weight
		if roll < accum:
			return option

	# Unreachable: the final cumulative weight equals total_weight > roll.
	return options[-1][0]
