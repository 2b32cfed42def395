import logging
import random
import typing

import markov.exceptions
import markov.sampling
import markov.serialization


logger = logging.getLogger(__name__)


class Chain:

	"""
	A discrete Markov chain over named states with integer-weighted transitions.

	Each state keeps its outgoing transitions (``target -> weight``) and the
	running total of those weights, which is the denominator for that state's
	transition probabilities.  Every mutating method validates its arguments
	before touching either mapping, so a failed call leaves the chain exactly
	as it was.

	A state with no outgoing transitions is terminal: it exists, its total is
	zero and :meth:`transit` returns ``None`` from it.

	Chains are not thread-safe.  Callers that share a chain between threads
	must serialize mutation themselves; the copy-returning getters are safe
	to call concurrently with each other, but not with a mutation.

	Example:
		```python
		chain = markov.chain.Chain(rng=random.Random(42))

		for name in ("sunny", "rainy"):
			chain.add_state(name)

		chain.add_transition("sunny", "sunny", 8)
		chain.add_transition("sunny", "rainy", 2)
		chain.add_transition("rainy", "sunny", 5)

		chain.get_transition_probability("sunny", "rainy")  # 0.2
		chain.transit("sunny")                               # "sunny" or "rainy"
		```
	"""

	def __init__ (self, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Initialize an empty chain.

		Parameters:
			rng: Random source used by :meth:`transit`.  Pass a seeded
				``random.Random`` for repeatable walks.
		"""

		self._transitions: typing.Dict[str, typing.Dict[str, int]] = {}
		self._totals: typing.Dict[str, int] = {}
		self.rng = rng or random.Random()


	def __len__ (self) -> int:

		"""Return the number of states."""

		return len(self._transitions)


	def __contains__ (self, state: object) -> bool:

		"""Return True if the state exists."""

		return state in self._transitions


	def __repr__ (self) -> str:

		edges = sum(len(targets) for targets in self._transitions.values())

		return f"Chain(states={len(self._transitions)}, transitions={edges})"


	# -- validation helpers ------------------------------------------------

	def _require_state (self, state: str) -> None:

		if state not in self._transitions:
			raise markov.exceptions.NotFoundError(f"State {state} doesn't exist in the chain")


	def _require_transition (self, outgoing: str, incoming: str) -> None:

		self._require_state(outgoing)
		self._require_state(incoming)

		if incoming not in self._transitions[outgoing]:
			raise markov.exceptions.NotFoundError(f"The transition from {outgoing} to {incoming} doesn't exist in the chain")


	@staticmethod
	def _require_weight (weight: int) -> None:

		if not isinstance(weight, int) or isinstance(weight, bool) or weight <= 0:
			raise markov.exceptions.InvalidWeightError(f"Weight should be an integer above zero, got {weight!r}")


	def _require_outgoing (self, state: str) -> None:

		if self._totals.get(state, 0) <= 0:
			raise markov.exceptions.NoOutgoingTransitionsError(f"State {state} has no outgoing transitions")


	# -- states ------------------------------------------------------------

	def add_state (self, state: str) -> None:

		"""
		Add a new terminal state with no outgoing transitions.
		"""

		if state in self._transitions:
			raise markov.exceptions.AlreadyExistsError(f"State {state} already exists in the chain")

		self._transitions[state] = {}
		self._totals[state] = 0


	def remove_state (self, state: str) -> None:

		"""
		Remove a state along with every transition into or out of it.

		Visits every other state to drop edges that end at ``state``, keeping
		their totals in step.
		"""

		self._require_state(state)

		removed = 0

		for outgoing, targets in self._transitions.items():

			if outgoing == state or state not in targets:
				continue

			self._totals[outgoing] -= targets.pop(state)
			removed += 1

		del self._transitions[state]
		self._totals.pop(state, None)

		logger.debug(f"Removed state {state} and {removed} incoming transitions")


	def has_state (self, state: str) -> bool:

		"""Return True if the state exists in the chain."""

		return state in self._transitions


	def get_all_states (self) -> typing.Set[str]:

		"""
		Return the names of all states.

		The result is a set: callers must not rely on any ordering.
		"""

		return set(self._transitions)


	# -- transitions -------------------------------------------------------

	def add_transition (self, outgoing: str, incoming: str, weight: int) -> None:

		"""
		Add a weighted transition between two existing states.

		Raises ``NotFoundError`` if either state is missing,
		``AlreadyExistsError`` if the transition is already present and
		``InvalidWeightError`` unless the weight is a positive integer.
		"""

		self._require_state(outgoing)
		self._require_state(incoming)

		if incoming in self._transitions[outgoing]:
			raise markov.exceptions.AlreadyExistsError(f"The transition from {outgoing} to {incoming} already exists in the chain")

		self._require_weight(weight)

		self._transitions[outgoing][incoming] = weight
		self._totals[outgoing] += weight


	def update_transition (self, outgoing: str, incoming: str, weight: int) -> None:

		"""
		Change the weight of an existing transition.

		The new weight is validated the same way as in :meth:`add_transition`.
		"""

		self._require_transition(outgoing, incoming)
		self._require_weight(weight)

		old_weight = self._transitions[outgoing][incoming]

		self._transitions[outgoing][incoming] = weight
		self._totals[outgoing] += weight - old_weight


	def remove_transition (self, outgoing: str, incoming: str) -> None:

		"""
		Remove the transition from ``outgoing`` to ``incoming``.
		"""

		self._require_transition(outgoing, incoming)

		self._totals[outgoing] -= self._transitions[outgoing].pop(incoming)


	def has_transition (self, outgoing: str, incoming: str) -> bool:

		"""Return True if both states exist and the transition between them does too."""

		if outgoing not in self._transitions or incoming not in self._transitions:
			return False

		return incoming in self._transitions[outgoing]


	# -- queries -----------------------------------------------------------

	def get_transition_weight (self, outgoing: str, incoming: str) -> int:

		"""Return the raw weight of a transition."""

		self._require_transition(outgoing, incoming)

		return self._transitions[outgoing][incoming]


	def get_transition_weights (self, state: str) -> typing.Dict[str, int]:

		"""
		Return a copy of a state's outgoing transitions as ``target -> weight``.
		"""

		self._require_state(state)

		return dict(self._transitions[state])


	def get_total (self, state: str) -> int:

		"""Return the sum of a state's outgoing transition weights."""

		self._require_state(state)

		return self._totals.get(state, 0)


	def get_transition_probability (self, outgoing: str, incoming: str) -> float:

		"""
		Return the probability of moving from ``outgoing`` to ``incoming``.

		Raises ``NoOutgoingTransitionsError`` rather than dividing by a zero
		total, which can only happen for a chain loaded without validation.
		"""

		self._require_transition(outgoing, incoming)
		self._require_outgoing(outgoing)

		return self._transitions[outgoing][incoming] / self._totals[outgoing]


	def get_transition_probabilities (self, state: str) -> typing.Dict[str, float]:

		"""
		Return the probability of every outgoing transition of a state.

		Raises ``NoOutgoingTransitionsError`` for a terminal state.
		"""

		self._require_state(state)
		self._require_outgoing(state)

		total = self._totals[state]

		return {target: weight / total for target, weight in self._transitions[state].items()}


	# -- stochastic steps --------------------------------------------------

	def transit (self, state: str, rng: typing.Optional[random.Random] = None) -> typing.Optional[str]:

		"""
		Choose the next state from ``state`` in proportion to transition weights.

		Returns ``None`` when ``state`` is terminal.  Outgoing transitions are
		sampled in state-name order, so a seeded ``rng`` always produces the
		same walk for the same chain regardless of insertion history.

		Parameters:
			state: The current state.
			rng: Overrides the chain's random source for this call.
		"""

		self._require_state(state)

		targets = self._transitions[state]

		if not targets:
			return None

		options = sorted(targets.items())
		next_state = markov.sampling.choose_weighted(options, rng or self.rng)

		logger.debug(f"Transit {state} -> {next_state}")

		return next_state


	def walk (self, start: str, steps: int, rng: typing.Optional[random.Random] = None) -> typing.Iterator[str]:

		"""
		Return an iterator over up to ``steps`` successive states reached from ``start``.

		The walk ends early once a terminal state is reached; the terminal
		state itself is yielded, ``start`` is not.  Arguments are checked
		immediately, before any state is produced.
		"""

		if steps < 0:
			raise ValueError("Steps cannot be negative")

		self._require_state(start)

		return self._walk(start, steps, rng)


	def _walk (self, state: str, steps: int, rng: typing.Optional[random.Random]) -> typing.Iterator[str]:

		for _ in range(steps):

			next_state = self.transit(state, rng)

			if next_state is None:
				return

			yield next_state
			state = next_state


	# -- serialization -----------------------------------------------------

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""
		Return a deep copy of the chain's two serialized fields.
		"""

		return {
			markov.serialization.FIELD_TRANSITIONS: {state: dict(targets) for state, targets in self._transitions.items()},
			markov.serialization.FIELD_TOTALS: dict(self._totals),
		}


	def to_json (self) -> bytes:

		"""
		Serialize the chain to indented, key-sorted UTF-8 JSON.
		"""

		return markov.serialization.encode(self._transitions, self._totals)


	@classmethod
	def from_json (
		cls,
		data: typing.Union[bytes, str],
		strict: bool = True,
		rng: typing.Optional[random.Random] = None
	) -> "Chain":

		"""
		Restore a chain from :meth:`to_json` output.

		With ``strict`` (the default) the payload must satisfy the same
		invariants a chain built through the public API does: positive
		weights, transitions only between listed states, and totals that
		match their transitions.  ``strict=False`` accepts any well-typed
		payload as-is, so the restored totals may disagree with the edges.

		Raises ``ParseError`` on malformed or, when strict, inconsistent data.
		"""

		transitions, totals = markov.serialization.decode(data, strict=strict)

		chain = cls(rng=rng)
		chain._transitions = transitions
		chain._totals = totals

		return chain
