"""Two-field JSON interchange format for chains.

A serialized chain is a JSON object holding exactly two fields::

	{
	    "Transitions": {"a": {"b": 3}, "b": {}},
	    "Totals": {"a": 3, "b": 0}
	}

Field names and shape are the compatibility contract with existing
serialized chains.  Output uses a four space indent with state names sorted
at every level so that encoding the same chain always yields the same bytes.
"""

import json
import logging
import typing

import markov.exceptions


logger = logging.getLogger(__name__)


FIELD_TRANSITIONS = "Transitions"
FIELD_TOTALS = "Totals"
INDENT = 4

# HTML-sensitive characters and JS line separators, escaped inside names as existing chains write them.
HTML_ESCAPES = {
	"<": "\\u003c",
	">": "\\u003e",
	"&": "\\u0026",
	"\u2028": "\\u2028",
	"\u2029": "\\u2029",
}

TransitionsType = typing.Dict[str, typing.Dict[str, int]]
TotalsType = typing.Dict[str, int]


def encode (transitions: TransitionsType, totals: TotalsType) -> bytes:

	"""
	Encode the transition and total mappings as indented UTF-8 JSON.
	"""

	document = {
		FIELD_TRANSITIONS: {
			state: {target: edges[target] for target in sorted(edges)}
			for state, edges in sorted(transitions.items())
		},
		FIELD_TOTALS: {state: totals[state] for state in sorted(totals)},
	}

	text = json.dumps(document, indent=INDENT, ensure_ascii=False)

	for char, escaped in HTML_ESCAPES.items():
		text = text.replace(char, escaped)

	return text.encode("utf-8")


def _is_int (value: typing.Any) -> bool:

	"""Return True for real integers (bools are rejected)."""

	return isinstance(value, int) and not isinstance(value, bool)


def _read_transitions (raw: typing.Any) -> TransitionsType:

	"""Type-check the transitions field and return a fresh nested dict."""

	if not isinstance(raw, dict):
		raise markov.exceptions.ParseError(f"{FIELD_TRANSITIONS} must be an object")

	transitions: TransitionsType = {}

	for state, edges in raw.items():

		if not isinstance(edges, dict):
			raise markov.exceptions.ParseError(f"Transitions of state {state} must be an object")

		for target, weight in edges.items():
			if not _is_int(weight):
				raise markov.exceptions.ParseError(f"Weight of the transition from {state} to {target} must be an integer")

		transitions[state] = dict(edges)

	return transitions


def _read_totals (raw: typing.Any) -> TotalsType:

	"""Type-check the totals field and return a fresh dict."""

	if not isinstance(raw, dict):
		raise markov.exceptions.ParseError(f"{FIELD_TOTALS} must be an object")

	for state, total in raw.items():
		if not _is_int(total):
			raise markov.exceptions.ParseError(f"Total of state {state} must be an integer")

	return dict(raw)


def validate (transitions: TransitionsType, totals: TotalsType) -> None:

	"""
	Check that decoded mappings satisfy the chain invariants.

	Raises ``ParseError`` when the state sets differ, an edge points at an
	unknown state, a weight is not positive, or a total disagrees with the
	sum of its state's outgoing weights.
	"""

	if set(transitions) != set(totals):
		missing = sorted(set(transitions).symmetric_difference(totals))
		raise markov.exceptions.ParseError(f"{FIELD_TRANSITIONS} and {FIELD_TOTALS} disagree on states: {missing}")

	for state, edges in transitions.items():

		for target, weight in edges.items():

			if target not in transitions:
				raise markov.exceptions.ParseError(f"Transition from {state} references unknown state {target}")

			if weight <= 0:
				raise markov.exceptions.ParseError(f"Weight of the transition from {state} to {target} should be above zero")

		expected = sum(edges.values())

		if totals[state] != expected:
			raise markov.exceptions.ParseError(f"Total of state {state} is {totals[state]}, expected {expected}")


def decode (data: typing.Union[bytes, str], strict: bool = True) -> typing.Tuple[TransitionsType, TotalsType]:

	"""
	Parse serialized chain data back into transition and total mappings.

	With ``strict`` (the default) the decoded mappings are also checked with
	:func:`validate`.  Passing ``strict=False`` only checks the structure and
	value types, trusting the payload to be internally consistent.
	"""

	try:
		document = json.loads(data)

	except (ValueError, TypeError, RecursionError) as exc:
		raise markov.exceptions.ParseError(f"Invalid chain JSON: {exc}") from exc

	if not isinstance(document, dict):
		raise markov.exceptions.ParseError("Serialized chain must be a JSON object")

	for field in (FIELD_TRANSITIONS, FIELD_TOTALS):
		if field not in document:
			raise markov.exceptions.ParseError(f"Serialized chain is missing the {field} field")

	transitions = _read_transitions(document[FIELD_TRANSITIONS])
	totals = _read_totals(document[FIELD_TOTALS])

	if strict:
		validate(transitions, totals)

	else:
		logger.debug(f"Decoded {len(transitions)} states without validation")

	return transitions, totals
