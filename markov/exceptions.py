class ChainError (Exception):

	"""
	Base class for every error raised by a chain operation.
	"""


class AlreadyExistsError (ChainError, ValueError):

	"""
	A state or transition being added is already present in the chain.
	"""


class NotFoundError (ChainError, LookupError):

	"""
	A referenced state or transition does not exist in the chain.
	"""


class InvalidWeightError (ChainError, ValueError):

	"""
	A transition weight is not a strictly positive integer.
	"""


class NoOutgoingTransitionsError (ChainError, ValueError):

	"""
	Probabilities were requested from a state whose outgoing total is zero.
	"""


class ParseError (ChainError, ValueError):

	"""
	Serialized chain data is malformed, incomplete or inconsistent.
	"""
