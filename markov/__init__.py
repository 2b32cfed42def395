"""
Markov - a small weighted Markov chain library for Python.

A chain is a set of named states joined by directed transitions, each with a
positive integer weight.  The probability of moving from one state to another
is that transition's weight divided by the total weight leaving the state.
Chains are plain in-memory objects: build them by hand or from YAML, step
through them with a seeded random source, and save them as JSON.

What it covers:

- **Invariant-preserving mutation.** Add and remove states, add, update and
  remove transitions.  Each state's outgoing total always equals the sum of
  its transition weights, and a failed call never leaves a partial edit.
- **Probabilities.** ``get_transition_probability()`` and
  ``get_transition_probabilities()`` derive a state's distribution from
  its weights.
- **Weighted steps.** ``transit()`` picks the next state in proportion to
  the transition weights, and ``walk()`` chains steps together.  Inject a
  ``random.Random`` for repeatable results.
- **Interchange format.** ``to_json()`` writes a stable, indented
  two-field document (``Transitions`` and ``Totals``); ``Chain.from_json()``
  reads it back and, by default, checks it for consistency.
- **YAML definitions.** ``load_chain()`` builds a chain from a YAML file.

Minimal example:

    ```python
    import random

    import markov

    chain = markov.Chain(rng=random.Random(1))

    for name in ("idle", "walk", "run"):
        chain.add_state(name)

    chain.add_transition("idle", "walk", 3)
    chain.add_transition("idle", "idle", 1)
    chain.add_transition("walk", "run", 1)

    chain.get_transition_probability("idle", "walk")  # 0.75
    list(chain.walk("idle", steps=5))
    ```

Chains are not thread-safe; share one between threads only behind a lock.

Package-level exports: ``Chain``, ``load_chain``, and the error classes
``ChainError``, ``AlreadyExistsError``, ``NotFoundError``,
``InvalidWeightError``, ``NoOutgoingTransitionsError``, ``ParseError``.
"""

import markov.chain
import markov.config
import markov.exceptions


Chain = markov.chain.Chain
load_chain = markov.config.load_chain

ChainError = markov.exceptions.ChainError
AlreadyExistsError = markov.exceptions.AlreadyExistsError
NotFoundError = markov.exceptions.NotFoundError
InvalidWeightError = markov.exceptions.InvalidWeightError
NoOutgoingTransitionsError = markov.exceptions.NoOutgoingTransitionsError
ParseError = markov.exceptions.ParseError
