"""
The step applier: one rewrite operation turns one FactState into the next.

Pure function of (state, inference). It never looks at the history and
never mutates its input; the new state gets its own fact tuple and its own
membership index, edited from the parent's instead of recounted.

Removal always takes the first occurrence of a fact, so the relative order
of everything that survives is preserved. New facts go to the end.
"""

from collections import Counter

from .state import FactState
from .inference import (
    Inference, INFERENCE_KINDS,
    Propagate, Replace, ReplaceOne,
    consumed_facts,
)


class MissingFactError(ValueError):
    """An operation tried to consume a fact that is not in the state.

    This is a bug in the rule oracle, not a recoverable condition.
    """

    def __init__(self, fact, inference, state):
        self.fact = fact
        self.inference = inference
        self.state = state
        super().__init__(
            f"Cannot apply {type(inference).__name__} ({inference.describe()}): "
            f"{fact!r} is not present (often enough) in state [{state.name}]"
        )


def apply_inference(state: FactState, inference: Inference) -> FactState:
    """Apply one rewrite operation and return the next state."""
    if not isinstance(inference, INFERENCE_KINDS):
        raise TypeError(f"Unknown inference: {inference!r}")

    if isinstance(inference, Propagate):
        return _extend(list(state.facts), state.counts.copy(), inference.fact)

    remove = consumed_facts(inference)
    _check_present(state, remove, inference)
    facts, counts = _remove_each(state, remove)

    if isinstance(inference, (Replace, ReplaceOne)):
        # Target already known: the replacement degenerates to a removal.
        if inference.to_fact not in state:
            return _extend(facts, counts, inference.to_fact)

    return FactState(facts, counts)


def _check_present(state: FactState, facts, inference):
    needed = Counter(facts)
    for fact, n in needed.items():
        if state.count(fact) < n:
            raise MissingFactError(fact, inference, state)


def _remove_each(state: FactState, remove):
    facts = list(state.facts)
    counts = state.counts.copy()
    for fact in remove:
        facts.remove(fact)
        counts[fact] -= 1
        if counts[fact] == 0:
            del counts[fact]
    return facts, counts


def _extend(facts: list, counts: Counter, fact) -> FactState:
    facts.append(fact)
    counts[fact] += 1
    return FactState(facts, counts)
