"""
Rewrite operations: the whole vocabulary a rule oracle can use.

An oracle looks at the current state and returns at most one of these,
or None when no rule applies. There are exactly five kinds:

    Propagate(fact)                  add a fact, remove nothing
    RemoveOneAsTrue(fact)            one fact is tautological: consume it
    RemoveManyAsTrue(facts)          facts are jointly tautological: consume them
    Replace(from_facts, to_fact)     consume from_facts, produce to_fact
    ReplaceOne(from_fact, to_fact)   Replace with a single source fact

Every fact named as a source must be present in the state the operation is
applied to. Naming an absent fact is a logic error in the oracle and the
step applier fails fast on it (see core.apply.MissingFactError).

Rule authors should build replacements with `replace` / `replace_one`
below: they check the cache and demote to a removal when the target fact
already exists, so no duplicate is introduced. The step applier performs
the same demotion for directly constructed Replace / ReplaceOne.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Propagate:
    """Add `fact` without removing anything."""
    fact: object

    def describe(self):
        return f"propagate {self.fact}"


@dataclass(frozen=True)
class RemoveOneAsTrue:
    """`fact` is tautological: remove one occurrence, add nothing."""
    fact: object

    def describe(self):
        return f"{self.fact} <=> true"


@dataclass(frozen=True)
class RemoveManyAsTrue:
    """`facts` are jointly tautological: remove one occurrence of each."""
    facts: tuple

    def __post_init__(self):
        object.__setattr__(self, "facts", tuple(self.facts))

    def describe(self):
        return f"{', '.join(str(f) for f in self.facts)} <=> true"


@dataclass(frozen=True)
class Replace:
    """Consume `from_facts` and produce `to_fact` (unless already present)."""
    from_facts: tuple
    to_fact: object

    def __post_init__(self):
        object.__setattr__(self, "from_facts", tuple(self.from_facts))

    def describe(self):
        return f"{', '.join(str(f) for f in self.from_facts)} <=> {self.to_fact}"


@dataclass(frozen=True)
class ReplaceOne:
    """Consume `from_fact` and produce `to_fact` (unless already present)."""
    from_fact: object
    to_fact: object

    def describe(self):
        return f"{self.from_fact} <=> {self.to_fact}"


Inference = Union[Propagate, RemoveOneAsTrue, RemoveManyAsTrue, Replace, ReplaceOne]

INFERENCE_KINDS = (Propagate, RemoveOneAsTrue, RemoveManyAsTrue, Replace, ReplaceOne)


def replace(from_facts, to_fact, cache) -> Inference:
    """
    Replace `from_facts` with `to_fact`, checking the cache.

    Returns RemoveManyAsTrue if `to_fact` already exists, Replace otherwise.
    """
    if to_fact in cache:
        return RemoveManyAsTrue(tuple(from_facts))
    return Replace(tuple(from_facts), to_fact)


def replace_one(from_fact, to_fact, cache) -> Inference:
    """
    Replace `from_fact` with `to_fact`, checking the cache.

    Returns RemoveOneAsTrue if `to_fact` already exists, ReplaceOne otherwise.
    """
    if to_fact in cache:
        return RemoveOneAsTrue(from_fact)
    return ReplaceOne(from_fact, to_fact)


def consumed_facts(inference: Inference) -> tuple:
    """The source facts an operation removes (before any demotion)."""
    if isinstance(inference, Propagate):
        return ()
    if isinstance(inference, RemoveOneAsTrue):
        return (inference.fact,)
    if isinstance(inference, RemoveManyAsTrue):
        return inference.facts
    if isinstance(inference, Replace):
        return inference.from_facts
    if isinstance(inference, ReplaceOne):
        return (inference.from_fact,)
    raise TypeError(f"Unknown inference: {inference!r}")
