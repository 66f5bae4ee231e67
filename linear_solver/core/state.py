"""
Core data structure: FactState.

A FactState is one snapshot of the fact collection: an ordered sequence of
facts plus a membership index. Nothing in here depends on rules, domains,
or the solver loop.

Facts are opaque to the engine. They only need equality and a stable hash:
    strings       "left", "up"
    tuples        ("<=", "X", "Y"), ("prime", 7)
    any frozen dataclass or enum member

Duplicates are meaningful (linear logic: consuming one copy of a fact leaves
the other). So two states are equal when they hold the same facts the same
number of times, regardless of order.
"""

from collections import Counter
from dataclasses import dataclass, field


@dataclass
class FactState:
    """
    An ordered multiset of facts.

    facts:  the facts in their current order (a tuple, never mutated)
    counts: occurrences per distinct fact; zero counts are never stored

    The membership index is maintained incrementally by the step applier
    (copy of the parent's Counter plus the edits of one operation) instead
    of being recounted from `facts` on every step.
    """
    facts: tuple = ()
    counts: Counter = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        self.facts = tuple(self.facts)
        if self.counts is None:
            self.counts = Counter(self.facts)
        self._fingerprint = None

    @property
    def cache(self):
        """Read-only set-like view of the distinct facts present."""
        return self.counts.keys()

    @property
    def name(self):
        if not self.facts:
            return "{}"
        return ", ".join(_fact_name(f) for f in self.facts)

    def count(self, fact) -> int:
        return self.counts.get(fact, 0)

    def __len__(self):
        return len(self.facts)

    def __iter__(self):
        return iter(self.facts)

    def __contains__(self, fact):
        return fact in self.counts

    def __hash__(self):
        if self._fingerprint is None:
            self._fingerprint = hash(frozenset(self.counts.items()))
        return self._fingerprint

    def __eq__(self, other):
        return isinstance(other, FactState) and self.counts == other.counts

    def __repr__(self):
        return f"FactState({self.name})"


def _fact_name(fact) -> str:
    name = getattr(fact, "name", None)
    if isinstance(name, str):
        return name
    return str(fact)
