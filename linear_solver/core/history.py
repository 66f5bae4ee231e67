"""
History tracking and cycle detection.

Every state the solver visits is appended to the History, in order. A cycle
is found when a newly appended state equals (as a multiset) a state already
recorded: the states from that earlier index up to, but excluding, the
repeat form the cycle.

Lookups go through a dict keyed by FactState. FactState hashes by its
multiset fingerprint and compares by multiset equality, so the dict gives
average O(1) detection with an exact equality check behind every hash hit.
A plain linear scan of the history would give the same answers in O(n) per
step.
"""

from dataclasses import dataclass
from typing import Optional

from .state import FactState


@dataclass(frozen=True)
class Cycle:
    """
    A half-open range [start, end) of history indices.

    kind == "cycle":     history[end] repeated history[start]
    kind == "fixpoint":  no rule applied to history[start]; end == start + 1
    """
    start: int
    end: int
    kind: str = "cycle"

    def __len__(self):
        return self.end - self.start

    def indices(self):
        return range(self.start, self.end)

    def states(self, history: "History") -> list:
        return history.states(self.start, self.end)


class History:
    """Append-only record of visited states with a first-occurrence index."""

    def __init__(self, states=()):
        self._states = []
        self._first_seen = {}
        for state in states:
            self.append(state)

    def append(self, state: FactState) -> int:
        index = len(self._states)
        self._states.append(state)
        self._first_seen.setdefault(state, index)
        return index

    def find(self, state: FactState) -> Optional[int]:
        """Earliest index holding a state equal to `state`, or None."""
        return self._first_seen.get(state)

    def find_earlier(self, index: int) -> Optional[int]:
        """Earliest index before `index` whose state equals history[index]."""
        first = self._first_seen.get(self._states[index])
        if first is not None and first < index:
            return first
        return None

    def fixpoint(self) -> Cycle:
        """The last state as a self-cycle of length 1."""
        last = len(self._states) - 1
        return Cycle(last, last + 1, "fixpoint")

    def states(self, start: int = 0, end: Optional[int] = None) -> list:
        return self._states[start:end]

    @property
    def last(self) -> FactState:
        return self._states[-1]

    def __getitem__(self, index):
        return self._states[index]

    def __len__(self):
        return len(self._states)

    def __iter__(self):
        return iter(self._states)


def detect_cycle(history: History) -> Optional[Cycle]:
    """
    Check whether the most recently appended state repeats an earlier one.

    Returns the cycle [i, len(history) - 1) if it does, None otherwise.
    """
    if not len(history):
        return None
    last = len(history) - 1
    earlier = history.find_earlier(last)
    if earlier is None:
        return None
    return Cycle(earlier, last, "cycle")
