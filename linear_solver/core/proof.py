"""
Minimal-state extraction and display.

A linear solver can both introduce and consume facts, so "the goal was
derived" is not a stable notion: a goal can be consumed again later.
Instead, every state inside the detected cycle is provable from every other
one, and the state with the fewest facts is taken as the implicit goal.
"""

from .history import Cycle, History
from .state import FactState


def minimum_index(history: History, cycle: Cycle, prefer_latest: bool = False) -> int:
    """
    History index of the fewest-fact state in `cycle`.

    Duplicates count toward the size. Ties go to the earliest index, or the
    latest one with prefer_latest=True.
    """
    if not len(cycle):
        raise ValueError(f"Empty cycle range: {cycle}")
    indices = cycle.indices()
    if prefer_latest:
        indices = reversed(indices)
    return min(indices, key=lambda i: len(history[i]))


def extract_minimum(history: History, cycle: Cycle, prefer_latest: bool = False) -> FactState:
    """The fewest-fact state in `cycle`, facts in their original order."""
    return history[minimum_index(history, cycle, prefer_latest)]


def found_cycle(state) -> bool:
    """Stop condition: has the solver closed a cycle or reached a fixpoint?"""
    return state.cycle is not None


def print_minimum(state):
    """Pretty-print the minimal state of a finished solve."""
    if state.cycle is None:
        print(f"No cycle found ({state.halt_reason or 'not halted'}).")
        return
    cycle = state.cycle
    index = minimum_index(state.history, cycle)
    minimum = state.history[index]
    print(f"\n{'='*60}")
    if cycle.kind == "fixpoint":
        print(f"FIXPOINT at state {cycle.start}")
    else:
        print(f"CYCLE of length {len(cycle)}: states {cycle.start}..{cycle.end - 1}"
              f" (state {cycle.end} repeats state {cycle.start})")
    print(f"{'='*60}")
    print(f"  Minimum ({len(minimum)} facts, state {index}):")
    for i, fact in enumerate(minimum):
        print(f"  {i+1}. {fact}")
    print(f"{'='*60}")
