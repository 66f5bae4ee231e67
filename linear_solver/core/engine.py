"""
The linear solver main loop.

Ask the oracle for one rewrite, apply it, record the new state, and stop as
soon as a state repeats (a cycle) or the oracle has nothing to say (a
fixpoint). The oracle is entirely pluggable; this loop knows nothing about
what the facts mean.

Assumes the oracle is deterministic and pure: the same state content must
always yield the same inference. An impure oracle can cause spurious cycles
or non-termination, and the loop cannot tell.

Without a step limit the loop is unbounded: an oracle that keeps producing
new, distinct states never terminates. Pass max_steps to turn that into an
inconclusive outcome instead.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from .state import FactState
from .inference import Inference
from .apply import apply_inference
from .history import Cycle, History, detect_cycle
from .proof import extract_minimum


class RuleOracle(Protocol):
    """Selects at most one rewrite for the current state."""

    def infer(self, cache, facts: tuple) -> Optional[Inference]:
        ...


class InconclusiveError(RuntimeError):
    """The step limit was reached before any cycle or fixpoint."""


@dataclass
class SolverState:
    """
    Full state of one solve.

    history:      every state visited, in order
    current:      the state the oracle is asked about next
    trace:        log of what happened at each step
    cycle:        set once halted on a cycle or fixpoint
    """
    history: History = field(default_factory=History)
    current: Optional[FactState] = None
    trace: list = field(default_factory=list)
    step: int = 0
    halted: bool = False
    halt_reason: str = ""
    cycle: Optional[Cycle] = None


def make_solver_state(facts) -> SolverState:
    initial = facts if isinstance(facts, FactState) else FactState(facts)
    return SolverState(history=History([initial]), current=initial)


def as_infer_fn(oracle) -> Callable:
    """Accept either a RuleOracle object or a plain infer(cache, facts) function."""
    infer = getattr(oracle, "infer", None)
    if callable(infer):
        return infer
    if callable(oracle):
        return oracle
    raise TypeError(f"Not a rule oracle: {oracle!r}")


def solver_step(state: SolverState, infer: Callable, verbose: bool = True) -> SolverState:
    """
    Execute one step of the solver loop.

    Args:
        state:    current SolverState
        infer:    infer(cache, facts) -> Inference | None
        verbose:  print progress
    """
    if state.halted:
        return state

    current = state.current
    inference = infer(current.cache, current.facts)

    if inference is None:
        state.halted = True
        state.halt_reason = "fixpoint"
        state.cycle = state.history.fixpoint()
        if verbose:
            print(f"  [fixpoint] no rule applies to state {state.cycle.start}")
        return state

    state.step += 1
    if verbose:
        print(f"\n--- Step {state.step}: {inference.describe()} ---")

    new = apply_inference(current, inference)
    state.history.append(new)
    cycle = detect_cycle(state.history)

    state.trace.append({
        "step": state.step,
        "inference": inference.describe(),
        "kind": type(inference).__name__,
        "size": len(new),
        "repeats": cycle.start if cycle else None,
    })

    if verbose:
        print(f"  State ({len(new)}): {new.name}")

    if cycle is not None:
        state.halted = True
        state.halt_reason = "cycle"
        state.cycle = cycle
        if verbose:
            print(f"  [cycle] state {len(state.history) - 1} repeats state {cycle.start}")
        return state

    state.current = new
    return state


def run_solver(
    state: SolverState,
    oracle,
    max_steps: Optional[int] = None,
    stop_fn: Optional[Callable] = None,
    verbose: bool = True,
) -> SolverState:
    """
    Run the solver loop until a cycle or fixpoint, stop condition, or max_steps.

    Args:
        state:      initial state (see make_solver_state)
        oracle:     RuleOracle or infer(cache, facts) function
        max_steps:  safety limit; None means unbounded
        stop_fn:    stop_fn(state) -> bool; halt early if True
        verbose:    print progress
    """
    infer = as_infer_fn(oracle)
    while not state.halted:
        if max_steps is not None and state.step >= max_steps:
            state.halt_reason = "step limit reached"
            break
        if stop_fn and stop_fn(state):
            state.halted = True
            state.halt_reason = "stop condition met"
            break
        state = solver_step(state, infer, verbose=verbose)
    return state


def solve(initial_facts, oracle, max_steps: Optional[int] = None, verbose: bool = False) -> list:
    """
    Rewrite `initial_facts` with `oracle` and return the minimal state's facts.

    Raises InconclusiveError if max_steps is hit before a cycle or fixpoint.
    """
    state = run_solver(make_solver_state(initial_facts), oracle,
                       max_steps=max_steps, verbose=verbose)
    if state.cycle is None:
        raise InconclusiveError(
            f"No cycle found within {state.step} steps "
            f"({len(state.history)} states visited)"
        )
    return list(extract_minimum(state.history, state.cycle).facts)


solve_minimum = solve
