"""
Property-based and unit tests for the solver loop.

Core invariants:
    - History grows by exactly one state per step
    - A no-op oracle returns the initial facts unchanged
    - A cycle through states of sizes 3, 1, 2 yields the size-1 state
    - States before the cycle are never returned
    - Repeated solves of the same input give the same result
    - max_steps turns a runaway solve into an inconclusive outcome
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linear_solver.core.state import FactState
from linear_solver.core.inference import (
    Propagate, RemoveOneAsTrue, RemoveManyAsTrue, ReplaceOne, replace_one,
)
from linear_solver.core.apply import MissingFactError
from linear_solver.core.history import Cycle
from linear_solver.core.engine import (
    make_solver_state, solver_step, run_solver, solve, InconclusiveError,
)
from linear_solver.core.proof import found_cycle


# ── Helpers ──────────────────────────────────────────────────────────────────

def null_infer(cache, facts):
    """Never applies a rule. Used to test loop mechanics."""
    return None


def rotating_infer(cache, facts):
    """Cycles {p, q, r} -> {p} -> {p, q} -> {p, q, r}: sizes 3, 1, 2."""
    if "s" in cache:
        return RemoveOneAsTrue("s")
    if "r" in cache:
        return RemoveManyAsTrue(["q", "r"])
    if "q" in cache:
        return Propagate("r")
    return Propagate("q") if "p" in cache else Propagate("p")


def counting_infer(cache, facts):
    """Propagates 0, 1, 2, ... up to 5, checking the cache first."""
    n = len(facts)
    if n <= 5 and n not in cache:
        return Propagate(n)
    return None


def swap_infer(cache, facts):
    """Flips between {a} and {b}: a two-state cycle of equal sizes."""
    if "a" in cache:
        return ReplaceOne("a", "b")
    return ReplaceOne("b", "a")


def runaway_infer(cache, facts):
    """Always adds something new; never cycles."""
    return Propagate(len(facts))


class RotatingOracle:
    def infer(self, cache, facts):
        return rotating_infer(cache, facts)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestSolverStep:
    def test_no_rule_halts_at_fixpoint(self):
        state = make_solver_state(["a"])
        state = solver_step(state, null_infer, verbose=False)
        assert state.halted
        assert state.halt_reason == "fixpoint"
        assert state.cycle == Cycle(0, 1, "fixpoint")
        assert state.step == 0

    def test_step_appends_one_state(self):
        state = make_solver_state(["p"])
        state = solver_step(state, rotating_infer, verbose=False)
        assert len(state.history) == 2
        assert state.current == FactState(["p", "q"])
        assert state.step == 1

    def test_trace_recorded(self):
        state = make_solver_state(["p"])
        state = solver_step(state, rotating_infer, verbose=False)
        assert state.trace == [{
            "step": 1, "inference": "propagate q", "kind": "Propagate",
            "size": 2, "repeats": None,
        }]

    def test_halted_state_is_left_alone(self):
        state = make_solver_state(["a"])
        state = solver_step(state, null_infer, verbose=False)
        state = solver_step(state, rotating_infer, verbose=False)
        assert state.step == 0
        assert len(state.history) == 1

    def test_cycle_detected(self):
        state = make_solver_state(["p", "q", "r"])
        for _ in range(3):
            state = solver_step(state, rotating_infer, verbose=False)
        assert state.halted
        assert state.halt_reason == "cycle"
        assert state.cycle == Cycle(0, 3, "cycle")
        assert len(state.history) == 4
        assert state.trace[-1]["repeats"] == 0

    def test_contract_violation_propagates(self):
        def bad_infer(cache, facts):
            return RemoveOneAsTrue("missing")
        state = make_solver_state(["a"])
        with pytest.raises(MissingFactError):
            solver_step(state, bad_infer, verbose=False)

    def test_verbose_prints_progress(self, capsys):
        state = make_solver_state(["p"])
        solver_step(state, rotating_infer, verbose=True)
        out = capsys.readouterr().out
        assert "Step 1: propagate q" in out
        assert "p, q" in out


class TestRunSolver:
    def test_runs_until_cycle(self):
        state = run_solver(make_solver_state(["p", "q", "r"]), rotating_infer, verbose=False)
        assert found_cycle(state)
        assert state.step == 3

    def test_accepts_oracle_object(self):
        state = run_solver(make_solver_state(["p"]), RotatingOracle(), verbose=False)
        assert state.cycle is not None

    def test_rejects_non_oracle(self):
        with pytest.raises(TypeError, match="Not a rule oracle"):
            run_solver(make_solver_state(["a"]), 42, verbose=False)

    def test_max_steps_leaves_cycle_unset(self):
        state = run_solver(make_solver_state([]), runaway_infer, max_steps=10, verbose=False)
        assert state.step == 10
        assert state.cycle is None
        assert state.halt_reason == "step limit reached"
        assert len(state.history) == 11

    def test_stop_fn_halts_early(self):
        state = run_solver(make_solver_state([]), runaway_infer,
                           stop_fn=lambda s: s.step >= 3, verbose=False)
        assert state.step == 3
        assert state.halt_reason == "stop condition met"


class TestSolve:
    def test_no_op_oracle_returns_initial_facts(self):
        assert solve(["A", "B"], null_infer) == ["A", "B"]

    def test_no_op_keeps_duplicates_and_order(self):
        assert solve(["b", "a", "b"], null_infer) == ["b", "a", "b"]

    def test_empty_input(self):
        assert solve([], null_infer) == []

    def test_cycle_minimality(self):
        assert solve(["p", "q", "r"], rotating_infer) == ["p"]

    def test_tail_states_are_not_candidates(self):
        # [] -> [p] -> [p, q] -> [p, q, r] -> [p]: the empty start is outside the cycle
        assert solve([], rotating_infer) == ["p"]

    def test_larger_tail_state_is_dropped(self):
        assert solve(["s", "p", "q", "r"], rotating_infer) == ["p"]

    def test_tie_breaks_to_earliest(self):
        assert solve(["a"], swap_infer) == ["a"]
        assert solve(["b"], swap_infer) == ["b"]

    def test_pure_propagation_reaches_fixpoint(self):
        state = run_solver(make_solver_state([]), counting_infer, verbose=False)
        assert state.halt_reason == "fixpoint"
        assert solve([], counting_infer) == [0, 1, 2, 3, 4, 5]
        assert solve([], counting_infer) == list(state.history.last)

    def test_max_steps_raises_inconclusive(self):
        with pytest.raises(InconclusiveError, match="No cycle found within 20 steps"):
            solve([], runaway_infer, max_steps=20)

    def test_inconclusive_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            solve([], runaway_infer, max_steps=1)

    def test_oracle_sees_tuple_and_cache(self):
        seen = []

        def recording_infer(cache, facts):
            seen.append((set(cache), facts))
            return None

        solve(["a", "a", "b"], recording_infer)
        assert seen == [({"a", "b"}, ("a", "a", "b"))]


# ── Property-based tests ─────────────────────────────────────────────────────

class TestSolverProperties:
    @given(st.lists(st.sampled_from("abcd"), max_size=8))
    def test_deterministic(self, facts):
        def pair_infer(cache, current):
            if "a" in cache and "b" in cache:
                return RemoveManyAsTrue(["a", "b"])
            if "c" in cache:
                return replace_one("c", "d", cache)
            return None
        assert solve(facts, pair_infer) == solve(list(facts), pair_infer)

    @given(st.lists(st.integers(min_value=-5, max_value=5), max_size=8))
    def test_no_op_is_identity(self, facts):
        assert solve(facts, null_infer) == facts

    @given(st.lists(st.sampled_from("abcd"), max_size=8))
    def test_history_grows_one_per_step(self, facts):
        def drain_infer(cache, current):
            return RemoveOneAsTrue(current[0]) if current else None
        state = run_solver(make_solver_state(facts), drain_infer, verbose=False)
        assert len(state.history) == state.step + 1
        assert state.step == len(facts)
        assert solve(facts, drain_infer) == []

    @given(st.integers(min_value=1, max_value=30))
    def test_steps_bounded_by_max(self, max_steps):
        state = run_solver(make_solver_state([]), runaway_infer,
                           max_steps=max_steps, verbose=False)
        assert state.step <= max_steps
