"""
linear_solver: a fact-rewriting engine for automated reasoning.

Linear solving means facts can be consumed as well as produced. A rule
oracle proposes one rewrite at a time (add a fact, remove tautological
facts, or replace facts with another); the solver applies rewrites until
the sequence of states repeats, and returns the state with the fewest
facts in that cycle as the implicit goal.

Usage:
    python -m linear_solver --domain walk
    python -m linear_solver --domain less_equal
    python -m linear_solver --domain primes --upto 50
"""

from .core.state import FactState
from .core.inference import (
    Inference, Propagate, RemoveOneAsTrue, RemoveManyAsTrue, Replace, ReplaceOne,
    replace, replace_one,
)
from .core.apply import apply_inference, MissingFactError
from .core.history import History, Cycle, detect_cycle
from .core.engine import (
    RuleOracle, SolverState, InconclusiveError,
    make_solver_state, solver_step, run_solver, solve, solve_minimum,
)
from .core.proof import minimum_index, extract_minimum, found_cycle, print_minimum

__all__ = [
    "FactState",
    "Inference", "Propagate", "RemoveOneAsTrue", "RemoveManyAsTrue",
    "Replace", "ReplaceOne", "replace", "replace_one",
    "apply_inference", "MissingFactError",
    "History", "Cycle", "detect_cycle",
    "RuleOracle", "SolverState", "InconclusiveError",
    "make_solver_state", "solver_step", "run_solver", "solve", "solve_minimum",
    "minimum_index", "extract_minimum", "found_cycle", "print_minimum",
]
