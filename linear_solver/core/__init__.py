from .state import FactState
from .inference import (
    Inference, Propagate, RemoveOneAsTrue, RemoveManyAsTrue, Replace, ReplaceOne,
    replace, replace_one,
)
from .apply import apply_inference, MissingFactError
from .history import History, Cycle, detect_cycle
from .engine import (
    RuleOracle, SolverState, InconclusiveError,
    make_solver_state, solver_step, run_solver, solve, solve_minimum,
)
from .proof import minimum_index, extract_minimum, found_cycle, print_minimum

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
