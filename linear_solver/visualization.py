"""
Visualization and reporting utilities.
"""

from .core.engine import SolverState
from .core.proof import minimum_index


def print_state(state: SolverState):
    """Print a summary of the current solver state."""
    print(f"\n{'='*60}")
    print(f"Step: {state.step}")
    print(f"States visited: {len(state.history)}")
    if state.current is not None:
        print(f"Current ({len(state.current)}):")
        for fact in state.current:
            print(f"  {fact}")
    if state.halted or state.halt_reason:
        print(f"Halted: {state.halt_reason}")
    print(f"{'='*60}")


def print_history(state: SolverState):
    """Print the rewrite history."""
    print(f"\n{'='*60}")
    print("Rewrite history:")
    print(f"{'='*60}")
    for entry in state.trace:
        repeat = f"  [repeats state {entry['repeats']}]" if entry["repeats"] is not None else ""
        print(f"  Step {entry['step']}: {entry['inference']} -> {entry['size']} facts{repeat}")


def export_dot(state: SolverState, path="linear_solver_states.dot"):
    """Export the visited states as a DOT file for Graphviz visualization.

    States inside the cycle are highlighted; the minimal one is drawn bold.
    The edge that closes the cycle points back at the repeated state.
    """
    cycle = state.cycle
    in_cycle = set(cycle.indices()) if cycle else set()
    best = minimum_index(state.history, cycle) if cycle else None

    with open(path, "w") as f:
        f.write("digraph linear_solver {\n")
        f.write("  rankdir=LR;\n")
        f.write("  node [shape=box, style=rounded];\n")

        repeat_index = cycle.end if cycle and cycle.kind == "cycle" else None
        for i, fact_state in enumerate(state.history):
            if i == repeat_index:
                continue
            label = f"{i}: {fact_state.name}".replace('"', '\\"')
            color = "lightblue" if i in in_cycle else "lightgray"
            extra = ", penwidth=3" if i == best else ""
            f.write(f'  "s{i}" [label="{label}", fillcolor={color}, style=filled{extra}];\n')

        for entry in state.trace:
            source = entry["step"] - 1
            target = entry["repeats"] if entry["repeats"] is not None else entry["step"]
            label = entry["inference"].replace('"', '\\"')
            f.write(f'  "s{source}" -> "s{target}" [label="{label}"];\n')

        if cycle and cycle.kind == "fixpoint":
            f.write(f'  "s{cycle.start}" -> "s{cycle.start}" [label="fixpoint", style=dashed];\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
