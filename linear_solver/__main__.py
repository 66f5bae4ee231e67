"""
CLI entry point. Run as: python -m linear_solver --domain <name>
"""

import argparse

from .core.engine import make_solver_state, run_solver
from .core.proof import print_minimum
from .visualization import print_state, print_history, export_dot
from .domains import DOMAINS


def main():
    parser = argparse.ArgumentParser(description="Linear solver: rewrite facts until a cycle")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="walk",
        help="Which rule set to run",
    )
    parser.add_argument("--steps", type=int, default=None, help="Max steps (default: unbounded)")
    parser.add_argument("--upto",  type=int, default=100,  help="Upper bound for the primes domain")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args()

    domain = DOMAINS[args.domain]
    if args.domain == "primes":
        facts = domain["make_facts"](args.upto)
    else:
        facts = domain["make_facts"]()

    state = make_solver_state(facts)

    print(f"Domain: {args.domain} ({domain['description']})")
    print_state(state)

    try:
        state = run_solver(
            state, domain["infer"],
            max_steps=args.steps,
            verbose=not args.quiet,
        )
    except KeyboardInterrupt:
        print("\nInterrupted.")

    print_state(state)
    if not args.quiet:
        print_history(state)
    print_minimum(state)

    if args.dot:
        export_dot(state, args.dot)


if __name__ == "__main__":
    main()
