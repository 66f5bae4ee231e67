"""
Domain registry.

Each domain is a dict describing how to configure the solver:
    make_facts:   () -> list            initial facts
    infer:        (cache, facts) -> Inference | None
    description:  str
"""

from .walk import make_walk_facts, walk_infer
from .less_equal import make_less_equal_facts, less_equal_infer
from .primes import make_primes_facts, primes_infer


DOMAINS = {
    "walk": {
        "make_facts":  make_walk_facts,
        "infer":       walk_infer,
        "description": "Walk reduction: opposite moves cancel pairwise",
    },
    "less_equal": {
        "make_facts":  make_less_equal_facts,
        "infer":       less_equal_infer,
        "description": "Less or equal: X <= Y, Y <= Z, Z <= X proves Y = Z, Y = X",
    },
    "primes": {
        "make_facts":  make_primes_facts,
        "infer":       primes_infer,
        "description": "Sieve of Eratosthenes: composites are consumed, primes remain",
    },
}
