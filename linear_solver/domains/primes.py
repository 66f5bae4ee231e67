"""
Domain: the sieve of Eratosthenes as a rewrite system.

Facts:
    ("upto", n)    numbers up to n still have to be enumerated
    ("prime", n)   n is a prime candidate

Starting from ("upto", N), each number is introduced as a candidate and the
counter is stepped down. A candidate divisible by another candidate is
removed as tautological, so only divisibility by primes is ever checked
and the final state holds exactly the primes up to N.
"""

from ..core.inference import Propagate, RemoveOneAsTrue, replace_one


def prime(n: int) -> tuple:
    return ("prime", n)


def upto(n: int) -> tuple:
    return ("upto", n)


def primes_infer(cache, facts):
    # Remove composites first.
    for i, ea in enumerate(facts):
        if ea[0] != "prime":
            continue
        for j, eb in enumerate(facts):
            if i != j and eb[0] == "prime" and ea[1] % eb[1] == 0:
                return RemoveOneAsTrue(ea)

    for ea in facts:
        if ea[0] != "upto":
            continue
        n = ea[1]
        if n <= 1:
            return RemoveOneAsTrue(ea)
        if prime(n) not in cache:
            return Propagate(prime(n))
        return replace_one(ea, upto(n - 1), cache)
    return None


def make_primes_facts(n: int = 100) -> list:
    if n < 1:
        raise ValueError(f"Upper bound must be positive, got {n}")
    return [upto(n)]
