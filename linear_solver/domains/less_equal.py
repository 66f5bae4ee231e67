"""
Domain: less-or-equal reasoning over variables.

Facts:
    ("<=", "X", "Y")   X <= Y
    ("=", "X", "Y")    X = Y

Simplification rules (tried first, so the smallest state is reached before
anything new is introduced):

    X <= X                    <=>  true
    (X <= Y) & (Y <= X)       <=>  X = Y
    (X = Y) & (Y <= Z)        <=>  (X = Y) & (X <= Z)
    (X = Y) & (Z <= Y)        <=>  (X = Y) & (Z <= X)
    (X = Y) & (Y = Z)         <=>  (X = Y) & (X = Z)

Propagation rule (tried last):

    (X <= Y) & (Y <= Z)       =>   X <= Z

From X <= Y, Y <= Z, Z <= X this proves Y = Z, Y = X.
"""

from ..core.inference import Propagate, RemoveOneAsTrue, replace, replace_one


def le(a, b) -> tuple:
    return ("<=", a, b)


def eq(a, b) -> tuple:
    return ("=", a, b)


def is_le(fact) -> bool:
    return fact[0] == "<="


def is_eq(fact) -> bool:
    return fact[0] == "="


def less_equal_infer(cache, facts):
    for ea in facts:
        if is_le(ea):
            _, a, b = ea
            if a == b:
                return RemoveOneAsTrue(ea)
            for eb in facts:
                if is_le(eb):
                    _, c, d = eb
                    if a == d and b == c:
                        return replace([ea, eb], eq(a, b), cache)

        if is_eq(ea):
            _, a, b = ea
            for eb in facts:
                if is_le(eb):
                    _, c, d = eb
                    if c == b:
                        return replace_one(eb, le(a, d), cache)
                    if d == b:
                        return replace_one(eb, le(c, a), cache)
                if is_eq(eb):
                    _, c, d = eb
                    if b == c:
                        return replace_one(eb, eq(a, d), cache)

    for ea in facts:
        if is_le(ea):
            _, a, b = ea
            for eb in facts:
                if is_le(eb):
                    _, c, d = eb
                    if b == c:
                        new_fact = le(a, d)
                        if new_fact not in cache:
                            return Propagate(new_fact)
    return None


SAMPLE_FACTS = [le("X", "Y"), le("Y", "Z"), le("Z", "X")]


def make_less_equal_facts() -> list:
    return list(SAMPLE_FACTS)
