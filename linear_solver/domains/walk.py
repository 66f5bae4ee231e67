"""
Domain: walk reduction.

Facts are single moves on a grid. A left move and a right move cancel,
as do an up move and a down move, so the walk

    left, left, up, left, right, down, down, right

reduces to the net displacement

    left, down

The simplest demo of consumption: a pair of facts is jointly tautological
and both are removed, one occurrence each.
"""

from ..core.inference import RemoveManyAsTrue


LEFT, RIGHT, UP, DOWN = "left", "right", "up", "down"

SAMPLE_WALK = [LEFT, LEFT, UP, LEFT, RIGHT, DOWN, DOWN, RIGHT]


def walk_infer(cache, facts):
    # Simplification only; there is nothing to propagate.
    if LEFT in cache and RIGHT in cache:
        return RemoveManyAsTrue((LEFT, RIGHT))
    if UP in cache and DOWN in cache:
        return RemoveManyAsTrue((UP, DOWN))
    return None


def make_walk_facts(walk=None) -> list:
    return list(SAMPLE_WALK if walk is None else walk)
