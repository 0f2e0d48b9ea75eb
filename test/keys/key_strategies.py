"""Hypothesis strategies and brute-force oracles shared by the key tests."""

from typing import List

from hypothesis import strategies as st

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencySet
from fdkeys.keys.closure import is_superkey

# Attribute ids of the reference dataset
A, B, C, D, E, F, G, H, I = range(9)


@st.composite
def dependency_sets(draw, min_attributes: int = 1, max_attributes: int = 6):
    n = draw(st.integers(min_value=min_attributes, max_value=max_attributes))
    side = st.integers(min_value=1, max_value=(1 << n) - 1).map(AttributeSet.from_bitmask)
    pairs = draw(st.lists(st.tuples(side, side), max_size=8))
    return DependencySet(n, pairs)


@st.composite
def dependency_sets_with_seed(draw, max_attributes: int = 6):
    deps = draw(dependency_sets(max_attributes=max_attributes))
    mask = draw(st.integers(min_value=0, max_value=(1 << deps.n_attributes) - 1))
    return deps, AttributeSet.from_bitmask(mask)


def all_subsets(n_attributes: int) -> List[AttributeSet]:
    return [AttributeSet.from_bitmask(mask) for mask in range(1 << n_attributes)]


def brute_force_keys(deps: DependencySet) -> List[AttributeSet]:
    """Every minimal superkey, found by testing all subsets of the universe."""
    superkeys = [s for s in all_subsets(deps.n_attributes) if is_superkey(s, deps)]
    return [
        s
        for s in superkeys
        if not any(s.contains(other) and s != other for other in superkeys)
    ]
