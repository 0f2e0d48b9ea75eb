from typing import Optional

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencySet


def closure(
    seed: AttributeSet, deps: DependencySet, n_attributes: Optional[int] = None
) -> AttributeSet:
    """
    Compute the attribute closure of ``seed`` under the dependencies ``deps``.

    The closure is the smallest attribute set containing ``seed`` such that for
    every dependency ``lhs -> rhs`` with ``lhs`` in the closure, ``rhs`` is in
    the closure as well. It is reached by repeated passes over ``deps`` until a
    pass adds nothing, stopping early once the closure covers the universe.

    Args:
        seed: The attribute set to close.
        deps: The functional dependencies.
        n_attributes: Size of the universe, defaults to ``deps.n_attributes``.

    Returns:
        AttributeSet: A new set; ``seed`` is left untouched.
    """
    n = deps.n_attributes if n_attributes is None else n_attributes
    result = seed.copy()
    if result.is_full(n):
        return result

    changed = True
    while changed:
        changed = False
        for dependency in deps:
            if result.contains(dependency.lhs) and not result.contains(dependency.rhs):
                result = result | dependency.rhs
                changed = True
                # A full set is trivially closed
                if result.is_full(n):
                    return result
    return result


def is_superkey(
    candidate: AttributeSet, deps: DependencySet, n_attributes: Optional[int] = None
) -> bool:
    """
    Return True if the closure of ``candidate`` is the whole universe.

    Equivalent to ``closure(candidate, deps, n).is_full(n)``, but returns as
    soon as the growing closure becomes full.
    """
    n = deps.n_attributes if n_attributes is None else n_attributes
    if candidate.is_full(n):
        return True

    reached = candidate.bitmask
    size = candidate.size
    changed = True
    while changed:
        changed = False
        for dependency in deps:
            lhs = dependency.lhs.bitmask
            rhs = dependency.rhs.bitmask
            if reached & lhs == lhs and reached & rhs != rhs:
                reached |= rhs
                size = reached.bit_count()
                changed = True
                if size == n:
                    return True
    return False
