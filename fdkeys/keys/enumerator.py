"""
Discovery of every candidate key of a relation (Lucchesi-Osborn).
"""

import logging
from collections import deque
from typing import Deque, Iterable, Iterator, List, Set, Union

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencyPair, DependencySet
from fdkeys.exceptions import InvalidAttributeError
from fdkeys.keys.reducer import minimize
from fdkeys.logger import format_key_list, key_logger

logger = logging.getLogger(__name__)


def _as_dependency_set(
    n_attributes: int, dependencies: Union[DependencySet, Iterable[DependencyPair]]
) -> DependencySet:
    if isinstance(dependencies, DependencySet):
        if dependencies.n_attributes != n_attributes:
            raise InvalidAttributeError(
                f"Attribute count {n_attributes} does not match the dependency set "
                f"({dependencies.n_attributes})"
            )
        return dependencies
    return DependencySet(n_attributes, dependencies)


def iter_candidate_keys(
    n_attributes: int, dependencies: Union[DependencySet, Iterable[DependencyPair]]
) -> Iterator[AttributeSet]:
    """
    Yield every candidate key exactly once, in discovery order.

    The search starts from one key obtained by reducing the whole universe.
    For every known key K and dependency ``lhs -> rhs`` the set
    ``lhs | (K - rhs)`` is a superkey. When it does not contain a key found
    so far it is reduced to a key, which is new; new keys are queued and
    processed in FIFO order until the queue drains.

    Args:
        n_attributes: Size of the attribute universe.
        dependencies: A DependencySet or ``(lhs_ids, rhs_ids)`` pairs.

    Yields:
        AttributeSet: Each candidate key, first the one reduced from the universe.
    """
    deps = _as_dependency_set(n_attributes, dependencies)

    first_key = minimize(AttributeSet.full(n_attributes), deps, n_attributes)
    found: List[AttributeSet] = [first_key]
    seen: Set[int] = {first_key.bitmask}
    pending: Deque[AttributeSet] = deque([first_key])

    if not key_logger.disabled:
        key_logger.section("Candidate key search")
        key_logger.result("Initial key", first_key)
    yield first_key

    while pending:
        key = pending.popleft()
        if not key_logger.disabled:
            key_logger.subsection(f"Expanding key {key}")
        for dependency in deps:
            seed = dependency.lhs | (key - dependency.rhs)
            # Must be checked against every key found so far
            if any(seed.contains(known) for known in found):
                continue
            new_key = minimize(seed, deps, n_attributes)
            if new_key.bitmask in seen:
                continue
            seen.add(new_key.bitmask)
            found.append(new_key)
            pending.append(new_key)
            if not key_logger.disabled:
                key_logger.info(
                    f"{dependency} applied to {key} yields new key {new_key}"
                )
            yield new_key

    logger.debug("Found %d candidate keys: %s", len(found), format_key_list(found))


def enumerate_all(
    n_attributes: int, dependencies: Union[DependencySet, Iterable[DependencyPair]]
) -> List[AttributeSet]:
    """
    Return the complete, duplicate-free list of candidate keys.

    Example:
        >>> keys = enumerate_all(3, [((0,), (1,)), ((1,), (2,)), ((2,), (0,))])
        >>> [str(k) for k in keys]
        ['(C)', '(B)', '(A)']
    """
    keys = list(iter_candidate_keys(n_attributes, dependencies))
    if not key_logger.disabled:
        key_logger.result("Candidate keys", format_key_list(keys))
    return keys
