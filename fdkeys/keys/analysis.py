"""Summaries of a candidate key search: incidence matrix and prime attributes."""

import time
from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np
from numpy.typing import NDArray

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencySet
from fdkeys.keys.enumerator import enumerate_all
from fdkeys.logger import key_logger


def key_incidence_matrix(
    keys: Sequence[AttributeSet], n_attributes: int
) -> NDArray[np.bool_]:
    """
    Build a boolean matrix with one row per key and one column per attribute.

    ``matrix[k, a]`` is True if attribute ``a`` belongs to ``keys[k]``.
    """
    matrix = np.zeros((len(keys), n_attributes), dtype=bool)
    for row, key in enumerate(keys):
        matrix[row, list(key.indices)] = True
    return matrix


def prime_attributes(keys: Sequence[AttributeSet], n_attributes: int) -> AttributeSet:
    """Return the attributes that occur in at least one candidate key."""
    if not keys:
        return AttributeSet.empty()
    matrix = key_incidence_matrix(keys, n_attributes)
    return AttributeSet(np.flatnonzero(matrix.any(axis=0)).tolist())


def non_prime_attributes(
    keys: Sequence[AttributeSet], n_attributes: int
) -> AttributeSet:
    return AttributeSet.full(n_attributes) - prime_attributes(keys, n_attributes)


@dataclass
class KeyReport:
    """Result of a timed candidate key search."""

    n_attributes: int
    keys: List[AttributeSet]
    """Candidate keys in discovery order."""

    prime: AttributeSet
    non_prime: AttributeSet
    elapsed_seconds: float

    @property
    def incidence(self) -> NDArray[Any]:
        return key_incidence_matrix(self.keys, self.n_attributes)


@key_logger.log_execution
def analyse(deps: DependencySet) -> KeyReport:
    """Enumerate the candidate keys of ``deps`` and time the search."""
    start = time.perf_counter()
    keys = enumerate_all(deps.n_attributes, deps)
    elapsed = time.perf_counter() - start
    return KeyReport(
        n_attributes=deps.n_attributes,
        keys=keys,
        prime=prime_attributes(keys, deps.n_attributes),
        non_prime=non_prime_attributes(keys, deps.n_attributes),
        elapsed_seconds=elapsed,
    )
