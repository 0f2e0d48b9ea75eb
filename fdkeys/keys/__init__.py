"""Closure, key reduction and candidate key enumeration."""

from fdkeys.keys.closure import closure, is_superkey
from fdkeys.keys.reducer import minimize
from fdkeys.keys.enumerator import enumerate_all, iter_candidate_keys
from fdkeys.keys.analysis import (
    KeyReport,
    analyse,
    key_incidence_matrix,
    non_prime_attributes,
    prime_attributes,
)

__all__ = [
    "closure",
    "is_superkey",
    "minimize",
    "enumerate_all",
    "iter_candidate_keys",
    "KeyReport",
    "analyse",
    "key_incidence_matrix",
    "non_prime_attributes",
    "prime_attributes",
]
