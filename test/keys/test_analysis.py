import numpy as np

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencySet
from fdkeys.keys.analysis import (
    analyse,
    key_incidence_matrix,
    non_prime_attributes,
    prime_attributes,
)


def test_incidence_matrix():
    keys = [AttributeSet((0,)), AttributeSet((1, 2))]
    matrix = key_incidence_matrix(keys, 4)
    assert matrix.shape == (2, 4)
    assert matrix.dtype == bool
    np.testing.assert_array_equal(
        matrix,
        np.array([[True, False, False, False], [False, True, True, False]]),
    )


def test_incidence_matrix_without_keys():
    assert key_incidence_matrix([], 3).shape == (0, 3)


def test_prime_attributes():
    keys = [AttributeSet((0,)), AttributeSet((1, 2))]
    assert prime_attributes(keys, 4) == AttributeSet((0, 1, 2))
    assert non_prime_attributes(keys, 4) == AttributeSet((3,))
    assert prime_attributes([], 4) == AttributeSet.empty()


def test_analyse_single_dependency():
    report = analyse(DependencySet(2, [((0,), (1,))]))
    assert report.keys == [AttributeSet((0,))]
    assert report.prime == AttributeSet((0,))
    assert report.non_prime == AttributeSet((1,))
    assert report.elapsed_seconds >= 0.0
    assert report.incidence.tolist() == [[True, False]]


def test_analyse_reference_dataset(reference_deps):
    report = analyse(reference_deps)
    assert len(report.keys) == 12
    assert report.prime == AttributeSet.full(9)
    assert len(report.non_prime) == 0
