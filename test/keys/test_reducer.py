import pytest
from hypothesis import given, settings

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencySet
from fdkeys.exceptions import NotASuperkeyError
from fdkeys.keys.closure import is_superkey
from fdkeys.keys.reducer import minimize
from key_strategies import A, D, G, H, I, dependency_sets


def test_universe_reduces_to_first_key(reference_deps):
    # A..G are dropped in turn while H and I remain
    assert minimize(AttributeSet.full(9), reference_deps) == AttributeSet((H, I))


def test_reduction_keeps_input_untouched(reference_deps):
    superkey = AttributeSet((D, G, H, I))
    key = minimize(superkey, reference_deps)
    assert key == AttributeSet((H, I))
    assert superkey == AttributeSet((D, G, H, I))


def test_order_of_removal_decides_the_key(reference_deps):
    assert minimize(AttributeSet((A, H, I)), reference_deps) == AttributeSet((H, I))
    assert minimize(AttributeSet((A, D, G)), reference_deps) == AttributeSet((A,))


def test_key_without_dependencies_is_the_universe():
    deps = DependencySet(4)
    assert minimize(AttributeSet.full(4), deps) == AttributeSet.full(4)


def test_single_dependency():
    deps = DependencySet(2, [((0,), (1,))])
    assert minimize(AttributeSet.full(2), deps) == AttributeSet((0,))


def test_non_superkey_is_rejected(reference_deps):
    with pytest.raises(NotASuperkeyError):
        minimize(AttributeSet((D, G)), reference_deps)


class TestMinimizeProperties:
    @given(dependency_sets())
    @settings(max_examples=200)
    def test_result_is_a_minimal_superkey(self, deps):
        key = minimize(deps.universe, deps)
        assert is_superkey(key, deps)
        for attribute_id in key:
            smaller = key.copy()
            smaller.remove(attribute_id)
            assert not is_superkey(smaller, deps)

    @given(dependency_sets())
    @settings(max_examples=100)
    def test_result_is_deterministic(self, deps):
        assert minimize(deps.universe, deps) == minimize(deps.universe, deps)
