from typing import Optional

from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import DependencySet
from fdkeys.exceptions import NotASuperkeyError
from fdkeys.keys.closure import is_superkey
from fdkeys.logger import key_logger


def minimize(
    superkey: AttributeSet, deps: DependencySet, n_attributes: Optional[int] = None
) -> AttributeSet:
    """
    Shrink a superkey to a candidate key contained in it.

    Each attribute of the original superkey is tried once, in ascending order:
    it is dropped from the working key if what remains is still a superkey.
    After the pass no single attribute can be dropped, so the working key is
    minimal. The result only depends on the attribute order, so it is
    deterministic.

    Args:
        superkey: A superkey of the universe; it is not modified.
        deps: The functional dependencies.
        n_attributes: Size of the universe, defaults to ``deps.n_attributes``.

    Returns:
        AttributeSet: A candidate key contained in ``superkey``.

    Raises:
        NotASuperkeyError: If ``superkey`` is not a superkey.
    """
    n = deps.n_attributes if n_attributes is None else n_attributes
    if not is_superkey(superkey, deps, n):
        raise NotASuperkeyError(f"{superkey} is not a superkey")

    key = superkey.copy()
    # Iterate the original; ``key`` is replaced while we go
    for attribute_id in superkey:
        reduced = key.copy()
        reduced.remove(attribute_id)
        if is_superkey(reduced, deps, n):
            key = reduced

    if not key_logger.disabled:
        key_logger.debug(f"Reduced superkey {superkey} to candidate key {key}")
    return key
