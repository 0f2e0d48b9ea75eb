"""Helpers that render attribute sets and dependencies back to letters."""

from typing import Iterable

from fdkeys.elements.attribute_set import AttributeSet, attribute_label
from fdkeys.elements.dependency_set import Dependency


def format_attribute_set(attributes: AttributeSet, delimiter: str = ", ") -> str:
    """Render an attribute set as letters, e.g. ``A, C``; the empty set as ``{}``."""
    if not len(attributes):
        return "{}"
    return delimiter.join(attribute_label(i) for i in attributes)


def format_dependency(dependency: Dependency) -> str:
    """Render a dependency the way dependency files spell it, e.g. ``A,B -> C``."""
    return str(dependency)


def format_key_list(keys: Iterable[AttributeSet]) -> str:
    return "; ".join("{" + format_attribute_set(key) + "}" for key in keys)
