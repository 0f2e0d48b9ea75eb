from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import Dependency, DependencySet

__all__ = ["AttributeSet", "Dependency", "DependencySet"]
