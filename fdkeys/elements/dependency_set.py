# dependency_set.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union, overload

from fdkeys.constants import MAX_ATTRIBUTES
from fdkeys.elements.attribute_set import (
    AttributeSet,
    FrozenAttributeSet,
    attribute_label,
)
from fdkeys.exceptions import EmptyDependencySideError, InvalidAttributeError

AttributeIds = Iterable[int]
DependencyPair = Tuple[Union[AttributeSet, AttributeIds], Union[AttributeSet, AttributeIds]]


def _as_attribute_set(side: Union[AttributeSet, AttributeIds]) -> AttributeSet:
    if isinstance(side, AttributeSet):
        return side
    return AttributeSet(side)


@dataclass(frozen=True)
class Dependency:
    """
    A functional dependency ``lhs -> rhs``: lhs functionally determines rhs.

    Both sides are stored as FrozenAttributeSet copies of the arguments.
    """

    lhs: AttributeSet
    rhs: AttributeSet

    def __post_init__(self) -> None:
        object.__setattr__(self, "lhs", FrozenAttributeSet.copy_of(self.lhs))
        object.__setattr__(self, "rhs", FrozenAttributeSet.copy_of(self.rhs))
        if not len(self.lhs):
            raise EmptyDependencySideError("Left-hand side of dependency is empty")
        if not len(self.rhs):
            raise EmptyDependencySideError("Right-hand side of dependency is empty")

    @classmethod
    def of(
        cls,
        lhs: Union[AttributeSet, AttributeIds],
        rhs: Union[AttributeSet, AttributeIds],
    ) -> "Dependency":
        return cls(_as_attribute_set(lhs), _as_attribute_set(rhs))

    @property
    def is_trivial(self) -> bool:
        """True if the right-hand side is already contained in the left-hand side."""
        return self.lhs.contains(self.rhs)

    @property
    def attributes(self) -> AttributeSet:
        return self.lhs | self.rhs

    def __str__(self) -> str:
        left = ",".join(attribute_label(i) for i in self.lhs)
        right = ",".join(attribute_label(i) for i in self.rhs)
        return f"{left} -> {right}"


class DependencySet(Sequence[Dependency]):
    __slots__ = ("n_attributes", "_dependencies", "_universe")
    """
    An ordered, append-only collection of functional dependencies over a
    universe of ``n_attributes`` attributes.

    Every dependency added is checked against the universe, so the key
    search can trust that no attribute id reaches ``n_attributes``.
    Order does not change the set of candidate keys, only the order in
    which they are discovered.

    Attributes:
        n_attributes: Size of the attribute universe (1..MAX_ATTRIBUTES)
        _dependencies: The dependencies in insertion order
        _universe: The full attribute set of the universe
    """

    def __init__(
        self,
        n_attributes: int,
        dependencies: Optional[Iterable[Union[Dependency, DependencyPair]]] = None,
    ) -> None:
        if not isinstance(n_attributes, int) or not 1 <= n_attributes <= MAX_ATTRIBUTES:
            raise InvalidAttributeError(
                f"Invalid attribute count {n_attributes}: must be between 1 and "
                f"{MAX_ATTRIBUTES}"
            )
        self.n_attributes: int = n_attributes
        self._dependencies: List[Dependency] = []
        self._universe: AttributeSet = AttributeSet.full(n_attributes)

        if dependencies:
            for dependency in dependencies:
                if isinstance(dependency, Dependency):
                    self.add(dependency)
                else:
                    lhs, rhs = dependency
                    self.add_pair(lhs, rhs)

    def add(self, dependency: Dependency) -> None:
        """Append a dependency after checking both sides against the universe."""
        for side in (dependency.lhs, dependency.rhs):
            if not self._universe.contains(side):
                outside = side - self._universe
                InvalidAttributeError.raise_out_of_range(
                    max(outside.indices), self.n_attributes
                )
        self._dependencies.append(dependency)

    def add_pair(
        self,
        lhs: Union[AttributeSet, AttributeIds],
        rhs: Union[AttributeSet, AttributeIds],
    ) -> Dependency:
        dependency = Dependency.of(lhs, rhs)
        self.add(dependency)
        return dependency

    @property
    def universe(self) -> AttributeSet:
        """Return a fresh copy of the full attribute set."""
        return self._universe.copy()

    @property
    def attributes_used(self) -> AttributeSet:
        """Return every attribute mentioned by at least one dependency."""
        used = AttributeSet.empty()
        for dependency in self._dependencies:
            used = used | dependency.attributes
        return used

    @overload
    def __getitem__(self, index: int) -> Dependency: ...

    @overload
    def __getitem__(self, index: slice) -> List[Dependency]: ...

    def __getitem__(self, index):
        return self._dependencies[index]

    def __iter__(self) -> Iterator[Dependency]:
        return iter(self._dependencies)

    def __len__(self) -> int:
        return len(self._dependencies)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DependencySet):
            return (
                self.n_attributes == other.n_attributes
                and self._dependencies == other._dependencies
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = [str(dependency) for dependency in self._dependencies]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DependencySet(n_attributes={self.n_attributes}, "
            f"dependencies={len(self)})"
        )
