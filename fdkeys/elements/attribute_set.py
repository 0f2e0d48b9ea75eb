# attribute_set.py
from typing import Any, Iterable, Iterator, NoReturn, Optional, Tuple
from functools import total_ordering

from typing_extensions import Self

from fdkeys.constants import ATTRIBUTE_ALPHABET, ATTRIBUTE_MASK, MAX_ATTRIBUTES
from fdkeys.exceptions import (
    InvalidAttributeError,
    InvalidOperationError,
    ProtocolViolationError,
)


def attribute_label(attribute_id: int) -> str:
    """Return the display letter of an attribute id (numeric beyond the alphabet)."""
    if 0 <= attribute_id < len(ATTRIBUTE_ALPHABET):
        return ATTRIBUTE_ALPHABET[attribute_id]
    return str(attribute_id)


def _check_attribute_id(attribute_id: int, limit: int = MAX_ATTRIBUTES) -> None:
    if not isinstance(attribute_id, int) or not 0 <= attribute_id < limit:
        InvalidAttributeError.raise_out_of_range(attribute_id, limit)


@total_ordering
class AttributeSet:
    __slots__ = ("bitmask", "size", "_cursor", "_count", "_exhausted")

    def __init__(self, indices: Iterable[int] = ()):
        """
        AttributeSet represents a set of attribute ids as a bitmask.

        Attribute ids are small non-negative integers below MAX_ATTRIBUTES.
        Algebra results (union, intersection, difference) are new values;
        insert, remove and clear mutate in place.

        Besides the stateless bit-scan iterator (``__iter__``), the set carries
        an enumeration cursor used by ``next_position``. Mutating the set while
        that cursor is active raises ProtocolViolationError.
        """
        bitmask = 0
        for idx in indices:
            _check_attribute_id(idx)
            bitmask |= 1 << idx
        self.bitmask: int = bitmask
        self.size: int = bitmask.bit_count()
        self._reset_enumeration()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def full(cls, n_attributes: int) -> Self:
        """Return the set holding the first ``n_attributes`` attribute ids."""
        if not 0 <= n_attributes <= MAX_ATTRIBUTES:
            raise InvalidAttributeError(
                f"Invalid attribute count {n_attributes}: must be between 0 and "
                f"{MAX_ATTRIBUTES}"
            )
        return cls.from_bitmask((1 << n_attributes) - 1)

    @classmethod
    def from_bitmask(cls, bitmask: int) -> Self:
        if bitmask < 0 or bitmask & ~ATTRIBUTE_MASK:
            raise InvalidAttributeError(
                f"Bitmask {bitmask:#x} has bits outside the {MAX_ATTRIBUTES} "
                "attribute range"
            )
        instance = cls.__new__(cls)
        instance.bitmask = bitmask
        instance.size = bitmask.bit_count()
        instance._reset_enumeration()
        return instance

    @classmethod
    def copy_of(cls, other: "AttributeSet") -> Self:
        """Copy the members of ``other``; the enumeration cursor is not copied."""
        return cls.from_bitmask(other.bitmask)

    def copy(self) -> "AttributeSet":
        return AttributeSet.copy_of(self)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def union(self, other: "AttributeSet") -> "AttributeSet":
        return AttributeSet.from_bitmask(self.bitmask | other.bitmask)

    def intersection(self, other: "AttributeSet") -> "AttributeSet":
        return AttributeSet.from_bitmask(self.bitmask & other.bitmask)

    def difference(self, other: "AttributeSet") -> "AttributeSet":
        return AttributeSet.from_bitmask(
            self.bitmask & ~other.bitmask & ATTRIBUTE_MASK
        )

    def contains(self, subset: "AttributeSet") -> bool:
        """Return True if every attribute of ``subset`` is also in this set."""
        return (self.bitmask & subset.bitmask) == subset.bitmask

    def issubset(self, other: "AttributeSet") -> bool:
        return other.contains(self)

    def is_full(self, n_attributes: int) -> bool:
        """True if the set holds all ``n_attributes`` attributes of the universe."""
        return self.size == n_attributes

    def __or__(self, other: Any) -> "AttributeSet":
        if isinstance(other, AttributeSet):
            return self.union(other)
        return NotImplemented

    def __and__(self, other: Any) -> "AttributeSet":
        if isinstance(other, AttributeSet):
            return self.intersection(other)
        return NotImplemented

    def __sub__(self, other: Any) -> "AttributeSet":
        if isinstance(other, AttributeSet):
            return self.difference(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _check_not_enumerating(self, operation: str) -> None:
        if self._count:
            raise ProtocolViolationError(
                f"Tried to {operation} attribute while iterating over {self}"
            )

    def insert(self, attribute_id: int) -> None:
        _check_attribute_id(attribute_id)
        self._check_not_enumerating("insert")
        bit = 1 << attribute_id
        if self.bitmask & bit:
            return
        self.bitmask |= bit
        self.size += 1
        self._reset_enumeration()

    def remove(self, attribute_id: int) -> None:
        _check_attribute_id(attribute_id)
        self._check_not_enumerating("remove")
        bit = 1 << attribute_id
        if not self.bitmask & bit:
            raise ProtocolViolationError(
                f"Tried to remove attribute {attribute_label(attribute_id)} "
                f"that is not contained in {self}"
            )
        self.bitmask ^= bit
        self.size -= 1
        self._reset_enumeration()

    def clear(self) -> None:
        self.bitmask = 0
        self.size = 0
        self._reset_enumeration()

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def _reset_enumeration(self) -> None:
        self._cursor = 0
        self._count = 0
        self._exhausted = False

    @property
    def enumerating(self) -> bool:
        """True while a ``next_position`` pass is in progress."""
        return self._count > 0

    def reset_cursor(self) -> None:
        """Abandon the current ``next_position`` pass."""
        self._reset_enumeration()

    def next_position(self) -> Optional[int]:
        """
        Return the next member in ascending order since the last reset.

        A pass yields every member once and then returns None, after which
        the next call starts a new pass. The cursor is released as soon as the
        last member has been returned, so the set may be mutated again.
        """
        if self._exhausted or not self.bitmask:
            self._exhausted = False
            return None
        remaining = self.bitmask >> self._cursor
        # lowest set bit at or above the cursor
        position = self._cursor + ((remaining & -remaining).bit_length() - 1)
        self._cursor = position + 1
        self._count += 1
        if self._count == self.size:
            self._cursor = 0
            self._count = 0
            self._exhausted = True
        return position

    def __iter__(self) -> Iterator[int]:
        mask = self.bitmask
        while mask:
            low = mask & -mask
            yield low.bit_length() - 1
            mask ^= low

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(self)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size

    def __contains__(self, attribute_id: object) -> bool:
        if isinstance(attribute_id, int) and 0 <= attribute_id < MAX_ATTRIBUTES:
            return bool(self.bitmask & (1 << attribute_id))
        return False

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AttributeSet):
            return self.bitmask == other.bitmask
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, AttributeSet):
            # Both index tuples are unique & sorted
            return self.indices < other.indices
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.bitmask)

    def __str__(self) -> str:
        return f"({', '.join(attribute_label(i) for i in self)})"

    def __repr__(self) -> str:
        return f"AttributeSet{self}"


class FrozenAttributeSet(AttributeSet):
    """
    An AttributeSet whose members can no longer change.

    Used for the sides of a Dependency, which must stay valid for the
    universe they were checked against. Algebra results and ``copy()`` are
    ordinary, mutable AttributeSets.
    """

    __slots__ = ()

    def _reject_mutation(self, operation: str) -> NoReturn:
        raise InvalidOperationError(f"Tried to {operation} attribute of frozen {self}")

    def insert(self, attribute_id: int) -> None:
        self._reject_mutation("insert")

    def remove(self, attribute_id: int) -> None:
        self._reject_mutation("remove")

    def clear(self) -> None:
        self._reject_mutation("clear")
