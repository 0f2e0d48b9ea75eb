"""
Custom exceptions for candidate key discovery.
"""

from __future__ import annotations
from typing import NoReturn, Optional


class CandidateKeyError(Exception):
    """Base exception for candidate key discovery errors."""

    pass


class InvalidOperationError(CandidateKeyError):
    """Raised when an AttributeSet is used outside of its contract."""

    pass


class InvalidAttributeError(InvalidOperationError, ValueError):
    """Raised when an attribute id lies outside the configured universe."""

    @staticmethod
    def raise_out_of_range(attribute_id: int, limit: int) -> NoReturn:
        """
        Raises an InvalidAttributeError for an id outside ``0..limit-1``.

        Args:
            attribute_id: The offending attribute id
            limit: Number of valid attribute ids

        Raises:
            InvalidAttributeError: Always raised with detailed error information
        """
        from fdkeys.logger import key_logger

        message = (
            f"Invalid attribute id {attribute_id}: expected an id between 0 and "
            f"{limit - 1}"
        )
        if not key_logger.disabled:
            key_logger.error(message)
        raise InvalidAttributeError(message)


class ProtocolViolationError(InvalidOperationError):
    """Raised when an AttributeSet is mutated mid-enumeration or an absent id is removed."""

    pass


class EmptyDependencySideError(CandidateKeyError, ValueError):
    """Raised when a functional dependency has an empty left- or right-hand side."""

    pass


class NotASuperkeyError(CandidateKeyError, ValueError):
    """Raised when a key reduction is started from a set that is not a superkey."""

    pass


class DependencyParseError(CandidateKeyError, ValueError):
    """Raised when a functional dependency file cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
