"""
Parser for functional dependency files.

A dependency file starts with the number of attributes, followed by one
dependency per line::

    3
    A -> B
    B -> C
    C,B -> A

Attributes are the letters ``A`` up to the letter of the last attribute.
Blank lines and lines starting with ``#`` are ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from fdkeys.constants import (
    ATTRIBUTE_ALPHABET,
    ATTRIBUTE_DELIMITER,
    COMMENT_PREFIX,
    DEPENDENCY_SEPARATOR,
)
from fdkeys.elements.attribute_set import AttributeSet
from fdkeys.elements.dependency_set import Dependency, DependencySet
from fdkeys.exceptions import DependencyParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    """Syntax of dependency files."""

    separator: str = DEPENDENCY_SEPARATOR
    delimiter: str = ATTRIBUTE_DELIMITER
    comment_prefix: str = COMMENT_PREFIX
    alphabet: str = ATTRIBUTE_ALPHABET

    @property
    def max_attributes(self) -> int:
        return len(self.alphabet)


DEFAULT_CONFIG = ParserConfig()


# ===================================================================
# 1. ATTRIBUTE LISTS
# ===================================================================


def parse_attribute(
    token: str, n_attributes: int, config: Optional[ParserConfig] = None
) -> int:
    """
    Convert a single attribute letter to its attribute id.

    Raises:
        DependencyParseError: If the token is not a letter of the alphabet, or
            names an attribute beyond ``n_attributes``.
    """
    config = config or DEFAULT_CONFIG
    letter = token.strip()
    if len(letter) != 1 or letter not in config.alphabet:
        raise DependencyParseError(
            f"Missing valid attribute <{config.alphabet[0]}-{config.alphabet[-1]}>"
            f" in {token.strip()!r}"
        )
    index = config.alphabet.index(letter)
    if index >= n_attributes:
        raise DependencyParseError(
            f"Invalid attribute {letter}: Expected attributes from "
            f"{config.alphabet[0]} to {config.alphabet[n_attributes - 1]}"
        )
    return index


def parse_attribute_list(
    text: str, n_attributes: int, config: Optional[ParserConfig] = None
) -> AttributeSet:
    """
    Parse a delimited attribute list such as ``A, B,C`` into an AttributeSet.

    Repeated attributes are collapsed.
    """
    config = config or DEFAULT_CONFIG
    return AttributeSet(
        parse_attribute(token, n_attributes, config)
        for token in text.split(config.delimiter)
    )


# ===================================================================
# 2. DEPENDENCY LINES
# ===================================================================


def split_dependency_line(
    line: str, config: Optional[ParserConfig] = None
) -> Tuple[str, str]:
    """Split ``LHS -> RHS`` into its two sides."""
    config = config or DEFAULT_CONFIG
    parts = line.split(config.separator)
    if len(parts) == 1:
        raise DependencyParseError(f"Missing '{config.separator}'")
    if len(parts) > 2:
        raise DependencyParseError(f"More than one '{config.separator}'")
    left, right = (part.strip() for part in parts)
    if not left:
        raise DependencyParseError("Left-hand side empty")
    if not right:
        raise DependencyParseError("Right-hand side empty")
    return left, right


def parse_dependency_line(
    line: str, n_attributes: int, config: Optional[ParserConfig] = None
) -> Dependency:
    config = config or DEFAULT_CONFIG
    left, right = split_dependency_line(line, config)
    return Dependency(
        parse_attribute_list(left, n_attributes, config),
        parse_attribute_list(right, n_attributes, config),
    )


# ===================================================================
# 3. FILES
# ===================================================================


def parse_attribute_count(text: str, config: Optional[ParserConfig] = None) -> int:
    config = config or DEFAULT_CONFIG
    try:
        n_attributes = int(text.strip())
    except ValueError:
        raise DependencyParseError(
            f"Invalid attribute count {text.strip()!r}: expected an integer"
        ) from None
    if not 1 <= n_attributes <= config.max_attributes:
        raise DependencyParseError(
            f"Invalid attribute count: Must be between 1 and {config.max_attributes}"
        )
    return n_attributes


def parse_dependencies(
    lines: Iterable[str], config: Optional[ParserConfig] = None
) -> DependencySet:
    """
    Parse the contents of a dependency file.

    Args:
        lines: The lines of the file, with or without line endings.
        config: Optional syntax override.

    Returns:
        DependencySet: The dependencies in file order.

    Raises:
        DependencyParseError: On the first malformed line; the error carries
            its 1-based line number.
    """
    config = config or DEFAULT_CONFIG
    deps: Optional[DependencySet] = None

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith(config.comment_prefix):
            continue
        try:
            if deps is None:
                deps = DependencySet(parse_attribute_count(line, config))
            else:
                deps.add(parse_dependency_line(line, deps.n_attributes, config))
        except DependencyParseError as e:
            raise DependencyParseError(e.message, line_number) from None

    if deps is None:
        raise DependencyParseError("File is empty!")

    logger.debug(
        "Parsed %d dependencies over %d attributes", len(deps), deps.n_attributes
    )
    return deps


def load_dependency_file(
    path: Path | str, config: Optional[ParserConfig] = None
) -> DependencySet:
    """
    Read and parse a dependency file; ``OSError`` from opening it propagates.

    Raises:
        DependencyParseError: If the file is malformed or not valid UTF-8 text.
    """
    with open(path, "rb") as f:
        logger.info("Loading dependencies from %s", path)
        data = f.read()

    lines: List[str] = []
    for line_number, raw_line in enumerate(data.splitlines(), start=1):
        try:
            lines.append(raw_line.decode("utf-8"))
        except UnicodeDecodeError:
            raise DependencyParseError(
                "File is not valid UTF-8 text", line_number
            ) from None
    return parse_dependencies(lines, config)
