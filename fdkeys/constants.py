"""Constants shared by the attribute algebra, the parser and the CLI."""

import string

# Width of the attribute bitmask.
MAX_ATTRIBUTES = 32
ATTRIBUTE_MASK = (1 << MAX_ATTRIBUTES) - 1

# Attribute letters used by dependency files and for display.
ATTRIBUTE_ALPHABET = string.ascii_uppercase

DEPENDENCY_SEPARATOR = "->"
ATTRIBUTE_DELIMITER = ","
COMMENT_PREFIX = "#"
