"""Logging package for fdkeys."""

from fdkeys.logger.base_logger import AlgorithmLogger
from fdkeys.logger.formatting import (
    format_attribute_set,
    format_dependency,
    format_key_list,
)

# Singleton trace of the key search
key_logger = AlgorithmLogger("CandidateKeys")
key_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "key_logger",
    "format_attribute_set",
    "format_dependency",
    "format_key_list",
]
