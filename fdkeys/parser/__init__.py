"""Reading functional dependency files."""

from fdkeys.parser.fd_parser import (
    ParserConfig,
    load_dependency_file,
    parse_attribute_list,
    parse_dependencies,
    parse_dependency_line,
)

__all__ = [
    "ParserConfig",
    "load_dependency_file",
    "parse_attribute_list",
    "parse_dependencies",
    "parse_dependency_line",
]
