#!/usr/bin/env python3
"""
Command-line interface for candidate key discovery.

Reads a functional dependency file, prints every candidate key of the
relation and optionally answers closure and superkey queries.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from fdkeys.elements.dependency_set import DependencySet
from fdkeys.exceptions import CandidateKeyError
from fdkeys.keys.analysis import KeyReport, analyse
from fdkeys.keys.closure import closure, is_superkey
from fdkeys.logger import format_attribute_set, format_dependency, key_logger
from fdkeys.parser.fd_parser import load_dependency_file, parse_attribute_list

logger = logging.getLogger(__name__)


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="fdkeys",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input",
        help="Path to the functional dependency file",
        type=Path,
    )

    # Query options
    query_group = parser.add_argument_group("query options")
    query_group.add_argument(
        "--closure",
        help="Print the closure of a comma-separated attribute list (repeatable)",
        action="append",
        default=[],
        metavar="ATTRS",
    )
    query_group.add_argument(
        "--superkey",
        help="Check whether a comma-separated attribute list is a superkey (repeatable)",
        action="append",
        default=[],
        metavar="ATTRS",
    )

    # Output options
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--prime",
        help="Print prime and non-prime attributes",
        action="store_true",
    )
    output_group.add_argument(
        "--no-timing",
        dest="timing",
        help="Do not report the elapsed search time",
        action="store_false",
    )
    output_group.add_argument(
        "--trace",
        help="Write a trace of the key search to this file",
        type=Path,
    )
    output_group.add_argument(
        "-v",
        "--verbose",
        help="Enable debug logging",
        action="store_true",
    )

    return parser


def print_report(deps: DependencySet, report: KeyReport, timing: bool) -> None:
    print(f"Number of attributes: {deps.n_attributes}")
    print(f"Dependencies ({len(deps)}):")
    for dependency in deps:
        print(f"  {format_dependency(dependency)}")

    print(f"Candidate keys ({len(report.keys)}):")
    for key in report.keys:
        print(f"  {format_attribute_set(key)}")

    if timing:
        print(f"Elapsed time: {report.elapsed_seconds:.6f} s")


def answer_queries(
    deps: DependencySet, report: KeyReport, closures: List[str], superkeys: List[str]
) -> None:
    for text in closures:
        attributes = parse_attribute_list(text, deps.n_attributes)
        result = closure(attributes, deps)
        print(
            f"Closure of {{{format_attribute_set(attributes)}}}: "
            f"{format_attribute_set(result)}"
        )

    for text in superkeys:
        attributes = parse_attribute_list(text, deps.n_attributes)
        label = "{" + format_attribute_set(attributes) + "}"
        if attributes in report.keys:
            print(f"{label} is a candidate key")
        elif is_superkey(attributes, deps):
            print(f"{label} is a superkey")
        else:
            print(f"{label} is not a superkey")


def run(args: argparse.Namespace) -> None:
    deps = load_dependency_file(args.input)

    tracing = args.trace is not None
    was_disabled = key_logger.disabled
    if tracing:
        key_logger.clear()
        key_logger.disabled = False
    try:
        report = analyse(deps)
    finally:
        key_logger.disabled = was_disabled

    print_report(deps, report, args.timing)

    if args.prime:
        print(f"Prime attributes: {format_attribute_set(report.prime)}")
        print(f"Non-prime attributes: {format_attribute_set(report.non_prime)}")

    answer_queries(deps, report, args.closure, args.superkey)

    if tracing:
        key_logger.write(args.trace)
        logger.info("Wrote search trace to %s", args.trace)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        run(args)
    except FileNotFoundError as e:
        print(f"Could not open file at '{e.filename}'!", file=sys.stderr)
        return 1
    except (CandidateKeyError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
