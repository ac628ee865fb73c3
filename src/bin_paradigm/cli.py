"""
Command-line interface for paradigm lookups.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .batch import execute_query_request, load_query_request
from .exceptions import DataLoadError, ParseError
from .exporter import dump_json, dump_yaml, noun_plural_rows, paradigm_to_dict
from .loader import DEFAULT_DELIMITER, load_index_file
from .models import Category, parse_category
from .paradigms import build
from .wordlist import load_wordlist_file

# Exit codes
EXIT_OK = 0
EXIT_MISS = 1
EXIT_USAGE = 1
EXIT_LOAD_ERROR = 2


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the bin-paradigm CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_USAGE

    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bin-paradigm",
        description="Reconstruct inflectional paradigms from a BÍN dataset",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s (bin-paradigm)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Show the paradigm of one headword",
    )
    show_parser.add_argument(
        "category",
        help="One of: " + ", ".join(c.value for c in Category),
    )
    show_parser.add_argument("headword", help="Headword (or surface pronoun)")
    _add_dataset_arguments(show_parser)
    _add_format_argument(show_parser)
    show_parser.add_argument(
        "--all-cells",
        action="store_true",
        help="Include cells that have no form",
    )
    show_parser.set_defaults(func=cmd_show)

    # batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Run a YAML query request file",
    )
    batch_parser.add_argument(
        "file",
        type=Path,
        help="YAML file containing the query request",
    )
    _add_format_argument(batch_parser)
    batch_parser.set_defaults(func=cmd_batch)

    # plurals command
    plurals_parser = subparsers.add_parser(
        "plurals",
        help="List singular/plural/gender/definition rows for a word list's nouns",
    )
    plurals_parser.add_argument(
        "wordlist",
        type=Path,
        help="Tab separated word list: root, category, definition",
    )
    _add_dataset_arguments(plurals_parser)
    plurals_parser.set_defaults(func=cmd_plurals)

    return parser


def _add_dataset_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data", "-d",
        type=Path,
        required=True,
        help="BÍN dataset file",
    )
    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Dataset field delimiter (default: {DEFAULT_DELIMITER!r})",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Dataset encoding (default: utf-8)",
    )


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format", "-f",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )


def _load(args: argparse.Namespace):
    """Load the dataset named on the command line; None after reporting errors."""
    try:
        return load_index_file(args.data, delimiter=args.delimiter, encoding=args.encoding)
    except DataLoadError as e:
        print(f"\n  [LOAD ERROR] {e}", file=sys.stderr)
    except (FileNotFoundError, ValueError) as e:
        print(f"\n  [ERROR] {e}", file=sys.stderr)
    return None


def _dump(records: list, fmt: str) -> str:
    return dump_json(records) if fmt == "json" else dump_yaml(records)


def cmd_show(args: argparse.Namespace) -> int:
    """Handle show command."""
    category = parse_category(args.category)
    if category is None:
        print(f"\n  [ERROR] Unknown category: {args.category!r}", file=sys.stderr)
        return EXIT_USAGE

    index = _load(args)
    if index is None:
        return EXIT_LOAD_ERROR

    paradigm = build(index, category, args.headword)
    if paradigm is None:
        print(f"No {category.value} entry for {args.headword!r}")
        return EXIT_MISS

    record = paradigm_to_dict(paradigm, include_missing=args.all_cells)
    print(_dump([record], args.format), end="")
    return EXIT_OK


def cmd_batch(args: argparse.Namespace) -> int:
    """Handle batch command."""
    try:
        request = load_query_request(args.file)
    except ParseError as e:
        print(f"\n  [PARSE ERROR] {e}", file=sys.stderr)
        if e.line:
            print(f"               Line: {e.line}", file=sys.stderr)
        return EXIT_USAGE
    except FileNotFoundError as e:
        print(f"\n  [ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        result = execute_query_request(request)
    except DataLoadError as e:
        print(f"\n  [LOAD ERROR] {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    except FileNotFoundError as e:
        print(f"\n  [ERROR] {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    records = [paradigm_to_dict(r.paradigm) for r in result.results if r.paradigm is not None]
    print(_dump(records, args.format), end="")

    for r in result.results:
        if not r.found:
            print(
                f"  [MISS] #{r.index + 1} {r.query.category.value} {r.query.headword!r}",
                file=sys.stderr,
            )
    print(
        f"Found {result.found_count}/{result.total_count} paradigms "
        f"in {result.duration_seconds:.2f}s",
        file=sys.stderr,
    )
    return EXIT_OK


def cmd_plurals(args: argparse.Namespace) -> int:
    """Handle plurals command."""
    try:
        wordlist = load_wordlist_file(args.wordlist)
    except FileNotFoundError as e:
        print(f"\n  [ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE

    index = _load(args)
    if index is None:
        return EXIT_LOAD_ERROR

    for row in noun_plural_rows(index, wordlist):
        print("\t".join(row))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
