"""
Command-line interface for the propparse proposition parser.

Parses a proposition given on the command line or in a file and prints
its syntax tree or canonical form.
"""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import propparse
from propparse.parser.ast_nodes import Proposition
from propparse.parser.grammar import ParseError, PropParser
from propparse.parser.lexer import LexerError
from propparse.parser.traversal import (
    format_tree,
    identifiers,
    node_count,
    to_string,
    tree_depth,
)
from propparse.utils.logger import LogLevel, ParserLogger


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the propparse CLI."""
    parser = argparse.ArgumentParser(
        prog="propparse",
        description=(
            "propparse - parse a propositional formula built from "
            "identifiers, ( ), !, &, | and > into a syntax tree"
        ),
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "expression",
        nargs="?",
        help="Proposition to parse, e.g. '((!(a&b))|(c>(!d)))'",
    )
    source.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Path to a file containing the proposition",
    )

    parser.add_argument(
        "--format",
        choices=["tree", "canonical"],
        default="tree",
        help="Print the indented syntax tree or the canonical text (default: tree)",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=["silent", "normal", "verbose"],
        default="normal",
        help="Output level (default: normal)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        type=int,
        choices=[0, 1, 2, 3],
        default=0,
        help="Debug level 0-3; 3 traces every token (default: 0)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="Maximum parenthesis nesting (default: parser default)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print tree statistics after parsing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"propparse {propparse.__version__}",
    )

    return parser


def _resolve_log_level(output: str, debug: int) -> LogLevel:
    """Determine the effective log level from output and debug settings."""
    if debug >= 3:
        return LogLevel.DEBUG
    if output == "verbose" or debug >= 1:
        return LogLevel.VERBOSE
    if output == "silent":
        return LogLevel.SILENT
    return LogLevel.NORMAL


def _read_source(path: Path) -> Optional[str]:
    """Read a proposition file, dropping blank and ``#`` comment lines."""
    lines = [
        line.strip()
        for line in path.read_text().splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]
    if not lines:
        return None
    return " ".join(lines)


def _statistics(tree: Proposition) -> Dict[str, Any]:
    """Collect node count, depth and identifiers of a parsed tree."""
    return {
        "node_count": node_count(tree),
        "depth": tree_depth(tree),
        "identifiers": ", ".join(sorted(identifiers(tree))),
    }


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``propparse`` CLI command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _run(args)
    except SystemExit:
        raise
    except (ParseError, LexerError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def _run(args: argparse.Namespace) -> None:
    """Parse the proposition and print the result."""
    if args.file is not None:
        if not args.file.exists():
            print(f"Error: Proposition file not found: {args.file}", file=sys.stderr)
            sys.exit(2)
        text = _read_source(args.file)
        if text is None:
            print("Error: Proposition file is empty", file=sys.stderr)
            sys.exit(2)
    else:
        text = args.expression

    # Set up logger; -d keeps diagnostics visible even when output is silent
    log_level = _resolve_log_level(args.output, args.debug)
    stream = sys.stdout if args.output != "silent" else io.StringIO()
    log_stream = sys.stdout if args.debug > 0 else stream
    logger = ParserLogger(level=log_level, stream=log_stream)
    if args.file is not None:
        logger.info("Read proposition file", path=args.file, length=len(text))

    if args.max_depth is not None:
        prop_parser = PropParser(logger=logger, max_depth=args.max_depth)
    else:
        prop_parser = PropParser(logger=logger)
    tree = prop_parser.parse(text)

    if args.format == "canonical":
        stream.write(to_string(tree) + "\n")
    else:
        stream.write(format_tree(tree))

    # Verbose logging already includes the statistics block
    if logger.enabled(LogLevel.VERBOSE):
        logger.statistics(_statistics(tree))
    elif args.stats:
        stats = _statistics(tree)
        stream.write("=== Statistics ===\n")
        for key, value in stats.items():
            label = key.replace("_", " ").title()
            stream.write(f"  {label}: {value}\n")
