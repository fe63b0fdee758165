"""Command-line interface: ``json-field-diff FILE1 FILE2``.

Exit status follows diff(1): 0 when every field matches, 1 when any field
differs, 2 on usage errors, unreadable files, malformed JSON or a document
that is not a JSON object.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from json_field_diff import __version__
from json_field_diff.comparator import TreeComparator
from json_field_diff.config import CompareConfig, ContainerRendering, NumericEquality
from json_field_diff.errors import InvalidRootTypeError
from json_field_diff.report import format_table, to_jsonable
from json_field_diff.tree.values import reject_constant

__all__ = ["build_parser", "config_from_args", "main"]

logger = logging.getLogger(__name__)

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-field-diff",
        description="Compare two JSON documents field by field.",
    )
    parser.add_argument("file1", help="First JSON document ('-' for stdin)")
    parser.add_argument("file2", help="Second JSON document ('-' for stdin)")
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--only-mismatches",
        action="store_true",
        help="Hide matched fields in table output",
    )
    parser.add_argument(
        "--strict-numbers",
        action="store_true",
        help="Treat integer and float literals as different (1 != 1.0)",
    )
    parser.add_argument(
        "--null-equals-missing",
        action="store_true",
        help="Treat a member whose value is null as absent",
    )
    parser.add_argument(
        "--markers",
        action="store_true",
        help="Render containers as {...} / [...] instead of blank",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> CompareConfig:
    return CompareConfig(
        numeric_equality=(
            NumericEquality.STRICT if args.strict_numbers else NumericEquality.VALUE
        ),
        container_rendering=(
            ContainerRendering.MARKER if args.markers else ContainerRendering.EMPTY
        ),
        null_equals_missing=args.null_equals_missing,
    )


def _load(source: str, stdin: TextIO) -> Any:
    if source == "-":
        return json.load(stdin, parse_constant=reject_constant)
    with Path(source).open(encoding="utf-8") as fh:
        return json.load(fh, parse_constant=reject_constant)


def main(argv: Sequence[str] | None = None, stdout: TextIO | None = None) -> int:
    """Run the CLI and return its exit status."""
    out = stdout if stdout is not None else sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.file1 == "-" and args.file2 == "-":
        parser.error("stdin ('-') may be used for at most one document")

    try:
        doc1 = _load(args.file1, sys.stdin)
        doc2 = _load(args.file2, sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot read input: %s", exc)
        return EXIT_TROUBLE
    except ValueError as exc:
        # json.JSONDecodeError and non-finite constants
        logger.error("malformed JSON: %s", exc)
        return EXIT_TROUBLE

    try:
        nodes = TreeComparator(config=config_from_args(args)).compare(doc1, doc2)
    except InvalidRootTypeError as exc:
        logger.error("%s", exc)
        return EXIT_TROUBLE

    if args.format == "json":
        json.dump(to_jsonable(nodes), out, ensure_ascii=False, indent=2)
        out.write("\n")
    else:
        out.write(format_table(nodes, only_mismatches=args.only_mismatches))
        out.write("\n")

    return EXIT_SAME if all(node.matched for node in nodes) else EXIT_DIFFERENT


if __name__ == "__main__":
    sys.exit(main())
