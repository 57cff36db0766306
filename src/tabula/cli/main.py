"""Main CLI entry point for tabula."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.inspect import inspect_file
from ..exceptions import TabulaError


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the tabula CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="tabula: Typed Row Stream Format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tabula --inspect table.tab             Show schema and first rows
  tabula --inspect table.tab --limit 0   Show schema and row count only
  tabula --version                       Show version
        """,
    )

    parser.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Show the schema, first rows and row count of a tabula file",
    )

    parser.add_argument(
        "--limit",
        metavar="N",
        type=int,
        default=10,
        help="Number of rows to print with --inspect (default: 10)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tabula {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --inspect
    if args.inspect:
        file_path = Path(args.inspect)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        if args.limit < 0:
            print(f"Error: --limit must be >= 0, got {args.limit}", file=sys.stderr)
            return 1

        try:
            inspect_file(file_path, limit=args.limit)
            return 0
        except TabulaError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
