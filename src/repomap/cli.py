"""Command-line interface for repomap."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from repomap.pipeline import run

logger = logging.getLogger("repomap")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="repomap",
        description="Map functions, classes, imports, and UI markup across a JS/TS, Flutter, and Android codebase.",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Path to the project to map (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output JSON file path (default: stdout)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print the JSON with this indent (default: compact)",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_false",
        dest="respect_gitignore",
        default=None,
        help="Do not skip paths matched by the root .gitignore",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        run(
            args.project_dir,
            output=args.output,
            indent=args.indent,
            respect_gitignore=args.respect_gitignore,
        )
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)
