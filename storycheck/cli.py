"""CLI entrypoint for storycheck."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .checker import StoryChecker
from .config import ConfigError, load_config
from .locator import TraversalError
from .logging import configure_logging
from .report import render_json, render_text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storycheck",
        description="Verify that every UI component has a matching story file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to scan (defaults to the configured source directory, usually src/).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .storycheck.yml file (defaults to the current directory).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of text.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint. Exits with status 1 when any component lacks a story."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.config is not None and not args.config.exists():
        parser.exit(1, f"Config file not found: {args.config}\n")

    try:
        config = load_config(args.config if args.config is not None else Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    checker = StoryChecker(config)
    try:
        report = checker.run(args.path, relative_to=Path.cwd())
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except TraversalError as exc:
        parser.exit(1, f"storycheck failed: {exc}\n")

    if args.json:
        print(render_json(report))
    else:
        for line in render_text(report, config.naming):
            print(line)

    if not report.passed:
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
