"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from turnboard.ui.settings import BoardSettings
from turnboard.ui.theme import THEMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turnboard", description="Two-player chess board."
    )
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="Classic", help="board colours"
    )
    parser.add_argument(
        "--highlight-ms",
        type=int,
        default=1000,
        help="how long a double-clicked square stays highlighted",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="shorthand for --log-level DEBUG",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> BoardSettings:
    return BoardSettings(board_theme=args.theme, highlight_ms=args.highlight_ms)


def main(argv: list[str] | None = None) -> None:
    """Launch the turnboard application."""
    from turnboard.ui.bootstrap import run_application

    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "turnboard"
    parser = build_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    if args.highlight_ms < 0:
        parser.error(f"--highlight-ms must be >= 0, got {args.highlight_ms}")
    logging.basicConfig(
        level="DEBUG" if args.verbose else args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(run_application([prog, *qt_args], settings_from_args(args)))


if __name__ == "__main__":
    main()
