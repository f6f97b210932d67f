"""CLI entry: render help for a JSON argument schema."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .constants import APP_NAME, CLI_HELP_HINT, DEFAULT_MAX_WIDTH, ERROR_PREFIX
from .errors import HelpTextError, StartupValidationError
from .logging_utils import log_event, setup_logging
from .renderer import render_help
from .store import load_syntax


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log)

    try:
        max_width = _resolve_width(args.width)
        syntax = load_syntax(args.schema)
        if args.command is not None:
            syntax = syntax.model_copy(update={"active_command": args.command})

        text = render_help(syntax, max_width)
    except HelpTextError as exc:
        log_event("help_error", level=logging.ERROR, error_type=type(exc).__name__, error=str(exc))
        print(f"{ERROR_PREFIX} {exc}", file=sys.stderr)
        if isinstance(exc, StartupValidationError):
            print(CLI_HELP_HINT, file=sys.stderr)
        return 1

    log_event(
        "help_render",
        application=syntax.application_name,
        command=syntax.active_command,
        width=max_width,
        line_count=text.count("\n"),
    )
    sys.stdout.write(text)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Render help text for a command-line application from its argument schema.",
    )
    parser.add_argument(
        "--schema",
        required=True,
        type=Path,
        help="Path to the JSON argument schema.",
    )
    parser.add_argument(
        "--command",
        required=False,
        help="Command to describe. Omit to list commands.",
    )
    parser.add_argument(
        "--width",
        required=False,
        type=int,
        help="Maximum line width. Defaults to the terminal width.",
    )
    parser.add_argument(
        "--log",
        required=False,
        type=Path,
        help="Optional path of a log file.",
    )
    return parser


def _resolve_width(raw: int | None) -> int:
    if raw is None:
        return shutil.get_terminal_size(fallback=(DEFAULT_MAX_WIDTH, 24)).columns
    if raw < 1:
        raise StartupValidationError(f"--width must be at least 1, got {raw}.")
    return raw
