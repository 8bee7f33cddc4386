"""Command-line front door for lazystatus.

Parses CLI options, merges them over the user config, and sets up logging.
Then either prints the status once (``--print`` or no terminal) or starts
the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import LazyStatusError
from .gateway import GitGateway
from .highlight import DEFAULT_STYLE
from .log import setup_logging
from .preview import PREVIEW_MAX_LINES_DEFAULT
from .render import render_status_rows
from .runtime.actions import fetch_snapshot
from .runtime.app import AppOptions, build_preview_loader, run_app
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazystatus",
        description="Browse git working-tree status, preview files inline, and stage changes.",
    )
    parser.add_argument("-C", dest="directory", default=None, help="Run as if started in this directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for file previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable colors and preview highlighting.")
    parser.add_argument("--no-syntax", action="store_true", help="Show previews without syntax highlighting.")
    parser.add_argument(
        "--preview-max-lines",
        type=_positive_int,
        default=None,
        help=f"Maximum preview lines per expanded entry (default: {PREVIEW_MAX_LINES_DEFAULT}).",
    )
    parser.add_argument(
        "--preserve-view",
        action="store_true",
        help="Keep cursor position and expanded entries across refreshes.",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file.")
    parser.add_argument("--debug", action="store_true", help="Log at debug level.")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the status once and exit.")
    return parser


def resolve_options(args: argparse.Namespace) -> AppOptions:
    """Merge CLI flags over config values into runtime options."""
    cwd = None
    if args.directory is not None:
        cwd = Path(args.directory)
        if not cwd.is_dir():
            raise SystemExit(f"Not a directory: {cwd}")

    # Piped output gets no escape sequences.
    no_color = args.no_color or not sys.stdout.isatty()
    preview_max_lines = args.preview_max_lines or config.load_preview_max_lines() or PREVIEW_MAX_LINES_DEFAULT
    return AppOptions(
        cwd=cwd,
        theme=resolve_theme(args.theme or config.load_theme_name(), no_color=no_color),
        style=args.style or config.load_style() or DEFAULT_STYLE,
        syntax_highlight=not (no_color or args.no_syntax) and config.load_syntax_highlight(),
        preview_max_lines=preview_max_lines,
        preserve_view=args.preserve_view or config.load_preserve_view_on_refresh(),
    )


def render_status_text(options: AppOptions) -> str:
    """Render the status rows once, newline-separated, for non-interactive use."""
    snapshot = fetch_snapshot(GitGateway(cwd=options.cwd))
    rendered = render_status_rows(snapshot, options.theme, build_preview_loader(options), show_cursor=False)
    out: list[str] = []
    for row in rendered.rows:
        out.append(row)
        if "\033" in row:
            out.append(options.theme.reset)
        out.append("\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run lazystatus; returns the process exit code."""
    args = build_parser().parse_args(argv)
    log_file = Path(args.log_file).expanduser() if args.log_file else config.load_log_file()
    setup_logging(log_file, debug=args.debug)
    options = resolve_options(args)

    interactive = sys.stdin.isatty() and sys.stdout.isatty()
    if args.print_only or not interactive:
        try:
            sys.stdout.write(render_status_text(options))
        except LazyStatusError as exc:
            logger.error("%s", exc)
            raise SystemExit(f"lazystatus: {exc}") from exc
        return 0

    return run_app(options)


if __name__ == "__main__":
    sys.exit(main())
