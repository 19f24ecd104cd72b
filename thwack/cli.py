"""Command-line front door for thwack.

Parses CLI options on top of config-file defaults, sets up logging, and
runs one finder session. Returns the process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import __version__
from .clipboard import open_clipboard
from .errors import ThwackError
from .invoke import ExecInvoker, split_command
from .logger import close_logging, configure_logging
from .preferences import Preferences, StatusLine
from .runtime import run_finder
from .terminal import TerminalController


def _nonempty(value: str) -> str:
    """argparse type rejecting empty option values."""
    if not value:
        raise argparse.ArgumentTypeError("needs a value. Empty string cannot be processed.")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thwack",
        description="Find a file and open it with an arbitrary command.",
        usage="%(prog)s [OPTIONS] [--] [query]",
    )
    parser.add_argument("query", nargs="?", default=None, help="The name of the file you'd like to find.")
    parser.add_argument(
        "--exec",
        dest="exec_command",
        type=_nonempty,
        metavar="COMMAND",
        help=(
            "Command run when you hit Enter on a path. "
            'The default is "notepad" on Windows, or "cat" on other platforms.'
        ),
    )
    parser.add_argument(
        "--starting-point",
        type=_nonempty,
        metavar="PATH",
        help='Directory to search from (default: ".").',
    )
    parser.add_argument(
        "--status-line",
        metavar="{" + ",".join(mode.value for mode in StatusLine) + "}",
        help='Information shown on the status line (default: "absolute").',
    )
    parser.add_argument(
        "--log-file",
        type=_nonempty,
        metavar="PATH",
        help="Log what the program is doing to PATH. Nothing is logged by default.",
    )
    parser.add_argument(
        "--no-gitignore",
        dest="gitignore",
        action="store_false",
        default=None,
        help="Include files ignored by .gitignore.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_preferences(argv: Sequence[str]) -> Preferences:
    """Overlay command-line options onto config-file preferences.

    Everything after ``--`` is joined with spaces into the query. Raises
    :class:`ArgsError` when the resulting exec command cannot be split into
    words.
    """
    argv = list(argv)
    rest: list[str] | None = None
    if "--" in argv:
        split = argv.index("--")
        argv, rest = argv[:split], argv[split + 1:]

    args = build_parser().parse_args(argv)
    preferences = Preferences.from_config()
    if args.exec_command is not None:
        preferences.exec_command = args.exec_command
    if args.starting_point is not None:
        preferences.starting_point = args.starting_point
    if args.status_line is not None:
        preferences.status_line = StatusLine.parse(args.status_line)
    if args.gitignore is not None:
        preferences.gitignore = args.gitignore
    preferences.log_file = args.log_file
    if rest is not None:
        preferences.query = " ".join(rest)
    elif args.query is not None:
        preferences.query = args.query
    split_command(preferences.exec_command)
    return preferences


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the finder, and return an exit code."""
    try:
        preferences = parse_preferences(sys.argv[1:] if argv is None else argv)
        logger = configure_logging(preferences.log_file)
    except ThwackError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code

    try:
        run_finder(
            preferences,
            logger,
            TerminalController(sys.stdin.fileno(), sys.stdout.fileno()),
            ExecInvoker(),
            clipboard=open_clipboard(logger),
        )
    except ThwackError as exc:
        logger.error("%s", exc)
        print(exc, file=sys.stderr)
        return exc.exit_code
    finally:
        close_logging(logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
