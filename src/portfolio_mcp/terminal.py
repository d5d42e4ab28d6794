"""Interactive portfolio terminal for the local console."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Iterable

from portfolio_mcp import __version__
from portfolio_mcp.config import get_server_config
from portfolio_mcp.content import ContentLoader
from portfolio_mcp.shell import (
    BrowserEnvironment,
    EntryKind,
    HistoryEntry,
    RecordingEnvironment,
    ShellInterpreter,
    ShellMode,
)
from portfolio_mcp.shell.commands import SEPARATOR

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
EXIT_COMMANDS = {":quit", ":q", "exit"}
CLEAR_SCREEN = "\033[2J\033[H"

logger = logging.getLogger("portfolio-mcp.terminal")


def _print_entries(entries: Iterable[HistoryEntry], print_fn: PrintFn) -> None:
    """Print system and output entries; input is already on screen."""
    for entry in entries:
        if entry.kind is EntryKind.INPUT:
            continue
        print_fn(entry.text)
        if entry.kind is EntryKind.OUTPUT:
            print_fn(SEPARATOR)


def run_terminal(shell: ShellInterpreter, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run the read-eval-print loop until an exit command, EOF or Ctrl-C."""
    _print_entries(shell.history, print_fn)
    while True:
        try:
            line = input_fn(shell.prompt)
        except (EOFError, KeyboardInterrupt):
            print_fn("")
            return 0

        # In search mode every line is a query, exit words included
        if shell.mode is ShellMode.NORMAL and line.strip() in EXIT_COMMANDS:
            return 0

        entries = shell.submit(line)
        transition = shell.last_transition
        if transition is not None and transition.cleared:
            print_fn(CLEAR_SCREEN)
            continue
        _print_entries(entries, print_fn)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the portfolio terminal."""
    parser = argparse.ArgumentParser(
        prog="portfolio-terminal",
        description="Browse a portfolio from an interactive terminal",
    )
    parser.add_argument("--version", "-v", action="version", version=f"portfolio-terminal {__version__}")
    parser.add_argument("--content", metavar="PATH", help="Portfolio JSON file (default: bundled content)")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open links in the web browser; only report them",
    )
    args = parser.parse_args(argv)

    config = get_server_config()
    content = ContentLoader.load_file(args.content) if args.content else ContentLoader.load_default()

    if args.no_browser or not config.open_browser:
        environment = RecordingEnvironment()
    else:
        environment = BrowserEnvironment(site_url=config.site_url)
    logger.debug("Terminal environment: %s", type(environment).__name__)

    return run_terminal(ShellInterpreter(content=content, environment=environment))


if __name__ == "__main__":
    raise SystemExit(main())
