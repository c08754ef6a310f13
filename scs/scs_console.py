#!/usr/bin/env python3
"""Interactive console for the Simple Commands System.

Registers the built-in commands, then reads one line at a time
and dispatches it until EOF or the exit command.

Usage:
    uv run scs/scs_console.py                      # "/" prefix
    uv run scs/scs_console.py --prefix !           # "!help", "!sum 1 2"
    uv run scs/scs_console.py --description "No desc."
    uv run scs/scs_console.py --verbose            # dispatch logging on stderr

Examples:
    Enter a command: /help
    Enter a command: c!beep 3
    Enter a command: /echo "hello world" 2
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

# When run as a script, add the project root to sys.path so that
# absolute imports like "from scs.scs_modules..." resolve correctly.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import click  # noqa: E402

from scs.scs_modules import io_ops  # noqa: E402
from scs.scs_modules.builtin_commands import BuiltinCommands  # noqa: E402
from scs.scs_modules.commands.discovery import register_commands  # noqa: E402
from scs.scs_modules.commands.dispatch import Dispatcher  # noqa: E402
from scs.scs_modules.commands.registry import CommandRegistry  # noqa: E402
from scs.scs_modules.types import (  # noqa: E402
    DEFAULT_STANDARD_DESCRIPTION,
    DEFAULT_STANDARD_PREFIX,
    RegistrySettings,
)

PROMPT = "Enter a command: "


def _setup_logging(*, verbose: bool) -> logging.Logger:
    """Send scs log records to stderr when verbose."""
    logger = logging.getLogger("scs")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def build_console(
    settings: RegistrySettings,
) -> tuple[CommandRegistry, Dispatcher, BuiltinCommands]:
    """Create a registry with the built-in commands and its dispatcher."""
    registry = CommandRegistry(settings)
    builtins = BuiltinCommands(registry)
    register_commands(registry, builtins)
    dispatcher = Dispatcher(registry, on_warning=io_ops.report_error)
    return registry, dispatcher, builtins


def run_console(
    dispatcher: Dispatcher,
    builtins: BuiltinCommands,
) -> int:
    """Read and dispatch lines until EOF or exit. Returns lines read."""
    count = 0
    while builtins.running:
        message = io_ops.read_line(PROMPT)
        if message is None:
            break
        count += 1
        io_ops.write_line()
        dispatcher.execute(message)
        io_ops.write_line()
    return count


@click.command()
@click.option(
    "--prefix",
    default=DEFAULT_STANDARD_PREFIX,
    help=f"Standard command prefix (default: {DEFAULT_STANDARD_PREFIX!r})",
)
@click.option(
    "--description",
    default=DEFAULT_STANDARD_DESCRIPTION,
    help="Description for commands that declare none",
)
@click.option("--verbose", is_flag=True, help="Log dispatch decisions to stderr")
def main(*, prefix: str, description: str, verbose: bool) -> None:
    """Run the interactive command console."""
    _setup_logging(verbose=verbose)
    settings = RegistrySettings(
        standard_prefix=prefix,
        standard_description=description,
    )
    _, dispatcher, builtins = build_console(settings)

    io_ops.write_line("Enter ", nl=False)
    io_ops.write_line(settings.standard_prefix, fg="blue", nl=False)
    io_ops.write_line("help ", fg="cyan", nl=False)
    io_ops.write_line(
        "to get a list of commands. Don't use commas between"
        " arguments and use string arguments in quotes.",
    )
    io_ops.write_line()
    run_console(dispatcher, builtins)


if __name__ == "__main__":  # pragma: no cover
    main()
