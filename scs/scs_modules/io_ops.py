"""Console I/O boundary -- ALL terminal I/O goes through here.

This is the single mock point for console tests. Commands and
the console loop never print or read directly.
"""
from __future__ import annotations

import sys

import click

from scs.scs_modules.errors import DispatchError, WarningType

WARNING_TEXT: dict[WarningType, str] = {
    WarningType.WRONG_COMMAND: "Wrong command!",
    WarningType.WRONG_ARGUMENTS: "Wrong arguments!",
}

_WARNING_COLOR = "yellow"

# Current foreground color for write_line; None is the terminal default.
_state: dict[str, str | None] = {"fg": None}


def read_line(prompt: str = "") -> str | None:
    """Read one line from stdin. Returns None on EOF."""
    if prompt:
        click.echo(prompt, nl=False)
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def write_line(
    text: str = "",
    *,
    fg: str | None = None,
    nl: bool = True,
) -> None:
    """Write text to stdout in the given or current color."""
    color = fg or _state["fg"]
    click.secho(text, fg=color, nl=nl)


def write_warning(
    warning: WarningType,
    detail: str | None = None,
) -> None:
    """Write a dispatch warning, optionally with a detail line."""
    click.secho(WARNING_TEXT[warning], fg=_WARNING_COLOR)
    if detail:
        click.secho(f"  {detail}", fg=_WARNING_COLOR, dim=True)


def report_error(error: DispatchError) -> None:
    """Warning handler for the dispatcher."""
    write_warning(error.warning)


def beep() -> None:
    """Ring the terminal bell."""
    click.echo("\a", nl=False)


def set_foreground(color: str | None) -> None:
    """Set the color write_line uses by default."""
    _state["fg"] = color


def get_foreground() -> str | None:
    """Return the current default color."""
    return _state["fg"]
