"""Built-in commands for the SCS console.

help lists the registry through scanners; the console commands
(c!beep, c!color) and the math/text commands exercise integer,
enum, float and defaulted parameters.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from scs.scs_modules import io_ops
from scs.scs_modules.commands.discovery import command
from scs.scs_modules.commands.scanners import (
    ListScanner,
    ScanTarget,
    StringScanner,
)
from scs.scs_modules.commands.types import FindCondition

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scs.scs_modules.commands.registry import CommandRegistry
    from scs.scs_modules.commands.types import CommandDescriptor

CONSOLE_PREFIX = "c!"


class Color(Enum):
    """Foreground colors accepted by c!color."""

    DEFAULT = None
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return str(value)


class BuiltinCommands:
    """Commands bound to one registry and console session."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry
        self.running = True

    @command("help", description="Lists all commands", tags=("main",))
    def help_all(self) -> None:
        self._print_commands(self._registry.commands)

    @command(
        "help",
        description="Lists commands whose name, description or tags match",
        tags=("main",),
    )
    def help_query(self, query: str) -> None:
        found = self._registry.find(
            StringScanner(query, ScanTarget.NAME),
            StringScanner(query, ScanTarget.DESCRIPTION),
            ListScanner(query),
            condition=FindCondition.OR,
        )
        if not found:
            io_ops.write_line(f"No commands match '{query}'.")
            return
        self._print_commands(found)

    @command("exit", description="Leaves the console", tags=("main",))
    def exit_console(self) -> None:
        self.running = False

    @command(
        "beep",
        prefix=CONSOLE_PREFIX,
        description="Beeps the given number of times",
        tags=("console",),
    )
    def beep_times(self, quantity: int = 1) -> None:
        if quantity == 1:
            io_ops.write_line("Beep!")
            io_ops.beep()
        elif quantity > 1:
            io_ops.write_line("B", nl=False)
            for _ in range(quantity):
                io_ops.write_line("e", nl=False)
                io_ops.beep()
            io_ops.write_line("p!")
        else:
            io_ops.write_line("Not beep!")

    @command(
        "color",
        prefix=CONSOLE_PREFIX,
        description="Changes the foreground color",
        tags=("console",),
    )
    def change_color(self, color: Color) -> None:
        io_ops.set_foreground(color.value)
        io_ops.write_line(f"Foreground color changed to {color.name.lower()}")

    @command("sum", description="Adds two numbers", tags=("math",))
    def sum_numbers(self, a: float, b: float) -> None:
        io_ops.write_line(f"{_format_number(a)} + {_format_number(b)}"
                          f" = {_format_number(a + b)}")

    @command("echo", description="Repeats a text", tags=("text",))
    def echo_text(self, text: str, times: int = 1) -> None:
        for _ in range(times):
            io_ops.write_line(text)

    def _print_commands(
        self,
        commands: Iterable[CommandDescriptor],
    ) -> None:
        for cmd in commands:
            io_ops.write_line(cmd.usage, fg="cyan", nl=False)
            line = f" - {cmd.description}"
            if cmd.tags:
                line += f" [{', '.join(cmd.tags)}]"
            io_ops.write_line(line)
