"""Tests for the built-in console commands."""
from __future__ import annotations

import pytest
from returns.io import IOFailure, IOSuccess

from scs.scs_modules import io_ops
from scs.scs_modules.builtin_commands import (
    CONSOLE_PREFIX,
    BuiltinCommands,
    Color,
)
from scs.scs_modules.commands.discovery import register_commands
from scs.scs_modules.commands.dispatch import Dispatcher
from scs.scs_modules.commands.registry import CommandRegistry
from scs.scs_modules.commands.types import SemanticType


@pytest.fixture
def builtins(registry: CommandRegistry) -> BuiltinCommands:
    """Return built-in commands registered in the registry fixture."""
    commands = BuiltinCommands(registry)
    register_commands(registry, commands)
    return commands


@pytest.fixture
def console(
    registry: CommandRegistry,
    builtins: BuiltinCommands,
) -> Dispatcher:
    """Return a dispatcher over the built-in commands."""
    return Dispatcher(registry)


def test_builtins_register_expected_commands(
    registry: CommandRegistry,
    builtins: BuiltinCommands,
) -> None:
    """Every built-in is registered with its prefix."""
    assert [(c.prefix, c.name) for c in registry.commands] == [
        ("/", "help"),
        ("/", "help"),
        ("/", "exit"),
        (CONSOLE_PREFIX, "beep"),
        (CONSOLE_PREFIX, "color"),
        ("/", "sum"),
        ("/", "echo"),
    ]
    assert registry.prefixes == ("/", CONSOLE_PREFIX)


def test_builtin_parameter_types(
    registry: CommandRegistry,
    builtins: BuiltinCommands,
) -> None:
    """Built-in signatures cover int, enum, float and string."""
    by_name = {c.name: c for c in registry.commands if c.has_parameters}
    assert by_name["beep"].parameters[0].semantic_type is SemanticType.INTEGER
    assert by_name["beep"].parameters[0].default == 1
    assert by_name["color"].parameters[0].enum_type is Color
    assert [p.semantic_type for p in by_name["sum"].parameters] == [
        SemanticType.FLOAT, SemanticType.FLOAT,
    ]


def test_help_lists_all_commands(
    console: Dispatcher,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """/help prints usage and description of every command."""
    assert isinstance(console.execute("/help"), IOSuccess)
    out = capsys.readouterr().out
    assert "/help - Lists all commands [main]" in out
    assert "/help <query> - " in out
    assert "c!beep [quantity] - Beeps the given number of times" in out
    assert "/sum <a> <b> - Adds two numbers [math]" in out


def test_help_query_filters_by_name_description_or_tag(
    console: Dispatcher,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """/help <query> lists only matching commands."""
    console.execute("/help console")
    out = capsys.readouterr().out
    assert "c!beep" in out
    assert "c!color" in out
    assert "/sum" not in out

    console.execute("/help Adds")
    out = capsys.readouterr().out
    assert "/sum" in out
    assert "c!beep" not in out


def test_help_query_without_match(
    console: Dispatcher,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """/help with an unmatched query says so."""
    console.execute("/help zzz")
    assert "No commands match 'zzz'." in capsys.readouterr().out


def test_exit_stops_console(
    console: Dispatcher,
    builtins: BuiltinCommands,
) -> None:
    """/exit clears the running flag."""
    assert builtins.running
    console.execute("/exit")
    assert not builtins.running


@pytest.mark.parametrize(
    ("line", "expected", "beeps"),
    [
        ("c!beep", "Beep!\n", 1),
        ("c!beep 3", "Beeep!\n", 3),
        ("c!beep 0", "Not beep!\n", 0),
    ],
)
def test_beep(
    console: Dispatcher,
    mocker,  # type: ignore[no-untyped-def]
    capsys: pytest.CaptureFixture[str],
    line: str,
    expected: str,
    beeps: int,
) -> None:
    """c!beep rings the bell quantity times."""
    bell = mocker.patch("scs.scs_modules.io_ops.beep")
    assert isinstance(console.execute(line), IOSuccess)
    assert capsys.readouterr().out == expected
    assert bell.call_count == beeps


def test_color_changes_foreground(console: Dispatcher) -> None:
    """c!color sets the console color by enum name."""
    assert isinstance(console.execute("c!color Red"), IOSuccess)
    assert io_ops.get_foreground() == "red"
    console.execute("c!color default")
    assert io_ops.get_foreground() is None


def test_color_unknown_name_is_wrong_arguments(console: Dispatcher) -> None:
    """An unknown color fails coercion."""
    result = console.execute("c!color purple")
    assert isinstance(result, IOFailure)


def test_sum(console: Dispatcher, capsys: pytest.CaptureFixture[str]) -> None:
    """/sum adds two numbers."""
    console.execute("/sum 2 3.5")
    assert capsys.readouterr().out == "2 + 3.5 = 5.5\n"


def test_echo_with_default_and_quotes(
    console: Dispatcher,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """/echo repeats quoted text, once by default."""
    console.execute('/echo "hello world"')
    console.execute("/echo hi 2")
    assert capsys.readouterr().out == "hello world\nhi\nhi\n"
