"""Tests for the console I/O boundary."""
from __future__ import annotations

import io
from typing import TYPE_CHECKING

from scs.scs_modules import io_ops
from scs.scs_modules.errors import DispatchError, WarningType

if TYPE_CHECKING:
    import pytest


def test_read_line_strips_newline(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """read_line returns the line without its line ending."""
    monkeypatch.setattr("sys.stdin", io.StringIO("/help\r\nnext\n"))
    assert io_ops.read_line() == "/help"
    assert io_ops.read_line() == "next"


def test_read_line_eof_returns_none(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """read_line returns None at end of input."""
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert io_ops.read_line() is None


def test_read_line_writes_prompt(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The prompt is written without a newline."""
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    io_ops.read_line("Enter a command: ")
    assert capsys.readouterr().out == "Enter a command: "


def test_write_line(capsys: pytest.CaptureFixture[str]) -> None:
    """write_line prints text with or without a newline."""
    io_ops.write_line("B", nl=False)
    io_ops.write_line("eep!")
    io_ops.write_line()
    assert capsys.readouterr().out == "Beep!\n\n"


def test_write_line_uses_current_foreground(mocker) -> None:  # type: ignore[no-untyped-def]
    """Without fg, write_line uses the color set last."""
    secho = mocker.patch("scs.scs_modules.io_ops.click.secho")
    io_ops.set_foreground("red")
    io_ops.write_line("hello")
    secho.assert_called_once_with("hello", fg="red", nl=True)
    assert io_ops.get_foreground() == "red"


def test_write_line_explicit_color_wins(mocker) -> None:  # type: ignore[no-untyped-def]
    """An explicit fg overrides the current color."""
    secho = mocker.patch("scs.scs_modules.io_ops.click.secho")
    io_ops.set_foreground("red")
    io_ops.write_line("hello", fg="cyan")
    secho.assert_called_once_with("hello", fg="cyan", nl=True)


def test_write_warning_texts(capsys: pytest.CaptureFixture[str]) -> None:
    """Each warning type has its own message."""
    io_ops.write_warning(WarningType.WRONG_COMMAND)
    io_ops.write_warning(WarningType.WRONG_ARGUMENTS, "expected a number")
    out = capsys.readouterr().out
    assert out == (
        "Wrong command!\n"
        "Wrong arguments!\n"
        "  expected a number\n"
    )


def test_report_error_writes_warning(capsys: pytest.CaptureFixture[str]) -> None:
    """report_error renders the error's warning."""
    io_ops.report_error(
        DispatchError(
            step_name="dispatch.select_candidates",
            error_type="NoCandidate",
            message="Unknown command '/nope'",
        ),
    )
    assert capsys.readouterr().out == "Wrong command!\n"


def test_beep_writes_bell(capsys: pytest.CaptureFixture[str]) -> None:
    """beep writes the terminal bell character."""
    io_ops.beep()
    assert capsys.readouterr().out == "\a"
