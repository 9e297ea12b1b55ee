"""Regression tests for the optional Rich dependency.

Help, usage errors and the demo program must keep working when Rich is
missing; only ``configure_logging`` needs it and fails cleanly.
"""

from __future__ import annotations

import logging
import sys

import pytest

from tiny_cmdline.cli import demo, exit_codes
from tiny_cmdline.cli.console import configure_logging, console, escape
from tiny_cmdline.exceptions import MissingDependencyError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        demo.main(["--help"])
    assert exc_info.value.code == exit_codes.SUCCESS
    assert "-f, --file <arg>  " in capsys.readouterr().out


def test_unrecognized_option_reported_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        demo.main(["--bogus"])
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "unrecognized option '--bogus'" in capsys.readouterr().err


def test_demo_output_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    assert demo.main(["-p", "8080"]) == exit_codes.SUCCESS
    assert "port: 8080\n" in capsys.readouterr().out


def test_out_falls_back_to_stdout(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    console.out("plain [bold]text[/bold]\n")
    assert capsys.readouterr().out == "plain [bold]text[/bold]\n"


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape("[bold]x") == "[bold]x"


def test_configure_logging_requires_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(MissingDependencyError, match="pip install rich"):
        configure_logging(logging.DEBUG)
