"""Tests for the console helpers (cli/console.py) with Rich installed."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from tiny_cmdline.cli.console import configure_logging, console, escape, get_rich_console


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("tiny_cmdline")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestConsoleProxy:
    def test_out_writes_verbatim_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.out("  -f, --file <arg>  [x] The file.\n")
        captured = capsys.readouterr()
        assert captured.out == "  -f, --file <arg>  [x] The file.\n"
        assert captured.err == ""

    def test_out_does_not_wrap_long_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        line = "x" * 200 + "\n"
        console.out(line)
        assert capsys.readouterr().out == line

    def test_print_renders_markup_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print("[bold red]Error:[/bold red] something")
        captured = capsys.readouterr()
        assert "Error: something" in captured.err
        assert "[bold red]" not in captured.err
        assert captured.out == ""

    def test_escaped_text_prints_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print(f"token {escape('--[bold]x')}")
        assert "token --[bold]x" in capsys.readouterr().err

    def test_get_rich_console_targets_stderr_by_default(self) -> None:
        assert get_rich_console().stderr is True
        assert get_rich_console(stderr=False).stderr is False


class TestConfigureLogging:
    def test_attaches_single_rich_handler(self, package_logger: logging.Logger) -> None:
        from rich.logging import RichHandler

        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)

        rich_handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_keeps_null_handler(self, package_logger: logging.Logger) -> None:
        configure_logging()
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    def test_debug_records_reach_stderr(
        self, package_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(logging.DEBUG)
        logging.getLogger("tiny_cmdline.registry").debug("Dispatching --port")
        assert "Dispatching --port" in capsys.readouterr().err
