"""Tests for default usage rendering (core/usage.py).

Every test is a pure function call on hand-built option specs.
"""

from __future__ import annotations

from tiny_cmdline.core.handlers import normalize_handler
from tiny_cmdline.core.models import Argument, OptionSpec
from tiny_cmdline.core.usage import arg_marker, format_option_lines, format_usage, invocation


def _spec(
    short_name: str | None,
    long_name: str,
    arity: Argument = Argument.REQUIRED,
    help: str = "Help text.",
) -> OptionSpec:
    return OptionSpec(
        identifier=ord(short_name) if short_name else 256,
        short_name=short_name,
        long_name=long_name,
        arity=arity,
        help=help,
        handler=normalize_handler(lambda: None),
    )


class TestArgMarker:
    def test_required(self) -> None:
        assert arg_marker(Argument.REQUIRED) == " <arg>"

    def test_optional(self) -> None:
        assert arg_marker(Argument.OPTIONAL) == " [arg]"

    def test_none(self) -> None:
        assert arg_marker(Argument.NONE) == ""


class TestInvocation:
    def test_both_names(self) -> None:
        assert invocation(_spec("p", "port")) == "-p, --port <arg>"

    def test_short_only(self) -> None:
        assert invocation(_spec("p", "", Argument.NONE)) == "-p"

    def test_long_only_is_padded_to_long_column(self) -> None:
        assert invocation(_spec(None, "val")) == "    --val <arg>"


class TestFormatOptionLines:
    def test_one_line_per_option_in_order(self) -> None:
        lines = format_option_lines(
            [
                _spec("v", "version", Argument.NONE, "Prints the version information."),
                _spec("f", "file", help="The file to be loaded."),
                _spec("p", "port", help="The port to connect to."),
            ]
        )
        assert len(lines) == 3
        assert "--version" in lines[0]
        assert "--file" in lines[1]
        assert "--port" in lines[2]

    def test_arg_marker_only_for_required(self) -> None:
        lines = format_option_lines(
            [
                _spec("v", "version", Argument.NONE),
                _spec("f", "file", Argument.REQUIRED),
                _spec("c", "color", Argument.OPTIONAL),
            ]
        )
        assert ["<arg>" in line for line in lines] == [False, True, False]

    def test_help_column_is_aligned(self) -> None:
        lines = format_option_lines(
            [
                _spec("v", "version", Argument.NONE, "First."),
                _spec("f", "file", Argument.REQUIRED, "Second."),
            ]
        )
        assert lines[0].index("First.") == lines[1].index("Second.")

    def test_exact_layout(self) -> None:
        lines = format_option_lines([_spec("f", "file", help="The file to be loaded.")])
        assert lines == ["  -f, --file <arg>  The file to be loaded."]

    def test_option_without_help(self) -> None:
        assert format_option_lines([_spec("q", "quiet", Argument.NONE, "")]) == ["  -q, --quiet"]

    def test_overlong_invocation_does_not_widen_others(self) -> None:
        long_name = "a-very-long-option-name-that-exceeds-the-column"
        lines = format_option_lines(
            [
                _spec("x", long_name, Argument.NONE, "Long."),
                _spec("f", "file", Argument.REQUIRED, "Short."),
            ]
        )
        assert lines[1].index("Short.") < lines[0].index("Long.")

    def test_empty(self) -> None:
        assert format_option_lines([]) == []


class TestFormatUsage:
    def test_without_header(self) -> None:
        text = format_usage([_spec("f", "file", help="The file.")])
        assert text == "  -f, --file <arg>  The file.\n"

    def test_with_prog_and_description(self) -> None:
        text = format_usage(
            [_spec("f", "file", help="The file.")],
            prog="demo",
            description="Does things.",
        )
        assert text.splitlines() == [
            "Usage: demo [OPTION...]",
            "Does things.",
            "",
            "  -f, --file <arg>  The file.",
        ]
