"""Default usage text, generated from the option table.

Pure functions only — the registry decides where the text goes.

Example output::

    Usage: demo [OPTION...]

      -v, --version     Prints the version information.
      -f, --file <arg>  The file to be loaded.
          --val <arg>   The value to be set.
"""

from __future__ import annotations

from collections.abc import Sequence

from tiny_cmdline.core.models import Argument, OptionSpec
from tiny_cmdline.utils.constants import OPTIONAL_ARG_MARKER, REQUIRED_ARG_MARKER

_INDENT = "  "
_LONG_ONLY_PAD = "    "
"""Width of ``-x, `` so long-only names line up with the long column."""

_MAX_COLUMN = 30


def arg_marker(arity: Argument) -> str:
    """Return the value marker shown after an option label."""
    if arity is Argument.REQUIRED:
        return f" {REQUIRED_ARG_MARKER}"
    if arity is Argument.OPTIONAL:
        return f" {OPTIONAL_ARG_MARKER}"
    return ""


def invocation(spec: OptionSpec) -> str:
    """Return the left-hand column for *spec*, e.g. ``-p, --port <arg>``."""
    label = spec.label
    if spec.short_name is None:
        label = _LONG_ONLY_PAD + label
    return label + arg_marker(spec.arity)


def format_option_lines(options: Sequence[OptionSpec]) -> list[str]:
    """Return one usage line per option, in the given order.

    Help texts start in a shared column; invocations longer than the
    column cap simply push their own help text to the right.
    """
    invocations = [invocation(spec) for spec in options]
    width = min(max((len(inv) for inv in invocations), default=0), _MAX_COLUMN)

    lines: list[str] = []
    for spec, inv in zip(options, invocations):
        if spec.help:
            lines.append(f"{_INDENT}{inv.ljust(width)}  {spec.help}")
        else:
            lines.append(f"{_INDENT}{inv}")
    return lines


def format_usage(
    options: Sequence[OptionSpec],
    *,
    prog: str | None = None,
    description: str | None = None,
) -> str:
    """Return the full default usage text, ending with a newline."""
    parts: list[str] = []
    if prog:
        parts.append(f"Usage: {prog} [OPTION...]")
    if description:
        parts.append(description)
    if parts:
        parts.append("")
    parts.extend(format_option_lines(options))
    return "\n".join(parts) + "\n"
