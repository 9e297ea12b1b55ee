"""``tiny-cmdline-demo`` — a small program showing every registration style.

Example::

    $ tiny-cmdline-demo -f README.md -i 127.0.0.1 -p 8080 --val 66
    filename: README.md
    ip: 127.0.0.1
    port: 8080
    val: 66
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tiny_cmdline.cli import exit_codes
from tiny_cmdline.cli.app import parse_or_exit, run
from tiny_cmdline.cli.console import configure_logging, console
from tiny_cmdline.core.conversion import parse_int64
from tiny_cmdline.core.models import Argument
from tiny_cmdline.exceptions import InvalidValueError
from tiny_cmdline.registry import OptionRegistry
from tiny_cmdline.version import __version__

VAL_MIN = 0
VAL_MAX = 100


@dataclass
class ParsedArgs:
    filename: str = ""
    ip: str = ""
    port: int = 0
    val: int = 0


def _print_version() -> None:
    console.out(f"{__version__}\n")


def _enable_debug_logging() -> None:
    configure_logging(logging.DEBUG)


def _set_checked_val(args: ParsedArgs, value: str | None) -> None:
    """Store ``--val`` after checking it lies in [VAL_MIN, VAL_MAX]."""
    number = parse_int64(value or "")
    if not VAL_MIN <= number <= VAL_MAX:
        raise InvalidValueError(
            f"The value should be in the range [{VAL_MIN}, {VAL_MAX}], got {number}.",
        )
    args.val = number


def _report_and_reset_val(args: ParsedArgs) -> None:
    console.out(f"Previous value is {args.val}\n")
    args.val = VAL_MIN


def build_registry(args: ParsedArgs) -> OptionRegistry:
    """Register the demo options, binding values into *args*."""
    registry = OptionRegistry(
        prog="tiny-cmdline-demo",
        description="Demonstrates declarative option registration.",
    )
    # Run a function when the option is found.
    registry.add_argument("version", "v", _print_version, Argument.NONE, "Prints the version information.")
    # Load the value into a typed attribute.
    registry.add_value("file", "f", args, "filename", "The file to be loaded.")
    registry.add_value("ip", "i", args, "ip", "The IP address to connect to.")
    registry.add_value("port", "p", args, "port", "The port to connect to.")
    # Presence sets an alternate value.
    registry.add_flag("default_val", None, args, "val", 0, 66, "Sets the value to 66.")
    # The handler validates the raw text itself.
    registry.add_argument(
        "val",
        None,
        functools.partial(_set_checked_val, args),
        Argument.REQUIRED,
        f"The value to be set, between {VAL_MIN} and {VAL_MAX}.",
    )
    # A trigger may read and rewrite destinations bound by earlier options.
    registry.add_argument(
        "user_val",
        None,
        functools.partial(_report_and_reset_val, args),
        Argument.NONE,
        "Prints the current value and resets it.",
    )
    registry.add_argument("verbose", None, _enable_debug_logging, Argument.NONE, "Logs option dispatch to stderr.")
    return registry


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = ParsedArgs()
    registry = build_registry(args)
    remaining = parse_or_exit(registry, argv)

    console.out(
        f"filename: {args.filename}\n"
        f"ip: {args.ip}\n"
        f"port: {args.port}\n"
        f"val: {args.val}\n"
    )
    if remaining:
        console.out(f"remaining: {' '.join(remaining)}\n")
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point."""
    run(main)
