"""Process-level wrappers around :class:`~tiny_cmdline.registry.OptionRegistry`.

This module is the only place that translates between parse outcomes
and the OS process exit code.

* :func:`parse_or_exit` — parse once; exit on help, unrecognized
  options, or a library error; otherwise hand back the leftover tokens.
* :func:`run` — the script-level error boundary for a ``main`` function.

Exit codes
----------
* help requested → :data:`exit_codes.SUCCESS` (0)
* unrecognized option, bad value → :data:`exit_codes.GENERAL_ERROR` (1)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, NoReturn

from tiny_cmdline.cli import exit_codes
from tiny_cmdline.cli.console import console, escape
from tiny_cmdline.exceptions import TinyCmdlineError

if TYPE_CHECKING:
    from tiny_cmdline.registry import OptionRegistry

logger = logging.getLogger(__name__)


def report_error(exc: TinyCmdlineError) -> None:
    """Render *exc* and its hint on stderr."""
    console.print(f"[bold red]Error:[/bold red] {escape(exc.message)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def parse_or_exit(
    registry: OptionRegistry,
    argv: Sequence[str] | None = None,
) -> tuple[str, ...]:
    """Parse *argv* with *registry*, exiting the process on any terminal outcome.

    Parameters
    ----------
    registry:
        A fully populated registry.
    argv:
        Arguments without the program name; ``None`` means ``sys.argv[1:]``.

    Returns
    -------
    tuple[str, ...]
        Non-option tokens left over after parsing.

    Raises
    ------
    SystemExit
        With code 0 when help was requested, 1 for an unrecognized
        option or when a handler raised a
        :class:`~tiny_cmdline.exceptions.TinyCmdlineError`.
    """
    try:
        result = registry.parse(argv)
    except TinyCmdlineError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)

    if not result.ok:
        logger.debug("Parse ended with %s", result.status.value)
        sys.exit(exit_codes.FOR_STATUS[result.status])
    return result.remaining


def run(main: Callable[[], int]) -> NoReturn:
    """Top-level error boundary for a console-script ``main``.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TinyCmdlineError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
