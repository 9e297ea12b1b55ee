"""The option registry: registration, dispatch, and help output.

Lifecycle
---------
1. Construct an empty :class:`OptionRegistry`.
2. Register options with :meth:`~OptionRegistry.add_argument`,
   :meth:`~OptionRegistry.add_value` or :meth:`~OptionRegistry.add_flag`.
3. Call :meth:`~OptionRegistry.parse` once.  Handlers run in argv order;
   afterwards the caller reads its bound destinations.

``parse`` never exits the process.  It returns a
:class:`~tiny_cmdline.core.models.ParseResult`; turning that into an
exit code is the job of :func:`tiny_cmdline.cli.app.parse_or_exit`.

Short ``h`` and long ``help`` are reserved: registering either replaces
the default usage text with the caller's own help handler.
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from tiny_cmdline.cli.console import console, escape
from tiny_cmdline.core.conversion import Converter, convert, resolve_value_type
from tiny_cmdline.core.handlers import normalize_handler
from tiny_cmdline.core.models import Argument, Destination, OptionSpec, ParseResult, ParseStatus
from tiny_cmdline.core.option_table import build_option_table
from tiny_cmdline.core.protocols import Scanner
from tiny_cmdline.core.usage import format_usage
from tiny_cmdline.exceptions import OptionDefinitionError, ScanError
from tiny_cmdline.infra.argparse_scanner import ArgparseScanner
from tiny_cmdline.utils.constants import FIRST_SYNTHETIC_IDENTIFIER, FORBIDDEN_SHORT_NAMES

logger = logging.getLogger(__name__)


def _normalize_short_name(short_name: str | None) -> str | None:
    """Return the short name, ``None`` when absent; reject invalid ones."""
    if short_name is None or short_name in ("", "\0"):
        return None
    if not isinstance(short_name, str) or len(short_name) != 1:
        raise OptionDefinitionError(
            f"Short option name must be a single character, got {short_name!r}.",
        )
    if (
        not short_name.isascii()
        or not short_name.isprintable()
        or short_name.isspace()
        or short_name in FORBIDDEN_SHORT_NAMES
    ):
        raise OptionDefinitionError(
            f"Short option name {short_name!r} is not allowed.",
            hint="Use a printable ASCII character other than '-', ':', '?' or '='.",
        )
    return short_name


def _validate_long_name(long_name: str) -> str:
    if not isinstance(long_name, str):
        raise OptionDefinitionError(
            f"Long option name must be a string, got {type(long_name).__name__}.",
        )
    if long_name and (
        long_name.startswith("-")
        or "=" in long_name
        or any(char.isspace() for char in long_name)
    ):
        raise OptionDefinitionError(
            f"Long option name {long_name!r} is not allowed.",
            hint="Give the name without leading dashes, spaces or '='.",
        )
    return long_name


class OptionRegistry:
    """Declarative option table plus the parse loop that dispatches it.

    Usage::

        args = ParsedArgs()
        registry = OptionRegistry(prog="demo")
        registry.add_argument("version", "v", show_version, Argument.NONE, "Print the version.")
        registry.add_value("port", "p", args, "port", "The port to connect to.")
        result = registry.parse(["-p", "8080"])

    Parameters
    ----------
    prog:
        Program name for the ``Usage:`` header of the default help.
    description:
        Line printed under the header of the default help.
    scanner:
        Any :class:`~tiny_cmdline.core.protocols.Scanner`; defaults to
        :class:`~tiny_cmdline.infra.argparse_scanner.ArgparseScanner`.
    """

    def __init__(
        self,
        *,
        prog: str | None = None,
        description: str | None = None,
        scanner: Scanner | None = None,
    ) -> None:
        self.prog = prog
        self.description = description
        self._scanner: Scanner = scanner if scanner is not None else ArgparseScanner()
        self._options: dict[int, OptionSpec] = {}
        # Only advanced for options without a short name.
        self._next_identifier: int = FIRST_SYNTHETIC_IDENTIFIER

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        """Registered options in table (registration) order."""
        return tuple(self._options.values())

    @property
    def help_option(self) -> OptionSpec | None:
        """The caller-registered help option, if any."""
        return next((spec for spec in self._options.values() if spec.is_help), None)

    def get(self, identifier: int) -> OptionSpec | None:
        return self._options.get(identifier)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._options

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.options)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def _allocate_identifier(self, short_name: str | None) -> int:
        if short_name is not None:
            return ord(short_name)
        identifier = self._next_identifier
        self._next_identifier += 1
        return identifier

    def _is_duplicate(self, spec: OptionSpec) -> bool:
        if spec.identifier in self._options:
            return True
        return bool(spec.long_name) and any(
            existing.long_name == spec.long_name for existing in self._options.values()
        )

    def add_argument(
        self,
        long_name: str,
        short_name: str | None,
        handler: Callable[..., Any],
        arity: Argument,
        help: str = "",
    ) -> OptionSpec | None:
        """Register an option dispatched to *handler*.

        *handler* is either ``f(value)`` — receiving the raw value, or
        ``None`` when there is none — or ``f()`` for pure triggers.

        Returns the stored :class:`OptionSpec`, or ``None`` when the
        option duplicates an existing identifier or long name.  A
        duplicate is reported on stderr and dropped; the first
        registration stays in effect.

        Raises
        ------
        OptionDefinitionError
            For invalid names, a missing name, or an unusable handler.
        """
        long_name = _validate_long_name(long_name)
        short_name = _normalize_short_name(short_name)
        if short_name is None and not long_name:
            raise OptionDefinitionError(
                "An option needs a short name, a long name, or both.",
            )
        if not isinstance(arity, Argument):
            raise OptionDefinitionError(f"Unknown argument arity {arity!r}.")

        spec = OptionSpec(
            identifier=self._allocate_identifier(short_name),
            short_name=short_name,
            long_name=long_name,
            arity=arity,
            help=help,
            handler=normalize_handler(handler),
        )

        if self._is_duplicate(spec):
            console.print(f"[yellow]duplicate option[/yellow] {escape(spec.label)}")
            logger.debug("Dropped duplicate option %s (identifier %d)", spec.label, spec.identifier)
            return None

        self._options[spec.identifier] = spec
        logger.debug("Registered %s as identifier %d (%s)", spec.label, spec.identifier, arity.value)
        return spec

    def add_value(
        self,
        long_name: str,
        short_name: str | None,
        target: object,
        attribute: str,
        help: str = "",
        *,
        value_type: type | None = None,
        converter: Converter | None = None,
        arity: Argument = Argument.REQUIRED,
    ) -> OptionSpec | None:
        """Register an option that converts its value into ``target.attribute``.

        The destination type is *value_type*, else the attribute's class
        annotation, else the type of its current value.  The raw text is
        converted with *converter* or the converter registered for that
        type (see :mod:`tiny_cmdline.core.conversion`).

        The attribute is left alone until the option appears.  With
        ``Argument.OPTIONAL`` an occurrence without a value also leaves
        it alone.
        """
        destination = Destination(
            target=target,
            attribute=attribute,
            value_type=value_type if value_type is not None else resolve_value_type(target, attribute),
        )

        def assign(value: str | None) -> None:
            if value is None:
                return
            destination.assign(convert(destination.value_type, value, converter=converter))

        return self.add_argument(long_name, short_name, assign, arity, help)

    def add_flag(
        self,
        long_name: str,
        short_name: str | None,
        target: object,
        attribute: str,
        default: Any,
        placed: Any,
        help: str = "",
    ) -> OptionSpec | None:
        """Register a no-value option that sets ``target.attribute`` to *placed*.

        *default* is assigned right away, before any parsing.
        """
        destination = Destination(target=target, attribute=attribute, value_type=type(placed))
        destination.assign(default)
        return self.add_argument(
            long_name,
            short_name,
            functools.partial(destination.assign, placed),
            Argument.NONE,
            help,
        )

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def format_help(self) -> str:
        """Return the default usage text for the current table."""
        return format_usage(self.options, prog=self.prog, description=self.description)

    def print_help(self) -> None:
        """Show help: the caller's help handler if registered, else the default usage."""
        help_option = self.help_option
        if help_option is not None:
            help_option.handler(None)
            return
        console.out(self.format_help())

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _unrecognized(self, token: str | None, message: str) -> ParseResult:
        self.print_help()
        console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        return ParseResult(ParseStatus.UNRECOGNIZED_OPTION, token=token, message=message)

    def parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """Scan *argv* and dispatch recognized options to their handlers.

        Handlers run in argv order, once per occurrence, until the scan
        reaches help or an unknown option.  Options before that point
        keep their effects; options after it never run.

        Parameters
        ----------
        argv:
            Arguments without the program name.  ``None`` means
            ``sys.argv[1:]``.

        Returns
        -------
        ParseResult
            ``HELP_REQUESTED`` at a literal ``-h``/``--help`` or the
            registered help option; ``UNRECOGNIZED_OPTION`` at a token
            that matches nothing or cannot be scanned (help is shown and
            an error line is written to stderr).  Otherwise ``SUCCESS``
            with the leftover non-option tokens.

        Raises
        ------
        ValueConversionError
            When a typed destination rejects its value.  Handlers that
            ran before the failing one keep their effects.
        """
        tokens = list(sys.argv[1:] if argv is None else argv)

        table = build_option_table(self._options.values())
        logger.debug(
            "Scanning %d token(s): short options %r, long options %s",
            len(tokens),
            table.short_options,
            [option.name for option in table.long_options],
        )
        try:
            scan = self._scanner.scan(table, tokens)
        except ScanError as exc:
            return self._unrecognized(exc.token, exc.message)

        for match in scan.matches:
            # The table handed to the scanner came from self._options.
            spec = self._options[match.identifier]
            if spec.is_help:
                self.print_help()
                return ParseResult(ParseStatus.HELP_REQUESTED)
            logger.debug("Dispatching %s with value %r", match.option_string, match.value)
            spec.handler(match.value)

        stop = scan.stop
        if stop is not None:
            logger.debug("Scan stopped at argv[%d] %r: %s", stop.index, stop.token, stop.message)
            if stop.help_requested:
                self.print_help()
                return ParseResult(ParseStatus.HELP_REQUESTED)
            return self._unrecognized(stop.token, stop.message)

        return ParseResult(ParseStatus.SUCCESS, remaining=scan.remaining)
