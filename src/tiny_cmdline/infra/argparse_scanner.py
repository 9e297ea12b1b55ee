"""``argparse`` backed implementation of :class:`~tiny_cmdline.core.protocols.Scanner`.

This module is the **only** place in the codebase that touches
``argparse``.  A throwaway parser is built from the
:class:`~tiny_cmdline.core.models.OptionTable` for every scan, so no
scanner state outlives a call.  Its actions only *record* matches;
handlers are dispatched later by the registry.

``argv`` is fed to the parser one option token at a time, so the scan
can stop exactly at the first token argparse rejects.  A required value
is always the next token, even one starting with ``-``: such pairs are
rewritten into the attached form (``--port=-5``, ``-p=-5``) before
argparse sees them.  argparse errors become a
:class:`~tiny_cmdline.core.models.ScanStop`; argparse never prints and
never exits.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from typing import Any, NoReturn

from tiny_cmdline.core.models import (
    Argument,
    LongOption,
    OptionMatch,
    OptionTable,
    ScanResult,
    ScanStop,
)
from tiny_cmdline.core.option_table import split_short_options
from tiny_cmdline.exceptions import ScanError
from tiny_cmdline.utils.constants import END_OF_OPTIONS, HELP_TOKENS

# Same shape argparse uses to tell negative numbers from options.
_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")

_NARGS: dict[Argument, dict[str, Any]] = {
    Argument.NONE: {"nargs": 0},
    Argument.REQUIRED: {},
    Argument.OPTIONAL: {"nargs": "?", "const": None},
}

_HELP_MESSAGE = "help requested"


class _ScanParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise ScanError(message)


class _RecordMatch(argparse.Action):
    """Action that appends an :class:`OptionMatch` for every occurrence."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        *,
        identifier: int,
        matches: list[OptionMatch],
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.identifier = identifier
        self.matches = matches

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        value = values if isinstance(values, str) else None
        self.matches.append(
            OptionMatch(
                identifier=self.identifier,
                value=value,
                option_string=option_string or self.option_strings[0],
            )
        )


def _looks_like_option(token: str) -> bool:
    if len(token) < 2 or not token.startswith("-"):
        return False
    if _NEGATIVE_NUMBER.match(token):
        return False
    return " " not in token


def _attach_value(token: str, value: str) -> list[str]:
    """Rewrite an option token and its separate value into attached form.

    A short option ending a cluster is split off the cluster so the
    ``=`` separator is read the same way by every argparse version.
    """
    if token.startswith("--"):
        return [f"{token}={value}"]
    cluster, last = token[:-1], token[-1]
    attached = [f"-{last}={value}"]
    if len(cluster) > 1:
        return [cluster, *attached]
    return attached


class ArgparseScanner:
    """Concrete :class:`Scanner` backed by :mod:`argparse`.

    Usage::

        scanner = ArgparseScanner()
        result = scanner.scan(build_option_table(specs), ["-p", "8080"])

    Short options cluster (``-vf README.md``) and values attach
    (``-p8080``, ``--port=8080``).  Unambiguous long-name prefixes are
    accepted unless *allow_abbrev* is false.  A required value is taken
    from the next token whatever it looks like.  Optional-arity options
    only take an attached value and report ``None`` otherwise.
    """

    def __init__(self, *, allow_abbrev: bool = True) -> None:
        self._allow_abbrev = allow_abbrev

    def _build_parser(self, table: OptionTable, matches: list[OptionMatch]) -> _ScanParser:
        parser = _ScanParser(
            prog="tiny-cmdline",
            add_help=False,
            allow_abbrev=self._allow_abbrev,
            exit_on_error=False,
        )
        for char, arity in split_short_options(table.short_options):
            parser.add_argument(
                f"-{char}",
                action=_RecordMatch,
                dest=f"short_{ord(char)}",
                default=argparse.SUPPRESS,
                identifier=ord(char),
                matches=matches,
                **_NARGS[arity],
            )
        for long_option in table.long_options:
            parser.add_argument(
                f"--{long_option.name}",
                action=_RecordMatch,
                dest=f"long_{long_option.identifier}",
                default=argparse.SUPPRESS,
                identifier=long_option.identifier,
                matches=matches,
                **_NARGS[long_option.arity],
            )
        return parser

    def _long_arity(self, name: str, long_options: dict[str, LongOption]) -> Argument | None:
        if name in long_options:
            return long_options[name].arity
        if not self._allow_abbrev:
            return None
        candidates = [option for key, option in long_options.items() if key.startswith(name)]
        if len(candidates) != 1:
            return None
        return candidates[0].arity

    def _needs_next_token(
        self,
        token: str,
        short_options: dict[str, Argument],
        long_options: dict[str, LongOption],
    ) -> bool:
        """Whether *token* ends with a required option still missing its value."""
        if token.startswith("--"):
            name, sep, _value = token[2:].partition("=")
            return not sep and self._long_arity(name, long_options) is Argument.REQUIRED

        chars = token[1:]
        for position, char in enumerate(chars):
            arity = short_options.get(char)
            if arity is Argument.NONE:
                continue
            if arity is Argument.REQUIRED:
                return position == len(chars) - 1
            return False
        return False

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def scan(self, table: OptionTable, argv: Sequence[str]) -> ScanResult:
        """Match *argv* against *table*, stopping at the first bad token.

        The stop covers unknown options, literal ``-h``/``--help``, and
        everything argparse rejects: a required value missing at the end
        of ``argv``, an ambiguous abbreviation, or a value attached to a
        long option that takes none.
        """
        matches: list[OptionMatch] = []
        parser = self._build_parser(table, matches)
        short_options = dict(split_short_options(table.short_options))
        long_options = {option.name: option for option in table.long_options}

        remaining: list[str] = []
        stop: ScanStop | None = None
        index = 0
        while index < len(argv):
            token = argv[index]
            if token == END_OF_OPTIONS:
                remaining.extend(argv[index + 1:])
                break
            if token in HELP_TOKENS:
                stop = ScanStop(token, index, _HELP_MESSAGE, help_requested=True)
                break
            if len(token) < 2 or not token.startswith("-"):
                remaining.append(token)
                index += 1
                continue

            unit = [token]
            step = 1
            if index + 1 < len(argv) and self._needs_next_token(token, short_options, long_options):
                value = argv[index + 1]
                if value in HELP_TOKENS:
                    stop = ScanStop(value, index + 1, _HELP_MESSAGE, help_requested=True)
                    break
                unit = _attach_value(token, value)
                step = 2

            try:
                _namespace, extras = parser.parse_known_args(unit)
            except argparse.ArgumentError as exc:
                stop = ScanStop(token, index, str(exc))
                break
            except ScanError as exc:
                stop = ScanStop(token, index, exc.message)
                break

            for extra in extras:
                if _looks_like_option(extra):
                    stop = ScanStop(
                        extra,
                        index,
                        f"unrecognized option {extra!r}",
                        help_requested=extra in HELP_TOKENS,
                    )
                    break
                remaining.append(extra)
            if stop is not None:
                break
            index += step

        return ScanResult(
            matches=tuple(matches),
            stop=stop,
            remaining=tuple(remaining),
        )
