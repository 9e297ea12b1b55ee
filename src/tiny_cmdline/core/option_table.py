"""Derivation of the scanner's option description from registered options."""

from __future__ import annotations

from collections.abc import Iterable

from tiny_cmdline.core.models import Argument, LongOption, OptionSpec, OptionTable

_SHORT_SUFFIX: dict[Argument, str] = {
    Argument.NONE: "",
    Argument.REQUIRED: ":",
    Argument.OPTIONAL: "::",
}


def build_option_table(options: Iterable[OptionSpec]) -> OptionTable:
    """Build the getopt-style description for *options*.

    Every short name contributes its character plus ``:``/``::`` by
    arity; every long name contributes a descriptor carrying the
    option's identifier.
    """
    short_parts: list[str] = []
    long_options: list[LongOption] = []
    for spec in options:
        if spec.short_name is not None:
            short_parts.append(spec.short_name + _SHORT_SUFFIX[spec.arity])
        if spec.long_name:
            long_options.append(LongOption(spec.long_name, spec.arity, spec.identifier))
    return OptionTable("".join(short_parts), tuple(long_options))


def split_short_options(short_options: str) -> list[tuple[str, Argument]]:
    """Invert the short-option string into ``(char, arity)`` pairs."""
    pairs: list[tuple[str, Argument]] = []
    index = 0
    while index < len(short_options):
        char = short_options[index]
        index += 1
        colons = 0
        while colons < 2 and index < len(short_options) and short_options[index] == ":":
            colons += 1
            index += 1
        arity = (Argument.NONE, Argument.REQUIRED, Argument.OPTIONAL)[colons]
        pairs.append((char, arity))
    return pairs
