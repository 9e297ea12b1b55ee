"""Domain models for tiny-cmdline.

All models are **frozen** dataclasses.  :class:`Destination` is the
one with a side effect: it writes into an object the caller owns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from tiny_cmdline.utils.constants import HELP_LONG_NAME, HELP_SHORT_NAME

if TYPE_CHECKING:
    from tiny_cmdline.core.handlers import OptionHandler


# ---------------------------------------------------------------------------
# Arity
# ---------------------------------------------------------------------------

class Argument(Enum):
    """Whether an option consumes a value token."""

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"


# ---------------------------------------------------------------------------
# Registered option
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One registered option, keyed in the option table by ``identifier``."""

    identifier: int
    """``ord(short_name)`` when a short name exists, else a synthetic id >= 256."""

    short_name: str | None
    """Single-character short name, or ``None``."""

    long_name: str
    """Long name without leading dashes; ``""`` when absent."""

    arity: Argument

    help: str
    """Help text shown in the usage listing."""

    handler: OptionHandler
    """Normalized callback invoked with the raw value (or ``None``)."""

    @property
    def label(self) -> str:
        """Return the option as written on the command line, e.g. ``-p, --port``."""
        if self.short_name is None:
            return f"--{self.long_name}"
        if not self.long_name:
            return f"-{self.short_name}"
        return f"-{self.short_name}, --{self.long_name}"

    @property
    def is_help(self) -> bool:
        """Whether this option occupies the reserved help slot."""
        return self.short_name == HELP_SHORT_NAME or self.long_name == HELP_LONG_NAME


# ---------------------------------------------------------------------------
# Scanner input / output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LongOption:
    """Long-option descriptor handed to the scanner."""

    name: str
    arity: Argument
    identifier: int


@dataclass(frozen=True, slots=True)
class OptionTable:
    """The accepted-option description derived from the registration table.

    ``short_options`` uses getopt syntax: a character alone takes no
    value, ``c:`` requires one and ``c::`` takes an optional one.
    """

    short_options: str
    long_options: tuple[LongOption, ...]


@dataclass(frozen=True, slots=True)
class OptionMatch:
    """A recognized option occurrence, in argv order."""

    identifier: int
    value: str | None
    option_string: str
    """The option string the scanner resolved the token to (``-p`` or ``--port``)."""


@dataclass(frozen=True, slots=True)
class ScanStop:
    """The token that ended a scan early: an unknown option or a help request."""

    token: str
    index: int
    """Position of the offending token in ``argv``."""

    message: str
    help_requested: bool = False
    """True when the token was a literal ``-h``/``--help``."""


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Everything a scanner found in one pass over ``argv``.

    When ``stop`` is set, ``matches`` holds only the options that came
    before it.
    """

    matches: tuple[OptionMatch, ...]
    stop: ScanStop | None = None

    remaining: tuple[str, ...] = ()
    """Non-option tokens, in order, with the first ``--`` removed."""


# ---------------------------------------------------------------------------
# Parse outcome
# ---------------------------------------------------------------------------

class ParseStatus(Enum):
    """Terminal outcome of :meth:`OptionRegistry.parse`."""

    SUCCESS = "success"
    HELP_REQUESTED = "help_requested"
    UNRECOGNIZED_OPTION = "unrecognized_option"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Result of a parse.  Only ``SUCCESS`` means handlers were dispatched."""

    status: ParseStatus
    token: str | None = None
    """The offending token for ``UNRECOGNIZED_OPTION``."""

    message: str | None = None
    remaining: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.SUCCESS


# ---------------------------------------------------------------------------
# Typed destination
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Destination:
    """A typed binding to ``target.attribute``.

    Python has no references to variables, so a destination names an
    attribute on an object the caller owns (typically a dataclass
    holding the parsed arguments).
    """

    target: Any
    attribute: str
    value_type: type

    def assign(self, value: Any) -> None:
        setattr(self.target, self.attribute, value)

    def read(self) -> Any:
        return getattr(self.target, self.attribute)
