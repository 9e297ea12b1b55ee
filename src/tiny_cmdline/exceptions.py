"""Custom exception hierarchy for tiny-cmdline.

Every error raised by the library inherits from
:class:`TinyCmdlineError`.  ``argparse`` errors never leave the scanner
adapter; they end the scan there as a
:class:`~tiny_cmdline.core.models.ScanStop`.

Hierarchy
---------
TinyCmdlineError
├── OptionDefinitionError
├── ScanError
├── ValueConversionError
├── InvalidValueError
└── MissingDependencyError

Duplicate registrations are deliberately *not* part of the hierarchy:
they are reported as a diagnostic and registration continues.
"""

from __future__ import annotations


class TinyCmdlineError(Exception):
    """Base exception for all tiny-cmdline errors.

    The CLI error boundary renders ``message`` and, when present,
    ``hint`` without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registration ----------------------------------------------------------

class OptionDefinitionError(TinyCmdlineError):
    """Raised when an option is registered with an invalid definition.

    Examples: neither a short nor a long name, a short name longer than
    one character, or a handler that cannot accept zero or one argument.
    """


# --- Scanning --------------------------------------------------------------

class ScanError(TinyCmdlineError):
    """Raised by a scanner that rejects ``argv`` without saying where it stopped."""

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.token: str | None = token
        """The option string the scanner was looking at, when known."""


# --- Values ----------------------------------------------------------------

class ValueConversionError(TinyCmdlineError):
    """Raised when a raw option value cannot be converted to its destination type."""

    def __init__(
        self,
        message: str,
        *,
        text: str | None,
        value_type: type,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.text: str | None = text
        self.value_type: type = value_type


class InvalidValueError(TinyCmdlineError):
    """Raised by caller handlers that reject a well-formed value."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(TinyCmdlineError):
    """Raised when an optional runtime dependency is not installed."""
