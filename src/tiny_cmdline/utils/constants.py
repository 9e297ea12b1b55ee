"""Constants shared by the registry, the scanner adapter, and usage rendering."""

from __future__ import annotations

from typing import Final

FIRST_SYNTHETIC_IDENTIFIER: Final[int] = 256
"""First identifier handed to options without a short name.

Must stay above every code point a short name can have (short names
are ASCII, so anything >= 128 would do; 256 keeps the byte range free).
"""

HELP_SHORT_NAME: Final[str] = "h"
HELP_LONG_NAME: Final[str] = "help"

HELP_TOKENS: Final[frozenset[str]] = frozenset({"-h", "--help"})
"""Raw argv tokens that always request help, registered or not."""

END_OF_OPTIONS: Final[str] = "--"

FORBIDDEN_SHORT_NAMES: Final[frozenset[str]] = frozenset({"-", ":", "?", "="})
"""Characters with a meaning of their own in option scanning."""

REQUIRED_ARG_MARKER: Final[str] = "<arg>"
OPTIONAL_ARG_MARKER: Final[str] = "[arg]"

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
