"""Protocols (interfaces) consumed by the registry.

The scanner is the collaborator that walks ``argv`` against an option
description.  The registry depends ONLY on this protocol; the default
implementation lives in :mod:`tiny_cmdline.infra.argparse_scanner`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from tiny_cmdline.core.models import OptionTable, ScanResult


class Scanner(Protocol):
    """Contract for argv scanners.

    Any object with a matching :meth:`scan` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def scan(self, table: OptionTable, argv: Sequence[str]) -> ScanResult:
        """Match *argv* against *table* without invoking any handler.

        Recognized options are returned as
        :class:`~tiny_cmdline.core.models.OptionMatch` entries in argv
        order, carrying the identifier from *table*.  Scanning ends at
        the first unknown option, unscannable token or literal
        ``-h``/``--help``, which is reported as
        :class:`~tiny_cmdline.core.models.ScanStop`; options after it
        are not returned.  Non-option tokens go to ``remaining``.

        Implementations must not print and must not exit the process.

        Raises
        ------
        ScanError
            Optional alternative to a ``ScanStop`` for scanners that
            cannot say where they stopped.
        """
        ...  # pragma: no cover
