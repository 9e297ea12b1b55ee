"""Core layer — option models, handler normalization, conversion, usage text.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``, ``infra`` or the registry.
* All functions must be fully typed and deterministic.
"""

from tiny_cmdline.core.conversion import convert, register_converter, unregister_converter
from tiny_cmdline.core.handlers import OptionHandler, normalize_handler
from tiny_cmdline.core.models import (
    Argument,
    Destination,
    LongOption,
    OptionMatch,
    OptionSpec,
    OptionTable,
    ParseResult,
    ParseStatus,
    ScanResult,
    ScanStop,
)
from tiny_cmdline.core.option_table import build_option_table
from tiny_cmdline.core.protocols import Scanner

__all__: list[str] = [
    "Argument",
    "Destination",
    "LongOption",
    "OptionHandler",
    "OptionMatch",
    "OptionSpec",
    "OptionTable",
    "ParseResult",
    "ParseStatus",
    "ScanResult",
    "ScanStop",
    "Scanner",
    "build_option_table",
    "convert",
    "normalize_handler",
    "register_converter",
    "unregister_converter",
]
