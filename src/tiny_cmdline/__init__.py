"""tiny-cmdline — declarative command-line option registration.

Register options bound to callbacks or typed destinations, then parse
``argv`` once.  Help text is generated from the registrations.
"""

import logging

from tiny_cmdline.core.conversion import convert, register_converter, unregister_converter
from tiny_cmdline.core.models import Argument, Destination, OptionSpec, ParseResult, ParseStatus
from tiny_cmdline.registry import OptionRegistry
from tiny_cmdline.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "Argument",
    "Destination",
    "OptionRegistry",
    "OptionSpec",
    "ParseResult",
    "ParseStatus",
    "__version__",
    "convert",
    "register_converter",
    "unregister_converter",
]
