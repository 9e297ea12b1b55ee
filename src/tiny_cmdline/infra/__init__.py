"""Infrastructure layer — the argv scanner collaborator.

This layer wraps :mod:`argparse`.  Every raw argparse error is caught
here and re-raised as a :class:`~tiny_cmdline.exceptions.TinyCmdlineError`
subclass.

Rules
-----
* No imports from ``cli`` or the registry.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed through
  :class:`~tiny_cmdline.core.protocols.Scanner`.
"""

from tiny_cmdline.infra.argparse_scanner import ArgparseScanner

__all__: list[str] = [
    "ArgparseScanner",
]
