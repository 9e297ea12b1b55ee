"""CLI layer — process exit codes, console output, and error boundary.

This package is the outermost layer.  It is the only place that calls
``sys.exit``; the registry uses :mod:`tiny_cmdline.cli.console` for its
output, but nothing in ``core`` or ``infra`` imports from ``cli``.
"""
