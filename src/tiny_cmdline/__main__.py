"""Allow ``python -m tiny_cmdline`` invocation.

Runs the bundled demo program through the same error boundary as the
``tiny-cmdline-demo`` console script.
"""

from __future__ import annotations

from tiny_cmdline.cli.demo import cli

if __name__ == "__main__":
    cli()
