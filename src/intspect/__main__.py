"""Allow ``python -m intspect`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m intspect`` behaves identically to the ``intspect``
console script.
"""

from __future__ import annotations

from intspect.cli.app import cli

if __name__ == "__main__":
    cli()
