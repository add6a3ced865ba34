"""Rich console factories for the CLI layer.

The report is written to stdout; errors and log records go to stderr.
Consoles are built per invocation so ``--no-color`` and pytest's output
capture both take effect.
"""

from __future__ import annotations

from rich.console import Console


def get_console(*, stderr: bool = False, color: bool = True) -> Console:
    """Create a Rich console for stdout (default) or stderr.

    With *color* disabled no ANSI styling is emitted at all.
    """
    return Console(
        stderr=stderr,
        color_system="auto" if color else None,
        highlight=False,
    )
