"""Custom exception hierarchy for intspect.

Every user-input failure raised by the core inherits from
:class:`IntspectError`.  The CLI error boundary renders these as a
single ``error:`` line and never emits a partial report.

Hierarchy
---------
IntspectError
├── InvalidDigitError
├── ValueOverflowError
├── WidthOutOfRangeError
├── ConflictingOptionsError
├── EmptyInputError
└── RadixOutOfRangeError
"""

from __future__ import annotations

MAX_BITS: int = 64
"""Widest supported integer, in bits."""

MIN_RADIX: int = 2
MAX_RADIX: int = 36


class IntspectError(Exception):
    """Base exception for all intspect errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Literal parsing -------------------------------------------------------

class InvalidDigitError(IntspectError):
    """Raised when a character is not a valid digit for the resolved radix."""

    def __init__(
        self,
        text: str,
        char: str,
        position: int,
        radix: int,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"invalid digit {char!r} at position {position} "
            f"for radix {radix} in {text!r}",
            hint=hint,
        )
        self.text = text
        self.char = char
        self.position = position
        self.radix = radix


class EmptyInputError(IntspectError):
    """Raised when the literal holds no digits once sign and prefix are gone."""


class RadixOutOfRangeError(IntspectError):
    """Raised when an explicit radix falls outside 2–36."""


class ValueOverflowError(IntspectError):
    """Raised when a parsed magnitude needs more than 64 bits."""


# --- Width selection -------------------------------------------------------

class WidthOutOfRangeError(IntspectError):
    """Raised when a requested width is 0 or exceeds 64 bits."""


# --- Option groups ---------------------------------------------------------

class ConflictingOptionsError(IntspectError):
    """Raised when two options from one mutually exclusive group are given."""


# --- Internal --------------------------------------------------------------

class PatternInvariantError(RuntimeError):
    """Raised when a bit pattern does not fit its own width.

    Not an :class:`IntspectError`: the CLI reports it through the
    unexpected-error path.
    """
