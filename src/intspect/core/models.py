"""Domain models for intspect.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  Each pipeline stage builds a new value
from the previous one:

``Literal`` → ``ParsedValue`` → ``WidthSpec`` → ``BitPattern`` →
``InspectionReport``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Literal:
    """Raw integer literal as typed by the user."""

    text: str
    """Input string, possibly with a ``-`` sign and a radix prefix."""

    radix: int | None = None
    """Declared radix (2–36), or ``None`` to infer from the prefix."""

    signed: bool = False
    """Interpret the resulting bit pattern as a signed integer."""


class ExtensionMode(enum.Enum):
    """How a value is fitted to its final width."""

    EXACT_FIT = "exact-fit"
    ZERO_EXTEND = "zero-extend"
    SIGN_EXTEND = "sign-extend"
    TRUNCATE = "truncate"


@dataclass(frozen=True, slots=True)
class WidthRequest:
    """User-requested width, already reduced to a single choice."""

    bits: int | None = None
    """Requested width in bits, or ``None`` to infer it."""

    extension: ExtensionMode | None = None
    """Explicit ``SIGN_EXTEND``/``ZERO_EXTEND`` override."""


# ---------------------------------------------------------------------------
# Pipeline values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedValue:
    """Unsigned magnitude recovered from a literal."""

    magnitude: int
    """Absolute value of the literal."""

    radix: int
    """Radix the digits were read in."""

    minimal_bits: int
    """Smallest width (>= 1) that holds the value without loss."""

    source_bits: int
    """Width spanned by the digits as written.

    Counts leading zero digits for power-of-two radices; equal to
    :attr:`minimal_bits` otherwise.
    """

    negative: bool = False
    """The literal carried a leading ``-``."""


@dataclass(frozen=True, slots=True)
class WidthSpec:
    """Final width and the way the value is fitted to it."""

    bits: int
    mode: ExtensionMode
    signed: bool


@dataclass(frozen=True, slots=True)
class BitPattern:
    """Fixed-width two's-complement bit pattern.

    ``value`` is the unsigned pattern; it always satisfies
    ``0 <= value < 2 ** width``.
    """

    value: int
    width: int
    signed: bool = False


@dataclass(frozen=True, slots=True)
class TwosComplementDetail:
    """Steps of negating a pattern: invert every bit, then add one."""

    pattern: BitPattern
    inverted: BitPattern
    negated: BitPattern


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rendering:
    """A bit pattern written out in the four supported radices."""

    decimal: str
    binary: str
    octal: str
    hexadecimal: str


@dataclass(frozen=True, slots=True)
class TwosComplementReport:
    """Rendered two's-complement breakdown."""

    inverted: str
    """Binary form of the bitwise complement."""

    decimal: str
    binary: str
    octal: str
    hexadecimal: str


@dataclass(frozen=True, slots=True)
class InspectionReport:
    """Final result of inspecting one literal."""

    decimal: str
    binary: str
    octal: str
    hexadecimal: str
    bits: int
    twos_complement: TwosComplementReport | None = None
