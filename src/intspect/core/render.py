"""Render bit patterns as prefixed, zero-padded strings."""

from __future__ import annotations

from intspect.core.codec import to_signed
from intspect.core.models import BitPattern, Rendering
from intspect.exceptions import PatternInvariantError

BITS_PER_DIGIT: dict[int, int] = {
    2: 1,
    8: 3,
    16: 4,
}

PREFIX: dict[int, str] = {
    2: "0b",
    8: "0o",
    16: "0x",
}

_FORMAT_SPEC: dict[int, str] = {
    2: "b",
    8: "o",
    16: "x",
}


def digit_count(width: int, radix: int) -> int:
    """Digits needed to show every bit of a *width*-bit pattern in *radix*."""
    per_digit = BITS_PER_DIGIT[radix]
    return -(-width // per_digit)


def render_radix(pattern: BitPattern, radix: int) -> str:
    """Render *pattern* unsigned in a power-of-two *radix* with its prefix."""
    digits = digit_count(pattern.width, radix)
    return f"{PREFIX[radix]}{pattern.value:0{digits}{_FORMAT_SPEC[radix]}}"


def render_decimal(pattern: BitPattern) -> str:
    """Decimal value; two's-complement signed when the pattern is signed."""
    if pattern.signed:
        return str(to_signed(pattern.value, pattern.width))
    return str(pattern.value)


def _check_pattern(pattern: BitPattern) -> None:
    if pattern.width < 1 or not 0 <= pattern.value < (1 << pattern.width):
        raise PatternInvariantError(
            f"pattern {pattern.value:#x} does not fit in {pattern.width} bits"
        )


def render_pattern(pattern: BitPattern) -> Rendering:
    """Render *pattern* in decimal, binary, octal and hexadecimal.

    Raises
    ------
    PatternInvariantError
        If the pattern's value does not fit its width.
    """
    _check_pattern(pattern)
    return Rendering(
        decimal=render_decimal(pattern),
        binary=render_radix(pattern, 2),
        octal=render_radix(pattern, 8),
        hexadecimal=render_radix(pattern, 16),
    )
