"""Literal parsing: radix inference, digit validation, bit widths.

Radix resolution order:

1. **Explicit**: the radix declared on the :class:`Literal`.
2. **Prefix**: ``0b`` → 2, ``0o`` → 8, ``0x`` → 16 (either case).
3. **Default**: 10.

A single leading ``-`` is accepted in every radix.  The digits after it
are parsed as an unsigned magnitude and the result is flagged
``negative``; the codec applies the two's-complement negation.
"""

from __future__ import annotations

import logging

from intspect.core.models import Literal, ParsedValue
from intspect.exceptions import (
    MAX_BITS,
    MAX_RADIX,
    MIN_RADIX,
    EmptyInputError,
    InvalidDigitError,
    RadixOutOfRangeError,
    ValueOverflowError,
)

logger = logging.getLogger(__name__)

DEFAULT_RADIX: int = 10

PREFIXES: dict[str, int] = {
    "0b": 2,
    "0o": 8,
    "0x": 16,
}
"""Lower-case radix prefixes; matched case-insensitively."""

_DIGITS: str = "0123456789abcdefghijklmnopqrstuvwxyz"


# ---------------------------------------------------------------------------
# Radix resolution
# ---------------------------------------------------------------------------

def identify_radix(text: str) -> int | None:
    """Return the radix implied by *text*'s prefix, or ``None``.

    A leading ``-`` is skipped before the prefix is examined.
    """
    body = text[1:] if text.startswith("-") else text
    return PREFIXES.get(body[:2].lower())


def prefix_for(radix: int) -> str | None:
    """Return the canonical prefix for *radix*, if it has one."""
    for prefix, value in PREFIXES.items():
        if value == radix:
            return prefix
    return None


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise RadixOutOfRangeError(
            f"radix {radix} is out of range",
            hint=f"Choose a radix between {MIN_RADIX} and {MAX_RADIX}.",
        )


# ---------------------------------------------------------------------------
# Digits
# ---------------------------------------------------------------------------

def digit_value(char: str) -> int | None:
    """Return the numeric value of a single ASCII digit character, or ``None``."""
    if len(char) != 1 or not char.isascii():
        return None
    index = _DIGITS.find(char.lower())
    return index if index >= 0 else None


def _read_digits(text: str, digits: str, offset: int, radix: int) -> int:
    """Accumulate *digits* in *radix*, validating each character.

    Stops with :class:`ValueOverflowError` as soon as the running value
    is wider than any accepted literal, so oversized input fails in
    linear time.
    """
    magnitude = 0
    for index, char in enumerate(digits):
        value = digit_value(char)
        if value is None or value >= radix:
            raise InvalidDigitError(text, char, offset + index, radix)
        magnitude = magnitude * radix + value
        if magnitude.bit_length() > MAX_BITS + 1:
            raise ValueOverflowError(
                f"{text!r} needs more than {MAX_BITS} bits; "
                f"at most {MAX_BITS} are supported",
            )
    return magnitude


def bits_per_digit(radix: int) -> int | None:
    """Bits encoded by one digit when *radix* is a power of two."""
    if radix & (radix - 1):
        return None
    return radix.bit_length() - 1


def minimal_bits(magnitude: int, *, negative: bool = False) -> int:
    """Smallest width that represents the value without loss.

    For a non-negative value this is its bit length (at least 1).  For a
    negative value it is the smallest signed width holding
    ``-magnitude``.
    """
    if negative and magnitude > 0:
        return (magnitude - 1).bit_length() + 1
    return max(1, magnitude.bit_length())


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse_literal(literal: Literal) -> ParsedValue:
    """Parse *literal* into a :class:`ParsedValue`.

    Raises
    ------
    RadixOutOfRangeError
        If the declared radix lies outside 2–36.
    EmptyInputError
        If no digits remain after the sign and prefix.
    InvalidDigitError
        If a character is not a digit of the resolved radix.
    ValueOverflowError
        If the value needs more than 64 bits.
    """
    text = literal.text.strip()

    if literal.radix is not None:
        _check_radix(literal.radix)
        radix = literal.radix
    else:
        radix = identify_radix(text) or DEFAULT_RADIX

    negative = text.startswith("-")
    offset = 1 if negative else 0

    prefix = prefix_for(radix)
    if prefix is not None and text[offset:offset + 2].lower() == prefix:
        offset += 2

    digits = text[offset:]
    if not digits:
        raise EmptyInputError(
            f"no digits in {literal.text!r}",
            hint="Pass an integer such as 42, 0x2a or 0b101010.",
        )

    magnitude = _read_digits(text, digits, offset, radix)
    bits = minimal_bits(magnitude, negative=negative)
    if bits > MAX_BITS:
        raise ValueOverflowError(
            f"{literal.text!r} needs {bits} bits; "
            f"at most {MAX_BITS} are supported",
        )

    per_digit = bits_per_digit(radix)
    if per_digit is not None and not negative:
        source_bits = max(bits, len(digits) * per_digit)
    else:
        source_bits = bits

    logger.debug(
        "parsed %r: radix=%d magnitude=%d minimal_bits=%d source_bits=%d negative=%s",
        literal.text, radix, magnitude, bits, source_bits, negative,
    )
    return ParsedValue(
        magnitude=magnitude,
        radix=radix,
        minimal_bits=bits,
        source_bits=source_bits,
        negative=negative,
    )
