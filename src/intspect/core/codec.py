"""Two's-complement codec: fit a parsed value to a fixed-width pattern.

Every function in this module is a **pure** transformation on plain
integers.  Bit patterns are unsigned ints in ``[0, 2 ** width)`` and all
arithmetic is modulo ``2 ** width``.
"""

from __future__ import annotations

import logging

from intspect.core.models import (
    BitPattern,
    ExtensionMode,
    ParsedValue,
    TwosComplementDetail,
    WidthSpec,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Bit primitives
# ---------------------------------------------------------------------------

def mask(width: int) -> int:
    """All-ones pattern of *width* bits."""
    return (1 << width) - 1


def truncate(value: int, width: int) -> int:
    """Keep the low *width* bits of *value*."""
    return value & mask(width)


def zero_extend(value: int, width: int) -> int:
    """Widen to *width* bits, filling new high bits with 0."""
    return truncate(value, width)


def sign_extend(value: int, source_bits: int, width: int, *, sign_bit: bool) -> int:
    """Widen to *width* bits, filling bits from *source_bits* up with *sign_bit*.

    Bits already present below *source_bits* are left as they are.
    """
    value = truncate(value, width)
    if sign_bit and source_bits < width:
        value |= mask(width) ^ mask(source_bits)
    return value


def top_bit(value: int, width: int) -> bool:
    """Whether bit ``width - 1`` of *value* is set."""
    return bool((value >> (width - 1)) & 1)


def to_signed(value: int, width: int) -> int:
    """Read a *width*-bit pattern as a two's-complement signed integer."""
    if top_bit(value, width):
        return value - (1 << width)
    return value


def invert(value: int, width: int) -> int:
    """Bitwise complement within *width* bits."""
    return value ^ mask(width)


def negate(value: int, width: int) -> int:
    """Two's-complement negation within *width* bits."""
    return truncate(invert(value, width) + 1, width)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def base_value(parsed: ParsedValue) -> int:
    """The literal's bit pattern at its own minimal width."""
    if parsed.negative:
        return negate(parsed.magnitude, parsed.minimal_bits)
    return parsed.magnitude


def encode(parsed: ParsedValue, spec: WidthSpec) -> BitPattern:
    """Produce the ``spec.bits``-wide pattern for *parsed*.

    ``SIGN_EXTEND`` takes the sign from bit ``minimal_bits - 1`` of the
    value (set for every non-zero value) and fills from ``source_bits``
    upward, so digits written with leading zeros keep those zeros.
    """
    value = base_value(parsed)

    if spec.mode is ExtensionMode.SIGN_EXTEND:
        bits = sign_extend(
            value,
            min(parsed.source_bits, spec.bits),
            spec.bits,
            sign_bit=top_bit(value, parsed.minimal_bits),
        )
    elif spec.mode is ExtensionMode.TRUNCATE:
        bits = truncate(value, spec.bits)
    else:
        bits = zero_extend(value, spec.bits)

    logger.debug(
        "encoded %s to %d bits: %#x", spec.mode.value, spec.bits, bits,
    )
    return BitPattern(value=bits, width=spec.bits, signed=spec.signed)


def twos_complement_detail(pattern: BitPattern) -> TwosComplementDetail:
    """Break the negation of *pattern* into its invert and ``+1`` steps."""
    inverted = invert(pattern.value, pattern.width)
    negated = truncate(inverted + 1, pattern.width)
    return TwosComplementDetail(
        pattern=pattern,
        inverted=BitPattern(inverted, pattern.width, pattern.signed),
        negated=BitPattern(negated, pattern.width, pattern.signed),
    )
