"""Tests for pattern rendering (core/render.py)."""

from __future__ import annotations

import pytest

from intspect.core.models import BitPattern, Rendering
from intspect.core.render import (
    digit_count,
    render_decimal,
    render_pattern,
    render_radix,
)
from intspect.exceptions import PatternInvariantError


class TestDigitCount:
    @pytest.mark.parametrize("width", range(1, 65))
    def test_binary_digits_equal_width(self, width: int) -> None:
        assert digit_count(width, 2) == width

    @pytest.mark.parametrize(
        "width,octal,hexadecimal",
        [(1, 1, 1), (3, 1, 1), (4, 2, 1), (5, 2, 2), (16, 6, 4), (32, 11, 8), (64, 22, 16)],
    )
    def test_octal_and_hex(self, width: int, octal: int, hexadecimal: int) -> None:
        assert digit_count(width, 8) == octal
        assert digit_count(width, 16) == hexadecimal


class TestRenderRadix:
    def test_binary_is_padded_to_width(self) -> None:
        assert render_radix(BitPattern(0x123, 16), 2) == "0b0000000100100011"

    def test_octal_is_padded(self) -> None:
        assert render_radix(BitPattern(0x123, 16), 8) == "0o000443"

    def test_hex_is_lower_case_and_padded(self) -> None:
        assert render_radix(BitPattern(0xF123, 16), 16) == "0xf123"
        assert render_radix(BitPattern(0x123, 16), 16) == "0x0123"

    def test_signed_pattern_renders_unsigned_bits(self) -> None:
        assert render_radix(BitPattern(0b1001, 4, signed=True), 2) == "0b1001"


class TestRenderDecimal:
    def test_unsigned(self) -> None:
        assert render_decimal(BitPattern(0b1001, 4)) == "9"

    def test_signed_negative(self) -> None:
        assert render_decimal(BitPattern(0b1001, 4, signed=True)) == "-7"

    def test_signed_positive(self) -> None:
        assert render_decimal(BitPattern(0b0111, 4, signed=True)) == "7"

    def test_full_64_bit(self) -> None:
        pattern = BitPattern(2**64 - 1, 64)
        assert render_decimal(pattern) == "18446744073709551615"
        assert render_decimal(BitPattern(2**64 - 1, 64, signed=True)) == "-1"


class TestRenderPattern:
    def test_all_radices(self) -> None:
        assert render_pattern(BitPattern(0b1001, 4, signed=True)) == Rendering(
            decimal="-7",
            binary="0b1001",
            octal="0o11",
            hexadecimal="0x9",
        )

    def test_single_bit(self) -> None:
        assert render_pattern(BitPattern(0, 1)) == Rendering("0", "0b0", "0o0", "0x0")

    @pytest.mark.parametrize("value,width", [(16, 4), (-1, 4), (0, 0)])
    def test_invariant_violation(self, value: int, width: int) -> None:
        with pytest.raises(PatternInvariantError):
            render_pattern(BitPattern(value, width))
