"""Tests for domain models (core/models.py).

All models are frozen dataclasses: these tests verify immutability,
defaults, and equality semantics.
"""

from __future__ import annotations

import pytest

from intspect.core.models import (
    BitPattern,
    ExtensionMode,
    InspectionReport,
    Literal,
    ParsedValue,
    WidthRequest,
    WidthSpec,
)


def _make_report(**overrides: object) -> InspectionReport:
    defaults: dict[str, object] = {
        "decimal": "9",
        "binary": "0b1001",
        "octal": "0o11",
        "hexadecimal": "0x9",
        "bits": 4,
    }
    defaults.update(overrides)
    return InspectionReport(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Literal / WidthRequest
# ---------------------------------------------------------------------------

class TestLiteral:
    def test_defaults(self) -> None:
        literal = Literal("42")
        assert literal.radix is None
        assert literal.signed is False

    def test_frozen(self) -> None:
        literal = Literal("42")
        with pytest.raises(AttributeError):
            literal.text = "43"  # type: ignore[misc]


class TestWidthRequest:
    def test_defaults_infer_everything(self) -> None:
        request = WidthRequest()
        assert request.bits is None
        assert request.extension is None

    def test_equality(self) -> None:
        assert WidthRequest(8, ExtensionMode.ZERO_EXTEND) == WidthRequest(
            8, ExtensionMode.ZERO_EXTEND
        )


# ---------------------------------------------------------------------------
# Pipeline values
# ---------------------------------------------------------------------------

class TestParsedValue:
    def test_negative_defaults_to_false(self) -> None:
        parsed = ParsedValue(magnitude=5, radix=10, minimal_bits=3, source_bits=3)
        assert parsed.negative is False

    def test_frozen(self) -> None:
        parsed = ParsedValue(magnitude=5, radix=10, minimal_bits=3, source_bits=3)
        with pytest.raises(AttributeError):
            parsed.magnitude = 6  # type: ignore[misc]


class TestWidthSpec:
    def test_fields_accessible(self) -> None:
        spec = WidthSpec(16, ExtensionMode.SIGN_EXTEND, True)
        assert spec.bits == 16
        assert spec.mode is ExtensionMode.SIGN_EXTEND
        assert spec.signed is True


class TestBitPattern:
    def test_unsigned_by_default(self) -> None:
        assert BitPattern(9, 4).signed is False

    def test_frozen(self) -> None:
        pattern = BitPattern(9, 4)
        with pytest.raises(AttributeError):
            pattern.width = 8  # type: ignore[misc]


# ---------------------------------------------------------------------------
# InspectionReport
# ---------------------------------------------------------------------------

class TestInspectionReport:
    def test_twos_complement_defaults_to_none(self) -> None:
        assert _make_report().twos_complement is None

    def test_equality(self) -> None:
        assert _make_report() == _make_report()

    def test_inequality(self) -> None:
        assert _make_report(bits=4) != _make_report(bits=8)

    def test_frozen(self) -> None:
        report = _make_report()
        with pytest.raises(AttributeError):
            report.decimal = "10"  # type: ignore[misc]
