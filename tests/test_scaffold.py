"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from intspect import __version__
from intspect.cli import exit_codes
from intspect.cli.app import main
from intspect.exceptions import (
    ConflictingOptionsError,
    EmptyInputError,
    IntspectError,
    InvalidDigitError,
    PatternInvariantError,
    RadixOutOfRangeError,
    ValueOverflowError,
    WidthOutOfRangeError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ConflictingOptionsError,
            EmptyInputError,
            InvalidDigitError,
            RadixOutOfRangeError,
            ValueOverflowError,
            WidthOutOfRangeError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[IntspectError]
    ) -> None:
        assert issubclass(exc_class, IntspectError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(IntspectError, Exception)

    def test_invariant_error_is_not_user_facing(self) -> None:
        assert not issubclass(PatternInvariantError, IntspectError)

    def test_hint_is_stored(self) -> None:
        err = IntspectError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = IntspectError("boom")
        assert err.hint is None

    def test_invalid_digit_echoes_input(self) -> None:
        err = InvalidDigitError("0x1g", "g", 3, 16)
        assert "'0x1g'" in str(err)
        assert "'g'" in str(err)
        assert err.position == 3
        assert err.radix == 16


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: intspect" in capsys.readouterr().out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_literal_returns_success(self) -> None:
        assert main(["--no-color", "42"]) == exit_codes.SUCCESS
