"""Unit tests for the expression Cursor.

Covers character stepping, whitespace-skipping consume(), and the number and
identifier scan loops.
"""

from __future__ import annotations

import pytest

from mathexpr.evaluator.cursor import Cursor


class TestAdvance:
    """Tests for Cursor.advance() and the end-of-input sentinel."""

    def test_starts_on_first_character(self) -> None:
        """A new cursor rests on offset 0."""
        cursor = Cursor("12")
        assert cursor.pos == 0
        assert cursor.char == "1"
        assert not cursor.at_end

    def test_advance_past_last_character_sets_sentinel(self) -> None:
        """Stepping past the end leaves char empty and at_end True."""
        cursor = Cursor("1")
        cursor.advance()
        assert cursor.pos == 1
        assert cursor.char == ""
        assert cursor.at_end

    def test_empty_input_is_immediately_at_end(self) -> None:
        """An empty expression starts at end of input."""
        cursor = Cursor("")
        assert cursor.at_end
        assert cursor.char == ""


class TestConsume:
    """Tests for Cursor.consume()."""

    def test_consume_matching_character(self) -> None:
        """A matching character is stepped over."""
        cursor = Cursor("+1")
        assert cursor.consume("+") is True
        assert cursor.char == "1"

    def test_consume_skips_leading_whitespace(self) -> None:
        """Whitespace before the operator is skipped."""
        cursor = Cursor(" \t\n*2")
        assert cursor.consume("*") is True
        assert cursor.pos == 4

    def test_mismatch_leaves_cursor_on_non_whitespace(self) -> None:
        """On mismatch the whitespace is gone but the character remains."""
        cursor = Cursor("   -")
        assert cursor.consume("+") is False
        assert cursor.pos == 3
        assert cursor.char == "-"

    def test_consume_at_end_of_input(self) -> None:
        """Nothing matches the end-of-input sentinel."""
        cursor = Cursor("  ")
        assert cursor.consume(")") is False
        assert cursor.at_end

    @pytest.mark.parametrize("space", ["\t", "\n", "\u2003"])
    def test_unicode_separators_are_skipped(self, space: str) -> None:
        """Tabs, newlines and other separator spaces are whitespace."""
        cursor = Cursor(f"{space}+")
        assert cursor.consume("+") is True

    @pytest.mark.parametrize("space", ["\u00a0", "\u2007", "\u202f"])
    def test_no_break_spaces_are_not_skipped(self, space: str) -> None:
        """No-break spaces stay under the cursor."""
        cursor = Cursor(f"{space}+")
        assert cursor.consume("+") is False
        assert cursor.char == space


class TestScanNumber:
    """Tests for Cursor.scan_number()."""

    @pytest.mark.parametrize(
        ("text", "scanned", "next_char"),
        [
            ("42", "42", ""),
            ("3.14)", "3.14", ")"),
            (".5+1", ".5", "+"),
            ("5.*2", "5.", "*"),
            ("12.5e-3+1", "12.5e-3", "+"),
            ("1E+2", "1E+2", ""),
            ("6.02e23", "6.02e23", ""),
            ("1.2.3", "1.2", "."),
            ("1e5e6", "1e5", "e"),
            ("1e.5", "1e", "."),
            ("2-1", "2", "-"),
            ("3e", "3e", ""),
            ("7 8", "7", " "),
        ],
    )
    def test_scan_number(self, text: str, scanned: str, next_char: str) -> None:
        """The longest number-like prefix is consumed and returned."""
        cursor = Cursor(text)
        assert cursor.scan_number() == scanned
        assert cursor.char == next_char

    def test_sign_only_directly_after_exponent(self) -> None:
        """A sign after exponent digits ends the literal."""
        cursor = Cursor("1e2-3")
        assert cursor.scan_number() == "1e2"
        assert cursor.char == "-"


class TestScanIdentifier:
    """Tests for Cursor.scan_identifier()."""

    def test_identifier_is_lower_cased(self) -> None:
        """Function names are case-insensitive."""
        cursor = Cursor("ToRadians(1)")
        assert cursor.scan_identifier() == "toradians"
        assert cursor.char == "("

    def test_identifier_includes_digits(self) -> None:
        """Letters and digits form one identifier."""
        cursor = Cursor("log10 (")
        assert cursor.scan_identifier() == "log10"
        assert cursor.char == " "

    def test_identifier_stops_at_non_decimal_numerals(self) -> None:
        """Superscripts and other non-decimal numerals end the name."""
        cursor = Cursor("x\u00b2(1)")
        assert cursor.scan_identifier() == "x"
        assert cursor.char == "\u00b2"

    def test_identifier_accepts_unicode_letters(self) -> None:
        """Letters outside ASCII are part of the name."""
        cursor = Cursor("\u00e9t\u00e9(1)")
        assert cursor.scan_identifier() == "\u00e9t\u00e9"
