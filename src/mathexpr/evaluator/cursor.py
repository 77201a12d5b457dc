"""Character cursor over an expression string.

A Cursor is created for a single evaluation and discarded afterwards. It
tracks the current offset and the character under it; ``char`` is the empty
string once the input is exhausted, which never compares equal to an
operator and fails every ``str.is*`` test.
"""

from __future__ import annotations

__all__ = ["Cursor"]

#: No-break spaces are not separators between tokens
_NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")


class Cursor:
    """Position within the text of one expression.

    Attributes:
        text: The expression being read.
        pos: Offset of ``char`` within ``text``.
        char: Character at ``pos``, or "" at end of input.
    """

    __slots__ = ("text", "pos", "char")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = -1
        self.char = ""
        self.advance()

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self) -> None:
        """Move to the next character, or to the end-of-input sentinel."""
        self.pos += 1
        self.char = self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while self.char.isspace() and self.char not in _NON_BREAKING_SPACES:
            self.advance()

    def consume(self, expected: str) -> bool:
        """Skip whitespace, then step over ``expected`` if it is next.

        Args:
            expected: A single operator or punctuation character.

        Returns:
            True if the character matched and was consumed. On False the
            cursor rests on the first non-whitespace character.
        """
        self.skip_whitespace()
        if self.char == expected:
            self.advance()
            return True
        return False

    def scan_number(self) -> str:
        """Consume the longest run that looks like a numeric literal.

        Accepts digits, one decimal point before any exponent, one ``e``/``E``
        and a sign directly after the exponent marker. The run is not
        validated here; ``"1e"`` and ``"."`` are returned as scanned.
        """
        start = self.pos
        point_found = False
        exponent = False
        exponent_starting = False
        while True:
            char = self.char
            if char.isdecimal():
                pass
            elif char == "." and not point_found and not exponent:
                point_found = True
            elif char in ("e", "E") and not exponent:
                exponent = True
                exponent_starting = True
                self.advance()
                continue
            elif char in ("+", "-") and exponent_starting:
                pass
            else:
                break
            exponent_starting = False
            self.advance()
        return self.text[start : self.pos]

    def scan_identifier(self) -> str:
        """Consume a run of letters and decimal digits and return it lower-cased."""
        start = self.pos
        while self.char.isalpha() or self.char.isdecimal():
            self.advance()
        return self.text[start : self.pos].lower()
