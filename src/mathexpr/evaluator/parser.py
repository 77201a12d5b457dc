"""Recursive-descent parser that evaluates as it parses.

Grammar (lowest to highest precedence):

    relation   := expression ( ("==" | "!=") relation
                             | ("<" | "<=" | ">" | ">=") expression )*
    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/" | "%") factor)*
    factor     := ("+" | "-") factor
                | ( "(" relation ")" | number | function ) ("^" factor)?
    function   := name "(" [relation ("," relation)*] ")"

Each rule returns the value of the text it consumed; no tree is built.
Equality recurses right, so ``1==1==0`` is ``1==(1==0)``. Comparisons take a
single expression on their right and fold into the running value, so
``2 < 4 < 1`` compares ``(2 < 4)`` with ``1``. Unary signs apply to the whole
factor including its exponent (``-2^2`` is -4) and ``^`` is
right-associative.
"""

from __future__ import annotations

import numpy as np

from mathexpr.evaluator.cursor import Cursor
from mathexpr.evaluator.errors import (
    InvalidArgumentError,
    MalformedNumberError,
    MalformedOperatorError,
    MissingCloseParenError,
    MissingOpenParenError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnknownFunctionError,
)
from mathexpr.evaluator.functions import ArgumentDomainError, lookup, power

__all__ = ["ExpressionParser", "parse"]

_ONE = np.float64(1.0)
_ZERO = np.float64(0.0)


class ExpressionParser:
    """Single-use parser bound to one expression string.

    Attributes:
        expression: The text being evaluated.
        angle_scale: Radians per angle unit for trig functions.
    """

    def __init__(self, expression: str, angle_scale: float) -> None:
        self.expression = expression
        self.angle_scale = angle_scale
        self._cursor = Cursor(expression)

    def parse(self) -> np.float64:
        """Evaluate the whole expression.

        Raises:
            InvalidExpressionError: If the text is not a valid expression or
                has characters left over after one.
        """
        value = self._relation()
        cursor = self._cursor
        if not cursor.at_end:
            raise TrailingInputError(cursor.char, self.expression, cursor.pos)
        return value

    def _relation(self) -> np.float64:
        cursor = self._cursor
        x = self._expression()
        while True:
            if cursor.consume("="):
                self._require_equals("=")
                x = _ONE if x == self._relation() else _ZERO
            elif cursor.consume("!"):
                self._require_equals("!")
                x = _ONE if x != self._relation() else _ZERO
            elif cursor.consume(">"):
                if cursor.consume("="):
                    x = _ONE if x >= self._expression() else _ZERO
                else:
                    x = _ONE if x > self._expression() else _ZERO
            elif cursor.consume("<"):
                if cursor.consume("="):
                    x = _ONE if x <= self._expression() else _ZERO
                else:
                    x = _ONE if x < self._expression() else _ZERO
            else:
                return x

    def _require_equals(self, operator: str) -> None:
        cursor = self._cursor
        if not cursor.consume("="):
            raise MalformedOperatorError(operator, self.expression, cursor.pos)

    def _expression(self) -> np.float64:
        cursor = self._cursor
        x = self._term()
        while True:
            if cursor.consume("+"):
                x = x + self._term()
            elif cursor.consume("-"):
                x = x - self._term()
            else:
                return x

    def _term(self) -> np.float64:
        cursor = self._cursor
        x = self._factor()
        while True:
            if cursor.consume("*"):
                x = x * self._factor()
            elif cursor.consume("/"):
                x = x / self._factor()
            elif cursor.consume("%"):
                x = np.fmod(x, self._factor())
            else:
                return x

    def _factor(self) -> np.float64:
        cursor = self._cursor
        if cursor.consume("+"):
            return self._factor()
        if cursor.consume("-"):
            return -self._factor()

        if cursor.consume("("):
            x = self._relation()
            if not cursor.consume(")"):
                raise MissingCloseParenError(self.expression, cursor.pos)
        elif cursor.char.isdecimal() or cursor.char == ".":
            x = self._number()
        elif cursor.char.isalpha():
            x = self._function()
        else:
            raise UnexpectedCharacterError(cursor.char, self.expression, cursor.pos)

        if cursor.consume("^"):
            x = power(x, self._factor())
        return x

    def _number(self) -> np.float64:
        start = self._cursor.pos
        text = self._cursor.scan_number()
        if not text.isascii():
            raise MalformedNumberError(text, self.expression, start)
        try:
            return np.float64(float(text))
        except ValueError as e:
            raise MalformedNumberError(text, self.expression, start) from e

    def _function(self) -> np.float64:
        cursor = self._cursor
        start = cursor.pos
        name = cursor.scan_identifier()
        if not cursor.consume("("):
            raise MissingOpenParenError(name, self.expression, cursor.pos)

        args: list[np.float64] = []
        if cursor.char != ")":
            args.append(self._relation())
        while cursor.consume(","):
            args.append(self._relation())
        if not cursor.consume(")"):
            raise MissingCloseParenError(self.expression, cursor.pos, function=name)

        function = lookup(name, len(args))
        if function is None:
            raise UnknownFunctionError(name, len(args), self.expression, start)
        try:
            return function.apply(args, self.angle_scale)
        except ArgumentDomainError as e:
            raise InvalidArgumentError(name, str(e), self.expression, start) from e


def parse(expression: str, angle_scale: float = 1.0) -> float:
    """Evaluate ``expression`` with floating-point warnings silenced.

    Args:
        expression: Text to evaluate.
        angle_scale: Radians per angle unit for trig functions.

    Returns:
        The value as a Python float. NaN and Infinity are valid results.

    Raises:
        InvalidExpressionError: If the expression is malformed.
    """
    with np.errstate(all="ignore"):
        return float(ExpressionParser(expression, angle_scale).parse())
