"""Error types raised while evaluating math expressions.

Every failure is an InvalidExpressionError; the subclasses name the specific
problem and carry the offending token so callers can react to one case
without parsing messages. NaN and Infinity results are not errors.
"""

from __future__ import annotations

from dataclasses import dataclass

from mathexpr.exceptions import MathExprError

__all__ = [
    "InvalidExpressionError",
    "MalformedNumberError",
    "MissingParenthesisError",
    "MissingOpenParenError",
    "MissingCloseParenError",
    "UnknownFunctionError",
    "InvalidArgumentError",
    "MalformedOperatorError",
    "UnexpectedCharacterError",
    "TrailingInputError",
    "ExpressionErrorInfo",
    "describe_char",
]


def describe_char(char: str) -> str:
    """Render a cursor character for an error message.

    Args:
        char: A single character, or "" for end of input.

    Returns:
        The quoted character, or "end of input".
    """
    if not char:
        return "end of input"
    return f"'{char}'"


@dataclass(frozen=True, slots=True)
class ExpressionErrorInfo:
    """Immutable snapshot of an expression error for reporting.

    Attributes:
        expression: The expression that failed.
        message: Short description of the failure (without position).
        position: Character offset where the failure was detected.
    """

    expression: str
    message: str
    position: int = 0


class InvalidExpressionError(MathExprError):
    """Exception raised when an expression cannot be evaluated.

    The full message names the problem and its index, then repeats the
    expression with a caret under the offending character.

    Attributes:
        message: Full formatted message.
        reason: Short description without the position suffix.
        expression: The expression that failed.
        position: Character offset where the failure was detected.
    """

    def __init__(
        self,
        reason: str,
        expression: str,
        position: int,
    ) -> None:
        """Initialize the InvalidExpressionError.

        Args:
            reason: Short description of the failure.
            expression: The expression being evaluated.
            position: Character offset of the failure.
        """
        self.reason = reason
        self.expression = expression
        self.position = position
        error_line = f"{expression}\n{' ' * position}^"
        super().__init__(f"{reason} at index {position}:\n{error_line}")

    def to_info(self) -> ExpressionErrorInfo:
        """Capture this error as an ExpressionErrorInfo."""
        return ExpressionErrorInfo(
            expression=self.expression,
            message=self.reason,
            position=self.position,
        )


class MalformedNumberError(InvalidExpressionError):
    """A scanned numeric literal is not a valid float (e.g. ``1e`` or ``.``).

    Attributes:
        text: The scanned literal.
    """

    def __init__(self, text: str, expression: str, position: int) -> None:
        self.text = text
        super().__init__(f"Invalid number: {text}", expression, position)


class MissingParenthesisError(InvalidExpressionError):
    """A required parenthesis is absent.

    Attributes:
        paren: The parenthesis that was expected, "(" or ")".
    """

    def __init__(
        self, paren: str, reason: str, expression: str, position: int
    ) -> None:
        self.paren = paren
        super().__init__(reason, expression, position)


class MissingOpenParenError(MissingParenthesisError):
    """A function name is not followed by ``(``.

    Attributes:
        function: The lower-cased function name.
    """

    def __init__(self, function: str, expression: str, position: int) -> None:
        self.function = function
        super().__init__("(", f"Missing '(' after {function}", expression, position)


class MissingCloseParenError(MissingParenthesisError):
    """A parenthesized relation or argument list is not closed.

    Attributes:
        function: Name of the function whose argument list is unclosed, or
            None for a bare parenthesized group.
    """

    def __init__(
        self, expression: str, position: int, function: str | None = None
    ) -> None:
        self.function = function
        if function is None:
            reason = "Missing ')'"
        else:
            reason = f"Missing ')' after argument to {function}"
        super().__init__(")", reason, expression, position)


_ARITY_WORDS = {1: "one argument", 2: "two arguments", 3: "three arguments"}


class UnknownFunctionError(InvalidExpressionError):
    """No function matches the given name and argument count.

    Attributes:
        name: The lower-cased function name.
        arity: Number of arguments supplied.
    """

    def __init__(
        self, name: str, arity: int, expression: str, position: int
    ) -> None:
        self.name = name
        self.arity = arity
        if arity == 0:
            reason = f"Unknown function: {name}()"
        else:
            words = _ARITY_WORDS.get(arity, f"{arity} arguments")
            reason = f"Unknown function: {name} with {words}"
        super().__init__(reason, expression, position)


class InvalidArgumentError(InvalidExpressionError):
    """A known function received arguments outside its domain.

    Attributes:
        function: The lower-cased function name.
    """

    def __init__(
        self, function: str, reason: str, expression: str, position: int
    ) -> None:
        self.function = function
        super().__init__(reason, expression, position)


class MalformedOperatorError(InvalidExpressionError):
    """``=`` or ``!`` appears without the ``=`` that completes it.

    Attributes:
        operator: The operator that was started, "=" or "!".
    """

    def __init__(self, operator: str, expression: str, position: int) -> None:
        self.operator = operator
        super().__init__(
            f"Invalid operator '{operator}', probably missing '='",
            expression,
            position,
        )


class UnexpectedCharacterError(InvalidExpressionError):
    """A character cannot start a factor.

    Attributes:
        char: The offending character, or "" at end of input.
    """

    def __init__(self, char: str, expression: str, position: int) -> None:
        self.char = char
        if char:
            reason = f"Unexpected character: {describe_char(char)}"
        else:
            reason = "Unexpected end of input"
        super().__init__(reason, expression, position)


class TrailingInputError(UnexpectedCharacterError):
    """Characters remain after a complete expression was evaluated."""
