from __future__ import annotations


class MathExprError(Exception):
    """Base exception class for all mathexpr-specific errors.

    This is the root of the mathexpr exception hierarchy. Catching it at an
    application boundary handles every failure raised by this package while
    letting unrelated exceptions propagate.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            value = evaluator.evaluate(formula)
        except MathExprError as e:
            logger.error(f"Formula rejected: {e.message}")
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the MathExprError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
