"""Public evaluator for math expressions given as strings.

Example:
    ```python
    evaluator = Evaluator()
    evaluator.evaluate("2*(3+7)")  # 20.0

    evaluator.set_degree_mode()
    evaluator.evaluate("atan(1/sqrt(3))")  # 30.0
    ```

Supported operators, from lowest to highest precedence: relations
(``== != < <= > >=``, yielding 1 or 0), ``+ -``, ``* / %``, unary ``+ -``,
and right-associative ``^``. Functions are called as ``name(args)``; see
mathexpr.evaluator.functions for the full table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mathexpr.constants import DEGREE_MODE_THRESHOLD, AngleMode
from mathexpr.evaluator.errors import InvalidExpressionError
from mathexpr.evaluator.parser import parse
from mathexpr.logging import get_logger

if TYPE_CHECKING:
    from mathexpr.config import MathExprConfig

__all__ = ["Evaluator"]

logger = get_logger(__name__)


class Evaluator:
    """Evaluates math expressions, remembering the angle mode between calls.

    The angle mode is the only state kept across calls. Parsing state is
    created per call, so one instance can serve concurrent callers as long
    as nobody switches the angle mode while they run.

    Attributes:
        angle_scale: Radians per angle unit (1.0 in radian mode, pi/180 in
            degree mode).
    """

    def __init__(self, angle_mode: AngleMode = AngleMode.RADIANS) -> None:
        """Initialize the Evaluator.

        Args:
            angle_mode: Unit for trig arguments and inverse trig results.
        """
        self.angle_scale = AngleMode(angle_mode).scale

    @classmethod
    def from_config(cls, config: MathExprConfig) -> Evaluator:
        """Create an evaluator using the configured angle mode."""
        return cls(angle_mode=config.angle_mode)

    def evaluate(self, expression: str) -> float:
        """Evaluate ``expression`` and return its numerical value.

        Args:
            expression: The math expression, e.g. ``"3.2*sin(0.56)"``.

        Returns:
            The value of the expression. NaN and Infinity are returned as-is
            (``"1/0"`` is inf, ``"sqrt(-1)"`` is nan).

        Raises:
            InvalidExpressionError: If the expression is malformed, calls an
                unknown function, or passes invalid arguments to fact, comb
                or perm.
        """
        try:
            result = parse(expression, self.angle_scale)
        except InvalidExpressionError as e:
            logger.debug(
                "expression_rejected",
                expression=expression,
                error=type(e).__name__,
                position=e.position,
            )
            raise
        logger.debug("expression_evaluated", expression=expression, result=result)
        return result

    @property
    def angle_mode(self) -> AngleMode:
        if self.is_degree_mode():
            return AngleMode.DEGREES
        return AngleMode.RADIANS

    def set_degree_mode(self) -> None:
        """Make trig functions take, and inverse trig functions return, degrees."""
        self._set_mode(AngleMode.DEGREES)

    def set_radian_mode(self) -> None:
        """Make trig functions take, and inverse trig functions return, radians."""
        self._set_mode(AngleMode.RADIANS)

    def is_degree_mode(self) -> bool:
        return self.angle_scale < DEGREE_MODE_THRESHOLD

    def is_radian_mode(self) -> bool:
        return self.angle_scale > DEGREE_MODE_THRESHOLD

    def _set_mode(self, mode: AngleMode) -> None:
        self.angle_scale = mode.scale
        logger.debug("angle_mode_changed", angle_mode=mode.value)
