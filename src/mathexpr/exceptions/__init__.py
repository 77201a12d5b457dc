"""mathexpr exception hierarchy.

All project exceptions derive from MathExprError and can be imported from
this package:
    from mathexpr.exceptions import ConfigError, MathExprError

Expression evaluation errors live beside the evaluator in
mathexpr.evaluator.errors and also derive from MathExprError.
"""

from __future__ import annotations

# Base exception
from mathexpr.exceptions.base import MathExprError

# Configuration exceptions
from mathexpr.exceptions.config import ConfigError

__all__ = [
    "MathExprError",
    "ConfigError",
]
