"""String math expression evaluation.

Expressions are evaluated directly from text by a recursive-descent parser;
the result is always a float (relations and logical functions give 1.0 or
0.0).

Expression Syntax
-----------------
- Numbers: ``42``, ``3.14``, ``.5``, ``6.02e23``, ``3.547E-1``
- Arithmetic: ``+ - * / %`` and ``^`` (right-associative power)
- Relations: ``== !=`` (right-associative), ``< <= > >=``
- Grouping: ``( ... )``
- Functions: ``sqrt(2)``, ``log(2, 8)``, ``if(x > 0, 1, -1)``, ``pi()``

Examples
--------
    evaluator = Evaluator()
    evaluator.evaluate("sqrt(3^2 + 4^2)")     # 5.0
    evaluator.evaluate("-2^2")                # -4.0
    evaluator.evaluate("2 < 4 < 1 == 0")      # 1.0

Module Structure
----------------
- cursor.py: Character cursor and literal scanners
- functions.py: Function table keyed by name and argument count
- parser.py: Grammar rules, fused with evaluation
- evaluator.py: Evaluator class holding the angle mode
- errors.py: InvalidExpressionError and its subclasses
"""

from __future__ import annotations

from mathexpr.constants import AngleMode
from mathexpr.evaluator.errors import (
    ExpressionErrorInfo,
    InvalidArgumentError,
    InvalidExpressionError,
    MalformedNumberError,
    MalformedOperatorError,
    MissingCloseParenError,
    MissingOpenParenError,
    MissingParenthesisError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnknownFunctionError,
)
from mathexpr.evaluator.evaluator import Evaluator
from mathexpr.evaluator.functions import FUNCTIONS, FunctionKind, MathFunction

__all__: list[str] = [
    # Evaluator
    "Evaluator",
    "AngleMode",
    # Function table
    "FUNCTIONS",
    "FunctionKind",
    "MathFunction",
    # Error types
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
]
