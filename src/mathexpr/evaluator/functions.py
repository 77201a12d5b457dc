"""Built-in functions callable from expressions.

Functions are looked up by lower-cased name and argument count; one name may
carry several arities (``log(x)`` is the natural log, ``log(b, x)`` takes an
explicit base). Each entry is tagged with a FunctionKind that tells apply()
whether the evaluator's angle scale or the whole-number check is involved.

All implementations operate on numpy.float64 scalars so that domain errors
and overflow produce NaN or Infinity instead of raising.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from mathexpr.constants import INTEGRAL_THRESHOLD, ROUND_MAX, ROUND_MIN

__all__ = [
    "ArgumentDomainError",
    "FunctionKind",
    "MathFunction",
    "FUNCTIONS",
    "lookup",
    "power",
]

_ONE = np.float64(1.0)
_ZERO = np.float64(0.0)
_LN2 = np.log(np.float64(2.0))


class ArgumentDomainError(ValueError):
    """Raised by apply() when a whole-number function gets other arguments."""


class FunctionKind(str, Enum):
    """How a function's arguments and result relate to evaluator state."""

    CONSTANT = "constant"  # pi(), e()
    PLAIN = "plain"  # result depends on arguments only
    ANGLE_INPUT = "angle_input"  # sin, cos, tan: argument scaled to radians
    ANGLE_OUTPUT = "angle_output"  # asin, acos, atan, atan2: result scaled back
    LOGICAL = "logical"  # non-zero is true, result is 1.0 or 0.0
    INTEGRAL = "integral"  # non-negative whole arguments, non-increasing
    CONDITIONAL = "conditional"  # if(cond, then, else)


@dataclass(frozen=True, slots=True)
class MathFunction:
    """One (name, arity) overload in the function table.

    Attributes:
        name: Lower-cased name as written in expressions.
        arity: Number of arguments accepted.
        kind: Relationship to angle mode and argument validation.
        impl: Callable taking ``arity`` float64 arguments.
        requirement: Message used when an INTEGRAL function's arguments are
            rejected.
    """

    name: str
    arity: int
    kind: FunctionKind
    impl: Callable[..., np.float64]
    requirement: str | None = None

    def apply(self, args: Sequence[np.float64], angle_scale: float) -> np.float64:
        """Call the function with already-evaluated arguments.

        Args:
            args: Exactly ``arity`` values.
            angle_scale: Radians per angle unit of the calling evaluator.

        Returns:
            The function result.

        Raises:
            ArgumentDomainError: If an INTEGRAL function's arguments are not
                non-negative whole numbers in non-increasing order.
        """
        if self.kind is FunctionKind.ANGLE_INPUT:
            return self.impl(args[0] * angle_scale)
        if self.kind is FunctionKind.ANGLE_OUTPUT:
            return self.impl(*args) / angle_scale
        if self.kind is FunctionKind.INTEGRAL:
            whole = all(_is_whole(a) for a in args)
            ordered = all(a >= b for a, b in zip(args, args[1:]))
            if not (whole and ordered):
                raise ArgumentDomainError(self.requirement or self.name)
        return self.impl(*args)


def _truth(flag: bool) -> np.float64:
    return _ONE if flag else _ZERO


def _is_whole(x: np.float64) -> bool:
    # round() clamps to the 64-bit range, so larger values fail the comparison
    return bool(x >= 0 and _round_half_up(x) == x)


def _round_half_up(x: np.float64) -> np.float64:
    """Round half up into the signed 64-bit range; NaN rounds to 0."""
    if np.isnan(x):
        return _ZERO
    if abs(x) >= INTEGRAL_THRESHOLD:
        return np.float64(np.clip(x, ROUND_MIN, ROUND_MAX))
    return np.floor(x + 0.5)


def _signum(x: np.float64) -> np.float64:
    if x == 0 or np.isnan(x):
        return x
    return np.copysign(_ONE, x)


def _asinh(x: np.float64) -> np.float64:
    return np.log(x + np.sqrt(x * x + 1))


def _acosh(x: np.float64) -> np.float64:
    return np.log(x + np.sqrt(x * x - 1))


def _atanh(x: np.float64) -> np.float64:
    return 0.5 * np.log((1 + x) / (1 - x))


def power(base: np.float64, exponent: np.float64) -> np.float64:
    """Raise ``base`` to ``exponent``, keeping indeterminate forms NaN.

    C pow() defines ``1^nan`` and ``(-1)^inf`` as 1; both are NaN here, as is
    any NaN exponent.
    """
    if np.isnan(exponent) or (abs(base) == 1 and np.isinf(exponent)):
        return np.float64(np.nan)
    return np.power(base, exponent)


def _log_base(base: np.float64, x: np.float64) -> np.float64:
    return np.log(x) / np.log(base)


def _xor(a: np.float64, b: np.float64) -> np.float64:
    return _truth((a != 0) != (b != 0))


def _factorial(n: np.float64) -> np.float64:
    result = _ONE
    for j in range(2, int(n) + 1):
        result *= j
        if np.isinf(result):
            break
    return result


def _permutations(m: np.float64, n: np.float64) -> np.float64:
    """Falling product m * (m-1) * ... * (m-n+1)."""
    result = _ONE
    for i in range(int(n)):
        result *= m - i
        if np.isinf(result):
            break
    return result


def _combinations(m: np.float64, n: np.float64) -> np.float64:
    # Divide as we go so intermediate values stay near the final magnitude
    result = _ONE
    for j in range(1, int(n) + 1):
        result *= (m - (j - 1)) / j
        if np.isinf(result):
            break
    return result


def _if(cond: np.float64, then: np.float64, otherwise: np.float64) -> np.float64:
    return then if cond != 0 else otherwise


FUNCTIONS: dict[str, dict[int, MathFunction]] = {}


def _register(
    kind: FunctionKind,
    arity: int,
    table: dict[str, Callable[..., np.float64]],
    requirement: str | None = None,
) -> None:
    for name, impl in table.items():
        FUNCTIONS.setdefault(name, {})[arity] = MathFunction(
            name=name,
            arity=arity,
            kind=kind,
            impl=impl,
            requirement=requirement,
        )


_register(
    FunctionKind.CONSTANT,
    0,
    {
        "pi": lambda: np.float64(np.pi),
        "e": lambda: np.float64(np.e),
    },
)

_register(
    FunctionKind.PLAIN,
    1,
    {
        "abs": np.abs,
        "ceil": np.ceil,
        "floor": np.floor,
        "round": _round_half_up,
        "signum": _signum,
        "sqrt": np.sqrt,
        "cbrt": np.cbrt,
        "sinh": np.sinh,
        "cosh": np.cosh,
        "tanh": np.tanh,
        "asinh": _asinh,
        "acosh": _acosh,
        "atanh": _atanh,
        "exp": np.exp,
        "log": np.log,
        "log2": lambda x: np.log(x) / _LN2,
        "log10": np.log10,
        "toradians": np.deg2rad,
        "todegrees": np.rad2deg,
    },
)

_register(
    FunctionKind.ANGLE_INPUT,
    1,
    {
        "sin": np.sin,
        "cos": np.cos,
        "tan": np.tan,
    },
)

_register(
    FunctionKind.ANGLE_OUTPUT,
    1,
    {
        "asin": np.arcsin,
        "acos": np.arccos,
        "atan": np.arctan,
    },
)

_register(
    FunctionKind.ANGLE_OUTPUT,
    2,
    {
        "atan": np.arctan2,
        "atan2": np.arctan2,
    },
)

_register(
    FunctionKind.PLAIN,
    2,
    {
        "hypot": np.hypot,
        "log": _log_base,
        "max": np.maximum,
        "min": np.minimum,
        "pow": power,
    },
)

_register(FunctionKind.LOGICAL, 1, {"not": lambda x: _truth(x == 0)})

_register(
    FunctionKind.LOGICAL,
    2,
    {
        "and": lambda a, b: _truth(a != 0 and b != 0),
        "or": lambda a, b: _truth(a != 0 or b != 0),
        "xor": _xor,
    },
)

_register(
    FunctionKind.INTEGRAL,
    1,
    {"fact": _factorial},
    requirement="Factorial of non-integer or negative number",
)

_register(
    FunctionKind.INTEGRAL,
    2,
    {"comb": _combinations},
    requirement="In comb(m,n), n and m must be non-negative integers with m>=n",
)

_register(
    FunctionKind.INTEGRAL,
    2,
    {"perm": _permutations},
    requirement="In perm(m,n), n and m must be non-negative integers with m>=n",
)

_register(FunctionKind.CONDITIONAL, 3, {"if": _if})


def lookup(name: str, arity: int) -> MathFunction | None:
    """Find the overload of ``name`` taking ``arity`` arguments.

    Returns:
        The matching MathFunction, or None when the name is unknown or has
        no overload for that many arguments.
    """
    overloads = FUNCTIONS.get(name)
    if overloads is None:
        return None
    return overloads.get(arity)
