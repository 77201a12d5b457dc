"""mathexpr constants.

Single source of truth for the angle scales, the signed 64-bit limits used
by rounding, and the environment variables read by logging and
configuration.
"""

from __future__ import annotations

import math
from enum import Enum

# =============================================================================
# Angle Scales
# =============================================================================

#: Multiplier applied to trig arguments in radian mode (the default)
RADIAN_SCALE: float = 1.0

#: Multiplier applied to trig arguments in degree mode
DEGREE_SCALE: float = math.pi / 180.0

#: Scales below this threshold are reported as degree mode
DEGREE_MODE_THRESHOLD: float = 0.5

# =============================================================================
# Numeric Limits
# =============================================================================

#: Largest value round() can produce (signed 64-bit maximum as a double)
ROUND_MAX: float = float(2**63 - 1)

#: Smallest value round() can produce (signed 64-bit minimum as a double)
ROUND_MIN: float = float(-(2**63))

#: Doubles at or beyond this magnitude have no fractional part
INTEGRAL_THRESHOLD: float = float(2**52)

# =============================================================================
# Environment
# =============================================================================

#: Environment variable prefix for configuration settings
ENV_PREFIX: str = "MATHEXPR_"

#: Environment variable selecting the log output format ("json" or console)
LOG_FORMAT_ENV_VAR: str = "MATHEXPR_LOG_FORMAT"

#: Environment variable selecting the log level
LOG_LEVEL_ENV_VAR: str = "MATHEXPR_LOG_LEVEL"

#: Default log level name
DEFAULT_LOG_LEVEL: str = "INFO"

#: File name of the project-level configuration file
PROJECT_CONFIG_FILENAME: str = "mathexpr.yaml"


# =============================================================================
# Angle Modes
# =============================================================================


class AngleMode(str, Enum):
    """Unit in which trig functions take and inverse trig functions return angles."""

    RADIANS = "radians"
    DEGREES = "degrees"

    @property
    def scale(self) -> float:
        """Multiplier that converts this unit to radians."""
        return DEGREE_SCALE if self is AngleMode.DEGREES else RADIAN_SCALE
