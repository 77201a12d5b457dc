from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from mathexpr.constants import ENV_PREFIX, PROJECT_CONFIG_FILENAME, AngleMode
from mathexpr.exceptions import ConfigError
from mathexpr.logging import configure_logging, get_logger

__all__ = [
    "MathExprConfig",
    "load_config",
    "get_user_config_path",
    "setup_logging",
]

logger = get_logger(__name__)

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that reads top-level keys from a YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Expected a mapping at the top of {yaml_file}",
                    field=None,
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class MathExprConfig(BaseSettings):
    """Root configuration for evaluators created through from_config().

    Attributes:
        angle_mode: Unit used by trig and inverse trig functions.
        verbosity: Log level applied by setup_logging().
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    angle_mode: AngleMode = AngleMode.RADIANS
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @property
    def log_level(self) -> int:
        """stdlib logging level named by ``verbosity``."""
        return _VERBOSITY_LEVELS[self.verbosity]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init settings (explicit keyword arguments)
        2. Environment variables (MATHEXPR_*)
        3. Project YAML config (./mathexpr.yaml)
        4. User YAML config (~/.config/mathexpr/config.yaml)
        """
        project_config_path = Path.cwd() / PROJECT_CONFIG_FILENAME
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/mathexpr/config.yaml
    """
    return Path.home() / ".config" / "mathexpr" / "config.yaml"


def load_config(config_path: Path | None = None) -> MathExprConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional project config file to read instead of
            ./mathexpr.yaml. Its values still rank below environment
            variables.

    Returns:
        MathExprConfig instance with merged configuration.

    Raises:
        ConfigError: If configuration is invalid.
    """
    try:
        if config_path is None:
            if not (Path.cwd() / PROJECT_CONFIG_FILENAME).exists():
                logger.info("project_config_missing", using="defaults")
            return MathExprConfig()

        if not config_path.exists():
            raise ConfigError(
                message=f"Config file not found: {config_path}",
                field=None,
                value=str(config_path),
            )
        explicit = YamlConfigSource(MathExprConfig, config_path)()
        overrides = _env_overrides()
        return MathExprConfig(**{**explicit, **overrides})
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e


def _env_overrides() -> dict[str, Any]:
    """Environment values for MathExprConfig fields, keyed by field name."""
    overrides: dict[str, Any] = {}
    for name in MathExprConfig.model_fields:
        env_name = f"{ENV_PREFIX}{name.upper()}"
        if env_name in os.environ:
            overrides[name] = os.environ[env_name]
    return overrides


def setup_logging(config: MathExprConfig) -> None:
    """Configure logging at the level named by ``config.verbosity``.

    Example:
        config = load_config()
        setup_logging(config)
        evaluator = Evaluator.from_config(config)
    """
    configure_logging(level=config.log_level)
