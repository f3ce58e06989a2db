# src/meterline/core/config.py
"""
Configuration schema and loading for the Meterline agent.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True}

    level: str = Field(default="INFO", description="Root log level")
    json_output: bool = Field(default=False, description="Emit JSON lines instead of console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        normalized = v.upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level '{v}', expected one of {sorted(_LOG_LEVELS)}")
        return normalized


class PluginSettings(BaseModel):
    """Per-plugin settings.

    Example YAML:
        plugins:
          coffee:
            enabled: true
            config:
              poll_interval_ms: 500
    """

    model_config = {"frozen": True}

    enabled: bool = Field(default=True, description="Load this plugin at startup")
    config: dict[str, Any] = Field(default_factory=dict, description="Plugin-specific configuration")


class AgentSettings(BaseModel):
    """Top-level agent configuration."""

    model_config = {"frozen": True}

    plugins: dict[str, PluginSettings] = Field(default_factory=dict)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def enabled_plugins(self) -> list[str]:
        """Names of the plugins to load, in configuration order."""
        return [name for name, plugin in self.plugins.items() if plugin.enabled]


def load_settings(config_path: Path) -> AgentSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (METERLINE_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: METERLINE_LOGGING__LEVEL for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated AgentSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="METERLINE",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic fields are lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return AgentSettings(**raw_config)
