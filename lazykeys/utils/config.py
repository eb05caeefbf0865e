"""Configuration management using Pydantic for validation."""

from pathlib import Path
from typing import Any, Dict, Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path("config/lazykeys.yaml")

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class SearchConfig(BaseSettings):
    """Search engine configuration."""

    max_results: int = Field(default=50, ge=1)
    field_bonus: Dict[str, float] = {
        "description": 30.0,
        "keys": 20.0,
        "category": 0.0,
    }

    @field_validator("field_bonus")
    @classmethod
    def validate_field_bonus(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Keep per-field bonuses small enough to never cross a match tier."""
        for name, bonus in v.items():
            if not 0 <= bonus < 100:
                raise ValueError(f"Field bonus for '{name}' must be in [0, 100)")
        return v


class AnimationConfig(BaseSettings):
    """Keyframe playback configuration."""

    frame_interval: float = Field(default=0.8, gt=0.0)
    loop: bool = True


class ViewConfig(BaseSettings):
    """Keyboard panel configuration."""

    default_mode: Literal["animation", "legend"] = "animation"
    show_legend_steps: bool = True


class LoggingConfig(BaseSettings):
    """Logging configuration (file sink used while the TUI runs)."""

    level: str = "INFO"
    file: str = "logs/lazykeys.log"
    rotation: str = "5 MB"
    retention: int = Field(default=3, ge=1)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize to an upper-case Loguru level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Valid: {', '.join(LOG_LEVELS)}")
        return level


class Config(BaseSettings):
    """Main configuration class."""

    model_config = SettingsConfigDict(
        env_prefix="LAZYKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    search: SearchConfig = Field(default_factory=SearchConfig)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # None means the bundled data set
    data_path: Path | None = None

    @staticmethod
    def _deep_merge_dict(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge two dicts (overrides win)."""
        merged: Dict[str, Any] = dict(base)
        for key, value in overrides.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge_dict(merged[key], value)
            else:
                merged[key] = value
        return merged

    @classmethod
    def from_yaml(cls, yaml_path: str | Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Load configuration from YAML file and environment variables.

        Precedence (highest to lowest):
        1) Environment variables / .env
        2) YAML file
        3) Model defaults

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If the YAML root is not a mapping
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}

        if not isinstance(yaml_config, dict):
            raise ValueError(f"YAML config root must be a mapping/dict: {yaml_path}")

        env_overrides = cls().model_dump(exclude_defaults=True)
        merged = cls._deep_merge_dict(yaml_config, env_overrides)

        return cls(**merged)


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Raises:
        RuntimeError: If configuration hasn't been initialized
    """
    global _config
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call load_config() first.")
    return _config


def load_config(yaml_path: str | Path | None = None) -> Config:
    """Load configuration.

    With no path, ``config/lazykeys.yaml`` is used if present and defaults
    (plus environment overrides) otherwise. An explicit path must exist.

    Args:
        yaml_path: Optional path to YAML configuration file

    Returns:
        Loaded Config instance
    """
    global _config
    if yaml_path is None:
        _config = Config.from_yaml(DEFAULT_CONFIG_PATH) if DEFAULT_CONFIG_PATH.exists() else Config()
    else:
        _config = Config.from_yaml(yaml_path)
    return _config


def reset_config() -> None:
    """Reset global configuration (mainly for testing)."""
    global _config
    _config = None
