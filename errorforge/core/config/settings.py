"""Configuration for errorforge variants and logging."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errorforge.core.logging import LogConfig, get_logger

_logger = get_logger(__name__)


class ForgeConfig(BaseModel):
    """Defaults applied by :func:`errorforge.create`."""

    model_config = ConfigDict(frozen=True)

    strict_codes: bool = False
    stack_limit: int | None = Field(default=None, ge=1)
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ForgeConfig":
        """Build a validated config from a plain dictionary."""
        return cls.model_validate(config_dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return self.model_dump(exclude={"logging": {"console_stream"}})


class ConfigManager:
    """Loads and updates a :class:`ForgeConfig`."""

    def __init__(self, config_path: Path | str | None = None):
        """Initialise the manager.

        Args:
            config_path: TOML file to read. When None, defaults are used and
                nothing is read from disk.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.config = self._load_config()

    def _load_config(self) -> ForgeConfig:
        if self.config_path is None or not self.config_path.exists():
            return ForgeConfig()

        try:
            with open(self.config_path, "rb") as f:
                config_dict = tomllib.load(f)
            return ForgeConfig.from_dict(config_dict)
        except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
            _logger.warning("Failed to load config from {}: {}", self.config_path, e)
            return ForgeConfig()

    def get_config(self) -> ForgeConfig:
        """Return the current config."""
        return self.config

    def update_config(self, **updates: Any) -> ForgeConfig:
        """Deep-merge ``updates`` into the current config and re-validate."""
        config_dict = self.config.to_dict()

        def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        stream = self.config.logging.console_stream
        deep_update(config_dict, updates)
        config_dict.setdefault("logging", {}).setdefault("console_stream", stream)
        self.config = ForgeConfig.from_dict(config_dict)
        return self.config


__all__ = ["ConfigManager", "ForgeConfig"]
