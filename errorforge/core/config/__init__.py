"""Configuration management."""

from errorforge.core.config.settings import ConfigManager, ForgeConfig

__all__ = ["ConfigManager", "ForgeConfig"]
