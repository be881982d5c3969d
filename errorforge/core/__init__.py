"""errorforge core: the variant factory, the variant base class and their
ambient configuration and logging."""

from errorforge.core.config import ConfigManager, ForgeConfig
from errorforge.core.factory import create
from errorforge.core.serialization import describe_error, dumps
from errorforge.core.variant import VariantError

__all__ = [
    "ConfigManager",
    "ForgeConfig",
    "VariantError",
    "create",
    "describe_error",
    "dumps",
]
