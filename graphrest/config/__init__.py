"""Configuration module for graphrest."""

from graphrest.config.loader import get_config_path, load_settings
from graphrest.config.schema import Settings

__all__ = ["Settings", "get_config_path", "load_settings"]
