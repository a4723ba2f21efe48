"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from graphrest.config.schema import Settings


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".graphrest" / "config.json"


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load settings from file (if present) on top of environment defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Validated settings object.
    """
    path = config_path or get_config_path()

    if not path.exists():
        return Settings()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("config file must be a JSON object")
        return Settings(**convert_keys(data))
    except (json.JSONDecodeError, ValueError) as e:
        raise ValueError(
            f"Failed to load config from {path}: {e}. "
            "Fix the file or remove it to use defaults."
        ) from e


def convert_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Convert top-level camelCase keys to snake_case for Pydantic."""
    return {camel_to_snake(k): v for k, v in data.items()}


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
