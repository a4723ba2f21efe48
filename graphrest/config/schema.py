"""Configuration schema using Pydantic.

Settings are read from ``GRAPHREST_*`` environment variables and may be
overlaid by a JSON file (see ``graphrest.config.loader``).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings for the legacy REST dialect."""

    model_config = SettingsConfigDict(env_prefix="GRAPHREST_", extra="ignore")

    access_token: str = ""  # Attached to every call unless the caller passes one
    rest_server: str = "api.facebook.com"
    read_only_rest_server: str = "api-read.facebook.com"  # Used when read_only is set
    beta_marker: str = "beta"  # Inserted after the first host label for beta calls
    use_ssl: bool = True
    timeout_seconds: float = Field(default=20.0, gt=0)
    user_agent: str = "graphrest"
