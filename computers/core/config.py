"""Application configuration using pydantic-settings."""
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WIDTH: int = 1024
DEFAULT_HEIGHT: int = 768
DEFAULT_START_URL: str = "https://bing.com"
DEFAULT_DISPLAY: str = ":0"


class BrowserConfig(BaseModel):
    """Local browser launch configuration."""

    headless: bool = False
    width: int = Field(default=DEFAULT_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_HEIGHT, gt=0)
    start_url: str = DEFAULT_START_URL
    display: str = DEFAULT_DISPLAY
    inherit_env: bool = True


class Settings(BaseSettings):
    """Application settings loaded from YAML or environment."""

    model_config = SettingsConfigDict(env_prefix="CUA_", env_nested_delimiter="__")

    browser: BrowserConfig = BrowserConfig()
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Settings instance with loaded configuration.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
