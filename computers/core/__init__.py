"""Core utilities: configuration and logging."""
from .config import BrowserConfig, Settings
from .logging import setup_logging

__all__ = ["Settings", "BrowserConfig", "setup_logging"]
