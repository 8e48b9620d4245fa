"""Configuration management."""

from portallib.config.manager import ConfigManager

__all__ = ["ConfigManager"]
