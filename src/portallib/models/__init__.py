"""Data models."""

from portallib.models.category import Category
from portallib.models.config import Config
from portallib.models.library import Library
from portallib.models.world import Platform, World

__all__ = ["Library", "Category", "World", "Platform", "Config"]
