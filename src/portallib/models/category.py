"""Category data model for the portal library."""

import logging
from dataclasses import dataclass, field

from portallib.models.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    """Represents a named group of worlds, shown as one tab.

    Attributes:
        name: Category name, also used as the tab label
        worlds: Worlds in document order
    """

    name: str
    worlds: list[World] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "Category":
        """Create Category from a raw ``Categorys`` entry.

        Args:
            data: Raw category dictionary

        Returns:
            Category instance

        Raises:
            ValueError: If data is not a dictionary
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid category entry: {data!r}")

        name = data.get("Category")
        name = "" if name is None else str(name)

        worlds_data = data.get("Worlds")
        if not isinstance(worlds_data, list):
            worlds_data = []

        worlds = []
        for world_data in worlds_data:
            try:
                worlds.append(World.from_api_response(world_data))
            except ValueError as e:
                logger.warning(f"Skipping world in category {name!r}: {e}")
                continue

        return cls(name=name, worlds=worlds)
