"""World data model for the portal library."""

from dataclasses import dataclass, field
from typing import Any


def _optional_str(value: Any) -> str | None:
    """Convert a raw JSON value to a string, keeping missing values as None."""
    if value is None:
        return None
    return str(value)


def _format_count(value: Any) -> str:
    """Format a player count for display.

    Missing, zero and boolean values show as "-"; whole floats drop their
    fraction so JSON 16.0 reads as 16.
    """
    if isinstance(value, bool) or not value:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Platform:
    """Platforms a world supports.

    The data producer is inconsistent about key casing and value types, so
    both "PC" and "pc" are accepted, but the string "true" is only honoured
    on the capitalized key.

    Attributes:
        pc: World runs on PC
        android: World runs on Android (Quest)
    """

    pc: bool = False
    android: bool = False

    @classmethod
    def from_api_response(cls, data: Any) -> "Platform":
        """Create Platform from the raw ``Platform`` object.

        Args:
            data: Raw platform value (anything that isn't a dict means no platforms)

        Returns:
            Platform instance
        """
        if not isinstance(data, dict):
            return cls()

        pc = data.get("PC") is True or data.get("pc") is True or data.get("PC") == "true"
        android = (
            data.get("Android") is True
            or data.get("android") is True
            or data.get("Android") == "true"
        )
        return cls(pc=pc, android=android)

    @property
    def badges(self) -> list[str]:
        """Badge names to show, PC first."""
        badges = []
        if self.pc:
            badges.append("PC")
        if self.android:
            badges.append("Android")
        return badges

    @property
    def label(self) -> str:
        return " ".join(self.badges) or "N/A"


@dataclass(frozen=True)
class World:
    """Represents one listed virtual world.

    Attributes:
        id: World identifier used to build the launch link
        name: Display name
        description: Free-form description
        recommended_capacity: Suggested player count (raw value)
        capacity: Hard player cap (raw value)
        platform: Supported platforms
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    recommended_capacity: Any = None
    capacity: Any = None
    platform: Platform = field(default_factory=Platform)

    @classmethod
    def from_api_response(cls, data: dict) -> "World":
        """Create World from a raw ``Worlds`` entry.

        Every field is optional; missing fields stay None.

        Args:
            data: Raw world dictionary

        Returns:
            World instance

        Raises:
            ValueError: If data is not a dictionary
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid world entry: {data!r}")

        return cls(
            id=_optional_str(data.get("ID")),
            name=_optional_str(data.get("Name")),
            description=_optional_str(data.get("Description")),
            recommended_capacity=data.get("RecommendedCapacity"),
            capacity=data.get("Capacity"),
            platform=Platform.from_api_response(data.get("Platform")),
        )

    def display_title(self, index: int) -> str:
        """Title for display, falling back to the id and then the position.

        Args:
            index: Position of the world within its category

        Returns:
            Non-empty title string
        """
        return self.name or self.id or f"World {index}"

    def display_description(self) -> str:
        return self.description or "No description"

    def display_recommended_capacity(self) -> str:
        return _format_count(self.recommended_capacity)

    def display_capacity(self) -> str:
        return _format_count(self.capacity)
