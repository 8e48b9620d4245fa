"""Configuration data model for the portal library viewer."""

from dataclasses import dataclass

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/Riluchi/MyPortalLibrary_data"
    "/refs/heads/main/MyPortalLibrary.json"
)
DEFAULT_LAUNCH_URL = "https://vrchat.com/home/launch"
DEFAULT_THEME = "textual-dark"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        data_url: URL of the library JSON document
        launch_url: Base URL that world ids are appended to when launching
        theme: Theme name from Textual's available themes
        timeout: Request timeout in seconds, None for no timeout
    """

    data_url: str = DEFAULT_DATA_URL
    launch_url: str = DEFAULT_LAUNCH_URL
    theme: str = DEFAULT_THEME
    timeout: float | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary.

        Values of the wrong type fall back to their defaults one by one.

        Args:
            data: Dictionary from JSON deserialization

        Returns:
            Config instance

        Raises:
            ValueError: If data is not a dictionary
        """
        if not isinstance(data, dict):
            raise ValueError("Invalid configuration data: expected an object")

        data_url = data.get("data_url", DEFAULT_DATA_URL)
        if not isinstance(data_url, str) or not data_url:
            data_url = DEFAULT_DATA_URL

        launch_url = data.get("launch_url", DEFAULT_LAUNCH_URL)
        if not isinstance(launch_url, str) or not launch_url:
            launch_url = DEFAULT_LAUNCH_URL

        theme = data.get("theme", DEFAULT_THEME)
        if not isinstance(theme, str):
            theme = DEFAULT_THEME

        # bool is an int subclass, reject it explicitly
        timeout = data.get("timeout")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            timeout = None

        return cls(
            data_url=data_url,
            launch_url=launch_url,
            theme=theme,
            timeout=float(timeout) if timeout is not None else None,
        )

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls()
