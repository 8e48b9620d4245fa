"""Main application class for the portal library viewer."""

import logging

from textual.app import App
from textual.binding import Binding

from portallib.api import LibraryClient
from portallib.config import ConfigManager
from portallib.ui.screens import LibraryScreen

logger = logging.getLogger(__name__)


class PortalLibraryApp(App):
    """Main Textual application for the portal library viewer.

    Reads the configuration, applies the theme, and shows the library screen.
    """

    TITLE = "MyPortalLibrary Viewer"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    # Available themes mapping to Textual's built-in themes
    AVAILABLE_THEMES = [
        "textual-dark",
        "textual-light",
        "nord",
        "gruvbox",
        "monokai",
        "dracula",
        "catppuccin-mocha",
        "catppuccin-latte",
        "solarized-light",
        "tokyo-night",
        "flexoki",
        "textual-ansi",
    ]

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        client: LibraryClient | None = None,
    ):
        """Initialize the application.

        Args:
            config_manager: Source of configuration (defaults to ./config.json)
            client: Library client (defaults to one built from the configuration)
        """
        super().__init__()
        self.config_manager = config_manager or ConfigManager()
        self.client = client

    def on_mount(self) -> None:
        """Initialize the application and show the library screen."""
        logger.info("Application starting")

        config = self.config_manager.load()
        self._apply_theme(config.theme)

        client = self.client or LibraryClient(url=config.data_url, timeout=config.timeout)
        self.push_screen(LibraryScreen(client=client, launch_url=config.launch_url))

    def _apply_theme(self, theme_name: str) -> None:
        """Apply the specified theme.

        Args:
            theme_name: Name of theme to apply
        """
        # Validate theme is available, fallback to textual-dark
        if theme_name not in self.AVAILABLE_THEMES:
            theme_name = "textual-dark"

        self.theme = theme_name
        logger.info(f"Applied theme: {theme_name}")

    def action_quit(self) -> None:
        """Quit the application."""
        logger.info("Application exiting")
        self.exit()
