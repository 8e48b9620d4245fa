"""UI screens."""

from portallib.ui.screens.main_screen import LibraryScreen

__all__ = ["LibraryScreen"]
