"""User interface components."""

from portallib.ui.screens import LibraryScreen
from portallib.ui.widgets import CategoryTabs, WorldList

__all__ = ["LibraryScreen", "WorldList", "CategoryTabs"]
