"""UI widgets."""

from portallib.ui.widgets.category_tabs import CategoryTabs
from portallib.ui.widgets.world_list import WorldList

__all__ = ["WorldList", "CategoryTabs"]
