"""CategoryTabs widget for switching between library categories."""

import asyncio

from rich.text import Text
from textual.widgets import Tab, Tabs


class CategoryTabs(Tabs):
    """Tab strip with one tab per category, in document order.

    Tabs are rebuilt whenever a new library arrives. Category names may repeat
    and contain characters that aren't valid in widget IDs, so each rebuild
    generates its own tab IDs and keeps a map back to the tab position.
    """

    def __init__(self, *args, **kwargs):
        """Initialize the CategoryTabs widget."""
        super().__init__(*args, **kwargs)
        self._names: list[str] = []
        self._tab_to_index: dict[str, int] = {}
        self._generation = 0
        self._rebuild_lock = asyncio.Lock()

    @property
    def names(self) -> list[str]:
        return list(self._names)

    async def set_categories(self, names: list[str], active_index: int | None = None) -> None:
        """Replace all tabs.

        Args:
            names: Category names to show
            active_index: Tab to activate once the tabs are mounted
        """
        async with self._rebuild_lock:
            await self.clear()

            self._generation += 1
            self._names = list(names)
            self._tab_to_index = {}

            for index, name in enumerate(names):
                tab_id = f"category-{self._generation}-{index}"
                self._tab_to_index[tab_id] = index
                await self.add_tab(Tab(Text(name), id=tab_id))

        if active_index is not None:
            self.select_index(active_index)

    def select_index(self, index: int) -> None:
        """Activate the tab at ``index`` if it exists."""
        for tab_id, tab_index in self._tab_to_index.items():
            if tab_index == index:
                self.active = tab_id
                return

    def index_of(self, tab_id: str | None) -> int | None:
        """Map a tab ID from the current rebuild back to its position.

        Returns:
            Tab position, or None for unknown or stale IDs
        """
        if tab_id is None:
            return None
        return self._tab_to_index.get(tab_id)
