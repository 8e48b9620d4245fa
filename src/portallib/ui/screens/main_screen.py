"""Main screen for browsing the portal library."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Label, Tabs

from portallib.api import LibraryClient
from portallib.models.config import DEFAULT_LAUNCH_URL
from portallib.state import LibraryState, complete_load
from portallib.ui.view import LibraryView, render_state
from portallib.ui.widgets import CategoryTabs, WorldList

logger = logging.getLogger(__name__)


class LibraryScreen(Screen):
    """Main application screen showing worlds grouped by category.

    Fetches the library on mount and whenever the user refreshes, then shows
    one tab per category and one card per world of the active category.
    """

    BINDINGS = [
        Binding("r", "refresh", "Refresh"),
        Binding("left", "previous_category", "Previous category", show=False),
        Binding("right", "next_category", "Next category", show=False),
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    #header {
        height: auto;
        padding: 1 2;
    }

    #heading {
        width: 1fr;
        height: auto;
    }

    #title {
        text-style: bold;
    }

    #subtitle {
        color: $text-muted;
    }

    #status {
        padding: 0 2;
    }

    #world-list {
        height: 1fr;
    }

    WorldList > ListItem {
        padding: 1 2;
        border-bottom: solid $primary-background;
    }
    """

    def __init__(
        self,
        client: LibraryClient | None = None,
        launch_url: str = DEFAULT_LAUNCH_URL,
        *args,
        **kwargs,
    ):
        """Initialize the LibraryScreen.

        Args:
            client: Client used to fetch the library
            launch_url: Base URL for world launch links
        """
        super().__init__(*args, **kwargs)
        self.client = client or LibraryClient()
        self.launch_url = launch_url
        self.state = LibraryState()
        self.view: LibraryView = render_state(self.state, self.launch_url)
        self._status_label: Label | None = None
        self._refresh_button: Button | None = None
        self._category_tabs: CategoryTabs | None = None
        self._world_list: WorldList | None = None

    def compose(self) -> ComposeResult:
        """Compose the main screen layout."""
        with Vertical():
            with Horizontal(id="header"):
                with Vertical(id="heading"):
                    yield Label("MyPortalLibrary Viewer", id="title")
                    yield Label(
                        "Share your favourite VRChat worlds", id="subtitle"
                    )
                self._refresh_button = Button("Refresh", id="refresh")
                self._refresh_button.tooltip = "Reload data"
                yield self._refresh_button

            self._status_label = Label("Loading...", id="status")
            yield self._status_label

            self._category_tabs = CategoryTabs(id="category-tabs")
            yield self._category_tabs

            self._world_list = WorldList(id="world-list")
            yield self._world_list

            yield Footer()

    def on_mount(self) -> None:
        """Load the library when the screen is mounted."""
        self.start_load()

    def start_load(self) -> None:
        """Start a library fetch in the background.

        Loads are not exclusive: a second load started while one is in flight
        runs to completion too, and whichever resolves last wins.
        """
        self.run_worker(self._load(), group="library")

    async def _load(self) -> None:
        self.state.begin_load()
        await self._apply_view()
        await complete_load(self.state, self.client)
        await self._apply_view()

    async def _apply_view(self) -> None:
        """Render the current state and push it into the widgets."""
        self.view = render_state(self.state, self.launch_url)
        view = self.view

        if self._refresh_button is not None:
            self._refresh_button.disabled = self.state.loading
        self.refresh_bindings()

        if self._status_label is not None:
            self._status_label.update(view.message or "")
            self._status_label.display = view.message is not None

        if self._category_tabs is not None:
            if view.tabs != self._category_tabs.names:
                await self._category_tabs.set_categories(view.tabs, view.active_index)
            elif view.active_index is not None:
                self._category_tabs.select_index(view.active_index)
            self._category_tabs.display = bool(view.tabs)

        if self._world_list is not None:
            self._world_list.set_cards(view.cards)

    async def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        """Handle category tab changes to update the world list.

        Args:
            event: TabActivated message from CategoryTabs
        """
        if self._category_tabs is None or event.tabs is not self._category_tabs:
            return

        index = self._category_tabs.index_of(event.tab.id if event.tab else None)
        if index is None or index == self.view.active_index:
            return

        self.state.select_index(index)
        await self._apply_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "refresh":
            self.action_refresh()

    def on_world_list_launch_requested(self, message: WorldList.LaunchRequested) -> None:
        """Open the launch link of the selected world in a new browser tab.

        Args:
            message: LaunchRequested message from WorldList
        """
        url = message.card.launch_url
        logger.info(f"Launching world: {url}")
        self.app.open_url(url, new_tab=True)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable refresh while a fetch is in flight."""
        if action == "refresh" and self.state.loading:
            return None
        return True

    def action_refresh(self) -> None:
        """Reload the library from the remote document."""
        if self.state.loading:
            return
        logger.info("Refreshing library")
        self.start_load()

    def action_next_category(self) -> None:
        if self._category_tabs is not None and self._category_tabs.tab_count:
            self._category_tabs.action_next_tab()

    def action_previous_category(self) -> None:
        if self._category_tabs is not None and self._category_tabs.tab_count:
            self._category_tabs.action_previous_tab()

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()
