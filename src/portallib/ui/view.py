"""Pure rendering of library state into what the screen shows."""

from dataclasses import dataclass, field
from urllib.parse import quote

from portallib.models import Library, Platform
from portallib.models.config import DEFAULT_LAUNCH_URL
from portallib.state import LibraryState

# Characters encodeURIComponent leaves alone besides alphanumerics and "_.-~"
_URI_COMPONENT_SAFE = "!*'()"


def build_launch_url(world_id: str | None, base_url: str = DEFAULT_LAUNCH_URL) -> str:
    """Build the external launch link for a world.

    Args:
        world_id: World identifier; None produces an empty parameter
        base_url: Launch endpoint

    Returns:
        URL of the form ``<base>?worldId=<encoded id>``
    """
    # Lone surrogates are valid JSON but cannot be UTF-8 encoded
    encoded = quote(world_id or "", safe=_URI_COMPONENT_SAFE, errors="replace")
    return f"{base_url}?worldId={encoded}"


@dataclass(frozen=True)
class WorldCard:
    """Display data for one world."""

    title: str
    description: str
    recommended_capacity: str
    capacity: str
    platform: Platform
    launch_url: str


@dataclass(frozen=True)
class LibraryView:
    """Everything the library screen displays.

    Attributes:
        status: One of "loading", "error", "empty", "missing", "ready"
        message: Status line text, None when the list is shown
        tabs: Category names in document order
        active_index: Index of the active tab
        cards: Cards for the active category
    """

    status: str
    message: str | None = None
    tabs: list[str] = field(default_factory=list)
    active_index: int | None = None
    cards: list[WorldCard] = field(default_factory=list)


def render_view(
    library: Library | None,
    active_category: str | None,
    loading: bool,
    error: str | None,
    launch_url: str = DEFAULT_LAUNCH_URL,
) -> LibraryView:
    """Turn load state into a LibraryView.

    Args:
        library: Loaded library, if any
        active_category: Name of the selected category
        loading: Whether a fetch is in flight
        error: Error message from the last failed load
        launch_url: Base URL for world launch links

    Returns:
        LibraryView describing the screen
    """
    if loading:
        return LibraryView(status="loading", message="Loading...")

    if error:
        return LibraryView(status="error", message=f"Error: {error}")

    if library is None or not library.categories:
        return LibraryView(status="empty", message="No categories found.")

    tabs = library.category_names
    category = library.find_category(active_category) if active_category is not None else None
    if category is None:
        return LibraryView(status="missing", message="Category not found.", tabs=tabs)

    cards = [
        WorldCard(
            title=world.display_title(index),
            description=world.display_description(),
            recommended_capacity=world.display_recommended_capacity(),
            capacity=world.display_capacity(),
            platform=world.platform,
            launch_url=build_launch_url(world.id, launch_url),
        )
        for index, world in enumerate(category.worlds)
    ]

    return LibraryView(
        status="ready",
        tabs=tabs,
        active_index=tabs.index(category.name),
        cards=cards,
    )


def render_state(state: LibraryState, launch_url: str = DEFAULT_LAUNCH_URL) -> LibraryView:
    return render_view(
        state.library,
        state.active_category,
        state.loading,
        state.error,
        launch_url=launch_url,
    )
