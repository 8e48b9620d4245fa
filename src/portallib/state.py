"""Load state for the library screen."""

import logging
from dataclasses import dataclass, field

from portallib.api import LibraryClient, LibraryError
from portallib.models import Library

logger = logging.getLogger(__name__)


@dataclass
class LibraryState:
    """Current library, active category, and fetch status.

    The library is never mutated, only replaced by ``finish_load``. Fetches
    may overlap; each one that resolves overwrites whatever the previous one
    left behind.

    Attributes:
        library: Last successfully loaded library
        active_category: Name of the selected category
        error: Message from the last failed load
    """

    library: Library | None = None
    active_category: str | None = None
    error: str | None = None
    _in_flight: int = field(default=0, init=False, repr=False)

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    def begin_load(self) -> None:
        self._in_flight += 1
        self.error = None

    def finish_load(self, library: Library) -> None:
        """Replace the library and reset the selection to its first category.

        Args:
            library: Freshly loaded library
        """
        self._in_flight = max(0, self._in_flight - 1)
        self.library = library
        names = library.category_names
        self.active_category = names[0] if names else None
        self.error = None

    def fail_load(self, message: str) -> None:
        """Record a failed load.

        Args:
            message: Human-readable error message
        """
        self._in_flight = max(0, self._in_flight - 1)
        self.library = None
        self.active_category = None
        self.error = message

    def select_index(self, index: int) -> None:
        """Select the category at a tab position.

        Args:
            index: Tab index; ignored when out of range
        """
        if self.library is None:
            return
        names = self.library.category_names
        if 0 <= index < len(names):
            self.active_category = names[index]


async def load_library(state: LibraryState, client: LibraryClient) -> None:
    """Fetch the library and store the outcome in ``state``.

    Args:
        state: State to update
        client: Client used to fetch the document
    """
    state.begin_load()
    await complete_load(state, client)


async def complete_load(state: LibraryState, client: LibraryClient) -> None:
    """Finish a load already started with ``state.begin_load()``.

    Errors never escape: they end up in ``state.error``.

    Args:
        state: State to update
        client: Client used to fetch the document
    """
    try:
        library = await client.fetch_library()
    except LibraryError as e:
        logger.error(f"Failed to load library: {e}")
        state.fail_load(f"Failed to load library: {e}")
        return
    except Exception as e:
        logger.error(f"Unexpected error while loading library: {e}", exc_info=True)
        state.fail_load(f"An error occurred: {e}")
        return

    state.finish_load(library)
    logger.info(f"Library loaded, active category: {state.active_category!r}")
