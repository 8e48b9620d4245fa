"""WorldList widget for displaying the worlds of one category."""

from rich.markup import escape
from textual.binding import Binding
from textual.message import Message
from textual.widgets import ListItem, ListView, Static

from portallib.models import Platform
from portallib.ui.view import WorldCard

PC_COLOR = "#3b82f6"
ANDROID_COLOR = "#10b981"


def format_platform(platform: Platform) -> str:
    """Render platform badges as Rich markup.

    Args:
        platform: Platform flags

    Returns:
        Colored dot per supported platform, or a dim N/A
    """
    if not platform.badges:
        return "[dim]N/A[/dim]"

    badges = []
    if platform.pc:
        badges.append(f"[{PC_COLOR}]●[/] PC")
    if platform.android:
        badges.append(f"[{ANDROID_COLOR}]●[/] Android")
    return "  ".join(badges)


class WorldList(ListView):
    """Scrollable list of world cards.

    Enter (or clicking a card) requests a launch of the highlighted world.
    """

    BINDINGS = [
        Binding("l", "launch", "Launch World"),
    ]

    class LaunchRequested(Message):
        """Message sent when the user asks to launch a world."""

        def __init__(self, card: WorldCard) -> None:
            """Initialize the message.

            Args:
                card: Card of the world to launch
            """
            self.card = card
            super().__init__()

    def __init__(self, *args, **kwargs):
        """Initialize the WorldList widget."""
        super().__init__(*args, **kwargs)
        self._cards: list[WorldCard] = []

    @property
    def cards(self) -> list[WorldCard]:
        return list(self._cards)

    def set_cards(self, cards: list[WorldCard]) -> None:
        """Update the displayed cards.

        Args:
            cards: Cards to display, in order
        """
        self._cards = list(cards)
        self.clear()

        for card in cards:
            self.append(self._create_card_item(card))

    def _create_card_item(self, card: WorldCard) -> ListItem:
        """Create a ListItem for a card.

        Args:
            card: Card to create item for

        Returns:
            ListItem widget
        """
        lines = [
            f"[bold]{escape(card.title)}[/bold]    {format_platform(card.platform)}",
            f"[italic]{escape(card.description)}[/italic]",
            f"[dim]Recommended:[/dim] [bold]{escape(card.recommended_capacity)}[/bold]"
            f"   [dim]Capacity:[/dim] [bold]{escape(card.capacity)}[/bold]",
        ]
        content = Static("\n".join(lines))
        content.styles.width = "100%"

        # Don't set ID to avoid conflicts when switching tabs
        list_item = ListItem(content)
        list_item.card = card
        return list_item

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        card = getattr(event.item, "card", None)
        if card is not None:
            event.stop()
            self.post_message(self.LaunchRequested(card))

    def action_launch(self) -> None:
        """Launch the highlighted world."""
        index = self.index
        if index is None or index >= len(self._cards):
            return
        self.post_message(self.LaunchRequested(self._cards[index]))
