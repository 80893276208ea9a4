"""
Textual song search form.
Enter a song ID, press Enter or Search, and the record details (or a
not-found message) appear in the result area below.
"""

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Input, Label, Static

from song_lookup.domain.songs import SongLookup, format_record


def describe_lookup(store: SongLookup, song_id: str) -> str:
    """Build the result text shown for a lookup.

    Args:
        store: Loaded song store
        song_id: User-entered ID (surrounding whitespace ignored)

    Returns:
        Record details, a not-found message, or a prompt for empty input
    """
    song_id = song_id.strip()
    if not song_id:
        return "Please enter a song ID."

    song = store.get(song_id)
    if song is None:
        return f"Song with ID {song_id} not found."
    return "Song Found:\n" + format_record(song)


class SongSearchApp(App):
    """
    Song lookup window.

    Layout:
    - Top row: label, ID input, Search button
    - Below: scrollable result area
    """

    CSS = """
    #search-row {
        height: auto;
        padding: 1 1 0 1;
    }

    #search-row Label {
        padding: 1 1 0 0;
    }

    #song-id {
        width: 1fr;
    }

    #result-scroll {
        height: 1fr;
        border: solid $secondary;
        margin: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False),
        Binding("escape", "quit", "Quit", show=False),
    ]

    AUTO_FOCUS = "#song-id"

    def __init__(self, store: SongLookup, title: str = "Song Lookup"):
        """
        Initialize the app.

        Args:
            store: Song store to search (already loaded)
            title: Window title
        """
        super().__init__()
        self.store = store
        self.title = title
        self.last_result = ""

    def compose(self) -> ComposeResult:
        """Create child widgets"""
        with Horizontal(id="search-row"):
            yield Label("Enter Song ID:")
            yield Input(placeholder="Song ID", id="song-id")
            yield Button("Search", id="search", variant="primary")
        with VerticalScroll(id="result-scroll"):
            yield Static("", id="result")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Search when Enter is pressed in the ID field"""
        self.search(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Search when the Search button is clicked"""
        if event.button.id == "search":
            self.search(self.query_one("#song-id", Input).value)

    def search(self, song_id: str) -> None:
        """Look up song_id and show the outcome in the result area."""
        self.last_result = describe_lookup(self.store, song_id)
        self.query_one("#result", Static).update(Text(self.last_result))
