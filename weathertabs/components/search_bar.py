"""Search bar with city input and location button."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input


class SearchBar(Horizontal):
    """City search input with Search and My Location buttons."""

    class SearchRequested(Message):
        """Message sent when the user submits a city name."""

        def __init__(self, city: str) -> None:
            super().__init__()
            self.city = city

    class LocationRequested(Message):
        """Message sent when the user asks for their own location."""

        pass

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        padding: 0 1;
    }

    SearchBar #city-input {
        width: 1fr;
    }

    SearchBar Button {
        margin-left: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Enter a city name", id="city-input")
        yield Button("Search", id="search-button", variant="primary")
        yield Button("My Location", id="location-button", variant="default")

    def set_busy(self, busy: bool) -> None:
        """Disable the buttons while a fetch is in flight."""
        self.query_one("#search-button", Button).disabled = busy
        self.query_one("#location-button", Button).disabled = busy

    def focus_input(self) -> None:
        self.query_one("#city-input", Input).focus()

    def _submit(self) -> None:
        city_input = self.query_one("#city-input", Input)
        self.post_message(self.SearchRequested(city_input.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "search-button":
            self._submit()
        elif event.button.id == "location-button":
            self.post_message(self.LocationRequested())

    def clear_input(self) -> None:
        self.query_one("#city-input", Input).value = ""
