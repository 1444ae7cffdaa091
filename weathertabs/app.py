"""Main Textual application."""

import logging
from collections.abc import Awaitable
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

from .components import SearchBar, StatusBar, WeatherPanel
from .models.config import Config
from .models.view import ViewKind
from .models.weather import ForecastSnapshot
from .services import SearchThrottle, ViewController, WeatherService, WeatherSession

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Terminal weather viewer with Today / Tomorrow / 7-Day tabs."""

    TITLE = "Weather Tabs"

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        Binding("1", "select_view('today')", "Today"),
        Binding("2", "select_view('tomorrow')", "Tomorrow"),
        Binding("3", "select_view('week')", "7-Day"),
        Binding("slash", "focus_search", "Search"),
        Binding("l", "use_location", "My Location"),
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config_path: Path | str = "config.json",
        config: Config | None = None,
        initial_city: str | None = None,
        service: WeatherService | None = None,
    ) -> None:
        super().__init__()
        self.config = config or Config.load_or_default(config_path)
        self.initial_city = initial_city or self.config.settings.default_city
        self.service = service or WeatherService(self.config.weather)
        self.throttle = SearchThrottle(self.config.settings.min_search_interval_seconds)
        self._in_flight = 0
        self.panel = WeatherPanel()
        self.controller = ViewController(self.panel)
        self.session = WeatherSession(self.service, self.controller)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield SearchBar()
        yield self.panel
        yield StatusBar()

    def on_mount(self) -> None:
        self.query_one(SearchBar).focus_input()

        if self.initial_city:
            self._start_search(self.initial_city)

    @property
    def busy(self) -> bool:
        return self._in_flight > 0

    def _run_fetch(self, fetch: Awaitable[ForecastSnapshot | None], activity: str) -> None:
        """Run a session fetch in a worker, keeping inputs disabled meanwhile."""
        self._in_flight += 1
        self.query_one(SearchBar).set_busy(True)
        self.query_one(StatusBar).set_activity(activity)

        async def runner() -> None:
            try:
                await fetch
            finally:
                self._in_flight -= 1
                if not self.busy:
                    self.query_one(SearchBar).set_busy(False)
                    self.query_one(StatusBar).clear_activity()
                self.query_one(StatusBar).show_session(self.session)

        self.run_worker(runner(), group="fetch")

    def _start_search(self, city: str) -> bool:
        if city.strip() and not self.throttle.allow():
            logger.debug(f"Dropping search for {city!r}: too soon after the last one")
            return False
        self._run_fetch(self.session.search_city(city), f"Searching {city.strip()}...")
        return True

    def on_search_bar_search_requested(self, event: SearchBar.SearchRequested) -> None:
        city = event.city
        if self._start_search(city) and city.strip():
            self.query_one(SearchBar).clear_input()

    def on_search_bar_location_requested(self, event: SearchBar.LocationRequested) -> None:
        self.action_use_location()

    def on_weather_panel_view_selected(self, event: WeatherPanel.ViewSelected) -> None:
        if event.key is not None:
            self.controller.handle_key(event.view, event.key)
        else:
            self.controller.select(event.view)
        self.query_one(StatusBar).show_session(self.session)

    def action_select_view(self, view: str) -> None:
        """Switch tabs from the keyboard."""
        self.controller.select(ViewKind(view))
        self.query_one(StatusBar).show_session(self.session)

    def action_focus_search(self) -> None:
        self.query_one(SearchBar).focus_input()

    def action_use_location(self) -> None:
        """Show the forecast for the configured home coordinates."""
        if self.busy:
            return
        weather = self.config.weather
        self._run_fetch(
            self.session.search_coordinates(weather.latitude, weather.longitude),
            "Locating...",
        )

    def action_refresh(self) -> None:
        """Fetch the current location again."""
        if self.busy or self.session.last_location is None:
            return
        self._run_fetch(self.session.refresh(), "Refreshing...")
