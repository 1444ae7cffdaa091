"""Fetch orchestration between user input and the view controller."""

import logging

from ..exceptions import WeatherError
from ..models.weather import ForecastSnapshot, GeoLocation
from .throttle import RequestTracker
from .view_controller import RenderSink, ViewController
from .weather_service import WeatherService

logger = logging.getLogger(__name__)


class WeatherSession:
    """Runs searches and hands finished snapshots to the view controller.

    Fetches are never cancelled. Instead every fetch is tagged with a token
    and a result is only shown if no newer fetch was started meanwhile.
    """

    def __init__(
        self,
        service: WeatherService,
        controller: ViewController,
        tracker: RequestTracker | None = None,
    ):
        self.service = service
        self.controller = controller
        self.tracker = tracker or RequestTracker()
        self.last_location: GeoLocation | None = None

    @property
    def sink(self) -> RenderSink:
        return self.controller.sink

    async def search_city(self, name: str) -> ForecastSnapshot | None:
        """Geocode a city name and show its forecast."""
        name = name.strip()
        if not name:
            self.sink.show_error("Please enter a city name first.")
            return None

        token = self._begin(f"Searching for {name}...")
        try:
            location = await self.service.search(name)
            snapshot = await self.service.fetch_snapshot(location)
        except WeatherError as e:
            return self._fail(token, e)
        return self._finish(token, snapshot)

    async def search_coordinates(self, latitude: float, longitude: float) -> ForecastSnapshot | None:
        """Show the forecast for coordinates, naming them if geocoding can."""
        token = self._begin("Getting your location...")
        try:
            location = await self.service.reverse_search(latitude, longitude)
            if location is None:
                location = GeoLocation(name="Your Location", latitude=latitude, longitude=longitude)
            snapshot = await self.service.fetch_snapshot(location)
        except WeatherError as e:
            return self._fail(token, e)
        return self._finish(token, snapshot)

    async def refresh(self) -> ForecastSnapshot | None:
        """Fetch the last shown location again."""
        if self.last_location is None:
            return None
        location = self.last_location
        token = self._begin(f"Refreshing {location.display_name}...")
        try:
            snapshot = await self.service.fetch_snapshot(location)
        except WeatherError as e:
            return self._fail(token, e)
        return self._finish(token, snapshot)

    def _begin(self, message: str) -> int:
        token = self.tracker.issue()
        self.controller.clear()
        self.sink.show_loading(message)
        return token

    def _fail(self, token: int, error: WeatherError) -> None:
        if not self.tracker.is_current(token):
            logger.debug(f"Discarding stale error from request {token}: {error}")
            return None
        logger.info(f"Forecast request failed: {error}")
        self.sink.show_error(f"Error: {error}")
        return None

    def _finish(self, token: int, snapshot: ForecastSnapshot) -> ForecastSnapshot | None:
        if not self.tracker.is_current(token):
            logger.debug(f"Discarding stale forecast from request {token}")
            return None
        self.last_location = snapshot.location
        self.controller.load(snapshot)
        return snapshot
