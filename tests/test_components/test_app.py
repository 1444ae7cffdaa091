"""Tests for the Textual app wiring, driven through Textual's pilot."""

import pytest
from textual.widgets import Button, Label

from weathertabs.app import WeatherApp
from weathertabs.components import SearchBar, StatusBar
from weathertabs.exceptions import LocationNotFound
from weathertabs.models.config import Config
from weathertabs.models.view import ViewKind
from weathertabs.models.weather import GeoLocation


class FakeService:
    """Returns canned snapshots and records every call."""

    def __init__(self, snapshot_factory):
        self.snapshot_factory = snapshot_factory
        self.searches: list[str] = []
        self.fetched: list[GeoLocation] = []
        self.missing: set[str] = set()

    async def search(self, name):
        self.searches.append(name)
        if name in self.missing:
            raise LocationNotFound(name)
        return GeoLocation(name=name, country="Testland", latitude=1.0, longitude=2.0)

    async def reverse_search(self, latitude, longitude):
        return None

    async def fetch_snapshot(self, location):
        self.fetched.append(location)
        return self.snapshot_factory().model_copy(update={"location": location})


@pytest.fixture
def service(snapshot_factory):
    return FakeService(snapshot_factory)


async def settle(app, pilot):
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestWeatherApp:
    """End-to-end tests of the app with a fake service."""

    @pytest.mark.asyncio
    async def test_initial_city_renders_today(self, service):
        app = WeatherApp(config=Config(), initial_city="Paris", service=service)
        async with app.run_test() as pilot:
            await settle(app, pilot)

            assert service.searches == ["Paris"]
            assert app.panel.view_model.view is ViewKind.TODAY
            assert app.panel.view_model.location_name == "Paris (Testland)"

    @pytest.mark.asyncio
    async def test_number_keys_switch_views_without_refetch(self, service):
        app = WeatherApp(config=Config(), initial_city="Paris", service=service)
        async with app.run_test() as pilot:
            await settle(app, pilot)
            app.set_focus(None)

            await pilot.press("2")
            await pilot.pause()
            assert app.panel.view_model.view is ViewKind.TOMORROW

            await pilot.press("3")
            await pilot.pause()
            assert app.panel.view_model.view is ViewKind.WEEK

            await pilot.press("1")
            await pilot.pause()
            assert app.panel.view_model.view is ViewKind.TODAY

            assert len(service.fetched) == 1

    @pytest.mark.asyncio
    async def test_rapid_searches_dropped(self, service):
        app = WeatherApp(config=Config(), service=service)
        async with app.run_test() as pilot:
            search_bar = app.query_one(SearchBar)
            search_bar.post_message(SearchBar.SearchRequested("Paris"))
            search_bar.post_message(SearchBar.SearchRequested("Rome"))
            await settle(app, pilot)

            assert service.searches == ["Paris"]
            assert app.panel.view_model.location_name == "Paris (Testland)"

    @pytest.mark.asyncio
    async def test_location_not_found_shows_error(self, service):
        service.missing.add("Atlantis")
        app = WeatherApp(config=Config(), initial_city="Atlantis", service=service)
        async with app.run_test() as pilot:
            await settle(app, pilot)

            assert app.panel.view_model is None
            assert app.panel.query_one("#weather-error", Label).has_class("visible")

    @pytest.mark.asyncio
    async def test_buttons_enabled_after_fetch(self, service):
        app = WeatherApp(config=Config(), initial_city="Paris", service=service)
        async with app.run_test() as pilot:
            await settle(app, pilot)

            assert not app.query_one("#search-button", Button).disabled
            assert not app.query_one("#location-button", Button).disabled

    @pytest.mark.asyncio
    async def test_my_location_uses_configured_coordinates(self, service):
        config = Config.model_validate({"weather": {"latitude": 48.85, "longitude": 2.35}})
        app = WeatherApp(config=config, service=service)
        async with app.run_test() as pilot:
            app.query_one(SearchBar).post_message(SearchBar.LocationRequested())
            await settle(app, pilot)

            assert service.fetched[0].latitude == 48.85
            assert service.fetched[0].longitude == 2.35
            assert app.panel.view_model.location_name == "Your Location"

    @pytest.mark.asyncio
    async def test_status_bar_follows_location_and_view(self, service):
        app = WeatherApp(config=Config(), initial_city="Paris", service=service)
        async with app.run_test() as pilot:
            await settle(app, pilot)
            status = app.query_one(StatusBar)

            assert status.location_label == "Paris (Testland)"
            assert status.view_label == "Today"

            app.set_focus(None)
            await pilot.press("3")
            await pilot.pause()
            assert status.view_label == "7-Day"

    @pytest.mark.asyncio
    async def test_status_bar_empty_before_first_search(self, service):
        app = WeatherApp(config=Config(), service=service)
        async with app.run_test() as pilot:
            await pilot.pause()
            status = app.query_one(StatusBar)

            assert status.location_label == ""
            assert status.view_label == ""
