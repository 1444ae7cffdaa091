"""Pytest configuration and fixtures."""

import json
import tempfile
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

from weathertabs.models.weather import (
    AirQuality,
    CurrentConditions,
    DailyForecast,
    ForecastSnapshot,
    GeoLocation,
    HourlyForecast,
)

START = datetime(2024, 6, 1, 0, 0)


class RecordingSink:
    """Render sink that remembers everything it was asked to show."""

    def __init__(self):
        self.rendered = []
        self.loading = []
        self.errors = []
        self.events = []

    def render_view(self, view_model):
        self.rendered.append(view_model)
        self.events.append(("render", view_model.view))

    def show_loading(self, message):
        self.loading.append(message)
        self.events.append(("loading", message))

    def show_error(self, message):
        self.errors.append(message)
        self.events.append(("error", message))


def make_snapshot(
    hours: int = 168,
    days: int = 7,
    uv_index: float | None = 5.5,
    us_aqi: float | None = 42,
    start: datetime = START,
) -> ForecastSnapshot:
    """Build a snapshot whose hourly temperature equals the hour offset."""
    hourly = tuple(
        HourlyForecast(
            timestamp=start + timedelta(hours=i),
            temperature_c=float(i),
            weather_code=0 if i % 2 == 0 else 61,
        )
        for i in range(hours)
    )
    daily = tuple(
        DailyForecast(
            date=start.date() + timedelta(days=i),
            temp_max_c=25.0 - i,
            temp_min_c=15.0 - i,
            weather_code=3,
        )
        for i in range(days)
    )
    return ForecastSnapshot(
        location=GeoLocation(name="Berlin", country="Germany", latitude=52.52, longitude=13.41),
        current=CurrentConditions(
            temperature_c=21.4,
            apparent_temperature_c=20.5,
            weather_code=2,
            uv_index=uv_index,
        ),
        hourly=hourly,
        daily=daily,
        air_quality=AirQuality(us_aqi=us_aqi),
        timezone="Europe/Berlin",
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def snapshot():
    return make_snapshot()


@pytest.fixture
def snapshot_factory():
    """Return the snapshot builder so tests can vary hours, days, UV and AQI."""
    return make_snapshot


@pytest.fixture
def berlin():
    return GeoLocation(name="Berlin", country="Germany", latitude=52.52, longitude=13.41)


@pytest.fixture
def geocoding_payload():
    """Open-Meteo geocoding response for a single match."""
    return {
        "results": [
            {
                "id": 2950159,
                "name": "Berlin",
                "latitude": 52.52437,
                "longitude": 13.41053,
                "country": "Germany",
                "admin1": "Land Berlin",
            }
        ],
        "generationtime_ms": 0.5,
    }


@pytest.fixture
def weather_payload():
    """Open-Meteo forecast response covering 7 days from 2024-06-01."""
    times = [(START + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(168)]
    days = [date(2024, 6, 1) + timedelta(days=i) for i in range(7)]
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "timezone": "Europe/Berlin",
        "current_units": {"temperature_2m": "°C"},
        "current": {
            "time": "2024-06-01T14:00",
            "interval": 900,
            "temperature_2m": 21.4,
            "apparent_temperature": 20.5,
            "weather_code": 2,
            "uv_index": 6.2,
        },
        "hourly": {
            "time": times,
            "temperature_2m": [10.0 + (i % 24) * 0.5 for i in range(168)],
            "weather_code": [0 if i % 24 < 12 else 61 for i in range(168)],
        },
        "daily": {
            "time": [d.isoformat() for d in days],
            "temperature_2m_max": [25.0, 18.0, 20.1, 22.3, 19.9, 17.0, 21.5],
            "temperature_2m_min": [15.0, 10.0, 11.2, 12.8, 9.4, 8.0, 13.3],
            "weather_code": [0, 61, 3, 2, 80, 95, 1],
        },
    }


@pytest.fixture
def air_quality_payload():
    """Open-Meteo air-quality response."""
    return {
        "latitude": 52.5,
        "longitude": 13.4,
        "current": {"time": "2024-06-01T14:00", "interval": 3600, "us_aqi": 57},
    }


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "weather": {
            "latitude": 51.5074,
            "longitude": -0.1278,
            "timeout_seconds": 5,
        },
        "settings": {
            "default_city": "London",
            "min_search_interval_seconds": 2.0,
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path
