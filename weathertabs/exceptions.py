"""Errors raised while fetching and presenting forecasts."""


class WeatherError(Exception):
    """Base class for forecast errors shown to the user."""


class LocationNotFound(WeatherError):
    """Geocoding returned no result for a query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f'Could not find "{query}".')


class WeatherUnavailable(WeatherError):
    """The primary forecast request failed or returned an unusable body."""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__("Could not fetch weather data.")


class InsufficientData(WeatherError):
    """A snapshot does not hold enough data to build the requested view."""


class AirQualityUnavailable(WeatherError):
    """The air-quality request failed. Never fatal to a snapshot."""
