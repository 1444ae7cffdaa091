"""Weather service using the Open-Meteo APIs."""

import asyncio
import logging
from typing import Any

import httpx

from ..exceptions import AirQualityUnavailable, LocationNotFound, WeatherUnavailable
from ..models.config import WeatherConfig
from ..models.weather import ForecastSnapshot, GeoLocation
from .normalizer import normalize, parse_location

logger = logging.getLogger(__name__)

CURRENT_FIELDS = "temperature_2m,apparent_temperature,weather_code,uv_index"
HOURLY_FIELDS = "temperature_2m,weather_code"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weather_code"


class WeatherService:
    """Fetches geocoding, forecast and air-quality data from Open-Meteo.

    Requests are made once; there is no retry. Pass an AsyncClient to share
    a connection pool, otherwise a short-lived client is opened per request.
    """

    def __init__(self, config: WeatherConfig | None = None, client: httpx.AsyncClient | None = None):
        self.config = config or WeatherConfig()
        self.timeout = self.config.timeout_seconds
        self._client = client

    async def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        if self._client is not None:
            response = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def search(self, name: str) -> GeoLocation:
        """Look up a location by name.

        Raises:
            LocationNotFound: the lookup failed or matched nothing.
        """
        params = {"name": name, "count": 1, "language": "en", "format": "json"}
        try:
            data = await self._get_json(self.config.geocoding_url, params)
        except httpx.HTTPStatusError as e:
            logger.error(f"Geocoding HTTP error: {e.response.status_code}")
            raise LocationNotFound(name) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Geocoding error: {e}")
            raise LocationNotFound(name) from e

        return parse_location(data, name)

    async def reverse_search(self, latitude: float, longitude: float) -> GeoLocation | None:
        """Best-effort name for a pair of coordinates, None if unknown."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "count": 1,
            "language": "en",
            "format": "json",
        }
        try:
            data = await self._get_json(self.config.geocoding_url, params)
            found = parse_location(data, "")
        except (httpx.HTTPError, ValueError, LocationNotFound) as e:
            logger.debug(f"Reverse geocoding failed for {latitude},{longitude}: {e}")
            return None

        # Keep the requested coordinates, only the name comes from the lookup
        return GeoLocation(
            name=found.name or "Your Location",
            country=found.country,
            latitude=latitude,
            longitude=longitude,
        )

    async def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch current, hourly and daily forecast data.

        Raises:
            WeatherUnavailable: non-success status, transport error or bad JSON.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_FIELDS,
            "hourly": HOURLY_FIELDS,
            "daily": DAILY_FIELDS,
            "timezone": "auto",
            "forecast_days": self.config.forecast_days,
        }
        try:
            return await self._get_json(self.config.forecast_url, params)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching weather for {latitude},{longitude}")
            raise WeatherUnavailable("Request timeout") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error fetching weather: {status}")
            raise WeatherUnavailable(f"HTTP {status}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching weather: {e}")
            raise WeatherUnavailable(str(e)) from e

    async def get_air_quality(self, latitude: float, longitude: float) -> dict:
        """Fetch the current US AQI.

        Raises:
            AirQualityUnavailable: the request failed in any way.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "us_aqi",
            "timezone": "auto",
        }
        try:
            return await self._get_json(self.config.air_quality_url, params)
        except httpx.HTTPStatusError as e:
            raise AirQualityUnavailable(f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise AirQualityUnavailable(str(e) or type(e).__name__) from e

    async def fetch_snapshot(self, location: GeoLocation) -> ForecastSnapshot:
        """Fetch forecast and air quality concurrently and normalize them.

        Air quality is best effort: if that branch fails the snapshot is
        still built, just without an AQI value.

        Raises:
            WeatherUnavailable: the forecast request or its body failed.
        """
        weather, air_quality = await asyncio.gather(
            self.get_forecast(location.latitude, location.longitude),
            self.get_air_quality(location.latitude, location.longitude),
            return_exceptions=True,
        )

        if isinstance(weather, BaseException):
            raise weather

        if isinstance(air_quality, BaseException):
            logger.warning(f"Air quality unavailable for {location.display_name}: {air_quality}")
            air_quality = None

        return normalize(weather, air_quality, location=location)
