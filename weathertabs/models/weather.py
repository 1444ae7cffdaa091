"""Weather data models."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class GeoLocation(BaseModel):
    """A place resolved by geocoding or picked from coordinates."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str = ""
    latitude: float
    longitude: float

    @property
    def display_name(self) -> str:
        """Return 'Name (Country)', or just the name when country is unknown."""
        if self.country:
            return f"{self.name} ({self.country})"
        return self.name


class CurrentConditions(BaseModel):
    """Current weather conditions."""

    model_config = ConfigDict(frozen=True)

    temperature_c: float
    apparent_temperature_c: float
    weather_code: int
    uv_index: float | None = None


class HourlyForecast(BaseModel):
    """Hourly weather forecast for a single hour."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature_c: float
    weather_code: int


class DailyForecast(BaseModel):
    """Daily weather forecast."""

    model_config = ConfigDict(frozen=True)

    date: date
    temp_max_c: float
    temp_min_c: float
    weather_code: int


class AirQuality(BaseModel):
    """Current air quality. us_aqi is None when the lookup failed."""

    model_config = ConfigDict(frozen=True)

    us_aqi: float | None = None


class ForecastSnapshot(BaseModel):
    """Normalized result of one forecast fetch.

    A snapshot is only built once the primary forecast request succeeded,
    so hourly and daily are always present (possibly empty). It is frozen
    and replaced wholesale on the next fetch.
    """

    model_config = ConfigDict(frozen=True)

    location: GeoLocation | None = None
    current: CurrentConditions
    hourly: tuple[HourlyForecast, ...] = ()
    daily: tuple[DailyForecast, ...] = Field(default=(), max_length=7)
    air_quality: AirQuality = Field(default_factory=AirQuality)
    timezone: str = "GMT"
    fetched_at: datetime = Field(default_factory=datetime.now)

    @property
    def location_name(self) -> str:
        """Name for headers, empty when the snapshot has no location."""
        return self.location.display_name if self.location else ""
