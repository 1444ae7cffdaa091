"""Turn raw Open-Meteo payloads into a ForecastSnapshot.

Open-Meteo returns hourly and daily data column-wise (one array per
variable, aligned by index). These helpers zip the columns back into
records. Values are passed through untouched: the API already answers in
Celsius and rounding happens at display time.
"""

from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from ..exceptions import LocationNotFound, WeatherUnavailable
from ..models.weather import (
    AirQuality,
    CurrentConditions,
    DailyForecast,
    ForecastSnapshot,
    GeoLocation,
    HourlyForecast,
)

MAX_DAYS = 7


def parse_location(payload: Any, query: str) -> GeoLocation:
    """Take the first geocoding result, raising LocationNotFound if there is none."""
    results = payload.get("results") if isinstance(payload, dict) else None
    if not results:
        raise LocationNotFound(query)

    result = results[0]
    try:
        return GeoLocation(
            name=result.get("name") or query,
            country=result.get("country") or "",
            latitude=result["latitude"],
            longitude=result["longitude"],
        )
    except (AttributeError, KeyError, TypeError, ValidationError) as e:
        raise LocationNotFound(query) from e


def parse_current(data: dict) -> CurrentConditions:
    return CurrentConditions(
        temperature_c=data["temperature_2m"],
        apparent_temperature_c=data["apparent_temperature"],
        weather_code=data["weather_code"],
        uv_index=data.get("uv_index"),
    )


def parse_hourly(data: dict) -> tuple[HourlyForecast, ...]:
    times = data.get("time") or []
    temps = data.get("temperature_2m") or []
    codes = data.get("weather_code") or []

    hourly = []
    for i, time_str in enumerate(times):
        if i >= len(temps) or i >= len(codes):
            break
        if temps[i] is None or codes[i] is None:
            # a gap would shift every later hour off its offset from the window start
            raise WeatherUnavailable(f"null hourly reading at {time_str}")
        hourly.append(
            HourlyForecast(
                timestamp=datetime.fromisoformat(time_str),
                temperature_c=temps[i],
                weather_code=codes[i],
            )
        )

    hourly.sort(key=lambda h: h.timestamp)
    return tuple(hourly)


def parse_daily(data: dict) -> tuple[DailyForecast, ...]:
    dates = data.get("time") or []
    temp_maxs = data.get("temperature_2m_max") or []
    temp_mins = data.get("temperature_2m_min") or []
    codes = data.get("weather_code") or []

    daily = []
    for i, date_str in enumerate(dates[:MAX_DAYS]):
        if i >= len(temp_maxs) or i >= len(temp_mins) or i >= len(codes):
            break
        daily.append(
            DailyForecast(
                date=date.fromisoformat(date_str),
                temp_max_c=temp_maxs[i],
                temp_min_c=temp_mins[i],
                weather_code=codes[i],
            )
        )
    return tuple(daily)


def parse_air_quality(payload: Any) -> AirQuality:
    """Extract the current US AQI. Never raises: anything unusable means absent."""
    if not isinstance(payload, dict):
        return AirQuality()
    current = payload.get("current")
    if not isinstance(current, dict):
        return AirQuality()
    value = current.get("us_aqi")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return AirQuality()
    return AirQuality(us_aqi=value)


def normalize(
    weather: Any,
    air_quality: Any = None,
    location: GeoLocation | None = None,
) -> ForecastSnapshot:
    """Build a snapshot from a forecast payload and an optional air-quality payload.

    Raises:
        WeatherUnavailable: the forecast body is not usable.
    """
    if not isinstance(weather, dict):
        raise WeatherUnavailable("forecast body is not an object")

    missing = [key for key in ("current", "hourly", "daily") if not isinstance(weather.get(key), dict)]
    if missing:
        raise WeatherUnavailable(f"forecast body lacks {', '.join(missing)}")

    try:
        current = parse_current(weather["current"])
        hourly = parse_hourly(weather["hourly"])
        daily = parse_daily(weather["daily"])
    except (KeyError, TypeError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        raise WeatherUnavailable(f"malformed forecast body: {e}") from e

    return ForecastSnapshot(
        location=location,
        current=current,
        hourly=hourly,
        daily=daily,
        air_quality=parse_air_quality(air_quality),
        timezone=weather.get("timezone") or "GMT",
    )
