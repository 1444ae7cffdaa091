"""Data models for forecasts, views and configuration."""

from .config import Config, Settings, WeatherConfig
from .view import Classification, DayRow, HourRow, SeverityColor, SummaryLine, ViewKind, ViewModel
from .weather import (
    AirQuality,
    CurrentConditions,
    DailyForecast,
    ForecastSnapshot,
    GeoLocation,
    HourlyForecast,
)

__all__ = [
    "AirQuality",
    "Classification",
    "Config",
    "CurrentConditions",
    "DailyForecast",
    "DayRow",
    "ForecastSnapshot",
    "GeoLocation",
    "HourRow",
    "HourlyForecast",
    "SeverityColor",
    "Settings",
    "SummaryLine",
    "ViewKind",
    "ViewModel",
    "WeatherConfig",
]
