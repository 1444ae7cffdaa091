"""Select the rows each forecast view shows.

Everything here is a pure function of the snapshot and the caller's notion
of the current hour, so a view can be rebuilt at any time without touching
the network or the clock.
"""

from ..exceptions import InsufficientData
from ..models.view import (
    DayRow,
    HourRow,
    SummaryLine,
    ViewKind,
    ViewModel,
    format_day,
    round_half_up,
)
from ..models.weather import ForecastSnapshot, HourlyForecast
from .classifier import aqi_classification, uv_classification, weather_description

HOURS_PER_VIEW = 24
TOMORROW_START = 24
TOMORROW_END = 48


def _hour_row(hour: HourlyForecast) -> HourRow:
    return HourRow(
        timestamp=hour.timestamp,
        temperature_c=hour.temperature_c,
        weather_code=hour.weather_code,
        description=weather_description(hour.weather_code),
    )


def _start_index(snapshot: ForecastSnapshot, current_hour: int) -> int:
    """Index of the first hourly entry falling on current_hour.

    Falls back to current_hour as a plain offset when no entry matches,
    which is where that hour sits in a series starting at local midnight.
    """
    for i, hour in enumerate(snapshot.hourly):
        if hour.timestamp.hour == current_hour:
            return i
    return current_hour


def today_view(snapshot: ForecastSnapshot, current_hour: int) -> ViewModel:
    """Current conditions plus the next 24 hours."""
    if not 0 <= current_hour <= 23:
        raise ValueError(f"current_hour must be between 0 and 23, got {current_hour}")

    current = snapshot.current
    summary = [
        SummaryLine(
            label="Now",
            value=f"{round_half_up(current.temperature_c)}°C "
            f"({weather_description(current.weather_code)})",
        ),
        SummaryLine(
            label="Feels like",
            value=f"{round_half_up(current.apparent_temperature_c)}°C",
        ),
    ]

    if current.uv_index is not None:
        uv = uv_classification(current.uv_index)
        summary.append(
            SummaryLine(
                label="UV Index",
                value=f"{round_half_up(current.uv_index)} - {uv.label}",
                classification=uv,
            )
        )

    aqi_value = snapshot.air_quality.us_aqi
    if aqi_value is not None:
        aqi = aqi_classification(aqi_value)
        summary.append(
            SummaryLine(
                label="Air Quality",
                value=f"{round_half_up(aqi_value)} - {aqi.label}",
                classification=aqi,
            )
        )

    start = _start_index(snapshot, current_hour)
    hours = snapshot.hourly[start : start + HOURS_PER_VIEW]

    return ViewModel(
        view=ViewKind.TODAY,
        location_name=snapshot.location_name,
        summary=tuple(summary),
        rows=tuple(_hour_row(h) for h in hours),
    )


def tomorrow_view(snapshot: ForecastSnapshot) -> ViewModel:
    """Hourly rows for the second day of the series."""
    if len(snapshot.daily) < 2:
        raise InsufficientData("No forecast available for tomorrow.")

    hours = snapshot.hourly[TOMORROW_START:TOMORROW_END]
    return ViewModel(
        view=ViewKind.TOMORROW,
        location_name=snapshot.location_name,
        title=f"{format_day(snapshot.daily[1].date)} Forecast",
        rows=tuple(_hour_row(h) for h in hours),
    )


def week_view(snapshot: ForecastSnapshot) -> ViewModel:
    """One row per forecast day, in the order the API returned them."""
    rows = tuple(
        DayRow(
            date=day.date,
            temp_max_c=day.temp_max_c,
            temp_min_c=day.temp_min_c,
            weather_code=day.weather_code,
            description=weather_description(day.weather_code),
        )
        for day in snapshot.daily
    )
    return ViewModel(
        view=ViewKind.WEEK,
        location_name=snapshot.location_name,
        title="7-Day Forecast",
        rows=rows,
    )


def build_view(snapshot: ForecastSnapshot, view: ViewKind, current_hour: int) -> ViewModel:
    """Build the view model for one tab.

    Raises:
        InsufficientData: the snapshot cannot back the requested view.
        ValueError: current_hour is not a valid hour of the day.
    """
    view = ViewKind(view)
    if view is ViewKind.TODAY:
        return today_view(snapshot, current_hour)
    if view is ViewKind.TOMORROW:
        return tomorrow_view(snapshot)
    return week_view(snapshot)
