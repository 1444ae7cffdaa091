"""View models produced for the forecast tabs."""

import math
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

SEPARATOR = " — "


class ViewKind(str, Enum):
    """The three selectable forecast views."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    WEEK = "week"

    @property
    def tab_label(self) -> str:
        return {"today": "Today", "tomorrow": "Tomorrow", "week": "7-Day"}[self.value]


class SeverityColor(str, Enum):
    """Colour tokens for classification badges."""

    NEUTRAL = "#9399b2"
    GREEN = "#a6e3a1"
    YELLOW = "#f9e2af"
    PEACH = "#fab387"
    RED = "#f38ba8"
    MAUVE = "#cba6f7"
    LAVENDER = "#b4befe"


class Classification(BaseModel):
    """A label and colour derived from a UV index or AQI value."""

    model_config = ConfigDict(frozen=True)

    label: str
    color: SeverityColor


def round_half_up(value: float) -> int:
    """Round for display: 2.5 -> 3, -2.5 -> -2."""
    return math.floor(value + 0.5)


def format_hour(hour: int) -> str:
    """Convert a 24-hour clock hour to '3 PM' style."""
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12} {suffix}"


def format_day(day: date) -> str:
    """Format a date like 'Sat, Jun 1'."""
    return f"{day:%a, %b} {day.day}"


class SummaryLine(BaseModel):
    """A single line of current conditions, e.g. 'UV Index: 6 - High'."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    classification: Classification | None = None

    @property
    def text(self) -> str:
        return f"{self.label}: {self.value}"


class HourRow(BaseModel):
    """One hour of an hourly forecast view."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature_c: float
    weather_code: int
    description: str = "Unknown"

    @property
    def heading(self) -> str:
        return format_hour(self.timestamp.hour)

    @property
    def temperature(self) -> str:
        return f"{round_half_up(self.temperature_c)}°C"

    @property
    def text(self) -> str:
        return SEPARATOR.join((self.heading, self.temperature, self.description))


class DayRow(BaseModel):
    """One day of the 7-day view."""

    model_config = ConfigDict(frozen=True)

    date: date
    temp_max_c: float
    temp_min_c: float
    weather_code: int
    description: str = "Unknown"

    @property
    def heading(self) -> str:
        return format_day(self.date)

    @property
    def temperature(self) -> str:
        return f"{round_half_up(self.temp_max_c)}°/{round_half_up(self.temp_min_c)}°C"

    @property
    def text(self) -> str:
        return SEPARATOR.join((self.heading, self.temperature, self.description))


class ViewModel(BaseModel):
    """Everything needed to paint one forecast view, in display order."""

    model_config = ConfigDict(frozen=True)

    view: ViewKind
    location_name: str = ""
    title: str | None = None
    summary: tuple[SummaryLine, ...] = ()
    rows: tuple[HourRow | DayRow, ...] = ()

    @property
    def lines(self) -> list[str]:
        """Plain-text rendering, summary first."""
        lines = [self.title] if self.title else []
        lines.extend(line.text for line in self.summary)
        lines.extend(row.text for row in self.rows)
        return lines
