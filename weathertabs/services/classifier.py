"""Human-readable labels for WMO weather codes, UV index and US AQI."""

from ..models.view import Classification, SeverityColor

# WMO weather interpretation codes as returned by Open-Meteo
WEATHER_DESCRIPTIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Heavy drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Light showers",
    81: "Showers",
    82: "Heavy showers",
    85: "Light snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with hail",
}

NOT_AVAILABLE = Classification(label="N/A", color=SeverityColor.NEUTRAL)

# (inclusive upper bound, classification), checked in order
UV_LEVELS: list[tuple[float, Classification]] = [
    (2, Classification(label="Low", color=SeverityColor.GREEN)),
    (5, Classification(label="Moderate", color=SeverityColor.YELLOW)),
    (7, Classification(label="High", color=SeverityColor.PEACH)),
    (10, Classification(label="Very High", color=SeverityColor.RED)),
]
UV_EXTREME = Classification(label="Extreme", color=SeverityColor.MAUVE)

AQI_LEVELS: list[tuple[float, Classification]] = [
    (50, Classification(label="Good", color=SeverityColor.GREEN)),
    (100, Classification(label="Moderate", color=SeverityColor.YELLOW)),
    (150, Classification(label="Unhealthy for Sensitive", color=SeverityColor.PEACH)),
    (200, Classification(label="Unhealthy", color=SeverityColor.RED)),
    (300, Classification(label="Very Unhealthy", color=SeverityColor.MAUVE)),
]
AQI_HAZARDOUS = Classification(label="Hazardous", color=SeverityColor.LAVENDER)


def weather_description(code: int | None) -> str:
    """Describe a WMO weather code, 'Unknown' for anything unmapped."""
    if code is None:
        return "Unknown"
    return WEATHER_DESCRIPTIONS.get(code, "Unknown")


def _classify(
    value: float | None, levels: list[tuple[float, Classification]], top: Classification
) -> Classification:
    if value is None:
        return NOT_AVAILABLE
    for upper, classification in levels:
        if value <= upper:
            return classification
    return top


def uv_classification(uv: float | None) -> Classification:
    """Bucket a UV index into Low..Extreme."""
    return _classify(uv, UV_LEVELS, UV_EXTREME)


def aqi_classification(aqi: float | None) -> Classification:
    """Bucket a US AQI value into Good..Hazardous."""
    return _classify(aqi, AQI_LEVELS, AQI_HAZARDOUS)
