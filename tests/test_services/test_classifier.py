"""Tests for weather, UV and AQI classification."""

import pytest

from weathertabs.models.view import SeverityColor
from weathertabs.services.classifier import (
    WEATHER_DESCRIPTIONS,
    aqi_classification,
    uv_classification,
    weather_description,
)


class TestWeatherDescription:
    """Tests for weather_description."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            (0, "Clear sky"),
            (3, "Overcast"),
            (48, "Foggy"),
            (61, "Light rain"),
            (77, "Snow grains"),
            (86, "Snow showers"),
            (99, "Thunderstorm with hail"),
        ],
    )
    def test_known_codes(self, code, expected):
        """Test mapped WMO codes."""
        assert weather_description(code) == expected

    def test_table_covers_all_codes(self):
        """Test the lookup table holds exactly the supported WMO codes."""
        assert sorted(WEATHER_DESCRIPTIONS) == [
            0, 1, 2, 3, 45, 48, 51, 53, 55, 61, 63, 65,
            71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99,
        ]

    @pytest.mark.parametrize("code", [12, 1000, -1, 4, 100])
    def test_unknown_codes(self, code):
        """Test unmapped codes fall back to Unknown."""
        assert weather_description(code) == "Unknown"

    def test_none_is_unknown(self):
        """Test a missing code does not raise."""
        assert weather_description(None) == "Unknown"


class TestUVClassification:
    """Tests for uv_classification."""

    @pytest.mark.parametrize(
        "uv,label",
        [
            (0, "Low"),
            (2.0, "Low"),
            (2.01, "Moderate"),
            (5, "Moderate"),
            (5.01, "High"),
            (7, "High"),
            (7.01, "Very High"),
            (10.0, "Very High"),
            (10.01, "Extreme"),
            (14, "Extreme"),
        ],
    )
    def test_boundaries(self, uv, label):
        """Test bucket upper bounds are inclusive."""
        assert uv_classification(uv).label == label

    def test_absent(self):
        """Test missing UV index is N/A with the neutral colour."""
        result = uv_classification(None)
        assert result.label == "N/A"
        assert result.color is SeverityColor.NEUTRAL

    def test_colors(self):
        """Test each bucket carries its own colour."""
        assert uv_classification(1).color is SeverityColor.GREEN
        assert uv_classification(4).color is SeverityColor.YELLOW
        assert uv_classification(6).color is SeverityColor.PEACH
        assert uv_classification(9).color is SeverityColor.RED
        assert uv_classification(11).color is SeverityColor.MAUVE


class TestAQIClassification:
    """Tests for aqi_classification."""

    @pytest.mark.parametrize(
        "aqi,label",
        [
            (0, "Good"),
            (50, "Good"),
            (51, "Moderate"),
            (100, "Moderate"),
            (101, "Unhealthy for Sensitive"),
            (150, "Unhealthy for Sensitive"),
            (151, "Unhealthy"),
            (200, "Unhealthy"),
            (201, "Very Unhealthy"),
            (300, "Very Unhealthy"),
            (301, "Hazardous"),
            (500, "Hazardous"),
        ],
    )
    def test_boundaries(self, aqi, label):
        """Test US AQI breakpoints."""
        assert aqi_classification(aqi).label == label

    def test_fractional_value_above_breakpoint(self):
        """Test values between integer breakpoints go to the next bucket."""
        assert aqi_classification(50.5).label == "Moderate"

    def test_absent(self):
        """Test missing AQI is N/A with the neutral colour."""
        result = aqi_classification(None)
        assert result.label == "N/A"
        assert result.color is SeverityColor.NEUTRAL

    def test_hazardous_color(self):
        """Test the top bucket uses its own colour."""
        assert aqi_classification(301).color is SeverityColor.LAVENDER
