"""Services for fetching forecasts and turning them into views."""

from .session import WeatherSession
from .throttle import RequestTracker, SearchThrottle
from .view_controller import RenderSink, ViewController
from .weather_service import WeatherService

__all__ = [
    "RenderSink",
    "RequestTracker",
    "SearchThrottle",
    "ViewController",
    "WeatherService",
    "WeatherSession",
]
