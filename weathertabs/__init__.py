"""Weather Tabs - a terminal weather forecast viewer."""

__version__ = "0.1.0"
