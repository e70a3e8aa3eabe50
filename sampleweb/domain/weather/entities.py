"""
Domain entities for the weather bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date

FREEZING = "Freezing"

SUMMARIES = (
    FREEZING,
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)


@dataclass(frozen=True)
class WeatherForecast:
    """Forecast for a single day at a postal code."""

    date: date
    temperature_c: int
    summary: str

    @property
    def temperature_f(self) -> int:
        """Temperature converted to Fahrenheit."""
        return 32 + int(self.temperature_c / 0.5556)
