"""
Data Transfer Objects for the weather application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class GetForecastCommand:
    """Input DTO for requesting a forecast.

    Attributes:
        postal_code: Postal code as sent by the client. May be missing.
    """

    postal_code: str | None


@dataclass(frozen=True)
class ForecastResult:
    """Output DTO for a single forecast day.

    Attributes:
        date: Day the forecast refers to.
        temperature_c: Temperature in Celsius.
        temperature_f: Temperature in Fahrenheit.
        summary: Short textual description.
    """

    date: date
    temperature_c: int
    temperature_f: int
    summary: str
