"""
Port interfaces (ABCs) for the weather bounded context.

Ports define the contracts that use cases require from forecast sources.
Use cases never depend on concrete implementations.
"""

from abc import ABC, abstractmethod

from sampleweb.domain.result import Result
from sampleweb.domain.weather.entities import WeatherForecast


class ForecastPort(ABC):
    """Port for looking up daily forecasts."""

    @abstractmethod
    def get_forecast(self, postal_code: str) -> Result[list[WeatherForecast]]:
        """Return the forecast for a validated postal code."""
        raise NotImplementedError

    @abstractmethod
    def simulate_fault(self) -> Result[list[WeatherForecast]]:
        """Raise an uncaught fault, used to exercise fault handling."""
        raise NotImplementedError
