"""
Forecast domain service.

Pure placeholder business logic: looks up a forecast for a postal
code and reports the outcome as a Result. A handful of postal codes
are reserved to drive each failure variant.
"""

import logging
import random
from collections.abc import Callable
from datetime import date, timedelta

from sampleweb.domain.result import Conflict, Error, NotFound, Result, Success
from sampleweb.domain.weather.entities import FREEZING, SUMMARIES, WeatherForecast
from sampleweb.domain.weather.errors import ForecastBackendError
from sampleweb.domain.weather.ports import ForecastPort

logger = logging.getLogger(__name__)

FREEZING_POSTAL_CODE = "55555"
NOT_FOUND_POSTAL_CODE = "NotFound"
CONFLICT_POSTAL_CODE = "Conflict"
ERROR_POSTAL_CODE = "Error"

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55


class WeatherService(ForecastPort):
    """Produces daily forecasts for a postal code.

    Args:
        rng: Source of randomness for generated forecasts.
        forecast_days: Number of consecutive days to forecast.
        today: Clock returning the current date.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        forecast_days: int = 5,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._rng = rng or random.Random()
        self._forecast_days = forecast_days
        self._today = today

    def get_forecast(self, postal_code: str) -> Result[list[WeatherForecast]]:
        """Return the forecast for ``postal_code``.

        Callers are expected to validate the postal code first.
        """
        if postal_code == NOT_FOUND_POSTAL_CODE:
            return NotFound()
        if postal_code == CONFLICT_POSTAL_CODE:
            return Conflict()
        if postal_code == ERROR_POSTAL_CODE:
            return Error("Forecast provider returned no data")

        start = self._today()
        if postal_code == FREEZING_POSTAL_CODE:
            return Success(
                [
                    WeatherForecast(
                        date=start + timedelta(days=offset),
                        temperature_c=0,
                        summary=FREEZING,
                    )
                    for offset in range(1, self._forecast_days + 1)
                ]
            )

        return Success(
            [
                WeatherForecast(
                    date=start + timedelta(days=offset),
                    temperature_c=self._rng.randint(
                        MIN_TEMPERATURE_C, MAX_TEMPERATURE_C
                    ),
                    summary=self._rng.choice(SUMMARIES),
                )
                for offset in range(1, self._forecast_days + 1)
            ]
        )

    def simulate_fault(self) -> Result[list[WeatherForecast]]:
        """Fail with an uncaught fault instead of returning a result."""
        logger.debug("Simulating forecast backend fault")
        raise ForecastBackendError("simulated outage")
