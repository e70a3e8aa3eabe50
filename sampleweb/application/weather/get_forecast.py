"""
Use case: Retrieve the forecast for a postal code.

Input: GetForecastCommand (postal_code)
Output: Result of list[ForecastResult]
Side effects: None.
Failure cases: Invalid (validation), NotFound, Conflict, Error.
"""

import logging

from sampleweb.application.weather.dtos import ForecastResult, GetForecastCommand
from sampleweb.application.weather.validation import validate_forecast_command
from sampleweb.domain.result import Invalid, Result
from sampleweb.domain.weather.entities import WeatherForecast
from sampleweb.domain.weather.ports import ForecastPort

logger = logging.getLogger(__name__)


def _to_result(forecasts: list[WeatherForecast]) -> list[ForecastResult]:
    return [
        ForecastResult(
            date=f.date,
            temperature_c=f.temperature_c,
            temperature_f=f.temperature_f,
            summary=f.summary,
        )
        for f in forecasts
    ]


class GetForecastUseCase:
    """Validates a forecast request, then delegates to the forecast port.

    Validation failures short-circuit into an Invalid result and the
    forecast port is never called.
    """

    def __init__(self, forecast_port: ForecastPort) -> None:
        self._forecast_port = forecast_port

    def execute(self, command: GetForecastCommand) -> Result[list[ForecastResult]]:
        """Run the forecast use case.

        Args:
            command: The forecast request.

        Returns:
            Success with forecast DTOs, or the failure variant reported
            by validation or by the forecast port.
        """
        errors = validate_forecast_command(command)
        if errors:
            logger.info("Forecast request rejected with %d field error(s)", len(errors))
            return Invalid(tuple(errors))

        result = self._forecast_port.get_forecast(command.postal_code)
        logger.info("Forecast lookup finished with status=%s", result.status.value)
        return result.map(_to_result)
