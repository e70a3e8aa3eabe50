"""
Use case: Exercise the uncaught-fault path of the forecast port.

Input: None
Output: Never returns; the port raises.
"""

from sampleweb.domain.result import Result
from sampleweb.domain.weather.entities import WeatherForecast
from sampleweb.domain.weather.ports import ForecastPort


class TriggerFaultUseCase:
    """Calls a forecast operation that faults instead of returning a result."""

    def __init__(self, forecast_port: ForecastPort) -> None:
        self._forecast_port = forecast_port

    def execute(self) -> Result[list[WeatherForecast]]:
        return self._forecast_port.simulate_fault()
