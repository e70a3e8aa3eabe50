"""
REST-style forecast endpoint (``/forecast/new``).

Behaves exactly like ``POST /weatherforecast/create``: same use case,
same translation, same problem bodies.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sampleweb.application.weather.dtos import GetForecastCommand
from sampleweb.application.weather.get_forecast import GetForecastUseCase
from sampleweb.interfaces.weather.dependencies import get_forecast_use_case
from sampleweb.interfaces.weather.router import FORECAST_RESPONSES
from sampleweb.interfaces.weather.schemas import (
    ForecastRequest,
    WeatherForecastItem,
    to_items,
)
from sampleweb.shared.errors import render_result

router = APIRouter(prefix="/forecast", tags=["forecast"])


@router.post(
    "/new",
    response_model=list[WeatherForecastItem],
    responses=FORECAST_RESPONSES,
    summary="New forecast",
)
def new_forecast(
    request: ForecastRequest,
    use_case: GetForecastUseCase = Depends(get_forecast_use_case),
) -> JSONResponse:
    result = use_case.execute(GetForecastCommand(postal_code=request.postal_code))
    return render_result(result.map(to_items))
