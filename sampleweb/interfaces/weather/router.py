"""
Controller-style forecast routes (``/weatherforecast/...``).

All routes delegate to use cases. No business logic here.
Results are rendered by the shared result translator; faults are
handled by the centralized error handlers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sampleweb.application.weather.dtos import GetForecastCommand
from sampleweb.application.weather.get_forecast import GetForecastUseCase
from sampleweb.application.weather.trigger_fault import TriggerFaultUseCase
from sampleweb.interfaces.schemas import ProblemDetailsResponse
from sampleweb.interfaces.weather.dependencies import (
    get_forecast_use_case,
    get_trigger_fault_use_case,
)
from sampleweb.interfaces.weather.schemas import (
    ForecastRequest,
    WeatherForecastItem,
    to_items,
)
from sampleweb.shared.errors import render_result

router = APIRouter(prefix="/weatherforecast", tags=["weatherforecast"])

FORECAST_RESPONSES = {
    400: {"model": ProblemDetailsResponse},
    404: {"model": ProblemDetailsResponse},
    409: {"model": ProblemDetailsResponse},
}


@router.post(
    "/create",
    response_model=list[WeatherForecastItem],
    responses=FORECAST_RESPONSES,
    summary="Create forecast",
    description="Return the forecast for a postal code.",
)
def create(
    request: ForecastRequest,
    use_case: GetForecastUseCase = Depends(get_forecast_use_case),
) -> JSONResponse:
    """Forecast for the requested postal code."""
    result = use_case.execute(GetForecastCommand(postal_code=request.postal_code))
    return render_result(result.map(to_items))


@router.get(
    "/throws",
    responses={400: {"model": ProblemDetailsResponse}},
    summary="Faulting operation",
    description="Calls an operation that raises; always answers 400.",
)
def throws(
    use_case: TriggerFaultUseCase = Depends(get_trigger_fault_use_case),
) -> JSONResponse:
    """Run an operation that faults instead of returning a result."""
    return render_result(use_case.execute())
