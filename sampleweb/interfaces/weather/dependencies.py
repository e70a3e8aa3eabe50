"""
Dependency injection for the weather bounded context.

Provides FastAPI dependency functions that wire the forecast port
into use cases via constructor injection.
These are the composition root for the weather context.
"""

import random

from fastapi import Depends

from sampleweb.application.weather.get_forecast import GetForecastUseCase
from sampleweb.application.weather.trigger_fault import TriggerFaultUseCase
from sampleweb.core.config import Settings
from sampleweb.domain.weather.forecast_service import WeatherService
from sampleweb.domain.weather.ports import ForecastPort
from sampleweb.interfaces.dependencies import get_settings


def get_forecast_port(settings: Settings = Depends(get_settings)) -> ForecastPort:
    """Build the forecast service from application settings."""
    return WeatherService(
        rng=random.Random(settings.forecast_seed),
        forecast_days=settings.forecast_days,
    )


def get_forecast_use_case(
    forecast_port: ForecastPort = Depends(get_forecast_port),
) -> GetForecastUseCase:
    """Build GetForecastUseCase with its dependencies."""
    return GetForecastUseCase(forecast_port=forecast_port)


def get_trigger_fault_use_case(
    forecast_port: ForecastPort = Depends(get_forecast_port),
) -> TriggerFaultUseCase:
    """Build TriggerFaultUseCase with its dependencies."""
    return TriggerFaultUseCase(forecast_port=forecast_port)
