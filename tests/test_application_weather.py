"""
Tests for the weather application layer.

Tests request validation and use case orchestration with a mocked
forecast port.
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from sampleweb.application.weather.dtos import ForecastResult, GetForecastCommand
from sampleweb.application.weather.get_forecast import GetForecastUseCase
from sampleweb.application.weather.trigger_fault import TriggerFaultUseCase
from sampleweb.application.weather.validation import (
    MAXIMUM_LENGTH_CODE,
    NOT_EMPTY_CODE,
    validate_forecast_command,
)
from sampleweb.domain.result import Conflict, Invalid, NotFound, Success
from sampleweb.domain.weather.entities import WeatherForecast
from sampleweb.domain.weather.errors import ForecastBackendError
from sampleweb.domain.weather.ports import ForecastPort


@pytest.fixture
def port() -> MagicMock:
    return MagicMock(spec=ForecastPort)


class TestForecastValidation:
    """Tests for validate_forecast_command."""

    @pytest.mark.parametrize("postal_code", [None, "", "   "])
    def test_missing_or_empty_is_required(self, postal_code) -> None:
        errors = validate_forecast_command(GetForecastCommand(postal_code=postal_code))
        assert len(errors) == 1
        assert errors[0].identifier == "PostalCode"
        assert errors[0].error_code == NOT_EMPTY_CODE
        assert "PostalCode" in errors[0].error_message

    def test_too_long(self) -> None:
        errors = validate_forecast_command(GetForecastCommand(postal_code="01234567890"))
        assert [e.error_message for e in errors] == [
            "PostalCode cannot exceed 10 characters."
        ]
        assert errors[0].error_code == MAXIMUM_LENGTH_CODE

    def test_exactly_ten_characters_is_valid(self) -> None:
        assert validate_forecast_command(GetForecastCommand(postal_code="0123456789")) == []

    def test_both_rules_fire_independently(self) -> None:
        errors = validate_forecast_command(GetForecastCommand(postal_code=" " * 11))
        assert [e.error_code for e in errors] == [NOT_EMPTY_CODE, MAXIMUM_LENGTH_CODE]


class TestGetForecastUseCase:
    """Tests for GetForecastUseCase."""

    def test_invalid_command_short_circuits(self, port: MagicMock) -> None:
        result = GetForecastUseCase(port).execute(GetForecastCommand(postal_code=""))
        assert isinstance(result, Invalid)
        assert list(result.errors_by_field()) == ["PostalCode"]
        port.get_forecast.assert_not_called()

    def test_success_is_mapped_to_dtos(self, port: MagicMock) -> None:
        port.get_forecast.return_value = Success(
            [WeatherForecast(date=date(2024, 1, 2), temperature_c=0, summary="Freezing")]
        )
        result = GetForecastUseCase(port).execute(GetForecastCommand(postal_code="55555"))
        port.get_forecast.assert_called_once_with("55555")
        assert result == Success(
            [
                ForecastResult(
                    date=date(2024, 1, 2),
                    temperature_c=0,
                    temperature_f=32,
                    summary="Freezing",
                )
            ]
        )

    @pytest.mark.parametrize("failure", [NotFound(), Conflict()])
    def test_failures_pass_through(self, port: MagicMock, failure) -> None:
        port.get_forecast.return_value = failure
        result = GetForecastUseCase(port).execute(GetForecastCommand(postal_code="x"))
        assert result is failure


class TestTriggerFaultUseCase:
    """Tests for TriggerFaultUseCase."""

    def test_fault_propagates(self, port: MagicMock) -> None:
        port.simulate_fault.side_effect = ForecastBackendError("down")
        with pytest.raises(ForecastBackendError):
            TriggerFaultUseCase(port).execute()
