"""
Pydantic schemas for forecast API request/response validation.

Field names on the wire follow the client contract (``PostalCode``,
``temperatureC``), attribute names stay snake_case.
No business logic belongs here; the postal code rules live in the
application layer so that their failures are reported field by field.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from sampleweb.application.weather.dtos import ForecastResult


class ForecastRequest(BaseModel):
    """Request schema for the forecast endpoints.

    Attributes:
        postal_code: Postal code to forecast. Optional here; a missing
            value is reported by the validation rules as required.
    """

    model_config = ConfigDict(populate_by_name=True)

    postal_code: str | None = Field(
        default=None,
        alias="PostalCode",
        description="Postal code, at most 10 characters",
    )


class WeatherForecastItem(BaseModel):
    """A single forecast day in the response."""

    model_config = ConfigDict(populate_by_name=True)

    date: date
    temperature_c: int = Field(alias="temperatureC")
    temperature_f: int = Field(alias="temperatureF")
    summary: str

    @classmethod
    def from_result(cls, result: ForecastResult) -> "WeatherForecastItem":
        return cls(
            date=result.date,
            temperature_c=result.temperature_c,
            temperature_f=result.temperature_f,
            summary=result.summary,
        )


def to_items(results: list[ForecastResult]) -> list[WeatherForecastItem]:
    """Convert forecast DTOs to response schemas."""
    return [WeatherForecastItem.from_result(r) for r in results]
