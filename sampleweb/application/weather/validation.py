"""
Validation rules for forecast requests.

Each rule yields a FieldError addressed to the client-facing field
name. Rules are independent: every failing rule is reported.
"""

from sampleweb.application.weather.dtos import GetForecastCommand
from sampleweb.domain.result import FieldError

POSTAL_CODE_FIELD = "PostalCode"
POSTAL_CODE_MAX_LENGTH = 10

NOT_EMPTY_CODE = "NotEmptyValidator"
MAXIMUM_LENGTH_CODE = "MaximumLengthValidator"


def validate_forecast_command(command: GetForecastCommand) -> list[FieldError]:
    """Return the field errors for ``command``, in rule order.

    An empty list means the command is valid.
    """
    errors: list[FieldError] = []
    postal_code = command.postal_code or ""

    if not postal_code.strip():
        errors.append(
            FieldError(
                identifier=POSTAL_CODE_FIELD,
                error_message=f"'{POSTAL_CODE_FIELD}' must not be empty.",
                error_code=NOT_EMPTY_CODE,
            )
        )

    if len(postal_code) > POSTAL_CODE_MAX_LENGTH:
        errors.append(
            FieldError(
                identifier=POSTAL_CODE_FIELD,
                error_message=(
                    f"{POSTAL_CODE_FIELD} cannot exceed "
                    f"{POSTAL_CODE_MAX_LENGTH} characters."
                ),
                error_code=MAXIMUM_LENGTH_CODE,
            )
        )

    return errors
