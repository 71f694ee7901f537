from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class WeatherDescription(BaseModel):
    """Nested weather details, e.g. ``{"description": "Clear Sky"}``."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    description: str


class WeatherRecord(BaseModel):
    """
    One observation as returned by Weatherbit's ``/current`` endpoint.

    Attributes:
        temp (float): Temperature in Celsius.
        city_name (str): The city the provider matched.
        datetime (str): Provider-local observation time, e.g. "2023-10-27:11".
        weather (WeatherDescription): Short textual description.
        app_temp (float): Apparent ("feels like") temperature in Celsius.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    temp: float
    city_name: str
    datetime: str
    weather: WeatherDescription
    app_temp: float


class WeatherbitResponse(BaseModel):
    """
    The API returns a list of observations under the "data" key.

    Entries are kept raw, only the primary one is validated as a WeatherRecord.
    """
    model_config = ConfigDict(extra="ignore")

    data: list[Any] | None = None


class FailureKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    TRANSPORT = "transport_failure"
    UPSTREAM = "upstream_error"
    EMPTY_RESULT = "empty_result"
    PARSE = "parse_failure"


class WeatherFailure(BaseModel):
    """Why a weather lookup produced no record. ``detail`` is meant for operators, not end users."""
    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    detail: str
    status_code: int | None = None
