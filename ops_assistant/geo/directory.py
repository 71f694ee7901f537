from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

from ops_assistant.errors import (
    ConfigurationInconsistencyError,
    CountryNotFoundError,
    InvalidArgumentError,
)

# Reference data. USA and AUS use their largest city rather than the capital,
# it gives the more useful timezone for an operations desk.
DEFAULT_CAPITALS: dict[str, str] = {
    "GBR": "London",
    "FRA": "Paris",
    "USA": "New York",
    "JPN": "Tokyo",
    "AUS": "Sydney",
    "IND": "New Delhi",
}

DEFAULT_TIMEZONES: dict[str, str] = {
    "London": "Europe/London",
    "Paris": "Europe/Paris",
    "New York": "America/New_York",
    "Tokyo": "Asia/Tokyo",
    "Sydney": "Australia/Sydney",
    "New Delhi": "Asia/Kolkata",  # IST
}


class CapitalEntry(BaseModel):
    """A supported country together with its capital city and IANA timezone."""
    model_config = ConfigDict(frozen=True)

    country_code: str
    capital: str
    timezone_id: str


def normalize_country_code(country_code: str | None) -> str:
    """Trims and upper-cases a country code. Blank input is an InvalidArgumentError."""
    if country_code is None or not country_code.strip():
        raise InvalidArgumentError("Error: Country code cannot be empty.")
    return country_code.strip().upper()


class GeoDirectory:
    """
    Static country code -> capital -> timezone lookup.

    Both tables are copied into read-only mappings on construction, so one
    directory can be shared between any number of callers without locking.
    """

    def __init__(self, capitals: Mapping[str, str], timezones: Mapping[str, str]):
        self._capitals = MappingProxyType({code.strip().upper(): city for code, city in capitals.items()})
        self._timezones = MappingProxyType(dict(timezones))

    @property
    def supported_codes(self) -> list[str]:
        return sorted(self._capitals)

    def capital_city(self, country_code: str | None) -> str:
        """
        Resolves only the capital city name.

        Raises:
            InvalidArgumentError: if the code is blank.
            CountryNotFoundError: if the code is not supported. The error keeps the caller's original input.
        """
        code = normalize_country_code(country_code)
        capital = self._capitals.get(code)
        if capital is None:
            raise CountryNotFoundError(country_code)
        return capital

    def resolve_capital(self, country_code: str | None) -> CapitalEntry:
        """
        Resolves a country code to its full CapitalEntry.

        Raises:
            InvalidArgumentError: if the code is blank.
            CountryNotFoundError: if the code is not supported.
            ConfigurationInconsistencyError: if the capital has no timezone mapping.
        """
        capital = self.capital_city(country_code)
        timezone_id = self._timezones.get(capital)
        if timezone_id is None:
            raise ConfigurationInconsistencyError(capital)

        return CapitalEntry(
            country_code=normalize_country_code(country_code),
            capital=capital,
            timezone_id=timezone_id,
        )


def default_directory() -> GeoDirectory:
    """A fresh directory holding the built-in reference data."""
    return GeoDirectory(DEFAULT_CAPITALS, DEFAULT_TIMEZONES)
