from ops_assistant.config.logging_config import logger
from ops_assistant.errors import AssistantError
from ops_assistant.geo.directory import GeoDirectory
from ops_assistant.weather.client import WeatherClient
from ops_assistant.weather.models import FailureKind, WeatherFailure

# Polite, user-facing wording. The raw detail of a failure stays in the logs.
_FAILURE_MESSAGES: dict[FailureKind, str] = {
    FailureKind.INVALID_ARGUMENT: "Error: No city name was available to look up the weather.",
    FailureKind.TRANSPORT: "Error: The weather service could not be reached for {city}. Please try again later.",
    FailureKind.UPSTREAM: "Error: The weather service could not provide data for {city} right now.",
    FailureKind.EMPTY_RESULT: "Error: No weather data was found for {city}.",
    FailureKind.PARSE: "Error: The weather service returned an unreadable response for {city}.",
}


def describe_failure(failure: WeatherFailure, city: str) -> str:
    return _FAILURE_MESSAGES[failure.kind].format(city=city)


class WeatherResolver:
    """Looks up the capital of a country and returns its current weather as JSON."""

    def __init__(self, directory: GeoDirectory, client: WeatherClient):
        self.directory = directory
        self.client = client

    def current_weather_in_capital(self, country_code: str) -> str:
        """
        Retrieves the current weather conditions in the capital of a given country.

        The success payload is the serialized WeatherRecord, meant to be read and
        paraphrased by the language model, e.g.
        ``{"temp":12.2,"city_name":"Paris",...,"weather":{"description":"Clear Sky"}}``.
        Every failure comes back as an ``Error: ...`` string.
        """
        logger.info(f"current_weather_in_capital invoked with country code: {country_code!r}")
        try:
            capital = self.directory.capital_city(country_code)
        except AssistantError as e:
            logger.warning(f"Weather lookup rejected: {e.message}")
            return e.message

        try:
            result = self.client.fetch_current_weather(capital)
        except Exception:
            logger.exception(f"Unexpected error fetching weather for {capital}")
            return f"Error retrieving weather for {capital}."

        if isinstance(result, WeatherFailure):
            logger.warning(f"Weather lookup for {capital} failed: {result.kind.value} ({result.detail})")
            return describe_failure(result, capital)

        response_json = result.model_dump_json()
        logger.info(f"For {capital} in {country_code} we got weather: {response_json}")
        return response_json
