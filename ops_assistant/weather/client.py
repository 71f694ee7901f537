import requests
from pydantic import ValidationError

from ops_assistant.config.logging_config import logger
from ops_assistant.weather.models import FailureKind, WeatherbitResponse, WeatherFailure, WeatherRecord

DEFAULT_BASE_URL = "https://api.weatherbit.io/v2.0/current"
DEFAULT_TIMEOUT_SECONDS = 10.0


class WeatherClient:
    """
    Thin client for Weatherbit's current-conditions endpoint.

    The underlying ``requests.Session`` is reused across calls, but no state is
    carried from one call to the next.
    """

    def __init__(self,
                 api_key: str,
                 base_url: str = DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 session: requests.Session | None = None):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_current_weather(self, city: str) -> WeatherRecord | WeatherFailure:
        """
        Gets current weather conditions for a given city.

        Args:
            city: The name of the city (e.g., "Paris", "London", "New York").

        Returns:
            The first observation of the provider's data array, or a WeatherFailure
            describing which step went wrong. Never raises for network or payload problems.
        """
        if city is None or not city.strip():
            logger.error("City name cannot be empty.")
            return WeatherFailure(kind=FailureKind.INVALID_ARGUMENT, detail="City name cannot be empty.")

        # requests URL-encodes the query parameters. The key is left out of the log line.
        logger.info(f"Calling weather API: {self.base_url} for city={city!r}")
        try:
            response = self.session.get(
                self.base_url,
                params={"city": city, "key": self.api_key},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Weather API request for {city!r} failed: {e}")
            return WeatherFailure(kind=FailureKind.TRANSPORT, detail=str(e))

        status_code = response.status_code
        response_body = response.text

        if status_code != 200:
            logger.error(f"API call failed with status code: {status_code}")
            logger.error(f"Response Body: {response_body}")
            return WeatherFailure(kind=FailureKind.UPSTREAM,
                                  detail=f"HTTP {status_code}",
                                  status_code=status_code)

        try:
            weather_response = WeatherbitResponse.model_validate_json(response_body)
        except ValidationError as e:
            logger.error(f"Error parsing JSON response: {e}")
            logger.error(f"Response Body: {response_body}")
            return WeatherFailure(kind=FailureKind.PARSE, detail=str(e), status_code=status_code)

        if not weather_response.data:
            logger.error(f"API returned success (200), but no weather data was found for city: {city}")
            logger.error(f"Response Body: {response_body}")
            return WeatherFailure(kind=FailureKind.EMPTY_RESULT,
                                  detail=f"No weather data for {city}",
                                  status_code=status_code)

        # Weatherbit may return several stations per city. The first one is the primary match,
        # the others are neither used nor validated.
        try:
            return WeatherRecord.model_validate(weather_response.data[0])
        except ValidationError as e:
            logger.error(f"Error parsing weather record: {e}")
            logger.error(f"Response Body: {response_body}")
            return WeatherFailure(kind=FailureKind.PARSE, detail=str(e), status_code=status_code)
