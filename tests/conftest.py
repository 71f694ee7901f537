import json

import pytest
from unittest.mock import MagicMock

from ops_assistant.geo.directory import GeoDirectory, default_directory
from ops_assistant.weather.client import WeatherClient

TOKYO_PAYLOAD = {
    "count": 1,
    "data": [
        {
            "temp": 18.5,
            "app_temp": 17.9,
            "city_name": "Tokyo",
            "datetime": "2024-04-02:06",
            "weather": {"description": "Few clouds", "icon": "c02d", "code": 801},
            "wind_spd": 3.1,
            "country_code": "JP",
        }
    ],
}


def make_response(status_code: int = 200, body=None, text: str | None = None):
    """A stand-in for requests.Response. ``body`` is JSON-encoded unless ``text`` is given."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(body)
    return response


@pytest.fixture
def directory() -> GeoDirectory:
    return default_directory()


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.get.return_value = make_response(200, TOKYO_PAYLOAD)
    return session


@pytest.fixture
def weather_client(mock_session) -> WeatherClient:
    return WeatherClient(api_key="test-key", base_url="https://weather.test/current",
                         timeout=2.5, session=mock_session)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def tokyo_payload():
    return json.loads(json.dumps(TOKYO_PAYLOAD))
