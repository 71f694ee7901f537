# Load all the necessary Global Variables
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv, find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    GEMINI_API_KEY: str
    WEATHERBIT_API_KEY: str
    WEATHERBIT_BASE_URL: str = "https://api.weatherbit.io/v2.0/current"
    WEATHER_TIMEOUT_SECONDS: float = 10.0

    # Optional: Allow overriding the LLM config via environment variables
    LLM_CONFIG_PATH: Path | None = None

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# --- Default Path Logic ---
# llm_config.toml ships next to this file.
DEFAULT_CONFIG_PATH = Path(__file__).parent / "llm_config.toml"


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Reads the environment (and .env) once. Importing this module never needs credentials."""
    load_dotenv(find_dotenv())
    env_settings = EnvSettings()

    if env_settings.LLM_CONFIG_PATH is None:
        env_settings.LLM_CONFIG_PATH = DEFAULT_CONFIG_PATH

    return env_settings
