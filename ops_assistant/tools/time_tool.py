from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo

from ops_assistant.config.logging_config import logger
from ops_assistant.errors import AssistantError
from ops_assistant.geo.directory import GeoDirectory

# e.g. 2023-10-27 10:30:00 BST
TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def _system_clock(zone: ZoneInfo) -> datetime:
    return datetime.now(zone)


class TimeResolver:
    """Formats the current local time in the capital of a supported country."""

    def __init__(self, directory: GeoDirectory, clock: Callable[[ZoneInfo], datetime] = _system_clock):
        self.directory = directory
        self.clock = clock

    def current_time_in_capital(self, country_code: str) -> str:
        """
        Retrieves the current time in the capital city of a given country code.

        Args:
            country_code: The 3-letter country code (e.g., GBR, USA, FRA).

        Returns:
            The current date and time in the capital's timezone, or an
            ``Error: ...`` string. Never raises.
        """
        logger.info(f"current_time_in_capital invoked with country code: {country_code!r}")
        try:
            entry = self.directory.resolve_capital(country_code)
        except AssistantError as e:
            logger.warning(f"Time lookup rejected: {e.message}")
            return e.message

        try:
            now = self.clock(ZoneInfo(entry.timezone_id))
            formatted_time = now.strftime(TIME_FORMAT)
        except Exception:
            logger.exception(f"Error getting time for timezone {entry.timezone_id}")
            return f"Error retrieving time for {entry.capital}."

        result_msg = f"The current time in {entry.capital} ({entry.country_code}) is: {formatted_time}"
        logger.info(f"Result message: {result_msg}")
        return result_msg
