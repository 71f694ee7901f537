class AssistantError(Exception):
    """
    Base class for lookup errors raised inside the assistant.

    Every subclass carries a user-facing ``message``. Tool boundaries turn these
    into ``Error: ...`` strings, they are never meant to reach the model as a fault.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(AssistantError):
    """Malformed or blank input."""


class CountryNotFoundError(AssistantError):
    """The country code is not part of the supported set."""

    def __init__(self, country_code: str):
        super().__init__(f"Error: Country code '{country_code}' not supported or found.")
        self.country_code = country_code


class ConfigurationInconsistencyError(AssistantError):
    """A capital resolved but has no timezone mapping."""

    def __init__(self, capital: str):
        super().__init__(f"Error: Timezone information not available for capital '{capital}'.")
        self.capital = capital
