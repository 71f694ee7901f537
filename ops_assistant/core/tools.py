import inspect
from typing import Callable, Dict, List

from google.genai import types
from pydantic import BaseModel, ConfigDict

from ops_assistant.config.logging_config import logger
from ops_assistant.geo.directory import GeoDirectory
from ops_assistant.tools.time_tool import TimeResolver
from ops_assistant.weather.resolver import WeatherResolver


class ToolDefinition(BaseModel):
    """A callable together with the schema the LLM sees."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str
    func: Callable[..., str]
    parameters: types.Schema

    @property
    def declaration(self) -> types.FunctionDeclaration:
        return types.FunctionDeclaration(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )


class ToolGateway:
    """
    A central registry to manage and invoke all tools offered to the LLM.

    This class holds the function declarations to be sent to the LLM and
    maps function names to their actual Python implementations. ``invoke``
    always answers with a string, a failing tool never raises past it.
    """

    def __init__(self):
        self.declarations: List[types.FunctionDeclaration] = []
        self.implementations: Dict[str, Callable[..., str]] = {}

    def register(self, tool_def: ToolDefinition):
        if tool_def.name in self.implementations:
            raise ValueError(f"Tool '{tool_def.name}' is already registered.")
        self.declarations.append(tool_def.declaration)
        self.implementations[tool_def.name] = tool_def.func

    @property
    def tool_names(self) -> List[str]:
        return list(self.implementations)

    @property
    def tool_object(self) -> types.Tool | None:
        """Constructs the final Tool object for the Gemini API."""
        return types.Tool(function_declarations=self.declarations) if self.declarations else None

    def invoke(self, name: str, /, **kwargs) -> str:
        tool_function = self.implementations.get(name)
        if tool_function is None:
            logger.error(f"LLM requested unknown tool: {name}")
            return f"Error: Unknown tool '{name}'."

        # Argument names come from the model, check them before calling.
        try:
            signature = inspect.signature(tool_function)
        except (TypeError, ValueError):
            signature = None
        if signature is not None:
            try:
                signature.bind(**kwargs)
            except TypeError as e:
                logger.error(f"Bad arguments for tool '{name}': {kwargs} ({e})")
                return f"Error: Invalid arguments for tool '{name}'."

        try:
            result = tool_function(**kwargs)
        except Exception:
            logger.exception(f"Error during function call '{name}'")
            return f"Error executing tool {name}."

        return result if isinstance(result, str) else str(result)


def _country_code_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "country_code": types.Schema(
                type=types.Type.STRING,
                description="The 3-letter country code (e.g., GBR, USA, FRA)."
            )
        },
        required=["country_code"]
    )


def build_gateway(directory: GeoDirectory,
                  time_resolver: TimeResolver,
                  weather_resolver: WeatherResolver) -> ToolGateway:
    """Registers the time and weather tools. Descriptions list the directory's supported codes."""
    supported = ", ".join(directory.supported_codes)
    gateway = ToolGateway()

    gateway.register(ToolDefinition(
        name="get_current_time_in_capital",
        description=("Gets the current date and time in the capital city of a given country. "
                     "Provide the country using its 3-letter code (e.g., GBR, USA, FRA). "
                     f"Supported codes include {supported}."),
        func=time_resolver.current_time_in_capital,
        parameters=_country_code_schema(),
    ))
    gateway.register(ToolDefinition(
        name="get_current_weather_in_capital",
        description=("Gets the current weather conditions in the capital city of a given country. "
                     "Provide the country using its 3-letter code (e.g., GBR, USA, FRA). "
                     f"Supported codes include {supported}."),
        func=weather_resolver.current_weather_in_capital,
        parameters=_country_code_schema(),
    ))

    logger.info(f"Created tool gateway with tools: {gateway.tool_names}")
    return gateway
