import json

import pytest
from unittest.mock import MagicMock
from google.genai import types

from ops_assistant.core.tools import ToolDefinition, ToolGateway, build_gateway
from ops_assistant.tools.time_tool import TimeResolver
from ops_assistant.weather.resolver import WeatherResolver

def _tool(name="test_tool", func=None):
    return ToolDefinition(
        name=name,
        description="A test tool",
        func=func or MagicMock(return_value="ok"),
        parameters=types.Schema(type=types.Type.OBJECT, properties={})
    )

@pytest.fixture
def gateway(directory, weather_client):
    return build_gateway(directory, TimeResolver(directory), WeatherResolver(directory, weather_client))

def test_gateway_init():
    gateway = ToolGateway()
    assert gateway.implementations == {}
    assert gateway.tool_object is None

def test_register_tool():
    gateway = ToolGateway()
    mock_func = MagicMock()

    gateway.register(_tool(func=mock_func))

    assert "test_tool" in gateway.implementations
    assert gateway.implementations["test_tool"] == mock_func

    tool_obj = gateway.tool_object
    assert isinstance(tool_obj, types.Tool)
    assert len(tool_obj.function_declarations) == 1
    assert tool_obj.function_declarations[0].name == "test_tool"

def test_duplicate_registration_is_rejected():
    gateway = ToolGateway()
    gateway.register(_tool())

    with pytest.raises(ValueError):
        gateway.register(_tool())

def test_invoke_unknown_tool_returns_error():
    assert ToolGateway().invoke("nope", country_code="FRA") == "Error: Unknown tool 'nope'."

def test_invoke_converts_exceptions_to_strings():
    gateway = ToolGateway()
    gateway.register(_tool(func=MagicMock(side_effect=RuntimeError("kaboom"))))

    result = gateway.invoke("test_tool")

    assert result == "Error executing tool test_tool."
    assert "kaboom" not in result

def test_invoke_with_bad_arguments_returns_error(gateway):
    assert gateway.invoke("get_current_time_in_capital", city="Paris") == \
        "Error: Invalid arguments for tool 'get_current_time_in_capital'."

def test_invoke_stringifies_non_string_results():
    gateway = ToolGateway()
    gateway.register(_tool(func=MagicMock(return_value=42)))

    assert gateway.invoke("test_tool") == "42"

def test_built_gateway_exposes_both_tools(gateway):
    assert gateway.tool_names == ["get_current_time_in_capital", "get_current_weather_in_capital"]

    for declaration in gateway.tool_object.function_declarations:
        assert "AUS, FRA, GBR, IND, JPN, USA" in declaration.description
        assert declaration.parameters.required == ["country_code"]
        assert declaration.parameters.properties["country_code"].type == types.Type.STRING

def test_built_gateway_invokes_time_tool(gateway):
    result = gateway.invoke("get_current_time_in_capital", country_code="FRA")

    assert result.startswith("The current time in Paris (FRA) is: ")

def test_built_gateway_invokes_weather_tool(gateway):
    result = gateway.invoke("get_current_weather_in_capital", country_code="jpn")

    assert json.loads(result)["city_name"] == "Tokyo"

@pytest.mark.parametrize("name", ["get_current_time_in_capital", "get_current_weather_in_capital"])
@pytest.mark.parametrize("code", ["XXX", "", "  "])
def test_built_gateway_never_raises_for_bad_codes(gateway, name, code):
    result = gateway.invoke(name, country_code=code)

    assert isinstance(result, str)
    assert result.startswith("Error")

def test_invoke_with_argument_called_name_returns_error(gateway):
    # Argument names are chosen by the model and may clash with invoke's own parameters
    result = gateway.invoke("get_current_time_in_capital", **{"name": "FRA"})

    assert result == "Error: Invalid arguments for tool 'get_current_time_in_capital'."

def test_invoke_passes_argument_called_name_to_tool():
    def echo(name: str) -> str:
        return f"hello {name}"

    gateway = ToolGateway()
    gateway.register(_tool(func=echo))

    assert gateway.invoke("test_tool", **{"name": "FRA"}) == "hello FRA"

def test_type_error_inside_tool_is_not_reported_as_bad_arguments():
    def broken(country_code: str) -> str:
        return country_code + 1

    gateway = ToolGateway()
    gateway.register(_tool(func=broken))

    assert gateway.invoke("test_tool", country_code="FRA") == "Error executing tool test_tool."
