import asyncio
import logging
from typing import Callable

from google import genai

from ops_assistant.config.config_loader import LLMConfigModel, load_config
from ops_assistant.config.logging_config import logger, setup_logging
from ops_assistant.config.settings import EnvSettings, get_env_settings
from ops_assistant.core.agent import GenericAgent
from ops_assistant.core.tools import build_gateway
from ops_assistant.geo.directory import GeoDirectory, default_directory
from ops_assistant.memory.buffer import ConversationBuffer
from ops_assistant.tools.time_tool import TimeResolver
from ops_assistant.weather.client import WeatherClient
from ops_assistant.weather.resolver import WeatherResolver

EXIT_COMMAND = "exit"


def build_agent(settings: EnvSettings,
                config: LLMConfigModel,
                client: genai.Client | None = None,
                directory: GeoDirectory | None = None) -> GenericAgent:
    """Wires directory, resolvers, gateway and memory into one agent."""
    directory = directory or default_directory()
    weather_client = WeatherClient(
        api_key=settings.WEATHERBIT_API_KEY,
        base_url=settings.WEATHERBIT_BASE_URL,
        timeout=settings.WEATHER_TIMEOUT_SECONDS,
    )
    gateway = build_gateway(
        directory,
        TimeResolver(directory),
        WeatherResolver(directory, weather_client),
    )

    return GenericAgent(
        client=client or genai.Client(api_key=settings.GEMINI_API_KEY),
        model_name=config.model,
        sys_instruction=config.system_instruction,
        gateway=gateway,
        buffer=ConversationBuffer(max_turns=config.max_history_turns),
        temp=config.temperature,
        max_tokens=config.max_output_tokens,
        thinking_budget=config.thinking_budget,
    )


async def run_console(agent: GenericAgent,
                      read_line: Callable[[str], str] = input,
                      write: Callable[[str], None] = print):
    """Reads one line at a time until 'exit' (any case) or end of input."""
    write("Chatbot started. Type 'exit' to quit.")
    write("Ask me about the time/weather in a country (e.g., 'What time is it in the UK?', "
          "'Current time in France?', 'What is the time and weather in England?').")

    while True:
        try:
            user_message = read_line("\nUser: ")
        except (EOFError, KeyboardInterrupt):
            break

        if user_message.strip().lower() == EXIT_COMMAND:
            break
        if not user_message.strip():
            continue

        try:
            agent_response = await agent.chat(user_message)
        except Exception:
            logger.exception("Chat turn failed")
            write("Bot: Sorry, something went wrong while answering. Please try again.")
            continue

        write(f"Bot: {agent_response}")

    write("Chatbot stopped.")


def main():
    settings = get_env_settings()
    setup_logging(log_level=logging.getLevelName(settings.LOG_LEVEL.upper()), use_json=settings.LOG_JSON)
    logger.info("Starting operations assistant...")

    config = load_config(settings.LLM_CONFIG_PATH)
    agent = build_agent(settings, config)
    asyncio.run(run_console(agent))


if __name__ == "__main__":
    main()
