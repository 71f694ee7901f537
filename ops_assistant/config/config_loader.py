import tomli
from pathlib import Path
from pydantic import BaseModel, Field

from ops_assistant.config.logging_config import logger

class LLMConfigModel(BaseModel):
    model: str = "gemini-2.0-flash"
    thinking_budget: int = Field(..., ge=0)
    temperature: float = Field(..., ge=0, le=2)
    max_output_tokens: int = 512
    system_instruction: str = ("Someone forgot to add a system instruction... "
                               "Tell the user to open the llm_config.toml and add one.")
    max_history_turns: int = Field(10, ge=1)

def load_config(path: Path) -> LLMConfigModel:
    """Loads and returns a BaseModel of the llm_config.toml."""
    try:
        with open(path, "rb") as f:
            raw = tomli.load(f)
        logger.info(f"Configuration loaded from: {path}")
        return LLMConfigModel(**raw["config"])
    except FileNotFoundError:
        logger.error(f"Config file not found at {path}")
        raise
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        raise
