from collections import deque
from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["user", "assistant"]


class ConversationTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ConversationBuffer:
    """
    Windowed chat memory: keeps the last ``max_turns`` turns in insertion order.

    Capacity counts turns, not exchanges, so a capacity of 10 holds five
    question/answer pairs. Appending past capacity evicts the oldest turn.
    """

    def __init__(self, max_turns: int = 10):
        if max_turns < 1:
            raise ValueError("max_turns must be at least 1")
        self._turns: deque[ConversationTurn] = deque(maxlen=max_turns)

    @property
    def max_turns(self) -> int:
        return self._turns.maxlen

    def append(self, turn: ConversationTurn):
        self._turns.append(turn)

    def add_user(self, content: str):
        self.append(ConversationTurn(role="user", content=content))

    def add_assistant(self, content: str):
        self.append(ConversationTurn(role="assistant", content=content))

    def as_ordered_sequence(self) -> tuple[ConversationTurn, ...]:
        """Oldest turn first."""
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
