from google import genai
from google.genai import types

from ops_assistant.core.tools import ToolGateway
from ops_assistant.memory.buffer import ConversationBuffer
from ops_assistant.config.logging_config import logger

# ConversationTurn roles -> Gemini content roles
_GENAI_ROLES = {"user": "user", "assistant": "model"}

# Tool rounds allowed per user message
MAX_TOOL_ROUNDS = 5

EMPTY_ANSWER_FALLBACK = "Sorry, I could not come up with an answer. Please try rephrasing your question."


def history_to_contents(buffer: ConversationBuffer) -> list[types.Content]:
    """Converts the windowed memory into the history format of a Gemini chat."""
    return [
        types.Content(role=_GENAI_ROLES[turn.role], parts=[types.Part(text=turn.content)])
        for turn in buffer.as_ordered_sequence()
    ]


class GenericAgent:
    """An operations assistant backed by Gemini, answering with the tools of a ToolGateway."""
    def __init__(self,
                 client: genai.Client,
                 model_name: str,
                 sys_instruction: str,
                 gateway: ToolGateway,
                 buffer: ConversationBuffer | None = None,
                 temp: float = 0.0,
                 max_tokens: int = 512,
                 thinking_budget: int | None = None
                 ):

        self.model: str = model_name
        self.gateway: ToolGateway = gateway
        self.buffer: ConversationBuffer = buffer if buffer is not None else ConversationBuffer()

        # Only include tools if there are any registered
        tool_obj = self.gateway.tool_object
        tools_config = [tool_obj] if tool_obj else None

        self.config: types.GenerateContentConfig = types.GenerateContentConfig(
            system_instruction=sys_instruction,
            temperature=temp,
            max_output_tokens=max_tokens,
            tools=tools_config,
            # Tool calls go through the gateway, never through the SDK.
            automatic_function_calling=types.AutomaticFunctionCallingConfig(disable=True),
            thinking_config=(types.ThinkingConfig(thinking_budget=thinking_budget)
                             if thinking_budget is not None else None)
        )

        self.client: genai.Client = client

    def create_chat(self):
        """Create a new Chat with gemini, seeded with the windowed history."""
        return self.client.chats.create(
                model=self.model,
                config=self.config,
                history=history_to_contents(self.buffer)
                )

    async def chat(self, prompt: str) -> str:
        """
        Answers one user message and records the exchange in the conversation buffer.
        An empty model answer is replaced by EMPTY_ANSWER_FALLBACK and not recorded.

        Raises:
            ValueError: if the prompt is blank.
            Exception: errors from the Gemini API are logged and re-raised to the caller.
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt cannot be empty.")

        try:
            chat = self.create_chat()
            answer = await self.process_chat_turn(chat, prompt)
        except Exception as e:
            logger.error(f"Failed to answer!\n{e}")
            raise

        if not answer.strip():
            # Gemini rejects empty text parts, so an empty answer must never enter the history.
            logger.warning(f"Model returned no text for prompt: {prompt!r}")
            return EMPTY_ANSWER_FALLBACK

        self.buffer.add_user(prompt)
        self.buffer.add_assistant(answer)
        return answer

    async def process_chat_turn(self, chat, user_prompt: str) -> str:
        """
        Processes a single turn of a chat, handling user input and any subsequent
        function calls requested by the model.

        Args:
            chat: The active chat session object.
            user_prompt: The user's message.

        Returns:
            The final text response from the LLM after all processing is complete.
        """
        response = chat.send_message(user_prompt)

        # This loop continues as long as the model requests function calls.
        for _ in range(MAX_TOOL_ROUNDS):
            # Search for a function call in any part of the response
            target_part = next((p for p in (response.parts or []) if p.function_call), None)
            if not target_part:
                # If there's no function call, we have our final text response.
                break

            # --- Execute the function call ---
            function_call = target_part.function_call
            function_name = function_call.name
            args = dict(function_call.args or {})
            logger.info(f"LLM wants to call function: {function_name}({args})")

            # The gateway turns every failure into an error string, so the model
            # always gets a result it can explain to the user.
            function_result = self.gateway.invoke(function_name, **args)

            response = chat.send_message(
                types.Part(function_response=types.FunctionResponse(
                    name=function_name,
                    response={"result": function_result},
                ))
            )
        else:
            if any(p.function_call for p in (response.parts or [])):
                logger.warning(f"Model still requested tools after {MAX_TOOL_ROUNDS} rounds, stopping.")

        # After the loop, return the final text response from the LLM.
        return "".join([p.text for p in response.parts if p.text]) if response.parts else ""
