"""Conversation agent -- owns the chat history for one session."""

from typing import List, Optional, Protocol, Sequence, Tuple

from src.agent.prompts import CHAT_SYSTEM_PROMPT
from src.llm.messages import Message, Role
from src.tools.base import Tool
from src.utils.logger import get_logger

log = get_logger(__name__)


class ChatModel(Protocol):
    """Anything with the ``BaseLLM.generate`` signature."""

    def generate(
        self,
        messages: Sequence[Message],
        system_prompt: Optional[str] = None,
        tools: Sequence[Tool] = (),
    ) -> str:
        ...


class ConversationAgent:
    """Multi-turn chat over a model backend, with optional tools.

    History is append-only and sent whole on every turn. It is never trimmed;
    only ``clear_history`` empties it.
    """

    def __init__(
        self,
        llm: ChatModel,
        tools: Sequence[Tool] = (),
        system_prompt: str = CHAT_SYSTEM_PROMPT,
    ):
        self._llm = llm
        self._tools: Tuple[Tool, ...] = tuple(tools)
        self._system_prompt = system_prompt
        self._history: List[Message] = []

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    @property
    def tools(self) -> Tuple[Tool, ...]:
        return self._tools

    @property
    def history(self) -> Tuple[Message, ...]:
        return tuple(self._history)

    def send(self, query: str) -> str:
        """Ask *query* with the full history and return the model's answer.

        The user message is recorded before the model is called and stays in
        history if the call raises ``GenerationError``.
        """
        self._history.append(Message(Role.USER, query))
        log.info("Sending turn %d (%d messages in history)",
                 (len(self._history) + 1) // 2, len(self._history))
        text = self._llm.generate(self.history, self._system_prompt, self._tools)
        self._history.append(Message(Role.MODEL, text))
        return text

    def clear_history(self) -> None:
        self._history = []
        log.info("Chat history cleared")
