"""Conversation LLM -- generates the user-facing answers.

Default model: gemini-2.5-pro (configurable via GEMINI_MODEL).
"""

from typing import Optional, Sequence

from src.llm.base import BaseLLM
from src.llm.messages import Message
from src.tools.base import Tool
from src.utils.config import settings


class ConversationLLM(BaseLLM):
    """Generates final responses shown to the user."""

    def __init__(self, model: str | None = None, **kwargs):
        super().__init__(model=model or settings.gemini_model, **kwargs)

    def generate(
        self,
        messages: Sequence[Message],
        system_prompt: Optional[str] = None,
        tools: Sequence[Tool] = (),
        **kwargs,
    ) -> str:
        kwargs.setdefault("temperature", settings.gemini_temperature)
        return super().generate(messages, system_prompt, tools, **kwargs)
