"""LLM module -- model-agnostic chat wrappers and the message model."""

from src.llm.base import BaseLLM
from src.llm.conversation import ConversationLLM
from src.llm.messages import Message, Role

__all__ = ["BaseLLM", "ConversationLLM", "Message", "Role"]
