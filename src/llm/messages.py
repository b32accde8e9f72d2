"""Chat message model shared by the agent and the LLM wrappers."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


# Chat completions role names
_API_ROLES = {Role.USER: "user", Role.MODEL: "assistant"}


@dataclass(frozen=True)
class Message:
    """One turn of the conversation. Immutable once created."""

    role: Role
    content: str

    def to_openai(self) -> Dict[str, str]:
        return {"role": _API_ROLES[self.role], "content": self.content}
