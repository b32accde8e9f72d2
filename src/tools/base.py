"""Tool capability exposed to the model backend.

A tool is a named, described callable. The model decides when to call it;
the orchestration code only declares it and executes the calls it receives.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping


class Tool(ABC):
    """Abstract tool -- subclasses set ``name``, ``description`` and ``parameters``."""

    name: str = ""
    description: str = ""
    # JSON schema for the arguments object; subclasses assign their own
    parameters: Dict[str, Any]

    @abstractmethod
    def invoke(self, arguments: Mapping[str, Any]) -> str:
        """Run the tool and return text for the model, or raise ``ToolError``."""
        ...

    def to_openai_schema(self) -> Dict[str, Any]:
        """Function-tool declaration for the chat completions API."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": getattr(self, "parameters", None)
                or {"type": "object", "properties": {}},
            },
        }
