"""Base LLM wrapper -- model-agnostic chat completions with tool calls.

Any OpenAI-compatible API can be used by passing a different model name and
base URL. Defaults point at Gemini's OpenAI-compatible endpoint and are read
from ``settings`` but can be overridden per-instance.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence

from openai import OpenAI, OpenAIError

from src.llm.messages import Message
from src.tools.base import Tool
from src.utils.config import settings
from src.utils.errors import GenerationError, ToolError
from src.utils.logger import get_logger

log = get_logger(__name__)


class BaseLLM:
    """Thin wrapper around the chat completions API with tool round-trips."""

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        max_turns: int | None = None,
    ):
        self.model = model or settings.gemini_model
        self.max_turns = max_turns if max_turns is not None else settings.max_tool_turns
        self._client = OpenAI(
            api_key=api_key or settings.gemini_api_key,
            base_url=base_url or settings.gemini_base_url,
        )

    def generate(
        self,
        messages: Sequence[Message],
        system_prompt: Optional[str] = None,
        tools: Sequence[Tool] = (),
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """Send the conversation to the model and return the final answer text.

        When the model asks for tools, each call is executed and its output
        fed back before asking again, up to ``max_turns`` rounds. Whether a
        tool runs at all is up to the model.
        """
        payload: List[Dict[str, Any]] = []
        if system_prompt:
            payload.append({"role": "system", "content": system_prompt})
        payload.extend(m.to_openai() for m in messages)

        by_name = {t.name: t for t in tools}
        if tools:
            kwargs["tools"] = [t.to_openai_schema() for t in tools]

        for turn in range(self.max_turns + 1):
            try:
                resp = self._client.chat.completions.create(
                    model=self.model,
                    messages=payload,
                    temperature=temperature,
                    **kwargs,
                )
            except OpenAIError as exc:
                raise GenerationError(f"generate error: {exc}") from exc

            if not resp.choices:
                raise GenerationError("generate error: empty response")
            msg = resp.choices[0].message
            calls = msg.tool_calls or []
            if not calls:
                return msg.content or ""

            if turn == self.max_turns:
                raise GenerationError(
                    f"generate error: exceeded {self.max_turns} tool turns without an answer"
                )

            log.debug("Turn %d: model requested %d tool call(s)", turn + 1, len(calls))
            payload.append(
                {
                    "role": "assistant",
                    "content": msg.content,
                    "tool_calls": [
                        {
                            "id": c.id,
                            "type": "function",
                            "function": {
                                "name": c.function.name,
                                "arguments": c.function.arguments,
                            },
                        }
                        for c in calls
                    ],
                }
            )
            for c in calls:
                payload.append(
                    {
                        "role": "tool",
                        "tool_call_id": c.id,
                        "content": _run_tool(by_name, c.function.name, c.function.arguments),
                    }
                )

        # range() always returns or raises inside the loop
        raise GenerationError("generate error: no answer produced")


def _run_tool(tools: Mapping[str, Tool], name: str, raw_arguments: Optional[str]) -> str:
    """Execute one tool call; failures become an error string for the model."""
    tool = tools.get(name)
    if tool is None:
        log.warning("Model requested unknown tool %r", name)
        return f"Error: unknown tool '{name}'"
    try:
        arguments = json.loads(raw_arguments) if raw_arguments else {}
    except json.JSONDecodeError:
        log.warning("Malformed arguments for tool %s: %s", name, raw_arguments)
        return f"Error: malformed arguments for tool '{name}'"
    if not isinstance(arguments, dict):
        return f"Error: arguments for tool '{name}' must be a JSON object"
    try:
        return tool.invoke(arguments)
    except ToolError as exc:
        log.warning("Tool %s failed: %s", name, exc)
        return f"Error: {exc}"
    except Exception as exc:
        log.warning("Tool %s crashed: %r", name, exc, exc_info=True)
        return f"Error: {exc}"
