"""Unit tests for the askQuestion LangGraph flow."""

import pytest

from src.agent.graph import FLOW_NAME, ask_question, build_graph
from src.agent.prompts import FLOW_SYSTEM_PROMPT
from src.utils.config import settings
from src.utils.errors import InputValidationError


class FakeLLM:
    def __init__(self):
        self.calls = []

    def generate(self, messages, system_prompt=None, tools=()):
        self.calls.append((list(messages), system_prompt, tuple(tools)))
        return "flow answer"


def test_flow_answers_single_turn():
    llm = FakeLLM()
    flow = build_graph(llm, ["tool-sentinel"])

    assert ask_question(flow, "  capital of France?  ") == "flow answer"

    messages, system_prompt, tools = llm.calls[0]
    assert len(messages) == 1
    assert messages[0].content == "User Query: capital of France?"
    assert system_prompt == FLOW_SYSTEM_PROMPT
    assert tools == ("tool-sentinel",)


def test_flow_keeps_no_history_between_runs():
    llm = FakeLLM()
    flow = build_graph(llm)
    ask_question(flow, "one")
    ask_question(flow, "two")
    assert [len(call[0]) for call in llm.calls] == [1, 1]


def test_flow_name():
    assert build_graph(FakeLLM()).name == FLOW_NAME == "askQuestion"


@pytest.mark.parametrize("query", ["", "   "])
def test_empty_query_rejected(query):
    llm = FakeLLM()
    with pytest.raises(InputValidationError):
        ask_question(build_graph(llm), query)
    assert llm.calls == []


def test_oversized_query_rejected():
    llm = FakeLLM()
    with pytest.raises(InputValidationError, match="max length"):
        ask_question(build_graph(llm), "x" * (settings.max_query_length + 1))
    assert llm.calls == []
