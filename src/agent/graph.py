"""LangGraph wiring for the askQuestion flow.

The same question-answering behaviour as the interactive shell, but single
turn and driven from outside (``langgraph dev`` reads ``langgraph.json``):

  validate_query -> generate_answer -> END
"""

from typing import Sequence

from langgraph.graph import END, StateGraph

from src.agent.nodes import make_generate_answer_node, validate_query_node
from src.agent.state import FlowState
from src.tools.base import Tool

FLOW_NAME = "askQuestion"


def build_graph(llm, tools: Sequence[Tool] = ()):
    """Construct and compile the askQuestion graph.  Returns a runnable."""
    g = StateGraph(FlowState)

    # -- add nodes ----------------------------------------------------------
    g.add_node("validate_query", validate_query_node)
    g.add_node("generate_answer", make_generate_answer_node(llm, tools))

    # -- edges --------------------------------------------------------------
    g.set_entry_point("validate_query")
    g.add_edge("validate_query", "generate_answer")
    g.add_edge("generate_answer", END)

    return g.compile(name=FLOW_NAME)


def make_flow():
    """Zero-argument factory used by the LangGraph dev server."""
    from src.llm.conversation import ConversationLLM
    from src.tools.search_tool import build_search_tool
    from src.utils.config import settings

    tool = build_search_tool(settings.tavily_api_key)
    return build_graph(ConversationLLM(), [tool] if tool else [])


def ask_question(flow, query: str) -> str:
    """Run *query* through a compiled flow and return the answer text."""
    result = flow.invoke({"query": query})
    return result.get("response") or ""
