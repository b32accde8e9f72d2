"""Node implementations for the askQuestion graph.

Each node receives the full ``FlowState`` and returns a *partial* dict with
only the keys it updates. Nodes that need the model are built by factories
so the graph never reaches for module-level singletons.
"""

from typing import Any, Callable, Dict, Sequence

from src.agent.prompts import FLOW_SYSTEM_PROMPT, FLOW_USER_TEMPLATE
from src.agent.state import FlowState
from src.llm.messages import Message, Role
from src.security.guardrails import validate_query
from src.tools.base import Tool
from src.utils.errors import InputValidationError
from src.utils.logger import get_logger

log = get_logger(__name__)


def validate_query_node(state: FlowState) -> Dict[str, Any]:
    """Reject empty or oversized queries before any network call."""
    query = state.get("query", "")
    ok, reason = validate_query(query)
    if not ok:
        raise InputValidationError(reason)
    return {"query": query.strip()}


def make_generate_answer_node(llm, tools: Sequence[Tool] = ()) -> Callable[[FlowState], Dict[str, Any]]:
    """Return a node that answers the query in a single, history-free turn."""
    tools = tuple(tools)

    def generate_answer_node(state: FlowState) -> Dict[str, Any]:
        log.info("askQuestion: generating answer (%d tool(s) available)", len(tools))
        prompt = FLOW_USER_TEMPLATE.format(query=state["query"])
        text = llm.generate([Message(Role.USER, prompt)], FLOW_SYSTEM_PROMPT, tools)
        return {"response": text}

    return generate_answer_node
