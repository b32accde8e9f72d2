"""Agent module -- the chat agent and the askQuestion LangGraph flow."""

from src.agent.conversation import ConversationAgent
from src.agent.graph import FLOW_NAME, ask_question, build_graph
from src.agent.state import FlowState

__all__ = ["ConversationAgent", "FLOW_NAME", "FlowState", "ask_question", "build_graph"]
