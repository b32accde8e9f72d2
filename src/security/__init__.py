"""Security module -- input validation."""

from src.security.guardrails import validate_query

__all__ = ["validate_query"]
