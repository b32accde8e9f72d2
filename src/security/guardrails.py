"""Input validation for queries entering the askQuestion flow."""

from typing import Optional, Tuple

from src.utils.config import settings

MIN_QUERY_LENGTH = 1


def validate_query(query: str) -> Tuple[bool, Optional[str]]:
    """Return (is_valid, reason) for a flow query."""
    if not query or len(query.strip()) < MIN_QUERY_LENGTH:
        return False, "Query is empty."
    if len(query) > settings.max_query_length:
        return False, f"Query exceeds max length ({settings.max_query_length} chars)."
    return True, None
