"""Flow state schema -- the TypedDict that flows through the askQuestion graph."""

from typing import Optional, TypedDict


class FlowState(TypedDict, total=False):
    """State carried across the askQuestion graph.

    Every node receives the full state and returns a *partial* dict with only
    the keys it wants to update.
    """

    # Input
    query: str

    # Output
    response: Optional[str]
