"""The ``searchWeb`` tool -- lets the model pull live web results mid-answer."""

from typing import Any, List, Mapping, Optional

from src.tools.base import Tool
from src.utils.errors import SearchError, ToolError
from src.utils.logger import get_logger
from src.web.search_provider import SearchOptions, SearchProvider, SearchResult
from src.web.tavily_search import TavilySearch

log = get_logger(__name__)

SEARCH_OPTIONS = SearchOptions(
    search_depth="advanced",
    max_results=5,
    include_answer="basic",
    include_raw_content=False,
    include_images=False,
)


def format_results(results: List[SearchResult]) -> str:
    """Render results as a numbered block the model can cite with [n]."""
    return "".join(
        f"[{i}] {r.title}\nURL: {r.url}\nContent: {r.content}\n\n"
        for i, r in enumerate(results, 1)
    )


class SearchWebTool(Tool):
    """Adapts a ``SearchProvider`` into a model-callable tool."""

    name = "searchWeb"
    description = (
        "Search the web for current information to answer user queries. "
        "Use this when you need up-to-date or factual information."
    )
    parameters = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "The search query to look up",
            },
        },
        "required": ["query"],
    }

    def __init__(self, provider: SearchProvider):
        self._provider = provider

    def invoke(self, arguments: Mapping[str, Any]) -> str:
        query = arguments.get("query")
        if not isinstance(query, str) or not query.strip():
            raise ToolError("searchWeb requires a non-empty 'query' string")

        log.info("Model requested web search: %r", query)
        try:
            results = self._provider.search(query, SEARCH_OPTIONS)
        except SearchError as exc:
            raise SearchError(f"search error: {exc}") from exc
        return format_results(results)


def build_search_tool(api_key: str | None) -> Optional[SearchWebTool]:
    """Build the Tavily-backed search tool, or None when it is unavailable."""
    if not api_key:
        log.info("No Tavily key; search tool disabled")
        return None
    try:
        return SearchWebTool(TavilySearch(api_key=api_key))
    except Exception:
        log.warning("Could not create Tavily client; search tool disabled", exc_info=True)
        return None
