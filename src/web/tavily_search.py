"""Tavily Search implementation (our sole web search provider)."""

from typing import List, Optional

from tavily import TavilyClient

from src.utils.config import settings
from src.utils.errors import ConfigError, SearchError
from src.utils.logger import get_logger
from src.web.search_provider import SearchOptions, SearchProvider, SearchQuery, SearchResult

log = get_logger(__name__)


class TavilySearch(SearchProvider):
    """Web search via the Tavily API.

    Single-shot: no retries and no caching. Any failure of the underlying
    client is re-raised as ``SearchError`` so the caller decides what to do.
    """

    def __init__(self, api_key: str | None = None):
        key = api_key or settings.tavily_api_key
        if not key:
            raise ConfigError("TAVILY_API_KEY is not set")
        self._client = TavilyClient(api_key=key)

    def search(
        self, query: str, options: Optional[SearchOptions] = None
    ) -> List[SearchResult]:
        """Execute a Tavily search and normalise results."""
        params = SearchQuery(query=query, options=options or SearchOptions()).to_params()
        log.info("Tavily search: %r (depth=%s, max_results=%d)",
                 query, params["search_depth"], params["max_results"])
        try:
            raw = self._client.search(**params)
        except Exception as exc:
            log.debug("Tavily search failed for query %r", query, exc_info=True)
            raise SearchError(f"Tavily search failed: {exc}") from exc

        results: List[SearchResult] = []
        for item in raw.get("results", []):
            results.append(
                SearchResult(
                    title=item.get("title", ""),
                    url=item.get("url", ""),
                    content=item.get("content", ""),
                    score=item.get("score"),
                )
            )
        log.debug("Tavily returned %d results", len(results))
        return results
