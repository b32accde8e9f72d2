"""Web module -- search backend abstraction and the Tavily client."""

from src.web.search_provider import SearchOptions, SearchProvider, SearchQuery, SearchResult
from src.web.tavily_search import TavilySearch

__all__ = ["SearchOptions", "SearchProvider", "SearchQuery", "SearchResult", "TavilySearch"]
