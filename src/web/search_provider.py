"""Abstract search interface and the search request/result dataclasses."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_MAX_RESULTS = 5


@dataclass(frozen=True)
class SearchOptions:
    """Knobs passed to the search backend alongside the query text."""

    search_depth: str = "advanced"
    max_results: int = DEFAULT_MAX_RESULTS
    include_answer: str = "basic"
    include_raw_content: bool = False
    include_images: bool = False


@dataclass(frozen=True)
class SearchQuery:
    """One search request, built fresh for every call."""

    query: str
    options: SearchOptions = field(default_factory=SearchOptions)

    def to_params(self) -> Dict[str, Any]:
        """Render the keyword arguments the backend client expects."""
        max_results = self.options.max_results
        if max_results <= 0:
            max_results = DEFAULT_MAX_RESULTS
        return {
            "query": self.query,
            "search_depth": self.options.search_depth,
            "max_results": max_results,
            "include_answer": self.options.include_answer,
            "include_raw_content": self.options.include_raw_content,
            "include_images": self.options.include_images,
        }


@dataclass
class SearchResult:
    """A single web search result."""

    title: str
    url: str
    content: str
    score: Optional[float] = None


class SearchProvider(ABC):
    """Abstract interface -- swap implementations without touching callers."""

    @abstractmethod
    def search(
        self, query: str, options: Optional[SearchOptions] = None
    ) -> List[SearchResult]:
        """Return results for *query* in rank order, or raise ``SearchError``."""
        ...
