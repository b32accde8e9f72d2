"""Unit tests for the Tavily search client."""

from unittest.mock import patch

import pytest

from src.utils.config import Settings
from src.utils.errors import ConfigError, SearchError
from src.web.search_provider import SearchOptions, SearchQuery
from src.web.tavily_search import TavilySearch

RAW = {
    "answer": "A short answer",
    "results": [
        {"title": "First", "url": "https://a.example", "content": "alpha", "score": 0.9},
        {"title": "Second", "url": "https://b.example", "content": "beta"},
    ],
}


def test_search_normalises_results():
    with patch("src.web.tavily_search.TavilyClient") as mock_cls:
        mock_cls.return_value.search.return_value = RAW
        results = TavilySearch(api_key="t").search("what is up")

    assert [r.title for r in results] == ["First", "Second"]
    assert results[0].url == "https://a.example"
    assert results[0].content == "alpha"
    assert results[0].score == 0.9
    assert results[1].score is None


def test_default_options_sent_to_backend():
    with patch("src.web.tavily_search.TavilyClient") as mock_cls:
        mock_cls.return_value.search.return_value = {"results": []}
        TavilySearch(api_key="t").search("q")
        kwargs = mock_cls.return_value.search.call_args.kwargs

    assert kwargs == {
        "query": "q",
        "search_depth": "advanced",
        "max_results": 5,
        "include_answer": "basic",
        "include_raw_content": False,
        "include_images": False,
    }


@pytest.mark.parametrize("max_results", [0, -1, -20])
def test_non_positive_max_results_behaves_like_five(max_results):
    with patch("src.web.tavily_search.TavilyClient") as mock_cls:
        mock_cls.return_value.search.return_value = {"results": []}
        client = TavilySearch(api_key="t")
        client.search("q", SearchOptions(max_results=max_results))
        client.search("q", SearchOptions(max_results=5))
        first, second = mock_cls.return_value.search.call_args_list

    assert first.kwargs == second.kwargs


def test_explicit_max_results_passed_through():
    params = SearchQuery("q", SearchOptions(max_results=3)).to_params()
    assert params["max_results"] == 3


def test_backend_failure_raises_search_error():
    with patch("src.web.tavily_search.TavilyClient") as mock_cls:
        mock_cls.return_value.search.side_effect = RuntimeError("quota exceeded")
        with pytest.raises(SearchError, match="quota exceeded"):
            TavilySearch(api_key="t").search("q")


def test_missing_results_key_yields_empty_list():
    with patch("src.web.tavily_search.TavilyClient") as mock_cls:
        mock_cls.return_value.search.return_value = {}
        assert TavilySearch(api_key="t").search("q") == []


def test_missing_key_raises_config_error():
    with patch("src.web.tavily_search.settings", Settings(tavily_api_key="")), \
            patch("src.web.tavily_search.TavilyClient") as mock_cls:
        with pytest.raises(ConfigError):
            TavilySearch(api_key="")
        mock_cls.assert_not_called()
