"""Unit tests for flow query validation."""

from src.security.guardrails import validate_query
from src.utils.config import settings


class TestValidateQuery:
    def test_valid_query(self):
        ok, reason = validate_query("What is the weather in Paris?")
        assert ok is True
        assert reason is None

    def test_empty_query(self):
        ok, reason = validate_query("")
        assert ok is False
        assert "empty" in reason.lower()

    def test_whitespace_only(self):
        ok, _ = validate_query("   \n ")
        assert ok is False

    def test_single_character_is_enough(self):
        ok, _ = validate_query("a")
        assert ok is True

    def test_too_long(self):
        ok, reason = validate_query("a" * (settings.max_query_length + 1))
        assert ok is False
        assert "length" in reason.lower()

    def test_exactly_max_length(self):
        ok, _ = validate_query("a" * settings.max_query_length)
        assert ok is True
