"""Unit tests for the Tool base class."""

from src.tools.base import Tool


class BareTool(Tool):
    name = "bare"
    description = "no arguments"

    def invoke(self, arguments):
        return "ok"


def test_default_parameters_schema():
    schema = BareTool().to_openai_schema()
    assert schema["function"]["name"] == "bare"
    assert schema["function"]["parameters"] == {"type": "object", "properties": {}}


def test_default_schema_is_not_shared():
    first = BareTool().to_openai_schema()["function"]["parameters"]
    first["properties"]["injected"] = {"type": "string"}
    second = BareTool().to_openai_schema()["function"]["parameters"]
    assert second == {"type": "object", "properties": {}}
    assert not hasattr(Tool, "parameters")
