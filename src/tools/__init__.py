"""Tools module -- capabilities the model backend may call during generation."""

from src.tools.base import Tool
from src.tools.search_tool import SearchWebTool, build_search_tool, format_results

__all__ = ["Tool", "SearchWebTool", "build_search_tool", "format_results"]
