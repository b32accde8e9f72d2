"""CLI entry point for the web-search chat assistant."""

import argparse
import sys
import threading
from typing import List, NoReturn, Optional

from rich.console import Console

from src.agent.conversation import ConversationAgent
from src.agent.graph import build_graph
from src.cli.shell import InteractiveShell
from src.llm.conversation import ConversationLLM
from src.tools.search_tool import build_search_tool
from src.utils.config import Settings, settings
from src.utils.logger import get_logger, set_log_level

log = get_logger(__name__)

SERVE_MODE = "serve"

console = Console()


def fail(message: str, tip: str) -> NoReturn:
    """Print a startup error with a hint and exit with status 1."""
    console.print(f"\n[red]✗ Error: {message}[/red]")
    console.print(f"\n[yellow]Tip: {tip}[/yellow]")
    sys.exit(1)


def idle() -> None:
    """Block forever so an external dev server can drive the registered flow."""
    threading.Event().wait()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Chat with Gemini, grounded in live web search")
    parser.add_argument("mode", nargs="?", default="",
                        help="'serve' registers the askQuestion flow and waits; "
                             "anything else starts the interactive shell")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args, _unknown = parser.parse_known_args(argv)
    return args


def main(argv: Optional[List[str]] = None, config: Optional[Settings] = None) -> int:
    args = parse_args(argv)
    config = config or settings

    if args.verbose:
        set_log_level("DEBUG")

    if not config.gemini_api_key:
        fail("GEMINI_API_KEY is not set",
             "Make sure to set your GEMINI_API_KEY in the .env file")

    llm = ConversationLLM(
        model=config.gemini_model,
        api_key=config.gemini_api_key,
        base_url=config.gemini_base_url,
        max_turns=config.max_tool_turns,
    )

    # Search is optional here; the interactive mode insists on it below.
    search_tool = build_search_tool(config.tavily_api_key)
    tools = [search_tool] if search_tool else []

    flow = build_graph(llm, tools)
    log.info("Registered flow %s with %d tool(s)", flow.name, len(tools))

    if args.mode == SERVE_MODE:
        console.print("\n[cyan]Flows registered. Waiting for the LangGraph dev server...[/cyan]")
        try:
            idle()
        except KeyboardInterrupt:
            pass
        return 0

    if not config.tavily_api_key or search_tool is None:
        fail("TAVILY_API_KEY is not set",
             "Make sure to set your TAVILY_API_KEY in the .env file")

    agent = ConversationAgent(llm, tools)
    try:
        InteractiveShell(agent, console=console).run()
    except Exception as exc:
        log.debug("Shell crashed", exc_info=True)
        fail(str(exc), "Run with --verbose for details")
    return 0


if __name__ == "__main__":
    sys.exit(main())
