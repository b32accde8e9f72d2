"""Interactive terminal loop in front of a ``ConversationAgent``."""

from typing import Callable, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from src.agent.conversation import ConversationAgent
from src.utils.errors import GenerationError, ReadlineError
from src.utils.logger import get_logger

log = get_logger(__name__)

PROMPT = '[bold green]Ask a question (or type "exit" to quit): [/bold green]'
EXIT_COMMANDS = ("exit", "quit")
CLEAR_COMMAND = "clear"
USAGE_HINT = "Type a question or use: exit, quit, clear, Ctrl+C"


class InteractiveShell:
    """Read a line, dispatch control commands, otherwise ask the agent.

    ``read_line`` takes the prompt and returns one line; it defaults to
    ``console.input`` and may raise ``EOFError`` or ``KeyboardInterrupt``.
    """

    def __init__(
        self,
        agent: ConversationAgent,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.agent = agent
        self.console = console or Console()
        self._read_line = read_line or self.console.input

    def print_welcome(self) -> None:
        self.console.print(
            Panel(
                "Type your questions and get AI-powered answers with sources!\n"
                "Chat history is maintained during this session.",
                title="Web Search Chat - Interactive Mode",
                border_style="bold cyan",
            )
        )

    def read(self) -> str:
        try:
            return self._read_line(PROMPT)
        except (EOFError, KeyboardInterrupt) as exc:
            raise ReadlineError("input closed") from exc

    def handle_line(self, line: str) -> bool:
        """Process one line of input. Returns False when the loop should stop."""
        text = line.strip()

        if text in EXIT_COMMANDS:
            self.console.print("\n[yellow]Exiting. Goodbye![/yellow]\n")
            return False

        if not text:
            self.console.print(f"[bright_black]{USAGE_HINT}[/bright_black]")
            return True

        if text == CLEAR_COMMAND:
            self.agent.clear_history()
            self.console.print("[green]Chat history cleared![/green]")
            return True

        try:
            with self.console.status("Thinking...", spinner="dots"):
                answer = self.agent.send(text)
        except GenerationError as exc:
            log.info("Generation failed: %s", exc)
            self.console.print(f"[red]Error: {escape(str(exc))}[/red]")
            return True
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Interrupted. Goodbye![/yellow]\n")
            return False

        self.console.print("\n[bold cyan]Answer:[/bold cyan]")
        self.console.print(Markdown(answer))
        self.console.print()
        return True

    def run(self) -> None:
        """Loop until exit/quit or end of input."""
        self.print_welcome()
        while True:
            try:
                line = self.read()
            except ReadlineError:
                self.console.print()
                break
            if not self.handle_line(line):
                break
