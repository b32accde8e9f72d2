"""CLI module -- the interactive terminal shell."""

from src.cli.shell import InteractiveShell

__all__ = ["InteractiveShell"]
