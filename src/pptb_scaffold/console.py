"""Shared rich console for user-facing output."""

from rich.console import Console

console = Console(highlight=False)
