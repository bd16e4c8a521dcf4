"""Notification surface for conversion results."""

from typing import Protocol

from rich.console import Console


class Notifier(Protocol):
    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...


class ConsoleNotifier:
    """Prints notifications to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {message}[/yellow]")
