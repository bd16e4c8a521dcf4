"""CLI entry point for purse."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from purse.commands.actors import add_command, list_command, pay_command, remove_command, set_command
from purse.commands.admin import config_command, init_command
from purse.commands.exchange import exchange_command
from purse.domain.models import Purse

app = typer.Typer(
    name="purse",
    help="Coin purse keeper - exchanges character coins into the largest denominations",
    add_completion=False,
)


def setup_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Coin purse keeper - exchanges character coins into the largest denominations."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize purse database and configuration."""
    init_command(force)


@app.command()
def add(
    name: str,
    actor_type: str = typer.Option("character", "--type", "-t", help="Actor type"),
    gold: int = typer.Option(0, "--gold", "-g", help="Gold coins"),
    silver: int = typer.Option(0, "--silver", "-s", help="Silver coins"),
    copper: int = typer.Option(0, "--copper", "-c", help="Copper coins"),
    nickel: int = typer.Option(0, "--nickel", "-n", help="Nickel coins"),
) -> None:
    """Add an actor with a starting purse."""
    add_command(name, actor_type, Purse(gold=gold, silver=silver, copper=copper, nickel=nickel))


@app.command()
def remove(name: str) -> None:
    """Remove an actor."""
    remove_command(name)


@app.command(name="list")
def list_actors() -> None:
    """List actors and their purses."""
    list_command()


@app.command(name="set")
def set_coins(
    name: str,
    gold: int = typer.Option(None, "--gold", "-g", help="Gold coins"),
    silver: int = typer.Option(None, "--silver", "-s", help="Silver coins"),
    copper: int = typer.Option(None, "--copper", "-c", help="Copper coins"),
    nickel: int = typer.Option(None, "--nickel", "-n", help="Nickel coins"),
) -> None:
    """Set coin counts; the purse is exchanged automatically afterwards."""
    set_command(name, {"gold": gold, "silver": silver, "copper": copper, "nickel": nickel})


@app.command()
def pay(
    name: str,
    gold: int = typer.Option(None, "--gold", "-g", help="Gold coins to add (negative to spend)"),
    silver: int = typer.Option(None, "--silver", "-s", help="Silver coins to add (negative to spend)"),
    copper: int = typer.Option(None, "--copper", "-c", help="Copper coins to add (negative to spend)"),
    nickel: int = typer.Option(None, "--nickel", "-n", help="Nickel coins to add (negative to spend)"),
) -> None:
    """Add or spend coins; the purse is exchanged automatically afterwards."""
    pay_command(name, {"gold": gold, "silver": silver, "copper": copper, "nickel": nickel})


@app.command()
def exchange(
    name: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Exchange an actor's coins into the largest denominations."""
    exchange_command(name, yes)


@app.command()
def config(
    notifications: bool = typer.Option(
        None, "--notifications/--no-notifications", help="Show a message for automatic exchanges"
    ),
    language: str = typer.Option(None, "--language", "-l", help="Message language (en, de)"),
) -> None:
    """Show or update your configuration."""
    config_command(notifications, language)


if __name__ == "__main__":
    app()
