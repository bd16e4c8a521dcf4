"""Admin commands for init and configuration."""

import sqlite3
import sys
from pathlib import Path

from purse.commands.common import console
from purse.config import create_default_config, get_config_path, load_config, set_option
from purse.messages import CATALOGUE, Messages
from purse.store.schema import get_db_path, init_database


def run_full_init(db_path: Path, config_path: Path) -> None:
    """Initialize new database and config."""
    console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
    init_database(db_path)
    console.print("[green]✓[/green] Database initialized")

    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize purse database and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'purse init --force' to overwrite[/yellow]")
            sys.exit(1)

        if force and db_exists:
            db_path.unlink()

        run_full_init(db_path, config_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def config_command(notifications: bool | None = None, language: str | None = None) -> None:
    """Show or update user configuration."""
    config_path = get_config_path()

    try:
        if notifications is not None:
            set_option("show_notifications", notifications, config_path)
        if language is not None:
            if language not in CATALOGUE:
                console.print(f"[red]Unknown language '{language}' (choose from {', '.join(CATALOGUE)})[/red]")
                sys.exit(1)
            set_option("language", language, config_path)

        config = load_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    messages = Messages(config["language"])
    state = "on" if config["show_notifications"] else "off"
    console.print(f"[bold]{messages.localize('ShowNotifications')}:[/bold] {state}")
    console.print(f"[dim]{messages.localize('ShowNotificationsHint')}[/dim]")
    console.print(f"[bold]Language:[/bold] {config['language']}")
    console.print(f"[bold]Tracked actor type:[/bold] {config['actor_type']}")
    console.print(f"[bold]Quiet period:[/bold] {config['debounce_ms']} ms")
