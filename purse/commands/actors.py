"""Actor commands (add, remove, list, set, pay)."""

import asyncio
import sqlite3
import sys
import tomllib

from rich.table import Table

from purse.commands.common import console, current_user, require_actor, require_database, with_office
from purse.domain.coins import format_purse, to_base_unit
from purse.domain.models import Purse
from purse.errors import PurseError
from purse.exchange import ExchangeOffice
from purse.store.actors import ActorStore
from purse.store.queries import delete_actor, insert_actor
from purse.store.schema import get_db_path


def add_command(name: str, actor_type: str, money: Purse) -> None:
    """Add an actor with a starting purse."""
    require_database()

    try:
        inserted, actor_id = insert_actor(name, actor_type, money, get_db_path())
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not inserted:
        console.print(f"[yellow]Actor already exists (ID: {actor_id})[/yellow]")
        sys.exit(0)

    console.print(f"[green]✓[/green] Added {name} ({actor_type})")
    console.print(f"  ID: {actor_id}")
    console.print(f"  Purse: {format_purse(money)}")


def remove_command(name: str) -> None:
    """Remove an actor."""
    require_database()

    try:
        store = ActorStore(get_db_path())
        actor = require_actor(store, name)
        delete_actor(actor.id, store.db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except PurseError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Removed {actor.name}")


def list_command() -> None:
    """List actors and their purses."""
    require_database()

    try:
        actors = ActorStore(get_db_path()).all()
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if not actors:
        console.print("[yellow]No actors found[/yellow]")
        return

    table = Table(title=f"Actors ({len(actors)})")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Gold", justify="right")
    table.add_column("Silver", justify="right")
    table.add_column("Copper", justify="right")
    table.add_column("Nickel", justify="right")
    table.add_column("Total (N)", justify="right", style="dim")

    for actor in actors:
        money = actor.money
        total = to_base_unit(money)
        total_display = f"[red]{total}[/red]" if total < 0 else str(total)
        table.add_row(
            actor.name,
            actor.type,
            str(money.gold),
            str(money.silver),
            str(money.copper),
            str(money.nickel),
            total_display,
        )

    console.print(table)


def _edit_purse(name: str, edit: str, changes: dict[str, int | None]) -> None:
    """Apply a user edit to a purse and wait for the automatic exchange.

    Args:
        name: Actor name or ID.
        edit: "set" to overwrite the given fields, "pay" to add them.
        changes: Field values; None leaves a field untouched.
    """
    require_database()

    async def work(office: ExchangeOffice) -> str:
        actor = require_actor(office.store, name)
        current = actor.money.as_dict()
        for field, value in changes.items():
            if value is None:
                continue
            current[field] = value if edit == "set" else current[field] + value
        await office.store.update_money(actor.id, Purse(**current), user_id=current_user())
        return actor.id

    try:
        actor_id = asyncio.run(with_office(work))
        actor = ActorStore(get_db_path()).get(actor_id)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except PurseError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    if actor is not None:
        console.print(f"[bold]{actor.name}:[/bold] {format_purse(actor.money)}")


def set_command(name: str, changes: dict[str, int | None]) -> None:
    """Overwrite coin counts."""
    _edit_purse(name, "set", changes)


def pay_command(name: str, changes: dict[str, int | None]) -> None:
    """Add coin counts (negative amounts spend coins)."""
    _edit_purse(name, "pay", changes)
