"""Manual exchange command."""

import asyncio
import sqlite3
import sys
import tomllib

import typer

from purse.commands.common import console, require_actor, require_database, with_office
from purse.domain.coins import format_purse
from purse.errors import PurseError
from purse.exchange import ConversionResult, ExchangeOffice
from purse.store.actors import ActorStore
from purse.store.schema import get_db_path


def exchange_command(name: str, yes: bool = False) -> None:
    """Exchange an actor's coins into the largest denominations."""
    require_database()

    def confirm(question: str) -> bool:
        return yes or typer.confirm(question, default=True)

    async def work(office: ExchangeOffice) -> ConversionResult | None:
        actor = require_actor(office.store, name)
        return await office.prompt_manual_exchange(actor, confirm)

    try:
        result = asyncio.run(with_office(work))
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

    if result is None:
        console.print("[dim]Cancelled[/dim]")
        return

    if result in (ConversionResult.OPTIMIZED, ConversionResult.INSUFFICIENT_FUNDS):
        actor = ActorStore(get_db_path()).find(name)
        if actor is not None:
            console.print(f"[bold]{actor.name}:[/bold] {format_purse(actor.money)}")
