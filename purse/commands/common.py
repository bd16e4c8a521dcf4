"""Shared wiring for commands that touch purses."""

import getpass
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

from rich.console import Console

from purse.errors import ActorNotFoundError
from purse.exchange import ExchangeOffice
from purse.notify import ConsoleNotifier
from purse.settings import Settings
from purse.store.actors import Actor, ActorStore
from purse.store.schema import database_exists, get_db_path

console = Console()

T = TypeVar("T")


def current_user() -> str:
    return getpass.getuser()


def require_database() -> None:
    """Exit with an error if the database has not been initialized."""
    if not database_exists(get_db_path()):
        console.print("[red]Database not found. Run 'purse init' first.[/red]", style="bold")
        sys.exit(1)


def require_actor(store: ActorStore, name: str) -> Actor:
    """Find an actor by name or ID.

    Raises:
        ActorNotFoundError: If no actor matches.
    """
    actor = store.find(name)
    if actor is None:
        raise ActorNotFoundError(name)
    return actor


async def with_office(work: Callable[[ExchangeOffice], Awaitable[T]]) -> T:
    """Run work with an attached exchange office, then let conversions settle.

    The office is torn down afterwards, cancelling anything still pending.
    """
    db_path = get_db_path()
    settings = Settings.load(db_path=db_path)
    store = ActorStore(db_path)

    async with ExchangeOffice(store, ConsoleNotifier(console), settings) as office:
        office.ready()
        result = await work(office)
        await office.scheduler.wait_idle()
        return result
