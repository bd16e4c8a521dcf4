"""Actor store: reads actors and writes purses, announcing every write."""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from purse.domain.models import Purse
from purse.errors import ActorNotFoundError
from purse.hooks import UPDATE_ACTOR, Hooks
from purse.store import queries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Actor:
    """Immutable snapshot of an actor row."""

    id: str
    name: str
    type: str
    money: Purse

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Actor":
        return cls(id=row["id"], name=row["name"], type=row["type"], money=Purse.from_mapping(row))


class ActorStore:
    """Actor persistence with change notifications.

    Every purse write emits ``update_actor`` with
    ``(actor, changes, options, user_id)`` so listeners can react to edits.
    """

    def __init__(self, db_path: Path | None = None, hooks: Hooks | None = None) -> None:
        self.db_path = db_path
        self.hooks = hooks or Hooks()

    def get(self, actor_id: str) -> Actor | None:
        row = queries.get_actor(actor_id, self.db_path)
        return Actor.from_row(row) if row else None

    def find(self, name_or_id: str) -> Actor | None:
        """Look up an actor by name first, then by ID."""
        row = queries.get_actor_by_name(name_or_id, self.db_path) or queries.get_actor(name_or_id, self.db_path)
        return Actor.from_row(row) if row else None

    def all(self) -> list[Actor]:
        return [Actor.from_row(row) for row in queries.get_all_actors(self.db_path)]

    async def update_money(
        self,
        actor_id: str,
        money: Purse,
        options: Mapping[str, Any] | None = None,
        user_id: str | None = None,
    ) -> Actor:
        """Write an actor's purse and notify listeners.

        The database work runs on a worker thread; listeners are called on
        the event loop once the write has completed.

        Args:
            actor_id: Actor ID.
            money: New purse.
            options: Write options passed through to listeners.
            user_id: ID of the user performing the write.

        Returns:
            The updated actor.

        Raises:
            ActorNotFoundError: If the actor does not exist.
            sqlite3.Error: If the write fails.
        """
        if not await asyncio.to_thread(queries.set_actor_money, actor_id, money, self.db_path):
            raise ActorNotFoundError(actor_id)

        actor = await asyncio.to_thread(self.get, actor_id)
        if actor is None:
            raise ActorNotFoundError(actor_id)

        logger.debug("Wrote purse for %s: %s", actor.name, money)
        changes = {"system": {"money": money.as_dict()}}
        self.hooks.emit(UPDATE_ACTOR, actor, changes, dict(options or {}), user_id)
        return actor
