"""Exceptions raised by purse."""


class PurseError(Exception):
    """Base class for purse errors."""


class ActorNotFoundError(PurseError):
    """Raised when an actor cannot be found by name or ID."""

    def __init__(self, actor_id: str) -> None:
        super().__init__(f"Actor not found: {actor_id}")
        self.actor_id = actor_id
