"""Named event hooks connecting the actor store to its listeners."""

import logging
from collections import defaultdict
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

UPDATE_ACTOR = "update_actor"

Listener = Callable[..., Any]


class Hooks:
    """Synchronous event registry.

    Listeners run in registration order on the caller's thread. Exceptions
    raised by a listener propagate to whoever emitted the event.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def off(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: str, *args: Any) -> None:
        """Call every listener registered for an event.

        Args:
            event: Event name.
            *args: Positional arguments passed to each listener.
        """
        listeners = list(self._listeners.get(event, []))
        logger.debug("Emitting %s to %d listener(s)", event, len(listeners))
        for listener in listeners:
            listener(*args)


def has_property(data: Mapping[str, Any], path: str) -> bool:
    """Check whether a dotted path exists in nested change data.

    Args:
        data: Nested mapping (e.g., {"system": {"money": {...}}}).
        path: Dotted key path (e.g., "system.money").

    Returns:
        True if every segment of the path is present.
    """
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return False
        current = current[key]
    return True
