"""Automatic coin exchange.

Actor edits arrive as ``update_actor`` notifications. The scheduler waits
for a quiet period after the last edit of an actor, then the exchange office
reads the purse, normalizes it and writes it back. Writes made here carry
``AUTOCONVERT_MARKER`` in their options so they never schedule another
conversion.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from typing import Any, Protocol

from purse.domain.coins import is_canonical, optimize_money, to_base_unit
from purse.domain.models import Purse
from purse.hooks import UPDATE_ACTOR, has_property
from purse.messages import Messages
from purse.notify import Notifier
from purse.settings import Settings
from purse.store.actors import Actor, ActorStore

logger = logging.getLogger(__name__)

AUTOCONVERT_MARKER = "purse_autoconvert"

DEFAULT_QUIET_PERIOD = 0.1


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class EventLoop(Protocol):
    """The part of an asyncio event loop the scheduler relies on."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...

    def create_task(self, coro: Any) -> "asyncio.Future[Any]": ...


class ConversionResult(Enum):
    """Outcome of a single conversion."""

    MISSING = "missing"
    SKIPPED = "skipped"
    OPTIMIZED = "optimized"
    ALREADY_OPTIMIZED = "already_optimized"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class ConversionScheduler:
    """Debounces conversions per actor.

    Each actor has at most one pending timer. Scheduling again while a timer
    is pending cancels it and starts the quiet period over, so a burst of
    edits results in one conversion after the last edit.
    """

    def __init__(
        self,
        callback: Callable[[str], Awaitable[Any]],
        delay: float = DEFAULT_QUIET_PERIOD,
        loop: EventLoop | None = None,
    ) -> None:
        self._callback = callback
        self.delay = delay
        self._loop = loop
        self._timers: dict[str, TimerHandle] = {}
        self._tasks: set[asyncio.Future[Any]] = set()

    def __len__(self) -> int:
        return len(self._timers)

    def _get_loop(self) -> EventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def pending(self, actor_id: str) -> bool:
        return actor_id in self._timers

    def schedule(self, actor_id: str) -> None:
        """Start or restart the quiet period for an actor.

        Raises:
            RuntimeError: If no loop was given and none is running.
        """
        loop = self._get_loop()
        previous = self._timers.pop(actor_id, None)
        if previous is not None:
            previous.cancel()
            logger.debug("Restarting quiet period for %s", actor_id)
        self._timers[actor_id] = loop.call_later(self.delay, self._fire, actor_id)

    def discard(self, actor_id: str) -> None:
        """Cancel the pending timer for an actor, if any."""
        handle = self._timers.pop(actor_id, None)
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        """Cancel every pending timer."""
        if self._timers:
            logger.debug("Cancelling %d pending conversion(s)", len(self._timers))
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

    def _fire(self, actor_id: str) -> None:
        self._timers.pop(actor_id, None)
        task = self._get_loop().create_task(self._callback(actor_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait_idle(self) -> None:
        """Wait until no timer is pending and every started conversion finished.

        Raises:
            Exception: Whatever a finished conversion raised.
        """
        while self._timers or self._tasks:
            if self._tasks:
                await asyncio.gather(*self._tasks)
            else:
                await asyncio.sleep(self.delay)


class ExchangeOffice:
    """Keeps tracked actors' purses in canonical form."""

    def __init__(
        self,
        store: ActorStore,
        notifier: Notifier,
        settings: Settings,
        messages: Messages | None = None,
        loop: EventLoop | None = None,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self.settings = settings
        self.messages = messages or Messages(settings.language)
        self.scheduler = ConversionScheduler(self.perform_conversion, settings.quiet_period, loop)

    async def __aenter__(self) -> "ExchangeOffice":
        self.attach()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    def attach(self) -> None:
        self.store.hooks.on(UPDATE_ACTOR, self.on_actor_updated)

    def close(self) -> None:
        """Stop listening and drop pending conversions."""
        self.store.hooks.off(UPDATE_ACTOR, self.on_actor_updated)
        self.scheduler.cancel_all()

    def _should_notify(self, manual: bool) -> bool:
        return manual or self.settings.show_notifications

    def on_actor_updated(
        self,
        actor: Actor,
        changes: Mapping[str, Any],
        options: Mapping[str, Any],
        user_id: str | None,
    ) -> None:
        """Schedule a conversion for purse edits of tracked actors."""
        if options.get(AUTOCONVERT_MARKER):
            return
        if actor.type != self.settings.actor_type:
            return
        if not has_property(changes, "system.money"):
            return

        logger.debug("Purse of %s changed (user %s), scheduling conversion", actor.name, user_id)
        self.scheduler.schedule(actor.id)

    async def perform_conversion(self, actor_id: str, manual: bool = False) -> ConversionResult:
        """Normalize an actor's purse and write it back if it changed.

        Args:
            actor_id: Actor ID.
            manual: True when requested by the user. Manual runs always
                notify and report when nothing needed exchanging.

        Returns:
            What the conversion did.

        Raises:
            ActorNotFoundError: If the actor disappears during the write.
            sqlite3.Error: If reading or writing the actor fails.
        """
        self.scheduler.discard(actor_id)

        actor = self.store.get(actor_id)
        if actor is None:
            logger.debug("Actor %s no longer exists, skipping conversion", actor_id)
            return ConversionResult.MISSING

        current = actor.money
        if not manual and is_canonical(current):
            return ConversionResult.SKIPPED

        optimized = optimize_money(current)

        if to_base_unit(optimized) < 0:
            # Zero purse is written first, the warning follows a successful write
            logger.warning("Purse of %s is negative (%s), emptying it", actor.name, current)
            await self.store.update_money(actor.id, Purse.zero(), {AUTOCONVERT_MARKER: True})
            if self._should_notify(manual):
                self.notifier.warn(self.messages.localize("InsufficientFunds"))
            return ConversionResult.INSUFFICIENT_FUNDS

        if optimized != current:
            await self.store.update_money(actor.id, optimized, {AUTOCONVERT_MARKER: True})
            logger.info("Exchanged coins of %s: %s -> %s", actor.name, current, optimized)
            if self._should_notify(manual):
                self.notifier.info(
                    self.messages.format("OptimizedNotification", name=actor.name, **optimized.as_dict())
                )
            return ConversionResult.OPTIMIZED

        if manual:
            self.notifier.info(self.messages.localize("AlreadyOptimized"))
            return ConversionResult.ALREADY_OPTIMIZED

        return ConversionResult.SKIPPED

    async def prompt_manual_exchange(self, actor: Actor, confirm: Callable[[str], bool]) -> ConversionResult | None:
        """Ask for confirmation, then convert the actor's purse.

        Args:
            actor: Actor to convert.
            confirm: Callable showing a yes/no question and returning the answer.

        Returns:
            The conversion result, or None if the user declined.
        """
        if not confirm(self.messages.format("ConfirmExchange", name=actor.name)):
            return None
        return await self.perform_conversion(actor.id, manual=True)

    def ready(self, is_gm: bool = True) -> bool:
        """Show the one-time welcome message.

        Returns:
            True if the welcome was shown by this call.
        """
        if not is_gm or self.settings.welcome_shown():
            return False
        self.notifier.info(self.messages.localize("Welcome"))
        self.settings.mark_welcome_shown()
        return True
