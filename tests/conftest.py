"""Shared fixtures: temporary database, recording notifier and a manual-clock loop."""

import asyncio
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from purse.exchange import ExchangeOffice
from purse.messages import Messages
from purse.settings import Settings
from purse.store.actors import ActorStore
from purse.store.schema import init_database


class RecordingNotifier:
    """Collects notifications instead of printing them."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class FakeTimer:
    def __init__(self, when: float, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Event loop stand-in whose clock only moves when advance() is called.

    Tasks are created on the real running loop so coroutines still run.
    """

    def __init__(self) -> None:
        self.time = 0.0
        self.timers: list[FakeTimer] = []
        self.tasks: list[asyncio.Task[Any]] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> FakeTimer:
        timer = FakeTimer(self.time + delay, callback, args)
        self.timers.append(timer)
        return timer

    def create_task(self, coro: Any) -> "asyncio.Task[Any]":
        task = asyncio.get_running_loop().create_task(coro)
        self.tasks.append(task)
        return task

    def active_timers(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward and fire every timer that came due."""
        self.time += seconds
        due = sorted(
            (timer for timer in self.active_timers() if timer.when <= self.time + 1e-9),
            key=lambda timer: timer.when,
        )
        for timer in due:
            self.timers.remove(timer)
            timer.callback(*timer.args)

    async def run_tasks(self) -> list[Any]:
        results = await asyncio.gather(*self.tasks)
        self.tasks.clear()
        return results


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "purse.db"
    init_database(path)
    return path


@pytest.fixture
def store(db_path: Path) -> ActorStore:
    return ActorStore(db_path)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def settings(db_path: Path) -> Settings:
    return Settings(db_path=db_path)


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()


@pytest.fixture
def office(
    store: ActorStore, notifier: RecordingNotifier, settings: Settings, fake_loop: FakeLoop
) -> Iterator[ExchangeOffice]:
    office = ExchangeOffice(store, notifier, settings, Messages("en"), loop=fake_loop)
    office.attach()
    yield office
    office.close()
