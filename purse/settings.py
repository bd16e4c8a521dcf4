"""Typed settings view over the user config and deployment flags."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from purse.config import load_config
from purse.store.queries import get_setting, set_setting

WELCOME_SHOWN = "welcome_shown"


@dataclass
class Settings:
    """Settings consumed by the exchange office.

    User-scoped options come from config.toml; ``welcome_shown`` is stored
    in the database so it is shared by everyone using the same world.
    """

    show_notifications: bool = True
    debounce_ms: int = 100
    actor_type: str = "character"
    language: str = "en"
    db_path: Path | None = None

    @classmethod
    def from_config(cls, config: dict[str, Any], db_path: Path | None = None) -> "Settings":
        return cls(
            show_notifications=bool(config["show_notifications"]),
            debounce_ms=int(config["debounce_ms"]),
            actor_type=str(config["actor_type"]),
            language=str(config["language"]),
            db_path=db_path,
        )

    @classmethod
    def load(cls, config_path: Path | None = None, db_path: Path | None = None) -> "Settings":
        return cls.from_config(load_config(config_path), db_path)

    @property
    def quiet_period(self) -> float:
        """Debounce delay in seconds."""
        return self.debounce_ms / 1000

    def welcome_shown(self) -> bool:
        return get_setting(WELCOME_SHOWN, self.db_path) == "true"

    def mark_welcome_shown(self) -> None:
        set_setting(WELCOME_SHOWN, "true", self.db_path)
