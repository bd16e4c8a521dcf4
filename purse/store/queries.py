"""Database query functions."""

import sqlite3
import uuid
from pathlib import Path
from typing import Any

from purse.domain.models import Purse
from purse.store.schema import get_db_path


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def insert_actor(
    name: str, actor_type: str, money: Purse | None = None, db_path: Path | None = None
) -> tuple[bool, str]:
    """Insert an actor unless one with the same name exists.

    Args:
        name: Actor display name.
        actor_type: Actor kind (e.g., "character", "npc").
        money: Starting purse. Defaults to an empty purse.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Tuple of (inserted, actor_id):
        - inserted: True if the actor was created, False if the name exists
        - actor_id: ID of the new actor, or of the existing one

    Raises:
        sqlite3.Error: If database operation fails.
    """
    money = money or Purse.zero()
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("SELECT id FROM actors WHERE name = ?", (name,))
            existing = cursor.fetchone()
            if existing:
                return (False, existing[0])

            actor_id = uuid.uuid4().hex[:16]
            cursor.execute(
                "INSERT INTO actors (id, name, type, gold, silver, copper, nickel) VALUES (?, ?, ?, ?, ?, ?, ?)",
                (actor_id, name, actor_type, money.gold, money.silver, money.copper, money.nickel),
            )
            conn.commit()
            return (True, actor_id)
        except sqlite3.Error:
            conn.rollback()
            raise


def get_actor(actor_id: str, db_path: Path | None = None) -> dict[str, Any] | None:
    """Get an actor by ID.

    Args:
        actor_id: Actor ID.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Actor dictionary or None if not found.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM actors WHERE id = ?", (actor_id,))
        row = cursor.fetchone()
        return dict(row) if row else None


def get_actor_by_name(name: str, db_path: Path | None = None) -> dict[str, Any] | None:
    """Get an actor by name (case-insensitive).

    Args:
        name: Actor name.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Actor dictionary or None if not found.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM actors WHERE name = ? COLLATE NOCASE", (name,))
        row = cursor.fetchone()
        return dict(row) if row else None


def get_all_actors(db_path: Path | None = None) -> list[dict[str, Any]]:
    """Get all actors ordered by name.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM actors ORDER BY name")
        return [dict(row) for row in cursor.fetchall()]


def delete_actor(actor_id: str, db_path: Path | None = None) -> bool:
    """Delete an actor.

    Args:
        actor_id: Actor ID.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if a row was deleted.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM actors WHERE id = ?", (actor_id,))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def set_actor_money(actor_id: str, money: Purse, db_path: Path | None = None) -> bool:
    """Overwrite an actor's purse.

    Args:
        actor_id: Actor ID.
        money: New purse.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if the actor exists and was updated.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "UPDATE actors SET gold = ?, silver = ?, copper = ?, nickel = ? WHERE id = ?",
                (money.gold, money.silver, money.copper, money.nickel, actor_id),
            )
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise


def get_setting(key: str, db_path: Path | None = None) -> str | None:
    """Get a deployment-wide setting.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row[0] if row else None


def set_setting(key: str, value: str, db_path: Path | None = None) -> None:
    """Set a deployment-wide setting.

    Args:
        key: Setting key.
        value: Setting value.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT INTO settings (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
