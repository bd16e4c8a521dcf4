"""Database store layer - provides persistence for the application.

This module re-exports the public store API for easy importing.
"""

from purse.store.actors import Actor, ActorStore
from purse.store.queries import (
    delete_actor,
    get_actor,
    get_actor_by_name,
    get_all_actors,
    get_setting,
    insert_actor,
    set_actor_money,
    set_setting,
)
from purse.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Actors
    "Actor",
    "ActorStore",
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "delete_actor",
    "get_actor",
    "get_actor_by_name",
    "get_all_actors",
    "get_setting",
    "insert_actor",
    "set_actor_money",
    "set_setting",
]
