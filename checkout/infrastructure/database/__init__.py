"""Database engine, session factory and schema lifecycle."""

from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    enable_sqlite_foreign_keys,
    enable_sqlite_savepoints,
    get_engine,
    get_session_factory,
    init_database,
    settings,
)

__all__ = [
    "close_database",
    "create_engine",
    "DatabaseSettings",
    "enable_sqlite_foreign_keys",
    "enable_sqlite_savepoints",
    "get_engine",
    "get_session_factory",
    "init_database",
    "settings",
]
