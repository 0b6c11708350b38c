"""Config file store factory and process-wide default store."""

from __future__ import annotations

from typing import Optional

from .base import ConfigStoreBackend, describe_config
from .mongodb import MongoDBBackend
from .sqlite import SQLiteBackend
from ..exceptions import ConnectionError
from ..settings import get_db_url

_SQLITE_SUFFIXES = (".db", ".sqlite", ".sqlite3")

_default_store: Optional[ConfigStoreBackend] = None


def get_backend(connection_string: str) -> ConfigStoreBackend:
    """Return a backend for a MongoDB URL or a SQLite file path."""
    if connection_string.startswith(("mongodb://", "mongodb+srv://")):
        return MongoDBBackend(connection_string)
    if connection_string.startswith("sqlite:///") or connection_string.endswith(_SQLITE_SUFFIXES):
        return SQLiteBackend(connection_string)
    raise ConnectionError(
        f"Unsupported store connection string: {connection_string!r}\n"
        "Set CFC_DB_URL to a MongoDB URL or a SQLite file.\n"
        "Example: export CFC_DB_URL=mongodb://host:port/database\n"
        "         export CFC_DB_URL=sqlite:///path/to/cfc_store.sqlite"
    )


def get_default_store() -> ConfigStoreBackend:
    """Get or create the process-wide store from CFC_DB_URL."""
    global _default_store
    if _default_store is None:
        _default_store = get_backend(get_db_url())
    return _default_store


def set_default_store(store: Optional[ConfigStoreBackend]) -> None:
    """Replace the process-wide store; None resets it to lazy creation."""
    global _default_store
    _default_store = store


__all__ = [
    "ConfigStoreBackend",
    "MongoDBBackend",
    "SQLiteBackend",
    "describe_config",
    "get_backend",
    "get_default_store",
    "set_default_store",
]
