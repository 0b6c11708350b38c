"""Environment driven settings for the config file store and CLI."""

from __future__ import annotations

import os

DEFAULT_DB_URL = "cfc_store.sqlite"
DEFAULT_JOURNAL_MODE = "WAL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_db_url() -> str:
    """
    Get the store connection string.

    Returns:
        str: CFC_DB_URL if set, otherwise the local SQLite default
    """
    return os.getenv("CFC_DB_URL") or DEFAULT_DB_URL


def get_journal_mode() -> str:
    """SQLite journal mode; WAL can fail on some networked filesystems."""
    return os.getenv("CFC_DB_JOURNAL", DEFAULT_JOURNAL_MODE).upper()


def get_log_level() -> str:
    return os.getenv("CFC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_template_dir() -> str | None:
    """Optional directory whose templates take precedence over the packaged ones."""
    return os.getenv("CFC_TEMPLATE_DIR") or None
