"""Schema definitions for stored documents."""

from .config_file import CONFIG_FILE_SCHEMA, CONFIG_FILE_INDEXES

__all__ = [
    "CONFIG_FILE_SCHEMA",
    "CONFIG_FILE_INDEXES",
]
