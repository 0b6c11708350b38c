"""Config file document schema definition."""

CONFIG_FILE_SCHEMA = {
    "config_id": str,
    "name": str | None,
    "comment": str | None,
    "content": str,
    "provider_id": str | None,
    "created_at": "datetime",
    "updated_at": "datetime",
}

# (field, index options)
CONFIG_FILE_INDEXES = [
    ("config_id", {"unique": True}),
    ("provider_id", {"sparse": True}),
]
