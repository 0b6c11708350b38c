"""MongoDB backend implementation."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError
from pymongo import ASCENDING, MongoClient
from pymongo.errors import ConnectionFailure, DuplicateKeyError, PyMongoError

from .base import ConfigStoreBackend
from ..exceptions import ConnectionError, DatabaseError, ValidationError
from ..schemas import CONFIG_FILE_INDEXES
from ..schemas.validators import ConfigFileCreate

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = {"name", "comment", "content", "provider_id"}


def retry_on_error(max_tries: int = 3, delay: float = 1.0):
    """Decorator for retrying transient MongoDB failures."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            last_exc = None
            for attempt in range(max_tries):
                try:
                    return func(*args, **kwargs)
                except ConnectionFailure as exc:
                    last_exc = exc
                    if attempt == max_tries - 1:
                        raise ConnectionError(str(exc)) from exc
                    logger.warning(
                        "MongoDB connection failure in %s (attempt %d/%d): %s",
                        func.__name__, attempt + 1, max_tries, exc,
                    )
                    time.sleep(delay * (2**attempt))
                except PyMongoError as exc:
                    raise DatabaseError(str(exc)) from exc
            raise ConnectionError(str(last_exc)) from last_exc

        return wrapper

    return decorator


class MongoDBBackend(ConfigStoreBackend):
    """MongoDB-based implementation of the ConfigStoreBackend interface."""

    def __init__(self, connection_string: str, client: Optional[MongoClient] = None):
        super().__init__(connection_string)

        try:
            self.client = client or MongoClient(
                connection_string,
                maxPoolSize=50,
                serverSelectionTimeoutMS=5000,
                retryWrites=True,
            )
            self.client.server_info()
            # needs a database name in the URL, e.g. mongodb://host:27017/cfc
            self.db = self.client.get_database()
            self.config_files = self.db.config_files
            self._ensure_indexes()
        except (PyMongoError, ValueError) as exc:
            raise ConnectionError(f"Cannot connect to MongoDB: {exc}") from exc

    def _ensure_indexes(self) -> None:
        """Create MongoDB indexes."""
        for field, options in CONFIG_FILE_INDEXES:
            self.config_files.create_index(field, **options)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    @retry_on_error()
    def get_config(self, config_id: str) -> Optional[Dict]:
        doc = self.config_files.find_one({"config_id": config_id}, {"_id": 0})
        if not doc:
            return None
        return doc

    @retry_on_error()
    def list_configs(self, detailed: bool = False) -> List[Dict]:
        projection = {"_id": 0}
        if not detailed:
            projection["content"] = 0
        return list(self.config_files.find({}, projection).sort("config_id", ASCENDING))

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------
    @retry_on_error()
    def add_config(
        self,
        config_id: str,
        content: str,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        provider_id: Optional[str] = None,
    ) -> str:
        try:
            validated = ConfigFileCreate(
                config_id=config_id,
                content=content,
                name=name,
                comment=comment,
                provider_id=provider_id,
            )
        except PydanticValidationError as exc:
            raise ValidationError(str(exc)) from exc

        now = datetime.now(timezone.utc)
        document = {
            **validated.model_dump(),
            "created_at": now,
            "updated_at": now,
        }

        try:
            self.config_files.insert_one(document)
        except DuplicateKeyError as exc:
            raise ValidationError(f"Config file already exists: {config_id}") from exc

        logger.info("Added config file %s", config_id)
        return config_id

    @retry_on_error()
    def update_config(self, config_id: str, **updates) -> bool:
        unknown = set(updates) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if "content" in updates and not isinstance(updates["content"], str):
            raise ValidationError("content must be a string")

        set_doc = dict(updates)
        set_doc["updated_at"] = datetime.now(timezone.utc)
        result = self.config_files.update_one({"config_id": config_id}, {"$set": set_doc})
        return result.matched_count > 0

    @retry_on_error()
    def delete_config(self, config_id: str) -> bool:
        result = self.config_files.delete_one({"config_id": config_id})
        return result.deleted_count > 0

    def close(self) -> None:
        self.client.close()
