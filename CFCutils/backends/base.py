"""Abstract config file store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class ConfigStoreBackend(ABC):
    """Abstract interface that concrete config file stores must implement."""

    def __init__(self, connection_string: str):
        self.connection_string = connection_string

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    @abstractmethod
    def get_config(self, config_id: str) -> Optional[Dict]:
        """Retrieve a config file document by ID, or None when absent."""

    @abstractmethod
    def list_configs(self, detailed: bool = False) -> List[Dict]:
        """List config files ordered by ID, optionally including content."""

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------
    @abstractmethod
    def add_config(
        self,
        config_id: str,
        content: str,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        provider_id: Optional[str] = None,
    ) -> str:
        """Add a new config file and return its ID."""

    @abstractmethod
    def update_config(self, config_id: str, **updates) -> bool:
        """Update fields on a config file."""

    @abstractmethod
    def delete_config(self, config_id: str) -> bool:
        """Delete a config file."""

    def get_content(self, config_id: str) -> Optional[str]:
        """Return the text content of a config file, or None when absent."""
        doc = self.get_config(config_id)
        if doc is None:
            return None
        return doc.get("content")

    def close(self) -> None:
        """Release any held connections."""


def describe_config(doc: Dict) -> str:
    """One-line diagnostic description of a config file document."""
    parts = [f"id={doc.get('config_id')}"]
    if doc.get("name"):
        parts.append(f"name={doc['name']}")
    if doc.get("provider_id"):
        parts.append(f"provider={doc['provider_id']}")
    return f"ConfigFile[{', '.join(parts)}]"
