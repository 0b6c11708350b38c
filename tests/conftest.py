"""
Shared fixtures and configuration for CFCutils tests.
"""

from typing import Dict, List, Optional

import pytest

from CFCutils.backends import set_default_store
from CFCutils.backends.base import ConfigStoreBackend
from CFCutils.backends.sqlite import SQLiteBackend
from CFCutils.exceptions import DatabaseError


class MemoryStore(ConfigStoreBackend):
    """Dict-backed store used where the storage engine is irrelevant."""

    def __init__(self, configs: Optional[Dict[str, str]] = None):
        super().__init__("memory://")
        self.docs: Dict[str, Dict] = {}
        self.lookups: List[str] = []
        for config_id, content in (configs or {}).items():
            self.add_config(config_id, content)

    def get_config(self, config_id):
        self.lookups.append(config_id)
        doc = self.docs.get(config_id)
        return dict(doc) if doc else None

    def list_configs(self, detailed=False):
        docs = [dict(self.docs[key]) for key in sorted(self.docs)]
        if not detailed:
            for doc in docs:
                doc.pop("content", None)
        return docs

    def add_config(self, config_id, content, name=None, comment=None, provider_id=None):
        self.docs[config_id] = {
            "config_id": config_id,
            "content": content,
            "name": name,
            "comment": comment,
            "provider_id": provider_id,
        }
        return config_id

    def update_config(self, config_id, **updates):
        if config_id not in self.docs:
            return False
        self.docs[config_id].update(updates)
        return True

    def delete_config(self, config_id):
        return self.docs.pop(config_id, None) is not None


class BrokenStore(MemoryStore):
    """Store whose lookups always fail."""

    def get_config(self, config_id):
        raise DatabaseError("store unavailable")

    def list_configs(self, detailed=False):
        raise DatabaseError("store unavailable")


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_default_store():
    """Make sure no test leaks a process-wide store into the next."""
    set_default_store(None)
    yield
    set_default_store(None)


@pytest.fixture
def memory_store():
    """In-memory store with a few config files."""
    return MemoryStore({
        "shells": "bash\nzsh\nfish",
        "empty-doc": "",
        "regions": "eu-west-1\nus-east-1\neu-west-1\nap-south-1\n",
    })


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def sqlite_path(tmp_path):
    return str(tmp_path / "store.sqlite")


@pytest.fixture
def sqlite_store(sqlite_path):
    """SQLite store seeded with the shells config file."""
    store = SQLiteBackend(sqlite_path)
    store.add_config("shells", "bash\nzsh\nfish", name="Login shells", provider_id="text")
    return store


# =============================================================================
# Parameter Fixtures
# =============================================================================

@pytest.fixture
def shell_param():
    from CFCutils.parameters import ConfigFileChoiceParameter
    return ConfigFileChoiceParameter(
        "SHELL",
        "Login shell",
        "PT_SINGLE_SELECT",
        True,
        "shells",
    )


@pytest.fixture
def params_yaml(tmp_path):
    """Parameter set file with one resolvable and one dangling parameter."""
    path = tmp_path / "job.yaml"
    path.write_text(
        "parameters:\n"
        "  - type: configFileChoiceParameter\n"
        "    name: SHELL\n"
        "    description: Login shell\n"
        "    choice_type: PT_MULTI_SELECT\n"
        "    filterable: true\n"
        "    config_file_id: shells\n"
        "    filter_length: 2\n"
        "  - type: configFileChoiceParameter\n"
        "    name: REGION\n"
        "    choice_type: ''\n"
        "    config_file_id: missing\n"
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """CLI runs attach handlers to the package logger; drop them afterwards."""
    import logging
    yield
    logger = logging.getLogger("CFCutils")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
