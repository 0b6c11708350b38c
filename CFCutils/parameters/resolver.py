"""Turn a config file ID into the live, ordered set of choices."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..backends import ConfigStoreBackend, describe_config, get_default_store
from ..exceptions import CFCError

logger = logging.getLogger(__name__)


def split_lines(content: Optional[str]) -> List[str]:
    """Split on newlines, dropping trailing empty strings.

    Interior blank lines are kept and nothing is trimmed, so ``"a\\n\\nb\\n"``
    gives ``["a", "", "b"]`` while ``""`` and ``"\\n\\n"`` give ``[]``.
    """
    if not content:
        return []
    lines = content.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_choices(content: Optional[str]) -> Dict[str, str]:
    """Build the choice mapping; a repeated line keeps its first position."""
    choices: Dict[str, str] = {}
    for line in split_lines(content):
        choices[line] = line
    return choices


def _known_configs(store: ConfigStoreBackend) -> List[str]:
    try:
        return [describe_config(doc) for doc in store.list_configs()]
    except CFCError as exc:
        logger.error("Could not list existing config files: %s", exc)
        return []


def resolve_choices(
    config_file_id: Optional[str],
    store: Optional[ConfigStoreBackend] = None,
) -> Dict[str, str]:
    """
    Fetch a config file and return its lines as an ordered choice mapping.

    Never raises for a broken source: an unset ID, an unknown ID or a failing
    store is logged and yields an empty mapping.

    Args:
        config_file_id: ID of the config file holding one choice per line
        store: Config store to read from (process default if None)

    Returns:
        Dict mapping each line to itself, in first-seen order
    """
    if config_file_id is None or not str(config_file_id).strip():
        logger.error("No config file ID set, returning no choices")
        return {}

    try:
        if store is None:
            store = get_default_store()
        config = store.get_config(config_file_id)
    except CFCError:
        logger.exception("Failed to look up config file '%s'", config_file_id)
        return {}

    if config is None:
        logger.error("Config with id '%s' not found", config_file_id)
        logger.error("Existing configs: %s", _known_configs(store))
        return {}

    choices = parse_choices(config.get("content"))
    logger.debug("Resolved %d choices from config file '%s'", len(choices), config_file_id)
    return choices
