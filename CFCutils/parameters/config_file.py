"""Choice parameter whose values are the lines of a managed config file."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .base import DEFAULT_FILTER_LENGTH, AbstractChoiceParameter, ChoiceType
from .resolver import resolve_choices

logger = logging.getLogger(__name__)

SYMBOL = "configFileChoiceParameter"
DISPLAY_NAME = "Config File Choices Parameter"


class ConfigFileChoiceParameter(AbstractChoiceParameter):
    """Dynamic choice parameter backed by a config file in the store.

    ``choice_type`` and ``filterable`` are fixed at construction. The config
    file reference, filter length and visible item count are rebindable;
    a new config file ID is only seen on the next ``get_choices`` call.
    """

    symbol = SYMBOL

    # Restored through setters after construction when loading a document
    SETTER_FIELDS = ("config_file_id", "filter_length", "visible_item_count")

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        choice_type: Optional[Any] = None,
        filterable: Optional[bool] = None,
        config_file_id: Optional[str] = None,
        filter_length: Optional[int] = None,
        visible_item_count: Optional[int] = None,
    ):
        super().__init__(name, description)
        self._choice_type = ChoiceType.normalize(choice_type)
        self._filterable = filterable
        self._config_file_id = config_file_id
        self._filter_length = filter_length
        self._visible_item_count = visible_item_count

    # ------------------------------------------------------------------
    # Fixed configuration
    # ------------------------------------------------------------------
    def get_choice_type(self) -> ChoiceType:
        return self._choice_type

    def get_filterable(self) -> Optional[bool]:
        return self._filterable

    # ------------------------------------------------------------------
    # Rebindable fields
    # ------------------------------------------------------------------
    def get_config_file_id(self) -> Optional[str]:
        return self._config_file_id

    def set_config_file_id(self, config_file_id: Optional[str]) -> None:
        """Point the parameter at another config file, used from the next resolution on."""
        logger.debug("Parameter %s: config_file_id %r -> %r", self.name, self._config_file_id, config_file_id)
        self._config_file_id = config_file_id

    def get_filter_length(self) -> int:
        """Minimum characters typed before filtering starts; 1 when unset."""
        if self._filter_length is None or self._filter_length < 1:
            return DEFAULT_FILTER_LENGTH
        return self._filter_length

    def set_filter_length(self, filter_length: Optional[int]) -> None:
        self._filter_length = filter_length

    def get_visible_item_count(self) -> Optional[int]:
        return self._visible_item_count

    def set_visible_item_count(self, visible_item_count: Optional[int]) -> None:
        self._visible_item_count = visible_item_count

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def get_choices(self, parameters: Optional[Dict[str, Any]] = None, *, store=None) -> Dict[str, str]:
        # Sibling values do not influence which config file is read.
        return resolve_choices(self._config_file_id, store=store)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.symbol,
            "name": self.name,
            "description": self.description,
            "choice_type": self._choice_type.value,
            "filterable": self._filterable,
            "config_file_id": self._config_file_id,
            "filter_length": self._filter_length,
            "visible_item_count": self._visible_item_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigFileChoiceParameter":
        """Construct from a persisted entry, then apply the setter-bound fields."""
        param = cls(
            data["name"],
            data.get("description"),
            data.get("choice_type"),
            data.get("filterable"),
        )
        for field in cls.SETTER_FIELDS:
            getattr(param, f"set_{field}")(data.get(field))
        return param

    def __eq__(self, other):
        if not isinstance(other, ConfigFileChoiceParameter):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None
