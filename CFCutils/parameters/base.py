"""Base types shared by choice parameter definitions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ChoiceType(str, Enum):
    """How a choice parameter is rendered."""

    SINGLE_SELECT = "PT_SINGLE_SELECT"
    MULTI_SELECT = "PT_MULTI_SELECT"
    CHECKBOX = "PT_CHECKBOX"
    RADIO = "PT_RADIO"

    @classmethod
    def normalize(cls, value: Optional[Any]) -> "ChoiceType":
        """Return the matching member, SINGLE_SELECT for blank or unknown values."""
        if isinstance(value, ChoiceType):
            return value
        if value is None or not str(value).strip():
            return cls.SINGLE_SELECT
        text = str(value).strip().upper()
        for member in cls:
            if text in (member.value, member.name):
                return member
        logger.warning("Unknown choice type %r, using %s", value, cls.SINGLE_SELECT.value)
        return cls.SINGLE_SELECT


DEFAULT_FILTER_LENGTH = 1


class AbstractChoiceParameter(ABC):
    """Common contract for parameters whose choices are computed on demand.

    Subclasses hold the configuration; the host calls ``get_choices`` on
    every render and never caches the result.
    """

    symbol: str = ""

    def __init__(self, name: str, description: Optional[str] = None):
        self.name = name
        self.description = description or ""

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description

    @abstractmethod
    def get_choice_type(self) -> ChoiceType:
        """Rendering mode, never blank."""

    @abstractmethod
    def get_choices(self, parameters: Optional[Dict[str, Any]] = None, *, store=None) -> Dict[str, str]:
        """Return an insertion-ordered mapping of choice key to value.

        Args:
            parameters: Current values of sibling form fields
            store: Config store to resolve against (default store if None)
        """

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the owning parameter set document."""

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
