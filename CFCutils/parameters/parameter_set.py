"""Ordered, name-keyed collection of parameter definitions (a job form)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import yaml

from .base import AbstractChoiceParameter
from .registry import create_parameter
from ..backends import ConfigStoreBackend, get_default_store
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class ParameterSet:
    """Parameter definitions of one job/form, in declaration order."""

    def __init__(self, parameters: Optional[List[AbstractChoiceParameter]] = None):
        self._parameters: Dict[str, AbstractChoiceParameter] = {}
        for param in parameters or []:
            self.add(param)

    def add(self, param: AbstractChoiceParameter) -> None:
        if not param.name:
            raise ValidationError("Parameter name must not be empty")
        if param.name in self._parameters:
            raise ValidationError(f"Duplicate parameter name: {param.name}")
        self._parameters[param.name] = param

    def get(self, name: str) -> AbstractChoiceParameter:
        try:
            return self._parameters[name]
        except KeyError:
            raise ValidationError(
                f"No parameter named '{name}'. Available: {', '.join(self.names()) or 'none'}"
            ) from None

    def remove(self, name: str) -> AbstractChoiceParameter:
        param = self.get(name)
        del self._parameters[name]
        return param

    def names(self) -> List[str]:
        return list(self._parameters)

    def __iter__(self) -> Iterator[AbstractChoiceParameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, name) -> bool:
        return name in self._parameters

    # ------------------------------------------------------------------
    # Resolution helpers
    # ------------------------------------------------------------------
    def resolve_all(
        self,
        store: Optional[ConfigStoreBackend] = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Dict[str, str]]:
        """Current choices of every parameter, keyed by parameter name."""
        return {
            param.name: param.get_choices(parameters or {}, store=store)
            for param in self
        }

    def validate_sources(self, store: Optional[ConfigStoreBackend] = None) -> List[str]:
        """
        Names of parameters whose config file reference is unset or unknown.

        Meant for checking a parameter set before saving it; resolution
        itself stays best-effort.
        """
        if store is None:
            store = get_default_store()
        known = {doc.get("config_id") for doc in store.list_configs()}
        broken = []
        for param in self:
            getter = getattr(param, "get_config_file_id", None)
            if getter is None:
                continue
            config_file_id = getter()
            if not config_file_id or config_file_id not in known:
                broken.append(param.name)
        return broken

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"parameters": [param.to_dict() for param in self]}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ParameterSet":
        data = data or {}
        entries = data.get("parameters") or []
        if not isinstance(entries, list):
            raise ValidationError("'parameters' must be a list")
        return cls([create_parameter(entry) for entry in entries])

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ParameterSet":
        """Load a parameter set from a YAML file."""
        path = Path(path)
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except OSError as exc:
            raise ValidationError(f"Cannot read parameter file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ValidationError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValidationError(f"Parameter file {path} must contain a mapping")
        param_set = cls.from_dict(data)
        logger.debug("Loaded %d parameters from %s", len(param_set), path)
        return param_set

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        return path
