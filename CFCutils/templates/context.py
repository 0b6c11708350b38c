"""Context builders for template rendering."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel

from ..backends.base import ConfigStoreBackend
from ..parameters import AbstractChoiceParameter, ParameterSet


class ParameterContext(BaseModel):
    """Shape of one entry in the describe template context."""

    name: str
    type: str
    description: str
    choice_type: str
    filterable: Optional[bool] = None
    filter_length: Optional[int] = None
    visible_item_count: Optional[int] = None
    config_file_id: Optional[str] = None
    choices: List[str]


class DescribeContext(BaseModel):
    parameters: List[ParameterContext]


class ContextBuilder:
    """Builds rendering context payloads for templates."""

    def __init__(self, store: Optional[ConfigStoreBackend] = None):
        self.store = store

    def build_parameter_context(self, param: AbstractChoiceParameter) -> Dict:
        """Return the context entry for one parameter, choices resolved now."""
        context = {
            "name": param.name,
            "type": param.symbol,
            "description": param.description,
            "choice_type": param.get_choice_type().value,
            "choices": list(param.get_choices({}, store=self.store)),
        }
        for field in ("filterable", "filter_length", "visible_item_count", "config_file_id"):
            getter = getattr(param, f"get_{field}", None)
            if getter is not None:
                context[field] = getter()
        return context

    def build_describe_context(self, param_set: ParameterSet, names: Optional[List[str]] = None) -> Dict:
        """Return context for the parameter description template."""
        selected = [param_set.get(name) for name in names] if names else list(param_set)
        return {"parameters": [self.build_parameter_context(param) for param in selected]}
