"""Dynamic choice parameters and their registry."""

from .base import AbstractChoiceParameter, ChoiceType, DEFAULT_FILTER_LENGTH
from .config_file import DISPLAY_NAME, SYMBOL, ConfigFileChoiceParameter
from .registry import (
    ParameterDescriptor,
    create_parameter,
    get_descriptor,
    list_parameter_types,
    register_parameter_type,
    unregister_parameter_type,
)
from .resolver import parse_choices, resolve_choices, split_lines
from .parameter_set import ParameterSet

register_parameter_type(
    ParameterDescriptor(
        symbol=SYMBOL,
        display_name=DISPLAY_NAME,
        parameter_class=ConfigFileChoiceParameter,
        factory=ConfigFileChoiceParameter.from_dict,
    )
)

__all__ = [
    "AbstractChoiceParameter",
    "ChoiceType",
    "DEFAULT_FILTER_LENGTH",
    "ConfigFileChoiceParameter",
    "ParameterDescriptor",
    "ParameterSet",
    "create_parameter",
    "get_descriptor",
    "list_parameter_types",
    "parse_choices",
    "register_parameter_type",
    "resolve_choices",
    "split_lines",
    "unregister_parameter_type",
]
