"""Explicit registry of choice parameter types.

Types are registered once at import of ``CFCutils.parameters``; there is no
module scanning, so the set of types is exactly what was registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from pydantic import ValidationError as PydanticValidationError

from .base import AbstractChoiceParameter
from ..exceptions import UnknownParameterTypeError, ValidationError
from ..schemas.validators import ParameterDocument


@dataclass(frozen=True)
class ParameterDescriptor:
    """Metadata the host needs to offer and build a parameter type."""

    symbol: str
    display_name: str
    parameter_class: Type[AbstractChoiceParameter]
    factory: Callable[[Dict[str, Any]], AbstractChoiceParameter]


_REGISTRY: Dict[str, ParameterDescriptor] = {}


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #

def register_parameter_type(descriptor: ParameterDescriptor) -> ParameterDescriptor:
    """Add a descriptor; registering a symbol twice is an error."""
    existing = _REGISTRY.get(descriptor.symbol)
    if existing is not None and existing != descriptor:
        raise ValidationError(f"Parameter type '{descriptor.symbol}' is already registered")
    _REGISTRY[descriptor.symbol] = descriptor
    return descriptor


def unregister_parameter_type(symbol: str) -> None:
    if _REGISTRY.pop(symbol, None) is None:
        raise UnknownParameterTypeError(symbol)


def get_descriptor(symbol: str) -> ParameterDescriptor:
    descriptor = _REGISTRY.get(symbol)
    if descriptor is None:
        raise UnknownParameterTypeError(symbol)
    return descriptor


def list_parameter_types() -> List[ParameterDescriptor]:
    """Registered descriptors ordered by display name (the host's menu order)."""
    return sorted(_REGISTRY.values(), key=lambda d: d.display_name)


def create_parameter(data: Dict[str, Any]) -> AbstractChoiceParameter:
    """Validate a persisted parameter entry and build it with its type's factory.

    Args:
        data: Parameter entry with at least ``type`` and ``name``

    Returns:
        Parameter instance
    """
    try:
        document = ParameterDocument(**data)
    except PydanticValidationError as exc:
        name = data.get("name") if isinstance(data, dict) else None
        raise ValidationError(f"Invalid parameter {name or '<unnamed>'}: {exc}") from exc

    descriptor = get_descriptor(document.type)
    return descriptor.factory(document.model_dump())
