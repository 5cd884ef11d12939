"""Prefix-to-property registry."""

from .builtin import BUILTIN_DESCRIPTORS, builtin_registry
from .loader import RegistryLoadError, load_registry, parse_registry_payload, validate_registry
from .models import DEFAULT_UNIT, PropertyDescriptor, PropertyRegistry

__all__ = [
    "BUILTIN_DESCRIPTORS",
    "DEFAULT_UNIT",
    "PropertyDescriptor",
    "PropertyRegistry",
    "RegistryLoadError",
    "builtin_registry",
    "load_registry",
    "parse_registry_payload",
    "validate_registry",
]
