"""Typed models for the property registry."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_UNIT = "rem"


@dataclass(slots=True, frozen=True)
class PropertyDescriptor:
    """Maps one class-name prefix to the CSS property it generates."""

    prefix: str
    css_property: str
    variable_stem: str
    scaled: bool


@dataclass(slots=True, frozen=True)
class PropertyRegistry:
    """Immutable ordered descriptor table shared by every pipeline stage."""

    descriptors: tuple[PropertyDescriptor, ...]
    unit: str = DEFAULT_UNIT

    def prefixes(self) -> tuple[str, ...]:
        """Return registered prefixes in registry order."""
        return tuple(descriptor.prefix for descriptor in self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)
