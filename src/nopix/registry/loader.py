"""Registry loading and validation."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path

from nopix.registry.builtin import builtin_registry
from nopix.registry.models import DEFAULT_UNIT, PropertyDescriptor, PropertyRegistry

_UNIT_PATTERN = re.compile(r"^[A-Za-z%]+$")
_STEM_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*(?:-[A-Za-z_][A-Za-z0-9_]*)*$")


@dataclass(slots=True, frozen=True)
class RegistryLoadError(Exception):
    """Raised when the property registry cannot be loaded."""

    source: str
    reason: str

    def __str__(self) -> str:
        return f"Cannot load property registry from {self.source}: {self.reason}"


def load_registry(path: Path | None = None) -> PropertyRegistry:
    """Load a registry file, or the built-in table when no path is given."""
    if path is None:
        return validate_registry(builtin_registry(), source="<builtin>")
    source = str(path)
    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except OSError as exc:
        raise RegistryLoadError(source=source, reason=exc.strerror or str(exc)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise RegistryLoadError(source=source, reason=f"invalid TOML ({exc})") from exc
    return parse_registry_payload(payload, source=source)


def parse_registry_payload(payload: dict[str, object], source: str) -> PropertyRegistry:
    """Build a validated registry from a decoded TOML document."""
    unit = payload.get("unit", DEFAULT_UNIT)
    if not isinstance(unit, str) or not _UNIT_PATTERN.match(unit):
        raise RegistryLoadError(source=source, reason="'unit' must be a letters-only string")
    raw_properties = payload.get("property")
    if not isinstance(raw_properties, list) or not raw_properties:
        raise RegistryLoadError(
            source=source, reason="at least one [[property]] table is required"
        )

    descriptors: list[PropertyDescriptor] = []
    for index, raw in enumerate(raw_properties):
        if not isinstance(raw, dict):
            raise RegistryLoadError(source=source, reason=f"property[{index}] must be a table")
        prefix = raw.get("prefix")
        css_property = raw.get("css_property")
        variable_stem = raw.get("variable_stem")
        scaled = raw.get("scaled", False)
        for field_name, value in (
            ("prefix", prefix),
            ("css_property", css_property),
            ("variable_stem", variable_stem),
        ):
            if not isinstance(value, str) or not value:
                raise RegistryLoadError(
                    source=source,
                    reason=f"property[{index}].{field_name} must be a non-empty string",
                )
        if not isinstance(scaled, bool):
            raise RegistryLoadError(
                source=source, reason=f"property[{index}].scaled must be a boolean"
            )
        descriptors.append(
            PropertyDescriptor(
                prefix=str(prefix),
                css_property=str(css_property),
                variable_stem=str(variable_stem),
                scaled=scaled,
            )
        )
    return validate_registry(
        PropertyRegistry(descriptors=tuple(descriptors), unit=unit), source=source
    )


def validate_registry(registry: PropertyRegistry, source: str) -> PropertyRegistry:
    """Reject duplicate prefixes or stems, and stems that could collide as keys.

    A stem segment may not start with a digit, so the first ``-<digit>`` in a
    variable key always marks where the magnitude begins.
    """
    if not registry.descriptors:
        raise RegistryLoadError(source=source, reason="registry is empty")
    seen_prefixes: set[str] = set()
    seen_stems: set[str] = set()
    for descriptor in registry.descriptors:
        if descriptor.prefix in seen_prefixes:
            raise RegistryLoadError(
                source=source, reason=f"duplicate prefix '{descriptor.prefix}'"
            )
        if descriptor.variable_stem in seen_stems:
            raise RegistryLoadError(
                source=source, reason=f"duplicate variable stem '{descriptor.variable_stem}'"
            )
        if not _STEM_PATTERN.match(descriptor.variable_stem):
            raise RegistryLoadError(
                source=source,
                reason=(
                    f"variable stem '{descriptor.variable_stem}' must be a CSS identifier "
                    "with no '-' before a digit"
                ),
            )
        seen_prefixes.add(descriptor.prefix)
        seen_stems.add(descriptor.variable_stem)
    return registry
