"""Theme and utility block generation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from nopix.generate.variables import BASE_SCALE_VALUE, PROTECTED_KEY, variable_key
from nopix.registry import PropertyDescriptor, PropertyRegistry

SCALE_FACTOR = Decimal(10)
SCALED_UNIT = "px"
ROOT_FONT_SIZE = "16px"
BOX_SHADOW_PROPERTY = "box-shadow"

THEME_HEADER = (
    ":root {\n"
    f"  font-size: {ROOT_FONT_SIZE};\n"
    f"  {PROTECTED_KEY}: {BASE_SCALE_VALUE};\n"
    "}"
)


@dataclass(slots=True, frozen=True)
class UtilityRule:
    """One generated ``@utility`` rule."""

    class_name: str
    css_property: str
    variable_key: str

    def render(self) -> str:
        declaration = f"  {self.css_property}: var({self.variable_key});"
        return f"@utility {self.class_name} {{\n{declaration}\n}}"


@dataclass(slots=True, frozen=True)
class GeneratedBlocks:
    """Rendered output of one generation pass."""

    theme_block: str
    utility_block: str
    variables: dict[str, str]
    rules: tuple[UtilityRule, ...]
    new_keys: tuple[str, ...]


def compute_value(descriptor: PropertyDescriptor, raw_value: str, unit: str) -> str:
    """Compute the stored CSS value for a freshly discovered token.

    Scaled descriptors turn ``1.7rem`` into ``17px``; a scaled ``box-shadow``
    becomes a fixed-offset shadow of that size. Everything else keeps the raw
    token.
    """
    if not descriptor.scaled or not raw_value.endswith(unit):
        return raw_value
    try:
        magnitude = Decimal(raw_value[: -len(unit)])
    except InvalidOperation:
        return raw_value
    pixels = _format_decimal(magnitude * SCALE_FACTOR)
    if descriptor.css_property == BOX_SHADOW_PROPERTY:
        return f"0 0 {pixels}{SCALED_UNIT} rgba(0, 0, 0, 0.1)"
    return f"{pixels}{SCALED_UNIT}"


def generate_blocks(
    registry: PropertyRegistry,
    values_by_prefix: Mapping[str, tuple[str, ...]],
    merged_state: Mapping[str, str],
) -> GeneratedBlocks:
    """Fill in values for new keys and render both blocks in sorted order."""
    variables = dict(merged_state)
    rules: list[UtilityRule] = []
    new_keys: list[str] = []
    for descriptor in registry.descriptors:
        for raw_value in values_by_prefix.get(descriptor.prefix, ()):
            key = variable_key(descriptor.variable_stem, raw_value, registry.unit)
            if key not in variables:
                variables[key] = compute_value(descriptor, raw_value, registry.unit)
                new_keys.append(key)
            rules.append(
                UtilityRule(
                    class_name=f"{descriptor.prefix}{raw_value}",
                    css_property=descriptor.css_property,
                    variable_key=key,
                )
            )
    rules.sort(key=lambda rule: rule.class_name)
    return GeneratedBlocks(
        theme_block=render_theme_block(variables),
        utility_block="\n\n".join(rule.render() for rule in rules),
        variables=variables,
        rules=tuple(rules),
        new_keys=tuple(sorted(new_keys)),
    )


def render_theme_block(variables: Mapping[str, str]) -> str:
    """Render the ``:root`` header and the sorted ``@theme`` body."""
    lines = [f"  {key}: {variables[key]};" for key in sorted(variables)]
    body = "\n".join(lines)
    return f"{THEME_HEADER}\n\n@theme {{\n{body}\n}}"


def _format_decimal(value: Decimal) -> str:
    return format(value.normalize(), "f")
