"""Theme variable keys, parsing and pruning."""

from __future__ import annotations

import re
from collections.abc import Mapping

from nopix.registry import PropertyRegistry

PROTECTED_KEY = "--1rem"
BASE_SCALE_VALUE = "10px"

THEME_BLOCK_PATTERN = re.compile(r"@theme\s*\{([^}]*)\}")


def variable_key(variable_stem: str, raw_value: str, unit: str) -> str:
    """Build the custom-property name for one stem and magnitude/unit token.

    ``padding`` + ``1.7rem`` gives ``--padding-1-7rem``. Magnitudes carry at
    most one decimal point, and registry stems never contain ``-`` followed
    by a digit, so distinct stem and value pairs cannot produce the same key.
    """
    magnitude = raw_value[: -len(unit)] if unit and raw_value.endswith(unit) else raw_value
    return f"--{variable_stem}-{magnitude.replace('.', '-')}{unit}"


def parse_theme_variables(css_text: str) -> dict[str, str]:
    """Read ``key: value;`` lines from the first ``@theme { ... }`` block."""
    match = THEME_BLOCK_PATTERN.search(css_text)
    if match is None:
        return {}
    variables: dict[str, str] = {}
    for raw_line in match.group(1).splitlines():
        line = raw_line.strip()
        if not line:
            continue
        key, separator, value = line.partition(":")
        if not separator:
            continue
        key = key.strip()
        if not key:
            continue
        variables[key] = value.strip().removesuffix(";").strip()
    return variables


def used_variable_keys(
    registry: PropertyRegistry, values_by_prefix: Mapping[str, tuple[str, ...]]
) -> set[str]:
    """Return every variable key implied by the current extraction."""
    used: set[str] = set()
    for descriptor in registry.descriptors:
        for raw_value in values_by_prefix.get(descriptor.prefix, ()):
            used.add(variable_key(descriptor.variable_stem, raw_value, registry.unit))
    return used


def merge_variable_state(existing: Mapping[str, str], used_keys: set[str]) -> dict[str, str]:
    """Keep the protected entry plus in-use keys, with their stored values."""
    merged: dict[str, str] = {PROTECTED_KEY: BASE_SCALE_VALUE}
    for key, value in existing.items():
        if key == PROTECTED_KEY or key in used_keys:
            merged[key] = value
    return merged
