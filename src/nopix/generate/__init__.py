"""Variable state merging and block generation."""

from .theme import (
    GeneratedBlocks,
    UtilityRule,
    compute_value,
    generate_blocks,
    render_theme_block,
)
from .variables import (
    BASE_SCALE_VALUE,
    PROTECTED_KEY,
    merge_variable_state,
    parse_theme_variables,
    used_variable_keys,
    variable_key,
)

__all__ = [
    "BASE_SCALE_VALUE",
    "GeneratedBlocks",
    "PROTECTED_KEY",
    "UtilityRule",
    "compute_value",
    "generate_blocks",
    "merge_variable_state",
    "parse_theme_variables",
    "render_theme_block",
    "used_variable_keys",
    "variable_key",
]
