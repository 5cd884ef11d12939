"""Generated file persistence."""

from .writer import (
    PersistenceError,
    atomic_write_text,
    merge_utility_content,
    read_text_or_empty,
    read_theme_state,
    utility_rule_pattern,
    write_theme_file,
    write_utility_file,
)

__all__ = [
    "PersistenceError",
    "atomic_write_text",
    "merge_utility_content",
    "read_text_or_empty",
    "read_theme_state",
    "utility_rule_pattern",
    "write_theme_file",
    "write_utility_file",
]
