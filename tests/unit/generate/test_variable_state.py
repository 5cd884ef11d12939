from __future__ import annotations

from nopix.generate import (
    PROTECTED_KEY,
    merge_variable_state,
    parse_theme_variables,
    used_variable_keys,
    variable_key,
)
from nopix.registry import builtin_registry


def test_variable_key_replaces_decimal_separator() -> None:
    assert variable_key("padding", "1.7rem", "rem") == "--padding-1-7rem"
    assert variable_key("fontSize", "0.5rem", "rem") == "--fontSize-0-5rem"
    assert variable_key("margin", "2rem", "rem") == "--margin-2rem"


def test_variable_key_keeps_distinct_values_apart() -> None:
    keys = {
        variable_key("padding", "1.7rem", "rem"),
        variable_key("padding", "17rem", "rem"),
        variable_key("padding", "1.07rem", "rem"),
        variable_key("margin", "1.7rem", "rem"),
    }
    assert len(keys) == 4


def test_parse_theme_variables_reads_first_theme_block() -> None:
    css = "\n".join(
        [
            ":root {",
            "  font-size: 16px;",
            "}",
            "",
            "@theme {",
            "  --padding-1-7rem: 17px;",
            "  --boxShadow-2rem: 0 0 20px rgba(0, 0, 0, 0.1);",
            "  not a declaration",
            "}",
            "",
            "@theme {",
            "  --ignored-1rem: 1px;",
            "}",
        ]
    )

    assert parse_theme_variables(css) == {
        "--padding-1-7rem": "17px",
        "--boxShadow-2rem": "0 0 20px rgba(0, 0, 0, 0.1)",
    }


def test_parse_theme_variables_without_block_is_empty() -> None:
    assert parse_theme_variables("") == {}
    assert parse_theme_variables(":root { --x: 1px; }") == {}


def test_used_variable_keys_follow_registry_stems() -> None:
    used = used_variable_keys(builtin_registry(), {"p-": ("1.7rem",), "text-": ("0.5rem",)})

    assert used == {"--padding-1-7rem", "--fontSize-0-5rem"}


def test_merge_prunes_unused_keys_and_keeps_stored_values() -> None:
    existing = {
        PROTECTED_KEY: "12px",
        "--padding-1-7rem": "18px",
        "--margin-3rem": "30px",
    }

    merged = merge_variable_state(existing, {"--padding-1-7rem", "--width-2rem"})

    assert merged == {PROTECTED_KEY: "12px", "--padding-1-7rem": "18px"}


def test_merge_always_contains_protected_key() -> None:
    assert merge_variable_state({}, set()) == {PROTECTED_KEY: "10px"}
