from __future__ import annotations

from pathlib import Path

import pytest

from nopix.registry import (
    PropertyDescriptor,
    PropertyRegistry,
    RegistryLoadError,
    load_registry,
    validate_registry,
)


def _write_registry(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_registry_file_is_loaded_in_declared_order(tmp_path: Path) -> None:
    path = _write_registry(
        tmp_path / "registry.toml",
        'unit = "em"',
        "",
        "[[property]]",
        'prefix = "gap-"',
        'css_property = "gap"',
        'variable_stem = "gap"',
        "scaled = true",
        "",
        "[[property]]",
        'prefix = "z-"',
        'css_property = "z-index"',
        'variable_stem = "zIndex"',
    )

    registry = load_registry(path)

    assert registry.unit == "em"
    assert registry.prefixes() == ("gap-", "z-")
    assert registry.descriptors[1].css_property == "z-index"
    assert registry.descriptors[1].scaled is False


def test_missing_registry_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(RegistryLoadError, match="Cannot load property registry"):
        load_registry(tmp_path / "missing.toml")


def test_invalid_toml_raises_load_error(tmp_path: Path) -> None:
    path = _write_registry(tmp_path / "registry.toml", "[[property]", "prefix =")

    with pytest.raises(RegistryLoadError, match="invalid TOML"):
        load_registry(path)


def test_registry_without_properties_is_rejected(tmp_path: Path) -> None:
    path = _write_registry(tmp_path / "registry.toml", 'unit = "rem"')

    with pytest.raises(RegistryLoadError, match="property"):
        load_registry(path)


def test_non_boolean_scaled_flag_is_rejected(tmp_path: Path) -> None:
    path = _write_registry(
        tmp_path / "registry.toml",
        "[[property]]",
        'prefix = "p-"',
        'css_property = "padding"',
        'variable_stem = "padding"',
        'scaled = "yes"',
    )

    with pytest.raises(RegistryLoadError, match=r"property\[0\]\.scaled"):
        load_registry(path)


def test_duplicate_prefix_is_rejected() -> None:
    registry = PropertyRegistry(
        descriptors=(
            PropertyDescriptor("p-", "padding", "padding", True),
            PropertyDescriptor("p-", "padding-block", "paddingBlock", True),
        )
    )

    with pytest.raises(RegistryLoadError, match="duplicate prefix 'p-'"):
        validate_registry(registry, source="test")


def test_duplicate_variable_stem_is_rejected() -> None:
    registry = PropertyRegistry(
        descriptors=(
            PropertyDescriptor("p-", "padding", "padding", True),
            PropertyDescriptor("pad-", "padding", "padding", True),
        )
    )

    with pytest.raises(RegistryLoadError, match="duplicate variable stem"):
        validate_registry(registry, source="test")


def test_load_error_message_names_source() -> None:
    error = RegistryLoadError(source="custom.toml", reason="registry is empty")

    assert str(error) == "Cannot load property registry from custom.toml: registry is empty"


def test_stem_with_dash_before_digit_is_rejected(tmp_path: Path) -> None:
    path = _write_registry(
        tmp_path / "registry.toml",
        "[[property]]",
        'prefix = "a-"',
        'css_property = "padding"',
        'variable_stem = "a"',
        "",
        "[[property]]",
        'prefix = "b-"',
        'css_property = "margin"',
        'variable_stem = "a-1"',
    )

    with pytest.raises(RegistryLoadError, match="variable stem 'a-1'"):
        load_registry(path)


def test_dashed_stems_with_letter_segments_are_accepted() -> None:
    registry = PropertyRegistry(
        descriptors=(
            PropertyDescriptor("p-", "padding", "padding-block", True),
            PropertyDescriptor("m-", "margin", "margin2", True),
        )
    )

    assert validate_registry(registry, source="test") is registry
