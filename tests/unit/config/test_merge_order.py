from __future__ import annotations

from pathlib import Path

from nopix.config import (
    DEFAULT_EXCLUDED_DIRS,
    CliOverrides,
    default_config,
    load_effective_config,
)


def test_defaults_point_at_src_stylesheets(tmp_path: Path) -> None:
    config = default_config(tmp_path)

    root = tmp_path.resolve()
    assert config.theme_file == root / "src" / "nopix_theme.css"
    assert config.utility_file == root / "src" / "nopix_prefix.css"
    assert config.data_dir == root / ".nopix"
    assert config.registry_file is None
    assert config.scan.markup_extensions == (".html",)
    assert set(DEFAULT_EXCLUDED_DIRS) == {"node_modules", ".git", "dist", "build"}
    assert config.watch.debounce_seconds == 0.5
    assert config.watch.rescan_interval_seconds == 10.0


def test_project_file_then_cli_overrides_take_precedence(tmp_path: Path) -> None:
    (tmp_path / "nopix.toml").write_text(
        "\n".join(
            [
                "[paths]",
                'theme_file = "styles/theme.css"',
                'utility_file = "styles/utilities.css"',
                "",
                "[scan]",
                'markup_extensions = [".HTML", ".htm"]',
                'excluded_dirs = ["vendor"]',
                "",
                "[watch]",
                "rescan_interval_seconds = 30",
                "debounce_seconds = 0.2",
            ]
        ),
        encoding="utf-8",
    )
    override_theme = tmp_path / "override.css"

    config = load_effective_config(
        tmp_path,
        CliOverrides(theme_file=override_theme, debounce_seconds=1.5),
    )

    root = tmp_path.resolve()
    assert config.theme_file == override_theme.resolve()
    assert config.utility_file == root / "styles" / "utilities.css"
    assert config.scan.markup_extensions == (".html", ".htm")
    assert config.scan.excluded_dirs == ("vendor",)
    assert config.watch.rescan_interval_seconds == 30.0
    assert config.watch.debounce_seconds == 1.5


def test_public_dict_is_serializable_snapshot(tmp_path: Path) -> None:
    snapshot = default_config(tmp_path).to_public_dict()

    assert snapshot["registry_file"] is None
    assert snapshot["scan"] == {
        "markup_extensions": [".html"],
        "excluded_dirs": ["node_modules", ".git", "dist", "build"],
    }
    assert isinstance(snapshot["theme_file"], str)
