from __future__ import annotations

from pathlib import Path

from nopix.config import ScanConfig
from nopix.scan import discover_markup_files, relative_label


def _touch(path: Path, text: str = "<div></div>\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_discovery_honors_extensions_exclusions_and_stable_order(tmp_path: Path) -> None:
    _touch(tmp_path / "pages" / "z.html")
    _touch(tmp_path / "pages" / "a.HTML")
    _touch(tmp_path / "index.html")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "node_modules" / "pkg" / "demo.html")
    _touch(tmp_path / "dist" / "index.html")
    _touch(tmp_path / "src" / "build" / "out.html")

    config = ScanConfig(
        markup_extensions=(".html",),
        excluded_dirs=("node_modules", ".git", "dist", "build"),
    )
    result = discover_markup_files(tmp_path, config)

    labels = [relative_label(tmp_path, path) for path in result.files]
    assert labels == ["index.html", "pages/a.HTML", "pages/z.html"]
    assert result.skipped == ()


def test_discovery_matches_excluded_names_not_substrings(tmp_path: Path) -> None:
    _touch(tmp_path / "builder" / "page.html")
    _touch(tmp_path / "distant" / "page.html")

    config = ScanConfig(markup_extensions=(".html",), excluded_dirs=("build", "dist"))
    result = discover_markup_files(tmp_path, config)

    labels = [relative_label(tmp_path, path) for path in result.files]
    assert labels == ["builder/page.html", "distant/page.html"]


def test_discovery_skips_ignored_directories(tmp_path: Path) -> None:
    _touch(tmp_path / "page.html")
    _touch(tmp_path / ".nopix" / "snapshot.html")

    config = ScanConfig(markup_extensions=(".html",), excluded_dirs=())
    result = discover_markup_files(tmp_path, config, ignored_dirs=(tmp_path / ".nopix",))

    assert [path.name for path in result.files] == ["page.html"]


def test_discovery_of_empty_tree_returns_no_files(tmp_path: Path) -> None:
    config = ScanConfig(markup_extensions=(".html",), excluded_dirs=())

    result = discover_markup_files(tmp_path, config)

    assert result.files == ()


def test_relative_label_falls_back_for_outside_paths(tmp_path: Path) -> None:
    outside = tmp_path.parent / "elsewhere.html"

    assert relative_label(tmp_path / "root", outside) == outside.as_posix()
