from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/nopix/cli.py",
        "src/nopix/config.py",
        "src/nopix/pipeline.py",
        "src/nopix/registry/__init__.py",
        "src/nopix/scan/__init__.py",
        "src/nopix/generate/__init__.py",
        "src/nopix/persist/__init__.py",
        "src/nopix/watch/__init__.py",
        "src/nopix/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
