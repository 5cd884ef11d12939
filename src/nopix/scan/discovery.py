"""Deterministic markup file discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from nopix.config import ScanConfig
from nopix.scan.models import SkippedPath


@dataclass(slots=True, frozen=True)
class DiscoveryResult:
    """Markup files found by one walk plus the paths that could not be read."""

    files: tuple[Path, ...]
    skipped: tuple[SkippedPath, ...]


def discover_markup_files(
    root_dir: Path,
    config: ScanConfig,
    ignored_dirs: tuple[Path, ...] = (),
) -> DiscoveryResult:
    """Walk the tree and return markup files sorted by relative path.

    Directories named in ``config.excluded_dirs`` are pruned, as is every
    directory listed in ``ignored_dirs`` (for example the nopix data dir).
    Unreadable directories are recorded in ``skipped`` and the walk goes on.
    Nothing is cached, so every call reflects the current tree.
    """
    root = root_dir.resolve()
    excluded_names = set(config.excluded_dirs)
    ignored = {path.resolve() for path in ignored_dirs}
    extensions = tuple(ext.lower() for ext in config.markup_extensions)
    found: list[tuple[str, Path]] = []
    skipped: list[SkippedPath] = []
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                ordered_entries = sorted(entries, key=lambda item: item.name)
        except OSError as exc:
            skipped.append(SkippedPath(path=current, reason=_os_reason(exc)))
            continue
        for entry in reversed(ordered_entries):
            full_path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=True)
            except OSError as exc:
                skipped.append(SkippedPath(path=full_path, reason=_os_reason(exc)))
                continue
            if is_dir:
                if entry.name in excluded_names or full_path in ignored:
                    continue
                stack.append(full_path)
                continue
            if not is_file:
                continue
            if not entry.name.lower().endswith(extensions):
                continue
            found.append((full_path.relative_to(root).as_posix(), full_path))
    found.sort(key=lambda item: item[0])
    return DiscoveryResult(
        files=tuple(path for _, path in found),
        skipped=tuple(skipped),
    )


def relative_label(root_dir: Path, path: Path) -> str:
    """Return a POSIX path relative to root, or the path itself when outside it."""
    try:
        return path.resolve().relative_to(root_dir.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _os_reason(exc: OSError) -> str:
    return exc.strerror or exc.__class__.__name__
