"""Generated stylesheet persistence."""

from __future__ import annotations

import contextlib
import os
import re
import threading
from dataclasses import dataclass
from pathlib import Path

from nopix.generate.variables import parse_theme_variables
from nopix.registry import PropertyRegistry


@dataclass(slots=True, frozen=True)
class PersistenceError(Exception):
    """Raised when a generated file cannot be read or written."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


def utility_rule_pattern(registry: PropertyRegistry) -> re.Pattern[str]:
    """Match any ``@utility`` rule whose selector starts with a registered prefix."""
    alternation = "|".join(re.escape(prefix) for prefix in registry.prefixes())
    return re.compile(rf"@utility\s+(?:{alternation})[^\s{{]+\s*\{{[^}}]*\}}\s*")


def read_text_or_empty(path: Path) -> str:
    """Read a generated file, treating a missing file as empty."""
    if not path.exists():
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(path=path, reason=_reason(exc)) from exc


def read_theme_state(path: Path) -> dict[str, str]:
    """Return the variables currently persisted in the theme file."""
    return parse_theme_variables(read_text_or_empty(path))


def write_theme_file(path: Path, theme_block: str) -> None:
    """Overwrite the theme file with the freshly rendered block."""
    atomic_write_text(path, f"{theme_block}\n")


def merge_utility_content(existing: str, utility_block: str, pattern: re.Pattern[str]) -> str:
    """Drop previously generated rules and append the new block after user content."""
    remainder = pattern.sub("", existing)
    if not utility_block:
        return remainder
    preserved = remainder.strip()
    if not preserved:
        return f"{utility_block}\n"
    return f"{preserved}\n\n{utility_block}\n"


def write_utility_file(path: Path, utility_block: str, registry: PropertyRegistry) -> str:
    """Rewrite the utility file, keeping user-authored content. Returns what was written."""
    existing = read_text_or_empty(path)
    content = merge_utility_content(existing, utility_block, utility_rule_pattern(registry))
    atomic_write_text(path, content)
    return content


def atomic_write_text(path: Path, content: str) -> None:
    """Write via a per-thread sibling temp file so readers never see a partial file."""
    tmp = path.with_name(f"{path.name}.{os.getpid()}.{threading.get_ident()}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        tmp.replace(path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise PersistenceError(path=path, reason=_reason(exc)) from exc


def _reason(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__
