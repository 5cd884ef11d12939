"""Typed models for scanning and extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, frozen=True)
class SkippedPath:
    """A directory or file left out of a pass because it could not be read."""

    path: Path
    reason: str


@dataclass(slots=True, frozen=True)
class ExtractedOccurrence:
    """One magnitude/unit token matched for one prefix."""

    prefix: str
    raw_value: str

    @property
    def class_name(self) -> str:
        return f"{self.prefix}{self.raw_value}"


@dataclass(slots=True, frozen=True)
class FileExtraction:
    """Extraction output for a single markup file."""

    valid_classes: tuple[str, ...]
    values_by_prefix: dict[str, tuple[str, ...]]


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Extraction output aggregated over every scanned file."""

    valid_classes: tuple[str, ...]
    values_by_prefix: dict[str, tuple[str, ...]]
    files_scanned: int
    skipped: tuple[SkippedPath, ...] = field(default_factory=tuple)

    def occurrences(self) -> list[ExtractedOccurrence]:
        """Flatten to occurrences ordered by prefix then raw value."""
        output: list[ExtractedOccurrence] = []
        for prefix in sorted(self.values_by_prefix):
            for raw_value in self.values_by_prefix[prefix]:
                output.append(ExtractedOccurrence(prefix=prefix, raw_value=raw_value))
        return output
