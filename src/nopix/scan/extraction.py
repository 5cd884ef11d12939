"""Class-name extraction driven by the property registry."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from nopix.registry import PropertyRegistry
from nopix.scan.models import ExtractionResult, FileExtraction, SkippedPath

CLASS_ATTRIBUTE_PATTERN = re.compile(r'class="([^"]*)"')
MAGNITUDE_PATTERN = r"\d+(?:\.\d+)?"


@dataclass(slots=True, frozen=True)
class ClassPatterns:
    """Compiled patterns for one registry."""

    anchored: re.Pattern[str] | None
    by_prefix: tuple[tuple[str, re.Pattern[str]], ...]


def compile_patterns(registry: PropertyRegistry) -> ClassPatterns:
    """Compile the anchored class matcher and the per-prefix value scanners."""
    unit = re.escape(registry.unit)
    prefixes = registry.prefixes()
    anchored: re.Pattern[str] | None = None
    if prefixes:
        alternation = "|".join(re.escape(prefix) for prefix in prefixes)
        anchored = re.compile(rf"(?:{alternation}){MAGNITUDE_PATTERN}{unit}")
    by_prefix = tuple(
        (prefix, re.compile(rf"{re.escape(prefix)}({MAGNITUDE_PATTERN}{unit})"))
        for prefix in prefixes
    )
    return ClassPatterns(anchored=anchored, by_prefix=by_prefix)


def extract_valid_classes(text: str, patterns: ClassPatterns) -> list[str]:
    """Return class tokens inside class="..." that fully match a registered prefix."""
    if patterns.anchored is None:
        return []
    output: list[str] = []
    for match in CLASS_ATTRIBUTE_PATTERN.finditer(text):
        for token in match.group(1).split():
            if patterns.anchored.fullmatch(token):
                output.append(token)
    return output


def extract_values_by_prefix(text: str, patterns: ClassPatterns) -> dict[str, tuple[str, ...]]:
    """Return magnitude/unit tokens per prefix found anywhere in the text.

    The scan is not limited to class attributes: any ``<prefix><number><unit>``
    sequence counts, including one embedded in a longer token.
    """
    output: dict[str, tuple[str, ...]] = {}
    for prefix, pattern in patterns.by_prefix:
        values = {match.group(1) for match in pattern.finditer(text)}
        if values:
            output[prefix] = tuple(sorted(values))
    return output


def extract_file(text: str, patterns: ClassPatterns) -> FileExtraction:
    """Run both extraction passes over one file's text."""
    valid = tuple(dict.fromkeys(extract_valid_classes(text, patterns)))
    return FileExtraction(
        valid_classes=valid,
        values_by_prefix=extract_values_by_prefix(text, patterns),
    )


def extract_markup(
    paths: Iterable[Path],
    registry: PropertyRegistry,
    on_skip: Callable[[SkippedPath], None] | None = None,
) -> ExtractionResult:
    """Extract and aggregate values from every readable markup file."""
    patterns = compile_patterns(registry)
    valid_classes: set[str] = set()
    values: dict[str, set[str]] = {}
    skipped: list[SkippedPath] = []
    scanned = 0
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            entry = SkippedPath(path=path, reason=exc.strerror or exc.__class__.__name__)
            skipped.append(entry)
            if on_skip is not None:
                on_skip(entry)
            continue
        scanned += 1
        extraction = extract_file(text, patterns)
        valid_classes.update(extraction.valid_classes)
        for prefix, raw_values in extraction.values_by_prefix.items():
            values.setdefault(prefix, set()).update(raw_values)
    return ExtractionResult(
        valid_classes=tuple(sorted(valid_classes)),
        values_by_prefix={prefix: tuple(sorted(values[prefix])) for prefix in sorted(values)},
        files_scanned=scanned,
        skipped=tuple(skipped),
    )
