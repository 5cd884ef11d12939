"""Scan, extract, merge, generate and persist in one pass."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from nopix.config import CliOverrides, NopixConfig, load_effective_config
from nopix.generate import (
    generate_blocks,
    merge_variable_state,
    used_variable_keys,
)
from nopix.logging import JsonlEventLogger, Reporter, utc_timestamp
from nopix.persist import (
    PersistenceError,
    read_theme_state,
    write_theme_file,
    write_utility_file,
)
from nopix.registry import PropertyRegistry, load_registry
from nopix.scan import (
    DiscoveryResult,
    SkippedPath,
    discover_markup_files,
    extract_markup,
    relative_label,
)

EVENT_LOG_NAME = "events.jsonl"


@dataclass(slots=True, frozen=True)
class PassResult:
    """Outcome of one regeneration pass."""

    ok: bool
    trigger: str | None
    timestamp: str
    duration_ms: int
    files_scanned: int
    files_skipped: int
    valid_classes: tuple[str, ...]
    variable_count: int
    utility_count: int
    new_keys: tuple[str, ...]
    removed_keys: tuple[str, ...]
    error: str | None = None


class RegenerationPipeline:
    """Keeps the theme and utility files in sync with the markup tree."""

    def __init__(
        self,
        config: NopixConfig,
        registry: PropertyRegistry,
        reporter: Reporter,
    ) -> None:
        self._config = config
        self._registry = registry
        self._reporter = reporter

    @property
    def config(self) -> NopixConfig:
        return self._config

    @property
    def registry(self) -> PropertyRegistry:
        return self._registry

    @property
    def reporter(self) -> Reporter:
        return self._reporter

    def label(self, path: Path) -> str:
        """Return a root-relative label for reports."""
        return relative_label(self._config.root_dir, path)

    def locate(self) -> DiscoveryResult:
        """Run the source locator and report unreadable directories."""
        result = discover_markup_files(
            self._config.root_dir,
            self._config.scan,
            ignored_dirs=(self._config.data_dir,),
        )
        for entry in result.skipped:
            self.report_skip(entry)
        return result

    def report_skip(self, entry: SkippedPath) -> None:
        self._reporter.emit(
            "path_skipped",
            f"cannot read ({entry.reason}), skipping",
            ok=False,
            path=self.label(entry.path),
        )

    def run(self, changed_file: Path | None = None) -> PassResult:
        """Run one full pass over the current tree.

        Every pass recomputes from the complete file set, so overlapping
        passes converge on the same output.
        """
        started = time.perf_counter()
        trigger = self.label(changed_file) if changed_file is not None else None
        if trigger is None:
            self._reporter.emit("pass_started", "initial markup analysis")
        else:
            self._reporter.emit("pass_started", "change detected", path=trigger)

        discovery = self.locate()
        if not discovery.files:
            self._reporter.emit("no_markup_files", "no markup files found", ok=True)
        extraction = extract_markup(discovery.files, self._registry, on_skip=self.report_skip)
        if extraction.valid_classes:
            self._reporter.emit(
                "valid_classes",
                f"{len(extraction.valid_classes)} valid classes detected",
                metadata={"classes": list(extraction.valid_classes)},
            )
        else:
            self._reporter.emit("valid_classes", 'no valid classes found in class="..."')

        skipped_count = len(discovery.skipped) + len(extraction.skipped)
        try:
            existing = read_theme_state(self._config.theme_file)
        except PersistenceError as exc:
            return self._failed(started, trigger, extraction.files_scanned, skipped_count, exc)

        merged = merge_variable_state(
            existing, used_variable_keys(self._registry, extraction.values_by_prefix)
        )
        removed_keys = tuple(sorted(set(existing) - set(merged)))
        blocks = generate_blocks(self._registry, extraction.values_by_prefix, merged)

        try:
            write_theme_file(self._config.theme_file, blocks.theme_block)
            self._reporter.emit(
                "theme_written",
                f"{len(blocks.variables)} variables",
                path=self.label(self._config.theme_file),
            )
            write_utility_file(self._config.utility_file, blocks.utility_block, self._registry)
            self._reporter.emit(
                "utilities_written",
                f"{len(blocks.rules)} utilities",
                path=self.label(self._config.utility_file),
            )
        except PersistenceError as exc:
            return self._failed(started, trigger, extraction.files_scanned, skipped_count, exc)

        result = PassResult(
            ok=True,
            trigger=trigger,
            timestamp=utc_timestamp(),
            duration_ms=int((time.perf_counter() - started) * 1000),
            files_scanned=extraction.files_scanned,
            files_skipped=skipped_count,
            valid_classes=extraction.valid_classes,
            variable_count=len(blocks.variables),
            utility_count=len(blocks.rules),
            new_keys=blocks.new_keys,
            removed_keys=removed_keys,
        )
        self._reporter.emit(
            "pass_completed",
            f"{result.files_scanned} files, {result.utility_count} utilities",
            path=trigger,
            metadata={
                "duration_ms": result.duration_ms,
                "new_keys": list(result.new_keys),
                "removed_keys": list(result.removed_keys),
            },
        )
        return result

    def _failed(
        self,
        started: float,
        trigger: str | None,
        files_scanned: int,
        files_skipped: int,
        error: PersistenceError,
    ) -> PassResult:
        self._reporter.emit(
            "pass_failed",
            f"cannot update generated files ({error.reason})",
            ok=False,
            path=self.label(error.path),
        )
        return PassResult(
            ok=False,
            trigger=trigger,
            timestamp=utc_timestamp(),
            duration_ms=int((time.perf_counter() - started) * 1000),
            files_scanned=files_scanned,
            files_skipped=files_skipped,
            valid_classes=(),
            variable_count=0,
            utility_count=0,
            new_keys=(),
            removed_keys=(),
            error=str(error),
        )


def create_pipeline(
    root_dir: str | Path,
    cli_overrides: CliOverrides | None = None,
    stream: TextIO | None = None,
) -> RegenerationPipeline:
    """Create a configured pipeline; raises RegistryLoadError when no registry loads."""
    config = load_effective_config(root_dir=Path(root_dir).resolve(), overrides=cli_overrides)
    registry = load_registry(config.registry_file)
    reporter = Reporter(logger=JsonlEventLogger(config.data_dir / EVENT_LOG_NAME), stream=stream)
    return RegenerationPipeline(config=config, registry=registry, reporter=reporter)
