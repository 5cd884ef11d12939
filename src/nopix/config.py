"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "nopix.toml"

MAX_RESCAN_INTERVAL_CAP = 3600.0
MAX_DEBOUNCE_CAP = 60.0
MAX_POLL_INTERVAL_CAP = 60.0

DEFAULT_THEME_FILE = "src/nopix_theme.css"
DEFAULT_UTILITY_FILE = "src/nopix_prefix.css"
DEFAULT_DATA_DIR = ".nopix"
DEFAULT_MARKUP_EXTENSIONS = (".html",)
DEFAULT_EXCLUDED_DIRS = ("node_modules", ".git", "dist", "build")
DEFAULT_RESCAN_INTERVAL_SECONDS = 10.0
DEFAULT_DEBOUNCE_SECONDS = 0.5
DEFAULT_POLL_INTERVAL_SECONDS = 0.25


@dataclass(slots=True, frozen=True)
class ScanConfig:
    """Markup discovery settings."""

    markup_extensions: tuple[str, ...]
    excluded_dirs: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class WatchConfig:
    """Timer settings for the watch loop."""

    rescan_interval_seconds: float
    debounce_seconds: float
    poll_interval_seconds: float


@dataclass(slots=True, frozen=True)
class NopixConfig:
    """Fully merged configuration."""

    root_dir: Path
    data_dir: Path
    theme_file: Path
    utility_file: Path
    registry_file: Path | None
    scan: ScanConfig
    watch: WatchConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "root_dir": str(self.root_dir),
            "data_dir": str(self.data_dir),
            "theme_file": str(self.theme_file),
            "utility_file": str(self.utility_file),
            "registry_file": str(self.registry_file) if self.registry_file else None,
            "scan": {
                "markup_extensions": list(self.scan.markup_extensions),
                "excluded_dirs": list(self.scan.excluded_dirs),
            },
            "watch": {
                "rescan_interval_seconds": self.watch.rescan_interval_seconds,
                "debounce_seconds": self.watch.debounce_seconds,
                "poll_interval_seconds": self.watch.poll_interval_seconds,
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    data_dir: Path | None = None
    theme_file: Path | None = None
    utility_file: Path | None = None
    registry_file: Path | None = None
    rescan_interval_seconds: float | None = None
    debounce_seconds: float | None = None


def default_config(root_dir: Path) -> NopixConfig:
    """Build default config for a given project root."""
    resolved_root = root_dir.resolve()
    return NopixConfig(
        root_dir=resolved_root,
        data_dir=resolved_root / DEFAULT_DATA_DIR,
        theme_file=resolved_root / DEFAULT_THEME_FILE,
        utility_file=resolved_root / DEFAULT_UTILITY_FILE,
        registry_file=None,
        scan=ScanConfig(
            markup_extensions=DEFAULT_MARKUP_EXTENSIONS,
            excluded_dirs=DEFAULT_EXCLUDED_DIRS,
        ),
        watch=WatchConfig(
            rescan_interval_seconds=DEFAULT_RESCAN_INTERVAL_SECONDS,
            debounce_seconds=DEFAULT_DEBOUNCE_SECONDS,
            poll_interval_seconds=DEFAULT_POLL_INTERVAL_SECONDS,
        ),
    )


def load_project_config_file(root_dir: Path) -> dict[str, object]:
    """Load optional nopix.toml from the project root."""
    config_path = root_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item:
            raise ValueError(
                f"Config field '{section}.{field}' must contain only non-empty strings."
            )
        output.append(item)
    return tuple(output)


def _optional_path(value: object, name: str, root_dir: Path, default: Path | None) -> Path | None:
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Config field '{name}' must be a non-empty string path.")
    path = Path(value)
    if not path.is_absolute():
        path = root_dir / path
    return path.resolve()


def merge_config(
    base: NopixConfig, project_payload: dict[str, object], overrides: CliOverrides
) -> NopixConfig:
    """Merge defaults, project config, then CLI/startup overrides."""
    paths_payload = _get_table(project_payload, "paths")
    scan_payload = _get_table(project_payload, "scan")
    watch_payload = _get_table(project_payload, "watch")

    root = base.root_dir
    theme_file = _optional_path(paths_payload.get("theme_file"), "paths.theme_file", root, None)
    utility_file = _optional_path(
        paths_payload.get("utility_file"), "paths.utility_file", root, None
    )
    registry_file = _optional_path(
        paths_payload.get("registry_file"), "paths.registry_file", root, base.registry_file
    )
    data_dir = _optional_path(paths_payload.get("data_dir"), "paths.data_dir", root, None)

    markup_extensions = base.scan.markup_extensions
    if "markup_extensions" in scan_payload:
        markup_extensions = _tuple_of_strings(
            scan_payload["markup_extensions"], "scan", "markup_extensions"
        )
        if not markup_extensions:
            raise ValueError("Config field 'scan.markup_extensions' must not be empty.")
    excluded_dirs = base.scan.excluded_dirs
    if "excluded_dirs" in scan_payload:
        excluded_dirs = _tuple_of_strings(scan_payload["excluded_dirs"], "scan", "excluded_dirs")

    merged = NopixConfig(
        root_dir=root,
        data_dir=data_dir or base.data_dir,
        theme_file=theme_file or base.theme_file,
        utility_file=utility_file or base.utility_file,
        registry_file=registry_file,
        scan=ScanConfig(
            markup_extensions=tuple(ext.lower() for ext in markup_extensions),
            excluded_dirs=excluded_dirs,
        ),
        watch=WatchConfig(
            rescan_interval_seconds=_optional_positive_float_with_cap(
                watch_payload.get("rescan_interval_seconds"),
                "watch.rescan_interval_seconds",
                base.watch.rescan_interval_seconds,
                MAX_RESCAN_INTERVAL_CAP,
            ),
            debounce_seconds=_optional_positive_float_with_cap(
                watch_payload.get("debounce_seconds"),
                "watch.debounce_seconds",
                base.watch.debounce_seconds,
                MAX_DEBOUNCE_CAP,
            ),
            poll_interval_seconds=_optional_positive_float_with_cap(
                watch_payload.get("poll_interval_seconds"),
                "watch.poll_interval_seconds",
                base.watch.poll_interval_seconds,
                MAX_POLL_INTERVAL_CAP,
            ),
        ),
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: NopixConfig, overrides: CliOverrides) -> NopixConfig:
    """Apply startup overrides at highest precedence."""
    watch = WatchConfig(
        rescan_interval_seconds=_optional_positive_float_with_cap(
            overrides.rescan_interval_seconds,
            "overrides.rescan_interval_seconds",
            config.watch.rescan_interval_seconds,
            MAX_RESCAN_INTERVAL_CAP,
        ),
        debounce_seconds=_optional_positive_float_with_cap(
            overrides.debounce_seconds,
            "overrides.debounce_seconds",
            config.watch.debounce_seconds,
            MAX_DEBOUNCE_CAP,
        ),
        poll_interval_seconds=config.watch.poll_interval_seconds,
    )
    data_dir = overrides.data_dir or config.data_dir
    theme_file = overrides.theme_file or config.theme_file
    utility_file = overrides.utility_file or config.utility_file
    registry_file = overrides.registry_file or config.registry_file
    return NopixConfig(
        root_dir=config.root_dir,
        data_dir=data_dir.resolve(),
        theme_file=theme_file.resolve(),
        utility_file=utility_file.resolve(),
        registry_file=registry_file.resolve() if registry_file is not None else None,
        scan=config.scan,
        watch=watch,
    )


def load_effective_config(root_dir: Path, overrides: CliOverrides | None = None) -> NopixConfig:
    """Load effective config using merge order defaults -> nopix.toml -> overrides."""
    resolved_root = root_dir.resolve()
    base = default_config(resolved_root)
    payload = load_project_config_file(resolved_root)
    return merge_config(base, payload, overrides or CliOverrides())


def _optional_positive_float_with_cap(
    value: object,
    name: str,
    default: float,
    cap: float | None,
) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"Config field '{name}' must be a positive number.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap:g}.")
    return float(value)
