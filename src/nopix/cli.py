"""Command-line entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TextIO

from nopix.config import CliOverrides, load_effective_config
from nopix.logging import JsonlEventLogger
from nopix.pipeline import EVENT_LOG_NAME, create_pipeline
from nopix.registry import RegistryLoadError
from nopix.watch import WatchManager

EXIT_OK = 0
EXIT_REGISTRY_FAILED = 1
EXIT_PASS_FAILED = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for the nopix commands."""
    parser = argparse.ArgumentParser(prog="nopix")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--root", required=False, default=".")
    common.add_argument("--data-dir", required=False, default=None)

    generate = subparsers.add_parser(
        "generate", parents=[common], help="Regenerate the theme and utility files once."
    )
    watch = subparsers.add_parser(
        "watch", parents=[common], help="Regenerate now, then on every markup change."
    )
    for sub in (generate, watch):
        sub.add_argument("--theme-file", required=False, default=None)
        sub.add_argument("--utility-file", required=False, default=None)
        sub.add_argument("--registry-file", required=False, default=None)
    watch.add_argument("--rescan-interval", type=float, required=False, default=None)
    watch.add_argument("--debounce", type=float, required=False, default=None)

    events = subparsers.add_parser("events", parents=[common], help="Print recent events.")
    events.add_argument("--limit", type=int, required=False, default=50)
    events.add_argument("--since", required=False, default=None)
    return parser


def overrides_from_args(args: argparse.Namespace) -> CliOverrides:
    """Translate parsed arguments into config overrides."""
    return CliOverrides(
        data_dir=_optional_path(args.data_dir),
        theme_file=_optional_path(getattr(args, "theme_file", None)),
        utility_file=_optional_path(getattr(args, "utility_file", None)),
        registry_file=_optional_path(getattr(args, "registry_file", None)),
        rescan_interval_seconds=getattr(args, "rescan_interval", None),
        debounce_seconds=getattr(args, "debounce", None),
    )


def main(argv: list[str] | None = None, stream: TextIO | None = None) -> int:
    """Entrypoint for the nopix process."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    out = stream if stream is not None else sys.stderr
    overrides = overrides_from_args(args)

    if args.command == "events":
        config = load_effective_config(Path(args.root), overrides)
        logger = JsonlEventLogger(config.data_dir / EVENT_LOG_NAME)
        for entry in logger.read(since=args.since, limit=args.limit):
            out.write(f"{json.dumps(entry, sort_keys=True)}\n")
        return EXIT_OK

    try:
        pipeline = create_pipeline(args.root, cli_overrides=overrides, stream=out)
    except RegistryLoadError as error:
        out.write(f"[error] registry_failed: {error}\n")
        return EXIT_REGISTRY_FAILED

    if args.command == "generate":
        result = pipeline.run()
        return EXIT_OK if result.ok else EXIT_PASS_FAILED

    manager = WatchManager(pipeline)
    try:
        asyncio.run(manager.run())
    except KeyboardInterrupt:
        pipeline.reporter.emit("watch_stopped", "interrupted")
    return EXIT_OK


def _optional_path(value: str | None) -> Path | None:
    if value is None:
        return None
    return Path(value).resolve()
