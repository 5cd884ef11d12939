from __future__ import annotations

import asyncio
import io
import os
from pathlib import Path

from nopix.config import CliOverrides
from nopix.pipeline import RegenerationPipeline, create_pipeline
from nopix.watch import WatchManager


def _idle_pipeline(root: Path) -> RegenerationPipeline:
    (root / "nopix.toml").write_text("[watch]\npoll_interval_seconds = 60\n", encoding="utf-8")
    return create_pipeline(
        root,
        cli_overrides=CliOverrides(debounce_seconds=0.05),
        stream=io.StringIO(),
    )


def _pass_count(pipeline: RegenerationPipeline) -> int:
    return sum(1 for event in pipeline.reporter.events if event.kind == "pass_completed")


def test_burst_of_notifications_runs_one_pass(tmp_path: Path) -> None:
    index = tmp_path / "index.html"
    index.write_text('<div class="p-1rem"></div>\n', encoding="utf-8")
    pipeline = _idle_pipeline(tmp_path)

    async def scenario() -> None:
        manager = WatchManager(pipeline)
        assert manager.register(index) is True
        stat = index.stat()
        later = stat.st_mtime_ns + 2_000_000_000
        os.utime(index, ns=(later, later))

        for _ in range(3):
            manager.notify_change(index)
        await manager.wait_idle()

        assert manager.session.records[index].last_modified_ns == later
        await manager.close()

    asyncio.run(scenario())

    assert _pass_count(pipeline) == 1


def test_notification_without_mtime_change_skips_pass(tmp_path: Path) -> None:
    index = tmp_path / "index.html"
    index.write_text('<div class="p-1rem"></div>\n', encoding="utf-8")
    pipeline = _idle_pipeline(tmp_path)

    async def scenario() -> None:
        manager = WatchManager(pipeline)
        manager.register(index)
        manager.notify_change(index)
        await manager.wait_idle()
        await manager.close()

    asyncio.run(scenario())

    assert _pass_count(pipeline) == 0


def test_unstatable_file_is_reported_and_not_watched(tmp_path: Path) -> None:
    pipeline = _idle_pipeline(tmp_path)
    missing = tmp_path / "missing.html"

    async def scenario() -> bool:
        manager = WatchManager(pipeline)
        registered = manager.register(missing)
        assert missing not in manager.session.records
        await manager.close()
        return registered

    assert asyncio.run(scenario()) is False
    failures = [event for event in pipeline.reporter.events if not event.ok]
    assert [event.kind for event in failures] == ["watch_attach_failed"]


def test_rescan_registers_new_files_and_regenerates(tmp_path: Path) -> None:
    pipeline = _idle_pipeline(tmp_path)

    async def scenario() -> list[Path]:
        manager = WatchManager(pipeline)
        (tmp_path / "new.html").write_text('<div class="gap-1rem"></div>\n', encoding="utf-8")
        discovered = await manager.rescan()
        await manager.wait_idle()
        again = await manager.rescan()
        assert again == []
        await manager.close()
        return discovered

    discovered = asyncio.run(scenario())

    assert [path.name for path in discovered] == ["new.html"]
    assert _pass_count(pipeline) == 1
    theme = (tmp_path / "src" / "nopix_theme.css").read_text(encoding="utf-8")
    assert "--gap-1rem: 10px;" in theme
