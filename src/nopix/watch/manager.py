"""Change-driven regeneration loop."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from nopix.config import WatchConfig
from nopix.pipeline import PassResult, RegenerationPipeline


@dataclass(slots=True)
class WatchedFileRecord:
    """Last modification time that a successful pass accounted for."""

    path: Path
    last_modified_ns: int


@dataclass(slots=True)
class WatchSession:
    """Mutable state owned by one watch run."""

    records: dict[Path, WatchedFileRecord] = field(default_factory=dict)
    watchers: dict[Path, asyncio.Task[None]] = field(default_factory=dict)
    debounce_timers: dict[Path, asyncio.Task[None]] = field(default_factory=dict)
    passes: set[asyncio.Task[None]] = field(default_factory=set)
    rescan_task: asyncio.Task[None] | None = None


class WatchManager:
    """Watches markup files and re-runs the pipeline when they change.

    Each watched file gets a stat poller that raises raw change
    notifications. Notifications are debounced per file, and a pass only runs
    when the file's mtime moved past the recorded one. A periodic rescan picks
    up new files and regenerates for them immediately.
    """

    def __init__(
        self,
        pipeline: RegenerationPipeline,
        watch_config: WatchConfig | None = None,
    ) -> None:
        self._pipeline = pipeline
        self._config = watch_config or pipeline.config.watch
        self._reporter = pipeline.reporter
        self._session = WatchSession()

    @property
    def session(self) -> WatchSession:
        return self._session

    async def run(self, stop_event: asyncio.Event | None = None) -> None:
        """Run the initial pass, then watch until ``stop_event`` is set."""
        await self.regenerate(None)
        discovery = await asyncio.to_thread(self._pipeline.locate)
        for path in discovery.files:
            self.register(path)
        self._reporter.emit(
            "watch_started",
            f"watching {len(self._session.records)} markup files",
            metadata={"rescan_interval_seconds": self._config.rescan_interval_seconds},
        )
        self._session.rescan_task = asyncio.create_task(self._rescan_loop())
        try:
            await (stop_event or asyncio.Event()).wait()
        finally:
            await self.close()

    def register(self, path: Path) -> bool:
        """Record a file and attach a watcher; report and skip on failure."""
        try:
            stat = path.stat()
        except OSError as exc:
            self._reporter.emit(
                "watch_attach_failed",
                f"cannot watch ({exc.strerror or exc.__class__.__name__})",
                ok=False,
                path=self._pipeline.label(path),
            )
            return False
        self._session.records[path] = WatchedFileRecord(
            path=path, last_modified_ns=stat.st_mtime_ns
        )
        self._session.watchers[path] = asyncio.create_task(
            self._poll_file(path, (stat.st_mtime_ns, stat.st_size))
        )
        return True

    def notify_change(self, path: Path) -> None:
        """Handle a raw change notification by re-arming the file's debounce timer."""
        if path not in self._session.records:
            return
        pending = self._session.debounce_timers.pop(path, None)
        if pending is not None:
            pending.cancel()
        self._session.debounce_timers[path] = asyncio.create_task(self._debounced(path))

    async def rescan(self) -> list[Path]:
        """Register files that appeared since the last scan and regenerate for each."""
        discovery = await asyncio.to_thread(self._pipeline.locate)
        discovered: list[Path] = []
        for path in discovery.files:
            if path in self._session.records:
                continue
            if not self.register(path):
                continue
            self._reporter.emit("file_discovered", "new file", path=self._pipeline.label(path))
            discovered.append(path)
            self._spawn(self._regenerate_for(path))
        return discovered

    async def regenerate(self, changed_file: Path | None) -> PassResult | None:
        """Run one pass off the event loop; unexpected errors are reported, not raised."""
        try:
            return await asyncio.to_thread(self._pipeline.run, changed_file)
        except Exception as exc:
            self._reporter.emit(
                "pass_failed",
                f"unexpected error ({exc.__class__.__name__}: {exc})",
                ok=False,
                path=self._pipeline.label(changed_file) if changed_file is not None else None,
            )
            return None

    async def wait_idle(self) -> None:
        """Wait until no debounce timer or pass is in flight."""
        while self._session.debounce_timers or self._session.passes:
            pending = [*self._session.debounce_timers.values(), *self._session.passes]
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        """Stop timers and watchers; passes already running finish first."""
        session = self._session
        cancelled: list[asyncio.Task[None]] = []
        if session.rescan_task is not None:
            cancelled.append(session.rescan_task)
            session.rescan_task = None
        cancelled.extend(session.watchers.values())
        cancelled.extend(session.debounce_timers.values())
        session.watchers.clear()
        session.debounce_timers.clear()
        for task in cancelled:
            task.cancel()
        await asyncio.gather(*cancelled, return_exceptions=True)
        if session.passes:
            await asyncio.gather(*session.passes, return_exceptions=True)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._session.passes.add(task)
        task.add_done_callback(self._session.passes.discard)

    async def _debounced(self, path: Path) -> None:
        await asyncio.sleep(self._config.debounce_seconds)
        if self._session.debounce_timers.get(path) is asyncio.current_task():
            del self._session.debounce_timers[path]
        # Settling runs as its own task so a newer notification cannot cancel it.
        self._spawn(self._settle(path))

    async def _settle(self, path: Path) -> None:
        try:
            modified_ns = path.stat().st_mtime_ns
        except OSError as exc:
            self._reporter.emit(
                "stat_failed",
                f"cannot check ({exc.strerror or exc.__class__.__name__})",
                ok=False,
                path=self._pipeline.label(path),
            )
            return
        record = self._session.records.get(path)
        if record is None or modified_ns <= record.last_modified_ns:
            return
        result = await self.regenerate(path)
        if result is not None and result.ok:
            record.last_modified_ns = max(record.last_modified_ns, modified_ns)

    async def _poll_file(self, path: Path, signature: tuple[int, int]) -> None:
        failing = False
        while True:
            await asyncio.sleep(self._config.poll_interval_seconds)
            try:
                stat = path.stat()
            except FileNotFoundError:
                self._forget(path)
                return
            except OSError as exc:
                if not failing:
                    self._reporter.emit(
                        "stat_failed",
                        f"cannot check ({exc.strerror or exc.__class__.__name__})",
                        ok=False,
                        path=self._pipeline.label(path),
                    )
                failing = True
                continue
            failing = False
            current = (stat.st_mtime_ns, stat.st_size)
            if current != signature:
                signature = current
                self.notify_change(path)

    def _forget(self, path: Path) -> None:
        session = self._session
        session.records.pop(path, None)
        session.watchers.pop(path, None)
        pending = session.debounce_timers.pop(path, None)
        if pending is not None:
            pending.cancel()
        self._reporter.emit("file_removed", "no longer present", path=self._pipeline.label(path))
        self._spawn(self._regenerate_for(path))

    async def _regenerate_for(self, path: Path) -> None:
        await self.regenerate(path)

    async def _rescan_loop(self) -> None:
        while True:
            await asyncio.sleep(self._config.rescan_interval_seconds)
            await self.rescan()
