"""Structured JSONL event log and console reporting."""

from __future__ import annotations

import json
import threading
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO

RECENT_EVENT_LIMIT = 256


@dataclass(slots=True, frozen=True)
class PipelineEvent:
    """One reportable occurrence during a pass or a watch session."""

    timestamp: str
    kind: str
    ok: bool
    path: str | None
    message: str
    metadata: dict[str, object] = field(default_factory=dict)


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonlEventLogger:
    """Append-only JSONL event logger and bounded reader."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: PipelineEvent) -> None:
        """Append an event as one JSON object per line."""
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True))
            handle.write("\n")

    def read(self, since: str | None = None, limit: int = 50) -> list[dict[str, object]]:
        """Read recent events, optionally filtered by timestamp lower bound."""
        if limit < 1:
            return []
        entries: list[dict[str, object]] = []
        if not self._path.exists():
            return entries
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    record = json.loads(stripped)
                except json.JSONDecodeError:
                    continue
                if since is not None:
                    ts = record.get("timestamp")
                    if not isinstance(ts, str) or ts < since:
                        continue
                entries.append(record)
        if len(entries) <= limit:
            return entries
        return entries[-limit:]


class Reporter:
    """Fans events out to the JSONL log and a human-readable stream.

    Regeneration passes run on worker threads, so emission is serialized. Only
    the most recent ``recent_limit`` events stay in memory; the JSONL log keeps
    the full history.
    """

    def __init__(
        self,
        logger: JsonlEventLogger | None = None,
        stream: TextIO | None = None,
        recent_limit: int = RECENT_EVENT_LIMIT,
    ) -> None:
        self._logger = logger
        self._stream = stream
        self._lock = threading.Lock()
        self._events: deque[PipelineEvent] = deque(maxlen=recent_limit)

    @property
    def events(self) -> tuple[PipelineEvent, ...]:
        """Return the most recent events emitted through this reporter, oldest first."""
        with self._lock:
            return tuple(self._events)

    def emit(
        self,
        kind: str,
        message: str,
        *,
        ok: bool = True,
        path: str | None = None,
        metadata: dict[str, object] | None = None,
    ) -> PipelineEvent:
        """Record one event and echo it to the stream."""
        event = PipelineEvent(
            timestamp=utc_timestamp(),
            kind=kind,
            ok=ok,
            path=path,
            message=message,
            metadata=dict(sorted((metadata or {}).items())),
        )
        with self._lock:
            self._events.append(event)
            if self._logger is not None:
                try:
                    self._logger.append(event)
                except OSError as exc:
                    self._write_line(f"[error] event_log: cannot append event ({exc})")
            self._write_line(format_event(event))
        return event

    def _write_line(self, line: str) -> None:
        if self._stream is None:
            return
        self._stream.write(f"{line}\n")
        self._stream.flush()


def format_event(event: PipelineEvent) -> str:
    """Render an event as a single console line."""
    level = "info" if event.ok else "error"
    location = f" {event.path}:" if event.path else ""
    return f"[{level}] {event.kind}:{location} {event.message}"
