from __future__ import annotations

import io
import json
from pathlib import Path

from nopix.logging import JsonlEventLogger, Reporter, format_event


def test_reporter_writes_jsonl_schema_and_console_line(tmp_path: Path) -> None:
    log_path = tmp_path / ".nopix" / "events.jsonl"
    stream = io.StringIO()
    reporter = Reporter(logger=JsonlEventLogger(log_path), stream=stream)

    event = reporter.emit(
        "theme_written",
        "3 variables",
        path="src/nopix_theme.css",
        metadata={"b": 2, "a": 1},
    )

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert set(record.keys()) == {"kind", "message", "metadata", "ok", "path", "timestamp"}
    assert record["kind"] == "theme_written"
    assert record["ok"] is True
    assert record["metadata"] == {"a": 1, "b": 2}
    assert record["timestamp"].endswith("Z")
    assert stream.getvalue() == "[info] theme_written: src/nopix_theme.css: 3 variables\n"
    assert reporter.events == (event,)


def test_error_events_render_with_error_level() -> None:
    reporter = Reporter()

    event = reporter.emit("pass_failed", "cannot update generated files", ok=False)

    assert format_event(event) == "[error] pass_failed: cannot update generated files"


def test_event_log_read_honors_since_and_limit(tmp_path: Path) -> None:
    log_path = tmp_path / "events.jsonl"
    log_path.write_text(
        "\n".join(
            [
                json.dumps({"timestamp": "2026-01-01T00:00:00.000Z", "kind": "a"}),
                "not json",
                json.dumps({"timestamp": "2026-01-02T00:00:00.000Z", "kind": "b"}),
                json.dumps({"timestamp": "2026-01-03T00:00:00.000Z", "kind": "c"}),
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    logger = JsonlEventLogger(log_path)

    assert [entry["kind"] for entry in logger.read()] == ["a", "b", "c"]
    assert [entry["kind"] for entry in logger.read(limit=2)] == ["b", "c"]
    recent = logger.read(since="2026-01-02T00:00:00.000Z")
    assert [entry["kind"] for entry in recent] == ["b", "c"]
    assert logger.read(limit=0) == []


def test_reporter_keeps_only_recent_events_in_memory(tmp_path: Path) -> None:
    log_path = tmp_path / "events.jsonl"
    reporter = Reporter(logger=JsonlEventLogger(log_path), recent_limit=3)

    for index in range(10):
        reporter.emit("pass_completed", f"pass {index}")

    assert [event.message for event in reporter.events] == ["pass 7", "pass 8", "pass 9"]
    assert len(log_path.read_text(encoding="utf-8").splitlines()) == 10
