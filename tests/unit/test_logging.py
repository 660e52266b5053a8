"""Unit tests for the lifecycle event journal."""

from __future__ import annotations

import io
import json

from rich.console import Console

from boopblur.core.logging import JournalLogger, Verbosity


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=120, no_color=True), buf


class TestJournalLogger:
    def test_writes_jsonl(self, tmp_path):
        log = JournalLogger(logs_dir=tmp_path / "logs")
        log.artifact_saved("a1", "2026-03-18", "2026-W12")
        log.cleanup_finished("delete-14-days", 3, ["a0"])
        log.close()

        lines = log.log_path.read_text().splitlines()
        events = [json.loads(line) for line in lines]
        assert [e["event"] for e in events] == ["artifact_saved", "cleanup_finished"]
        assert events[0]["week_key"] == "2026-W12"
        assert events[1]["deleted_ids"] == ["a0"]
        assert all("timestamp" in e for e in events)

    def test_without_logs_dir_keeps_events_in_memory(self):
        log = JournalLogger()
        log.artifact_removed("a1")
        assert log.log_path is None
        assert log.events[0]["event"] == "artifact_removed"

    def test_default_verbosity_is_quiet(self):
        console, buf = _console()
        log = JournalLogger(console=console)
        log.artifact_saved("a1", "2026-03-18", "2026-W12")
        assert buf.getvalue() == ""

    def test_verbose_echoes_events(self):
        console, buf = _console()
        log = JournalLogger(verbosity=Verbosity.VERBOSE, console=console)
        log.artifact_saved("a1", "2026-03-18", "2026-W12")
        log.store_cleared(4)
        out = buf.getvalue()
        assert "a1" in out
        assert "cleared" in out

    def test_debug_lists_deleted_ids(self):
        console, buf = _console()
        log = JournalLogger(verbosity=Verbosity.DEBUG, console=console)
        log.cleanup_finished("keep-4-weeks", 10, ["old-1", "old-2"])
        out = buf.getvalue()
        assert "2 deleted of 10 scanned" in out
        assert "old-2" in out

    def test_close_is_idempotent(self, tmp_path):
        log = JournalLogger(logs_dir=tmp_path)
        log.close()
        log.close()
