"""Logging setup and the structured lifecycle event journal."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from enum import IntEnum
from pathlib import Path
from typing import Any

from rich.console import Console


class Verbosity(IntEnum):
    """Verbosity levels for console output."""

    DEFAULT = 0   # Command results only
    VERBOSE = 1   # + per-artifact lifecycle events
    DEBUG = 2     # + store-level detail


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class JournalLogger:
    """Structured log of artifact lifecycle events.

    Writes one JSONL file per session to ``logs_dir`` and optionally echoes
    events to the console via Rich based on verbosity level.
    """

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.DEFAULT,
        logs_dir: Path | None = None,
        console: Console | None = None,
    ):
        self.verbosity = verbosity
        self.session_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        self.console = console or Console()
        self.events: list[dict[str, Any]] = []
        self._log_file = None
        self._log_path: Path | None = None

        if logs_dir is not None:
            logs_dir.mkdir(parents=True, exist_ok=True)
            self._log_path = logs_dir / f"{self.session_id}.jsonl"
            self._log_file = open(self._log_path, "a")

    @property
    def log_path(self) -> Path | None:
        return self._log_path

    def _write_event(self, event: dict[str, Any]) -> None:
        event["timestamp"] = datetime.now(timezone.utc).isoformat()
        self.events.append(event)
        if self._log_file is not None:
            self._log_file.write(json.dumps(event) + "\n")
            self._log_file.flush()

    def _console_print(self, message: str, min_verbosity: Verbosity) -> None:
        if self.verbosity >= min_verbosity:
            self.console.print(message)

    # -- Artifact events --

    def artifact_saved(self, artifact_id: str, iso_date: str, week_key: str) -> None:
        self._write_event({
            "event": "artifact_saved",
            "artifact_id": artifact_id,
            "iso_date": iso_date,
            "week_key": week_key,
        })
        self._console_print(
            f"  [green]+[/green] {artifact_id} [dim]({iso_date}, {week_key})[/dim]",
            Verbosity.VERBOSE,
        )

    def artifact_removed(self, artifact_id: str) -> None:
        self._write_event({"event": "artifact_removed", "artifact_id": artifact_id})
        self._console_print(f"  [red]-[/red] {artifact_id}", Verbosity.VERBOSE)

    def store_cleared(self, removed: int) -> None:
        self._write_event({"event": "store_cleared", "removed": removed})
        self._console_print(f"  [red]cleared[/red] {removed} artifacts", Verbosity.VERBOSE)

    # -- Cleanup --

    def cleanup_finished(self, policy: str, scanned: int, deleted_ids: list[str]) -> None:
        """Log the outcome of a retention sweep."""
        self._write_event({
            "event": "cleanup_finished",
            "policy": policy,
            "scanned": scanned,
            "deleted_ids": list(deleted_ids),
        })
        self._console_print(
            f"  cleanup ({policy}): {len(deleted_ids)} deleted of {scanned} scanned",
            Verbosity.VERBOSE,
        )
        for artifact_id in deleted_ids:
            self._console_print(f"    [red]-[/red] {artifact_id}", Verbosity.DEBUG)

    def close(self) -> None:
        """Close the log file if open."""
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None
