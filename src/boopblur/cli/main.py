"""Boop-Blur CLI — main entry point and shared utilities."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import click
from rich.console import Console

from boopblur.core.errors import BoopBlurError
from boopblur.core.logging import Verbosity, setup_logging

console = Console()

T = TypeVar("T")

# Color per decay state
DECAY_COLORS = {
    "crisp": "bold green",
    "slight-blur": "green",
    "more-blur": "yellow",
    "heavy-blur": "magenta",
    "pixelated": "dim",
}


def get_decay_style(state: str) -> str:
    """Return Rich style string for a decay state."""
    return DECAY_COLORS.get(state, "white")


def open_journal(ctx: click.Context):
    """Build the lifecycle controller for this invocation from the context config."""
    from boopblur.core.decay import DecayTable
    from boopblur.core.logging import JournalLogger
    from boopblur.lifecycle import ArtifactLifecycle
    from boopblur.preferences import SettingsService, TraceService
    from boopblur.store import get_store, reset_store

    config = ctx.obj["config"]
    config.ensure_storage_dir()
    event_log = JournalLogger(
        verbosity=ctx.obj["verbosity"],
        logs_dir=config.logs_dir,
        console=console,
    )
    ctx.call_on_close(event_log.close)
    ctx.call_on_close(reset_store)

    settings = SettingsService(
        config.settings_path,
        default_vibe_pack=config.default_vibe_pack,
        default_deletion_policy=config.default_deletion_policy,
    )
    return ArtifactLifecycle(
        get_store(config),
        settings=settings,
        trace=TraceService(config.trace_path),
        decay_table=DecayTable.from_mapping(config.decay_thresholds),
        event_log=event_log,
    )


def run_async(fn: Callable[[], Awaitable[T]]) -> T:
    """Run a coroutine function, turning Boop-Blur errors into a clean exit."""
    try:
        return asyncio.run(fn())
    except BoopBlurError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show lifecycle events and debug logging")
@click.option(
    "--storage-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Override storage directory",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, storage_dir: Path | None):
    """Boop-Blur — one photo a day, slowly fading."""
    from boopblur.config import AppConfig, get_config

    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["verbosity"] = Verbosity.DEBUG if verbose else Verbosity.DEFAULT
    ctx.obj["config"] = AppConfig(storage_dir=storage_dir) if storage_dir else get_config()


def cli():
    """Entrypoint that loads .env before running the CLI."""
    from dotenv import load_dotenv

    load_dotenv()
    main()


# Import subcommand modules to register commands
from boopblur.cli.artifact_commands import (  # noqa: E402
    capture,
    list_artifacts,
    remove,
    show_artifact,
)
from boopblur.cli.cleanup_commands import cleanup, clear  # noqa: E402
from boopblur.cli.settings_commands import packs, settings, trace  # noqa: E402

# Register commands
main.add_command(capture)
main.add_command(list_artifacts, name="list")
main.add_command(show_artifact, name="show")
main.add_command(remove)
main.add_command(cleanup)
main.add_command(clear)
main.add_command(settings)
main.add_command(trace)
main.add_command(packs)
