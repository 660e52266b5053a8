"""Settings commands — boopblur settings, trace, packs."""

from __future__ import annotations

from datetime import datetime

import click
from rich import box
from rich.table import Table

from boopblur.cli.main import console
from boopblur.core.models import DeletionPolicy


def _settings_service(ctx: click.Context):
    from boopblur.preferences import SettingsService

    config = ctx.obj["config"]
    return SettingsService(
        config.settings_path,
        default_vibe_pack=config.default_vibe_pack,
        default_deletion_policy=config.default_deletion_policy,
    )


@click.command()
@click.option("--vibe-pack", default=None, help="Set the active vibe pack")
@click.option(
    "--policy",
    type=click.Choice([p.value for p in DeletionPolicy]),
    default=None,
    help="Set the deletion policy",
)
@click.option("--reset", is_flag=True, help="Restore default settings")
@click.pass_context
def settings(ctx: click.Context, vibe_pack: str | None, policy: str | None, reset: bool):
    """Show or change journal settings."""
    from boopblur.retention import max_age_days
    from boopblur.vibes import get_pack

    service = _settings_service(ctx)
    if reset:
        service.reset()
    if vibe_pack is not None:
        if get_pack(vibe_pack) is None:
            console.print(f"[yellow]Unknown vibe pack:[/yellow] {vibe_pack} (saved anyway)")
        service.set_active_vibe_pack(vibe_pack)
    if policy is not None:
        service.set_deletion_policy(policy)

    current = service.settings
    limit = max_age_days(current.deletion_policy)
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Vibe pack", current.active_vibe_pack)
    table.add_row("Deletion policy", current.deletion_policy)
    table.add_row("Keeps", f"{limit} days" if limit is not None else "forever")
    console.print(table)


@click.command()
@click.option("--reset", is_flag=True, help="Reset the boop counter to zero")
@click.pass_context
def trace(ctx: click.Context, reset: bool):
    """Show the lifetime boop counter."""
    from boopblur.preferences import TraceService

    service = TraceService(ctx.obj["config"].trace_path)
    current = service.reset() if reset else service.trace

    last = "never"
    if current.last_boop_ts:
        last = datetime.fromtimestamp(current.last_boop_ts / 1000).strftime("%Y-%m-%d %H:%M")
    console.print(f"[bold]{current.total_boops}[/bold] boops [dim](last: {last})[/dim]")


@click.command()
def packs():
    """List the built-in vibe packs."""
    from boopblur.vibes import list_packs

    table = Table(box=box.ROUNDED, show_header=True)
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Sparks", justify="right")
    for pack in list_packs():
        table.add_row(pack.id, pack.name, str(len(pack.spark_lines)))
    console.print(table)
