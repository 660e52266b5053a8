"""Artifact commands — boopblur capture, list, show, remove."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import click
from rich import box
from rich.table import Table

from boopblur.cli.main import console, get_decay_style, open_journal, run_async


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--at",
    type=click.DateTime(),
    default=None,
    help="Capture time (local), defaults to now",
)
@click.pass_context
def capture(ctx: click.Context, image: Path, at: datetime | None):
    """Capture IMAGE as a boop.

    The day's spark line is picked from the active vibe pack.
    """
    from boopblur.vibes import spark_line

    journal = open_journal(ctx)
    ts = int(at.timestamp() * 1000) if at is not None else None
    artifact = run_async(lambda: journal.capture(image.read_bytes(), at=ts))

    console.print(
        f"[green]Booped:[/green] {artifact.id} "
        f"[dim]({artifact.iso_date}, {artifact.week_key})[/dim]"
    )
    line = spark_line(artifact.spark_pack_id, artifact.spark_index)
    if line:
        console.print(f"[italic]{line}[/italic]")


@click.command("list")
@click.option("--week", "scope", flag_value="week", help="Only this ISO week")
@click.option("--today", "scope", flag_value="today", help="Only today")
@click.pass_context
def list_artifacts(ctx: click.Context, scope: str | None):
    """List captured artifacts with their decay state."""
    from boopblur.core.temporal import week_start
    from boopblur.vibes import spark_line

    journal = open_journal(ctx)
    run_async(journal.load)

    if scope == "week":
        artifacts = journal.current_week()
        title = f"Week of {week_start().strftime('%Y-%m-%d')}"
    elif scope == "today":
        artifacts = journal.today()
        title = "Today"
    else:
        artifacts = list(journal.artifacts)
        title = "All boops"

    if not artifacts:
        console.print("[dim]No artifacts found.[/dim]")
        return

    table = Table(
        title=f"{title} — {len(artifacts)} artifacts",
        box=box.ROUNDED,
        show_header=True,
    )
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("Week", no_wrap=True)
    table.add_column("Decay", no_wrap=True)
    table.add_column("Spark", max_width=50)

    for artifact in sorted(artifacts, key=lambda a: a.ts):
        state = journal.decay_state_for(artifact)
        style = get_decay_style(state)
        line = spark_line(artifact.spark_pack_id, artifact.spark_index)
        table.add_row(
            artifact.id[:8],
            artifact.iso_date,
            artifact.week_key,
            f"[{style}]{state}[/{style}]",
            line or "[dim]-[/dim]",
        )

    console.print(table)


def _resolve_id(journal, prefix: str) -> str | None:
    """Resolve a full id or a unique id prefix against the loaded cache."""
    matches = [a.id for a in journal.artifacts if a.id.startswith(prefix)]
    if prefix in matches:
        return prefix
    if len(matches) > 1:
        console.print(f"[red]Ambiguous:[/red] {prefix} matches {len(matches)} artifacts")
        sys.exit(1)
    return matches[0] if matches else None


@click.command("show")
@click.argument("artifact_id")
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the image bytes to this file",
)
@click.pass_context
def show_artifact(ctx: click.Context, artifact_id: str, out: Path | None):
    """Display one artifact.

    ARTIFACT_ID may be a unique prefix.
    """
    from boopblur.vibes import spark_line

    journal = open_journal(ctx)
    run_async(journal.load)

    resolved = _resolve_id(journal, artifact_id)
    artifact = run_async(lambda: journal.store.get_by_id(resolved)) if resolved else None
    if artifact is None:
        console.print(f"[red]Artifact not found:[/red] {artifact_id}")
        sys.exit(1)

    state = journal.decay_state_for(artifact)
    style = get_decay_style(state)
    meta_parts = [
        f"[dim]ID:[/dim] {artifact.id}",
        f"[dim]Date:[/dim] {artifact.iso_date}",
        f"[dim]Week:[/dim] {artifact.week_key}",
        f"[dim]Decay:[/dim] [{style}]{state}[/{style}]",
        f"[dim]Size:[/dim] {len(artifact.blob)} bytes",
    ]
    console.print("  ".join(meta_parts))
    line = spark_line(artifact.spark_pack_id, artifact.spark_index)
    if line:
        console.print(f"[italic]{line}[/italic]")

    if out is not None:
        out.write_bytes(artifact.blob)
        console.print(f"[green]Wrote:[/green] {out}")


@click.command()
@click.argument("artifact_id")
@click.pass_context
def remove(ctx: click.Context, artifact_id: str):
    """Delete one artifact. ARTIFACT_ID may be a unique prefix."""
    journal = open_journal(ctx)
    run_async(journal.load)

    resolved = _resolve_id(journal, artifact_id)
    if resolved is None:
        console.print(f"[dim]Nothing to remove:[/dim] {artifact_id}")
        return
    run_async(lambda: journal.remove(resolved))
    console.print(f"[green]Removed:[/green] {resolved}")
