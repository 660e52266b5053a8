"""Cleanup commands — boopblur cleanup, boopblur clear."""

from __future__ import annotations

import click

from boopblur.cli.main import console, open_journal, run_async


@click.command()
@click.pass_context
def cleanup(ctx: click.Context):
    """Delete artifacts the configured deletion policy has expired."""
    journal = open_journal(ctx)
    report = run_async(journal.run_cleanup)

    if not report.deleted_ids:
        console.print(
            f"[dim]Nothing to clean — policy[/dim] [bold]{report.policy.value}[/bold] "
            f"[dim]kept all {report.scanned} artifacts.[/dim]"
        )
        return
    console.print(
        f"[green]Cleaned:[/green] {len(report.deleted_ids)} of {report.scanned} artifacts "
        f"(policy [bold]{report.policy.value}[/bold])"
    )


@click.command()
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def clear(ctx: click.Context, yes: bool):
    """Remove every captured artifact.

    Settings and the boop counter are kept. Use --yes to skip the confirmation prompt.
    """
    if not yes:
        console.print("This will delete [bold]all[/bold] captured artifacts.")
        if not click.confirm("Continue?"):
            console.print("[dim]Aborted.[/dim]")
            return

    journal = open_journal(ctx)
    removed = run_async(journal.clear_all)
    console.print(f"[green]Cleared:[/green] {removed} artifacts")
