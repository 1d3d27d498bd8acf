"""Event commands: run an event locally or print a sample one."""

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from dnsupdater.config import load_settings
from dnsupdater.errors import DNSUpdaterError
from dnsupdater.events import dump_yaml, load_event_file, sample_event
from dnsupdater.log import setup_logging
from dnsupdater.reconciler import Reconciler, ReconciliationReport, TagOutcome

app = typer.Typer()
console = Console()

_OUTCOME_STYLES = {
    TagOutcome.SUBMITTED: "green",
    TagOutcome.DRY_RUN: "cyan",
    TagOutcome.IGNORED: "dim",
    TagOutcome.SKIPPED: "yellow",
    TagOutcome.FAILED: "red",
}


def get_reconciler(dry_run: bool) -> Reconciler:
    """Build a reconciler from the environment settings."""
    settings = load_settings()
    if dry_run:
        settings = settings.model_copy(update={"dry_run": True})
    return Reconciler(settings=settings)


def print_report(report: ReconciliationReport) -> None:
    console.print(f"[bold]{report.instance_id}[/bold] ({report.state or 'unknown state'})")

    if not report.results:
        console.print("  No DNS tags found")
        return

    table = Table()
    table.add_column("Tag")
    table.add_column("Name")
    table.add_column("Decision")
    table.add_column("Outcome")
    table.add_column("Value")

    for result in report.results:
        style = _OUTCOME_STYLES[result.outcome]
        value = result.change.values[0] if result.change else "-"
        table.add_row(
            result.key,
            result.dns_name,
            result.decision.value,
            f"[{style}]{result.outcome.value}[/{style}]",
            value,
        )

    console.print(table)
    for result in report.results:
        for error in result.errors:
            console.print(f"[red]✗[/red] {result.dns_name}: {error}")


@app.command()
def run(
    event_file: Path = typer.Argument(..., help="Event payload (JSON or YAML)"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Build changes without submitting"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Include debug logs"),
) -> None:
    """Run the reconciliation for an event file."""
    reconciler = get_reconciler(dry_run)
    setup_logging("DEBUG" if verbose else reconciler.settings.log_level, rich_output=True)

    try:
        event = load_event_file(event_file)
        report = asyncio.run(reconciler.handle(event))
    except DNSUpdaterError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    print_report(report)
    if report.count(TagOutcome.FAILED):
        raise typer.Exit(1)


@app.command()
def sample(
    instance_id: str = typer.Argument(..., help="Instance id to put in the event"),
    state: str = typer.Option("running", "--state", "-s", help="Lifecycle state"),
    region: str = typer.Option("us-east-1", "--region", help="Event region"),
    as_yaml: bool = typer.Option(False, "--yaml", help="Print YAML instead of JSON"),
) -> None:
    """Print a sample state-change event."""
    event = sample_event(instance_id, state, region=region)
    if as_yaml:
        typer.echo(dump_yaml(event), nl=False)
    else:
        typer.echo(json.dumps(event, indent=2))
