"""CLI entry point for the DNS updater."""

import typer
from rich.console import Console
from rich.table import Table

from dnsupdater import __version__
from dnsupdater.commands import event
from dnsupdater.decision import decide
from dnsupdater.models import DNSRole

app = typer.Typer(
    name="dnsupdater",
    help="Keep Route53 records in step with EC2 instance lifecycle events.",
    no_args_is_help=True,
)
console = Console()

app.add_typer(event.app, name="event", help="Run or generate lifecycle events")


@app.command("decide")
def show_decision(
    state: str = typer.Argument(..., help="Lifecycle state (e.g., running, stopping)"),
) -> None:
    """Show what a lifecycle state does to public and private records."""
    state = state.lower()
    table = Table(title=f"State: {state}")
    table.add_column("Role")
    table.add_column("Decision")

    for role in DNSRole:
        table.add_row(role.value, decide(state, role).value)

    console.print(table)


@app.command()
def version() -> None:
    """Show the DNS updater version."""
    console.print(f"dnsupdater v{__version__}")


@app.callback()
def main() -> None:
    """DNS updater - Route53 records that follow EC2 instances."""
    pass


if __name__ == "__main__":
    app()
