"""dictsense CLI entry point."""

from __future__ import annotations

import importlib.metadata
from typing import Annotated

import typer

from dictsense.cli.complete import complete_cmd
from dictsense.cli.edit import create_cmd, set_cmd
from dictsense.cli.lookup import at_cmd, lookup_cmd
from dictsense.cli.scan import scan_cmd
from dictsense.cli.selection import select_cmd
from dictsense.cli.status import status_cmd
from dictsense.cli.watch import watch_cmd
from dictsense.logging_config import setup_logging


def _installed_version() -> str:
    try:
        return importlib.metadata.version("dictsense")
    except importlib.metadata.PackageNotFoundError:
        return "dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dictsense {_installed_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="dictsense",
    help=(
        "dictsense — navigate and edit dictionary.json entries referenced as d(\"a.b.c\").\n\n"
        "  dictsense lookup ui.submit         Show a value and where it is defined.\n"
        "  dictsense set ui.submit Send       Update a value in place.\n"
        "  dictsense create ui.cancel Stop    Add a key, creating parent objects."
    ),
    add_completion=False,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."),
    ] = None,
) -> None:
    """dictsense — dictionary key navigation and editing."""
    if log_level:
        setup_logging(log_level, explicit=True)


app.command("lookup")(lookup_cmd)
app.command("at")(at_cmd)
app.command("set")(set_cmd)
app.command("create")(create_cmd)
app.command("complete")(complete_cmd)
app.command("scan")(scan_cmd)
app.command("select")(select_cmd)
app.command("status")(status_cmd)
app.command("watch")(watch_cmd)


@app.command("version")
def version_cmd() -> None:
    """Show the installed dictsense version."""
    typer.echo(f"dictsense {_installed_version()}")


if __name__ == "__main__":
    app()
