"""dictsense set / create — format-preserving edits of the document.

Usage:
  dictsense set ui.submit "Send"
  dictsense create ui.dialogs.cancel "Stop"
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from dictsense.cli.errors import err_edit_failed, err_empty_value
from dictsense.cli.session import (
    DEFAULT_WORKSPACE,
    DocumentOption,
    WorkspaceOption,
    console,
    open_store,
)

PathArgument = Annotated[str, typer.Argument(help="Dotted key path, e.g. ui.submit")]
ValueArgument = Annotated[str, typer.Argument(help="New string value.")]


def set_cmd(
    path: PathArgument,
    value: ValueArgument,
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Update the value of an existing key."""
    if not value:
        console.print(err_empty_value())
        raise typer.Exit(1)

    _, store = open_store(workspace, document)
    existing = store.lookup(path)
    if existing is not None and existing.value == value:
        console.print(f"[dim]Unchanged:[/] {path}")
        return

    result = store.update(path, value)
    if not result.ok:
        console.print(err_edit_failed(result))
        raise typer.Exit(1)
    console.print(f"[green]✓[/] Updated value for {path}: {escape(value)}", highlight=False)


def create_cmd(
    path: PathArgument,
    value: ValueArgument,
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Create a new key, adding any missing parent objects."""
    if not value:
        console.print(err_empty_value())
        raise typer.Exit(1)

    _, store = open_store(workspace, document)
    result = store.create(path, value)
    if not result.ok:
        console.print(err_edit_failed(result))
        raise typer.Exit(1)
    console.print(f"[green]✓[/] Created new key: {path}", highlight=False)
