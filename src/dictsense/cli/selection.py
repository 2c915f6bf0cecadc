"""dictsense select — choose the dictionary document for this workspace.

The choice is stored in .dictsense/state.yaml and takes precedence over
config and workspace search on later runs.

Usage:
  dictsense select src/i18n/dictionary.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from dictsense.cli.errors import (
    err_document_invalid,
    err_document_unreadable,
    err_invalid_selection,
)
from dictsense.cli.session import DEFAULT_WORKSPACE, WorkspaceOption, console, load_cli_config
from dictsense.discovery import DiscoveryError, state_path_for, store_selection, validate_selection
from dictsense.document.models import DocumentParseError, DocumentReadError
from dictsense.document.store import DocumentStore


def select_cmd(
    file: Annotated[Path, typer.Argument(help="Path to the dictionary document.")],
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Select the dictionary document used by this workspace."""
    workspace = workspace.resolve()
    cfg = load_cli_config(workspace)

    try:
        selected = validate_selection(file, cfg.document.name)
    except DiscoveryError as exc:
        console.print(err_invalid_selection(str(exc)))
        raise typer.Exit(1) from None

    store = DocumentStore(indent=cfg.document.indent)
    try:
        store.load(selected)
    except DocumentReadError as exc:
        console.print(err_document_unreadable(exc.path, exc.message))
        raise typer.Exit(1) from None
    except DocumentParseError as exc:
        console.print(err_document_invalid(exc.path, exc.message, exc.line, exc.column))
        raise typer.Exit(1) from None

    store_selection(state_path_for(workspace), selected)
    console.print(f"[green]✓[/] Dictionary file set to: {selected}", soft_wrap=True)
    console.print(f"  {len(store.current_index())} entries")
