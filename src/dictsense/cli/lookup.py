"""dictsense lookup / at — read entries by path or by source position.

Usage:
  dictsense lookup ui.submit
  dictsense at src/App.tsx 12 24     # reference under line 12, column 24
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dictsense.cli.errors import err_document_unreadable, err_key_missing
from dictsense.cli.session import (
    DEFAULT_WORKSPACE,
    DocumentOption,
    WorkspaceOption,
    console,
    location,
    open_store,
)
from dictsense.references import key_at_position


def lookup_cmd(
    path: Annotated[str, typer.Argument(help="Dotted key path, e.g. ui.submit")],
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Show the value and location of a key."""
    _, store = open_store(workspace, document)
    entry = store.lookup(path)
    if entry is None:
        console.print(err_key_missing(path))
        raise typer.Exit(1)

    console.print(f"[bold]{path}[/] = {escape(entry.value)}", highlight=False)
    console.print(f"  [dim]{location(store, entry.line, entry.column)}[/]", soft_wrap=True)


def at_cmd(
    source: Annotated[Path, typer.Argument(help="Source file containing the reference.")],
    line: Annotated[int, typer.Argument(min=1, help="Line number (1-based).")],
    column: Annotated[int, typer.Argument(min=1, help="Column number (1-based).")],
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Resolve the reference at a source position (hover / go to definition)."""
    try:
        lines = source.read_text(encoding="utf-8", errors="replace").split("\n")
    except OSError as exc:
        console.print(err_document_unreadable(str(source), exc.strerror or str(exc)))
        raise typer.Exit(1) from None
    if line > len(lines):
        console.print(f"[yellow]No reference:[/] {source} has only {len(lines)} lines.")
        raise typer.Exit(1)

    cfg, store = open_store(workspace, document)
    key = key_at_position(lines[line - 1], column - 1, cfg.reference.function)
    if key is None:
        console.print(
            f"[yellow]No reference:[/] no {cfg.reference.function}(\"...\") call "
            f"at {source}:{line}:{column}."
        )
        raise typer.Exit(1)

    entry = store.lookup(key)
    if entry is None:
        console.print(err_key_missing(key))
        raise typer.Exit(1)

    console.print(f"[bold]{key}[/] = {escape(entry.value)}", highlight=False)
    console.print(f"  [dim]{location(store, entry.line, entry.column)}[/]", soft_wrap=True)
