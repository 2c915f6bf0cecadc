"""dictsense scan — check source files for references to missing keys.

Exit code 1 if any reference names a key that is not in the document.

Usage:
  dictsense scan src/App.tsx src/Form.tsx
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from dictsense.cli.session import (
    DEFAULT_WORKSPACE,
    DocumentOption,
    WorkspaceOption,
    console,
    open_store,
)
from dictsense.references import find_references


def scan_cmd(
    sources: Annotated[
        list[Path],
        typer.Argument(help="Source files to scan for references."),
    ],
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Report references whose keys are missing from the document."""
    cfg, store = open_store(workspace, document)

    table = Table(show_header=True, box=None, padding=(0, 1))
    table.add_column("Location", style="dim")
    table.add_column("Key", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    total = 0
    missing = 0
    for source in sources:
        try:
            text = source.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            console.print(f"[yellow]Skipped:[/] {source} ({exc.strerror or exc})")
            continue
        for ref in find_references(text, cfg.reference.function):
            total += 1
            if store.lookup(ref.path) is None:
                missing += 1
                status = "[red]✗ missing[/]"
            else:
                status = "[green]✓[/]"
            table.add_row(f"{source}:{ref.line + 1}:{ref.column + 1}", ref.path, status)

    if total:
        console.print(table)
    console.print(f"\nReferences: [bold]{total}[/]  |  Missing: [bold]{missing}[/]")
    if missing:
        raise typer.Exit(1)
