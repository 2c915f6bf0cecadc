"""dictsense complete — next-segment candidates for a partial key path.

The partial path may be given directly or as the text before the cursor in
a source line (--line), in which case the open reference call is extracted.

Usage:
  dictsense complete ui.
  dictsense complete ui.su
  dictsense complete --line 'title = d("ui.'
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from dictsense.cli.session import (
    DEFAULT_WORKSPACE,
    DocumentOption,
    WorkspaceOption,
    console,
    open_store,
)
from dictsense.references import partial_path_before


def complete_cmd(
    partial: Annotated[
        str,
        typer.Argument(help="Partial dotted path; empty for top-level keys."),
    ] = "",
    line: Annotated[
        str | None,
        typer.Option("--line", help="Source text before the cursor instead of a path."),
    ] = None,
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """List the keys that can follow a partial path."""
    cfg, store = open_store(workspace, document)

    if line is not None:
        extracted = partial_path_before(line, cfg.reference.function)
        if extracted is None:
            console.print(f"[dim]No open {cfg.reference.function}(\"...\") call.[/]")
            return
        partial = extracted

    typed = partial.rsplit(".", 1)[-1]
    candidates = [c for c in store.completions(partial) if c.segment.startswith(typed)]
    if not candidates:
        console.print(f"[dim]No completions for '{partial}'.[/]")
        return

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Segment", style="bold")
    table.add_column("Detail", style="dim")
    for c in candidates:
        label = f"{c.segment}." if c.has_children else c.segment
        table.add_row(escape(label), escape(c.detail))
    console.print(table)
