"""dictsense status — which document is in use and what it holds."""

from __future__ import annotations

from rich.panel import Panel

from dictsense.cli.session import (
    DEFAULT_WORKSPACE,
    DocumentOption,
    WorkspaceOption,
    console,
    open_store,
)


def status_cmd(
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Show the active document, entry count, and unsupported values."""
    cfg, store = open_store(workspace, document)
    index = store.current_index()
    top_level = {path.split(".", 1)[0] for path in index}

    lines = [
        f"Document:   [bold]{store.path}[/]",
        f"Entries:    [bold]{len(index):,}[/]  |  Top-level keys: [bold]{len(top_level)}[/]",
        f"Reference:  {cfg.reference.function}(\"a.b.c\")",
    ]

    unsupported = store.unsupported_leaves()
    if unsupported:
        lines.append(f"[yellow]Unsupported values (not strings): {len(unsupported)}[/]")
        for path in unsupported[:10]:
            lines.append(f"  [dim]{path}[/]")
        if len(unsupported) > 10:
            lines.append(f"  [dim]... and {len(unsupported) - 10} more[/]")

    console.print(Panel("\n".join(lines), title="[bold]Dictionary[/]", expand=False))
