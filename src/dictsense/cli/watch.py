"""dictsense watch — reload the document whenever it changes on disk.

Change notifications come from a watchdog observer. Each notification is
queued and handled on the main thread, which reloads the store if the file
really changed. A change that leaves the file unparseable is reported once
and the last good state is kept.

Usage:
  dictsense watch
  dictsense watch --interval 0.5
"""

from __future__ import annotations

import queue
from typing import Annotated

import typer

from dictsense.cli.errors import err_document_invalid, err_document_unreadable
from dictsense.cli.session import (
    DEFAULT_WORKSPACE,
    DocumentOption,
    WorkspaceOption,
    console,
    open_store,
)
from dictsense.document.models import DocumentParseError, DocumentReadError
from dictsense.document.watcher import start_observer


def watch_cmd(
    interval: Annotated[
        float | None,
        typer.Option(
            "--interval", "-i", min=0.05, help="Seconds to wait for a change between checks."
        ),
    ] = None,
    max_events: Annotated[
        int | None,
        typer.Option("--max-events", hidden=True, help="Stop after N notifications (for testing)."),
    ] = None,
    document: DocumentOption = None,
    workspace: WorkspaceOption = DEFAULT_WORKSPACE,
) -> None:
    """Watch the document and reload it on change (Ctrl+C to stop)."""
    cfg, store = open_store(workspace, document)
    delay = interval if interval is not None else cfg.watch.interval

    events: queue.Queue[None] = queue.Queue()
    observer = start_observer(store.path, lambda: events.put(None))
    console.print(
        f"Watching [bold]{store.path}[/] ({len(store.current_index())} entries)"
    )

    handled = 0
    try:
        while max_events is None or handled < max_events:
            try:
                events.get(timeout=delay)
            except queue.Empty:
                continue
            handled += 1
            try:
                changed = store.refresh()
            except DocumentReadError as exc:
                console.print(err_document_unreadable(exc.path, exc.message))
                continue
            except DocumentParseError as exc:
                console.print(err_document_invalid(exc.path, exc.message, exc.line, exc.column))
                continue
            if changed:
                console.print(
                    f"[green]↻[/] Reloaded ({len(store.current_index())} entries)"
                )
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/]")
    finally:
        observer.stop()
        observer.join()
        store.dispose()
