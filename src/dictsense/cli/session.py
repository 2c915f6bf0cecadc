"""Shared CLI plumbing: common options and opening the document store.

Every command that touches the document goes through open_store(), which
loads config, locates the document, and loads it, turning each failure
into an actionable message and exit code 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from dictsense.cli.errors import (
    err_config,
    err_document_invalid,
    err_document_unreadable,
    err_no_document,
)
from dictsense.config import ConfigError, DictsenseConfig, load_config
from dictsense.discovery import locate_document
from dictsense.document.models import DocumentParseError, DocumentReadError
from dictsense.document.store import DocumentStore
from dictsense.logging_config import setup_logging

console = Console()

DocumentOption = Annotated[
    Path | None,
    typer.Option("--document", "-d", help="Path to the dictionary document."),
]
WorkspaceOption = Annotated[
    Path,
    typer.Option("--workspace", hidden=True, help="Workspace root (defaults to CWD)."),
]

DEFAULT_WORKSPACE = Path(".")


def load_cli_config(workspace: Path) -> DictsenseConfig:
    try:
        cfg = load_config(project_dir=workspace)
    except ConfigError as exc:
        console.print(err_config(str(exc)))
        raise typer.Exit(1) from None
    setup_logging(cfg.log.level)
    return cfg


def open_store(
    workspace: Path, document: Path | None
) -> tuple[DictsenseConfig, DocumentStore]:
    """Return config and a store with the workspace document loaded."""
    workspace = workspace.resolve()
    cfg = load_cli_config(workspace)

    path = document if document is not None else locate_document(workspace, cfg)
    if path is None:
        console.print(err_no_document(cfg.document.name))
        raise typer.Exit(1)

    store = DocumentStore(indent=cfg.document.indent)
    try:
        store.load(path)
    except DocumentReadError as exc:
        console.print(err_document_unreadable(exc.path, exc.message))
        raise typer.Exit(1) from None
    except DocumentParseError as exc:
        console.print(err_document_invalid(exc.path, exc.message, exc.line, exc.column))
        raise typer.Exit(1) from None
    return cfg, store


def location(store: DocumentStore, line: int, column: int) -> str:
    """``file:line:col`` with 1-based numbers for display."""
    return f"{store.path}:{line + 1}:{column + 1}"
