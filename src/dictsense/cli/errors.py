"""dictsense rich error messages — actionable feedback.

Every error shown to the user must contain:
  1. What went wrong (clear cause)
  2. The exact action the user should take to fix it

Usage:
    from dictsense.cli.errors import err_no_document
    console.print(err_no_document("dictionary.json"))
    raise typer.Exit(1)
"""

from __future__ import annotations

from dictsense.document.models import EditFailure, EditResult


def err_no_document(name: str) -> str:
    """No document configured, stored, or found in the workspace."""
    return (
        f"[red]Error:[/] No {name} found in this workspace.\n"
        f"  Run:  dictsense select path/to/{name}\n"
        "  Or pass:  --document path/to/file"
    )


def err_document_unreadable(path: str, reason: str) -> str:
    """Document file missing or unreadable — user should pick another file."""
    return (
        f"[red]Error:[/] Cannot read '{path}': {reason}.\n"
        "  Select another file:  dictsense select <path>"
    )


def err_document_invalid(path: str, reason: str, line: int | None, column: int | None) -> str:
    """Document is not a valid JSON object."""
    where = f" (line {line}, column {column})" if line is not None else ""
    return (
        f"[red]Error:[/] '{path}' is not a valid dictionary{where}: {reason}.\n"
        "  Fix the JSON syntax and run the command again."
    )


def err_invalid_selection(reason: str) -> str:
    return f"[red]Error:[/] {reason}\n  Run:  dictsense select <path>"


def err_config(reason: str) -> str:
    return f"[red]Error:[/] Invalid configuration.\n  {reason}"


def err_empty_value() -> str:
    return "[red]Error:[/] Value cannot be empty."


def err_key_missing(path: str) -> str:
    """Lookup of a key that does not exist — offer the create command."""
    return (
        f"[yellow]Key does not exist:[/] '{path}'\n"
        f"  Create it:  dictsense create {path} <value>"
    )


def err_edit_failed(result: EditResult) -> str:
    """Translate a refused edit into an actionable message."""
    path = result.path
    if result.failure is EditFailure.NOT_FOUND:
        return (
            f"[red]Error:[/] Failed to update '{path}': key not found.\n"
            f"  Create it:  dictsense create {path} <value>"
        )
    if result.failure is EditFailure.STALE_LINE_MISMATCH:
        return (
            f"[red]Error:[/] Failed to update '{path}': the document changed since it was read.\n"
            f"  {result.detail}\n"
            "  Run the command again to use the current file."
        )
    if result.failure is EditFailure.KEY_EXISTS:
        return (
            f"[red]Error:[/] Failed to create '{path}': key already exists.\n"
            f"  Update it:  dictsense set {path} <value>"
        )
    if result.failure is EditFailure.INSERTION_POINT_NOT_FOUND:
        return (
            f"[red]Error:[/] Cannot find a location to insert '{path}'.\n"
            f"  {result.detail}\n"
            "  Choose a path whose parents are objects, not values."
        )
    return f"[red]Error:[/] Invalid key path '{path}'.\n  Use dot-separated, non-empty segments: a.b.c"
