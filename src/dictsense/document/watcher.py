"""File-system notifications for the dictionary document.

A watchdog observer watches the directory that holds the document (the
symlink target, if the document is a link) and calls back for any event that
touches the document file itself. Editors that save by writing a temp file
and renaming it show up as a move whose destination is the document.

The callback runs on the observer thread. Callers hand the notification to
their own thread rather than touching the DocumentStore from it.

Usage:
    observer = start_observer(store.path, on_change)
    ...
    observer.stop()
    observer.join()
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

logger = logging.getLogger(__name__)


class DocumentEventHandler(FileSystemEventHandler):
    """Calls *on_change* for events on one file, ignoring its siblings."""

    def __init__(self, document: Path, on_change: Callable[[], None]) -> None:
        super().__init__()
        self.document = Path(document).resolve()
        self.on_change = on_change

    def _touches_document(self, event: FileSystemEvent) -> bool:
        for raw in (event.src_path, getattr(event, "dest_path", "")):
            if raw and Path(os.fsdecode(raw)).resolve() == self.document:
                return True
        return False

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type in ("opened", "closed_no_write"):
            return
        if self._touches_document(event):
            logger.debug("%s event on %s", event.event_type, self.document)
            self.on_change()


def start_observer(document: Path, on_change: Callable[[], None]) -> BaseObserver:
    """Start and return an observer that reports changes to *document*."""
    handler = DocumentEventHandler(document, on_change)
    observer = Observer()
    observer.schedule(handler, str(handler.document.parent), recursive=False)
    observer.start()
    logger.info("Watching %s", handler.document)
    return observer
