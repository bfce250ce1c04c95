"""Workspace — a graph store backed by a snapshot JSON file.

The workspace is the single dependency injected into every service. The
store is loaded lazily on first access, so commands that fail argument
validation never touch the file. :meth:`transaction` writes the snapshot
back only when the store changed, atomically via a temp file + replace.
On an exception inside the transaction the in-memory store is discarded,
so the next access reloads the last saved state.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from graphctl.domain.errors import GraphctlError
from graphctl.domain.snapshot import GraphSnapshot
from graphctl.infrastructure.graph.store import GraphStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphctl.config.settings import GraphctlSettings

logger = logging.getLogger(__name__)


class WorkspaceError(GraphctlError):
    """The snapshot file could not be read, parsed, or written.

    ``code`` is ``INVALID_SNAPSHOT`` for malformed content, ``IO_ERROR``
    for filesystem failures.
    """

    def __init__(self, message: str, *, code: str, path: Path) -> None:
        super().__init__(message)
        self.code = code
        self.path = path


def parse_snapshot(raw: str, *, path: Path) -> GraphSnapshot:
    """Parse snapshot JSON, raising WorkspaceError on malformed content."""
    try:
        return GraphSnapshot.model_validate(json.loads(raw))
    except json.JSONDecodeError as exc:
        raise WorkspaceError(
            f"Invalid JSON in {path}: {exc}", code="INVALID_SNAPSHOT", path=path
        ) from exc
    except ValidationError as exc:
        raise WorkspaceError(
            f"Invalid snapshot in {path}: {exc.error_count()} validation error(s)",
            code="INVALID_SNAPSHOT",
            path=path,
        ) from exc


def read_snapshot(path: Path) -> GraphSnapshot:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise WorkspaceError(f"Cannot read {path}: {exc}", code="IO_ERROR", path=path) from exc
    return parse_snapshot(raw, path=path)


def write_snapshot(path: Path, snapshot: GraphSnapshot, *, indent: int = 2) -> None:
    """Write *snapshot* to *path* atomically."""
    content = snapshot.model_dump_json(indent=indent) + "\n"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise WorkspaceError(f"Cannot write {path}: {exc}", code="IO_ERROR", path=path) from exc


class Workspace:
    """Owns one GraphStore and the file it persists to."""

    def __init__(self, path: Path, *, indent: int = 2) -> None:
        self.path = path
        self._indent = indent
        self._store: GraphStore | None = None
        self.skipped_edges: list[str] = []

    @classmethod
    def from_settings(cls, settings: GraphctlSettings) -> Workspace:
        return cls(settings.graph_path, indent=settings.workspace.indent)

    @property
    def store(self) -> GraphStore:
        """The graph store, loaded from the snapshot file on first access."""
        if self._store is None:
            self._store = self._load()
        return self._store

    def invalidate(self) -> None:
        """Drop the in-memory store; the next access reloads from disk."""
        self._store = None

    def _load(self) -> GraphStore:
        store = GraphStore()
        if not self.path.exists():
            logger.debug("No workspace file at %s, starting empty", self.path)
            return store
        self.skipped_edges = store.replay(read_snapshot(self.path))
        logger.debug("Loaded %r from %s", store, self.path)
        return store

    def save(self) -> None:
        write_snapshot(self.path, self.store.to_snapshot(), indent=self._indent)
        logger.debug("Saved %r to %s", self.store, self.path)

    @contextmanager
    def transaction(self) -> Iterator[GraphStore]:
        """Yield the store; persist it if it changed, discard it on error."""
        store = self.store
        before = store.revision
        try:
            yield store
        except BaseException:
            self.invalidate()
            raise
        if store.revision != before:
            try:
                self.save()
            except WorkspaceError:
                self.invalidate()
                raise
