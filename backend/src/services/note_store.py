"""Note Store - SQLite-backed list/create/delete over the notes table."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ..models.note import Note
from .database import DatabaseService

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1


class NoteStoreError(Exception):
    """Raised when the store is used outside its open/close lifecycle."""


class NoteValidationError(ValueError):
    """Raised when a note is created without content."""


class NoteStore:
    """Owner and sole mutator of persisted notes.

    One connection is held between ``open()`` and ``close()``. The store is
    also a context manager::

        with NoteStore(path) as store:
            store.create("buy milk")
    """

    def __init__(self, db_path: str | Path | None = None):
        self._db = DatabaseService(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def db_path(self) -> Path:
        return self._db.db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> "NoteStore":
        """Connect and apply the schema. Opening an open store is a no-op."""
        if self._conn is None:
            conn = self._db.connect()
            try:
                self._db.initialize(conn)
            except sqlite3.Error:
                conn.close()
                raise
            self._conn = conn
            logger.info(f"Opened note store at {self.db_path}")
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info(f"Closed note store at {self.db_path}")

    def __enter__(self) -> "NoteStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise NoteStoreError("Note store is not open")
        return self._conn

    def list(self) -> List[Note]:
        """Return every note, newest first."""
        cursor = self._connection().execute(
            """
            SELECT id, content, created_at FROM notes
            ORDER BY created_at DESC, id DESC
            """
        )
        return [_row_to_note(row) for row in cursor.fetchall()]

    def create(self, content: Optional[str]) -> Note:
        """Insert a note and return it with its id and timestamp."""
        if not content:
            raise NoteValidationError("Content is required")

        conn = self._connection()
        created_at = datetime.now(timezone.utc)
        with conn:
            cursor = conn.execute(
                "INSERT INTO notes (content, created_at) VALUES (?, ?)",
                (content, created_at.isoformat(timespec="microseconds")),
            )
        note = Note(id=cursor.lastrowid, content=content, created_at=created_at)
        logger.info(f"Created note {note.id}")
        return note

    def delete(self, note_id: int) -> bool:
        """Remove a note. Missing ids are a no-op; always returns True."""
        conn = self._connection()
        if not SQLITE_MIN_INT <= note_id <= SQLITE_MAX_INT:
            logger.debug(f"Delete of out-of-range note id {note_id} ignored")
            return True
        with conn:
            cursor = conn.execute("DELETE FROM notes WHERE id = ?", (note_id,))
        if cursor.rowcount:
            logger.info(f"Deleted note {note_id}")
        else:
            logger.debug(f"Delete of missing note {note_id} ignored")
        return True

    def count(self) -> int:
        row = self._connection().execute("SELECT COUNT(*) FROM notes").fetchone()
        return int(row[0])


def _row_to_note(row: sqlite3.Row) -> Note:
    return Note(
        id=row["id"],
        content=row["content"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


__all__ = ["NoteStore", "NoteStoreError", "NoteValidationError"]
