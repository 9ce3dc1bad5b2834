"""SQLite database helpers for the notes schema."""

from __future__ import annotations

from pathlib import Path
import sqlite3

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_DB_PATH = DATA_DIR / "basewise.db"

DDL_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS notes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_notes_created ON notes(created_at DESC)",
)


class DatabaseService:
    """Manage SQLite connections and schema initialization."""

    def __init__(self, db_path: str | Path | None = None):
        self.db_path = Path(db_path) if db_path else DEFAULT_DB_PATH

    def _ensure_directory(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def connect(self) -> sqlite3.Connection:
        """Return a sqlite3 connection with the proper data directory created.

        One connection lives for the whole process. Same-thread checking is
        off because the thread that opens it (application startup, or a test
        fixture) need not be the thread that later runs the event loop.
        """
        self._ensure_directory()
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def initialize(self, conn: sqlite3.Connection) -> None:
        """Create all schema artifacts on ``conn``."""
        with conn:  # Transactional apply of DDL
            for statement in DDL_STATEMENTS:
                conn.execute(statement)


__all__ = ["DatabaseService", "DEFAULT_DB_PATH", "DDL_STATEMENTS"]
