"""
SQLite database integration.

This module owns the process-wide database handle.  A ``Database`` is
created and opened once at application startup, handed explicitly to
the store, and closed at shutdown; nothing in the application looks it
up through a global.  Every logical operation runs inside
``Database.transaction()``, which serialises access to the shared
connection and wraps the work in a single ``BEGIN IMMEDIATE`` /
``COMMIT`` unit so that it is either fully applied or not at all.

The schema is bootstrapped with ``CREATE TABLE IF NOT EXISTS``; there
is no migration machinery.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .errors import StorageUnavailable

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS movies (
    id INTEGER PRIMARY KEY,
    adult INTEGER NOT NULL DEFAULT 0,
    backdrop_path TEXT,
    genre_ids TEXT NOT NULL DEFAULT '[]',
    origin_country TEXT NOT NULL DEFAULT '[]',
    original_language TEXT,
    original_name TEXT,
    original_title TEXT,
    overview TEXT,
    popularity REAL NOT NULL DEFAULT 0,
    poster_path TEXT,
    first_air_date TEXT,
    release_date TEXT,
    name TEXT,
    title TEXT,
    video INTEGER NOT NULL DEFAULT 0,
    vote_average REAL NOT NULL DEFAULT 0,
    vote_count INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS messages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    movie_id INTEGER NOT NULL,
    content TEXT NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(movie_id) REFERENCES movies(id)
);

CREATE INDEX IF NOT EXISTS idx_messages_movie_id ON messages(movie_id, id);
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the package root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # movie_chat_api/
    return str((base_dir / database_url).resolve())


class Database:
    """Process-scoped SQLite handle with an explicit open/close lifecycle."""

    def __init__(self, path: str, timeout: float = 5.0) -> None:
        self.path = path
        self.timeout = timeout
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect to the database file and bootstrap the schema."""
        if self._conn is not None:
            return
        # ``isolation_level=None`` disables the sqlite3 module's implicit
        # transactions; ``transaction()`` issues BEGIN/COMMIT itself.
        conn = sqlite3.connect(
            self.path,
            timeout=self.timeout,
            isolation_level=None,
            check_same_thread=False,
        )
        conn.row_factory = sqlite3.Row
        # Foreign keys are off by default in SQLite and must be enabled
        # per connection.
        conn.execute("PRAGMA foreign_keys = ON")
        # Writes reach the disk before COMMIT returns.
        conn.execute("PRAGMA synchronous = FULL")
        conn.executescript(SCHEMA)
        self._conn = conn
        logger.info("Opened database %s", self.path)

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.info("Closed database %s", self.path)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside a single write-locked transaction.

        The transaction is committed when the block exits normally and
        rolled back if it raises.
        """
        with self._lock:
            if self._conn is None:
                raise StorageUnavailable("Database is not open")
            cursor = self._conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            try:
                yield cursor
                cursor.execute("COMMIT")
            except BaseException:
                self._conn.rollback()
                raise
            finally:
                cursor.close()


def open_database(database_url: str, timeout: float = 5.0) -> Database:
    """Create and open a ``Database`` for ``database_url``."""
    db = Database(get_database_path(database_url), timeout=timeout)
    db.open()
    return db
