"""
Persistence layer for movies and chat messages.

``ChatStore`` is the only component that reads or writes the database.
Each public method is one transaction on the shared ``Database``
handle, so a caller never observes a partially applied write.

Referential integrity is checked explicitly inside the insert
transaction and is additionally enforced by the ``FOREIGN KEY``
constraint on ``messages.movie_id``.  Either failure is reported as
``MovieNotFound``.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from movie_chat_api.app.core.db import Database
from movie_chat_api.app.core.errors import InvalidContent, MovieNotFound, StorageUnavailable
from movie_chat_api.app.schemas.chat import ChatMessageRead
from movie_chat_api.app.schemas.movie import MovieRead

logger = logging.getLogger(__name__)

# Range of a SQLite INTEGER; ids outside it cannot be stored.
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1

MOVIE_COLUMNS = (
    "id, adult, backdrop_path, genre_ids, origin_country, "
    "original_language, original_name, original_title, "
    "overview, popularity, poster_path, first_air_date, "
    "release_date, name, title, video, vote_average, vote_count"
)


class ChatStore:
    """Store for the movie catalog and the messages attached to it."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def list_movies(self) -> List[MovieRead]:
        """Return every movie ordered by id."""
        try:
            with self.db.transaction() as cursor:
                rows = cursor.execute(f"SELECT {MOVIE_COLUMNS} FROM movies ORDER BY id ASC").fetchall()
        except sqlite3.Error as exc:
            raise self._unavailable("list movies", exc) from exc
        return [self._row_to_movie(row) for row in rows]

    def movie_exists(self, movie_id: int) -> bool:
        """Return whether a movie with ``movie_id`` is in the catalog."""
        try:
            with self.db.transaction() as cursor:
                return self._movie_exists(cursor, movie_id)
        except sqlite3.Error as exc:
            raise self._unavailable("look up movie", exc) from exc

    def insert_message(self, movie_id: int, content: str) -> ChatMessageRead:
        """Insert a message for ``movie_id`` and return the stored row.

        The existence check and the insert share one transaction, so a
        movie cannot disappear between them.  ``id`` and ``created_at``
        are assigned by the database.
        """
        if not content or not content.strip():
            raise InvalidContent("Message content must not be empty")
        try:
            with self.db.transaction() as cursor:
                if not self._movie_exists(cursor, movie_id):
                    raise MovieNotFound(movie_id)
                cursor.execute(
                    "INSERT INTO messages (movie_id, content) VALUES (?, ?)",
                    (movie_id, content),
                )
                message_id = cursor.lastrowid
                row = cursor.execute(
                    "SELECT id, movie_id, content, created_at FROM messages WHERE id = ?",
                    (message_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            # Foreign key violation raised by the engine itself.
            raise MovieNotFound(movie_id) from exc
        except sqlite3.Error as exc:
            raise self._unavailable("insert message", exc) from exc
        logger.info("Created message %s for movie %s", message_id, movie_id)
        return self._row_to_message(row)

    def list_messages(self, movie_id: int) -> List[ChatMessageRead]:
        """Return the messages of ``movie_id`` ordered by id ascending."""
        try:
            with self.db.transaction() as cursor:
                if not self._movie_exists(cursor, movie_id):
                    raise MovieNotFound(movie_id)
                rows = cursor.execute(
                    "SELECT id, movie_id, content, created_at FROM messages WHERE movie_id = ? ORDER BY id ASC",
                    (movie_id,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise self._unavailable("list messages", exc) from exc
        return [self._row_to_message(row) for row in rows]

    @staticmethod
    def _movie_exists(cursor: sqlite3.Cursor, movie_id: int) -> bool:
        if not SQLITE_INT_MIN <= movie_id <= SQLITE_INT_MAX:
            return False
        row = cursor.execute("SELECT 1 FROM movies WHERE id = ?", (movie_id,)).fetchone()
        return row is not None

    @staticmethod
    def _unavailable(action: str, exc: sqlite3.Error) -> StorageUnavailable:
        logger.error("Failed to %s: %s", action, exc)
        return StorageUnavailable(f"Storage unavailable, could not {action}")

    @staticmethod
    def _row_to_movie(row: sqlite3.Row) -> MovieRead:
        """Convert a database row to a MovieRead schema instance."""
        return MovieRead(
            id=row["id"],
            adult=bool(row["adult"]),
            backdrop_path=row["backdrop_path"],
            genre_ids=row["genre_ids"],
            origin_country=row["origin_country"],
            original_language=row["original_language"],
            original_name=row["original_name"],
            original_title=row["original_title"],
            overview=row["overview"],
            popularity=row["popularity"],
            poster_path=row["poster_path"],
            first_air_date=row["first_air_date"],
            release_date=row["release_date"],
            name=row["name"],
            title=row["title"],
            video=bool(row["video"]),
            vote_average=row["vote_average"],
            vote_count=row["vote_count"],
        )

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> ChatMessageRead:
        return ChatMessageRead(
            id=row["id"],
            movie_id=row["movie_id"],
            content=row["content"],
            created_at=str(row["created_at"]),
        )
