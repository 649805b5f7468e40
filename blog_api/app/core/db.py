"""
SQLite storage for users and posts.

``Storage`` wraps a single SQLite connection that is opened once at
application startup (``open``) and released at shutdown (``close``).
The handle is created by the application factory and handed to the
services through a FastAPI dependency, so tests can build an app
around a temporary database.

Every public operation issues exactly one statement and commits it
immediately.  Any ``sqlite3.Error`` is re‑raised as
``StorageFailure``.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from .errors import IntegrityFailure, StorageFailure

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT UNIQUE,
    password TEXT
);

CREATE TABLE IF NOT EXISTS posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT,
    content TEXT,
    author TEXT,
    category TEXT,
    image TEXT,
    date TEXT
);
"""

POST_COLUMNS = ("title", "content", "author", "category", "image", "date")


class Storage:
    """Owned handle to the SQLite database file."""

    def __init__(self, database_path: str) -> None:
        self._database_path = database_path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def database_path(self) -> str:
        return self._database_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Connect to the database file and create missing tables.

        The parent directory is created when needed.  Calling ``open``
        on an already open handle only re‑runs the idempotent schema.
        Errors propagate: a database that cannot be opened is fatal.
        """
        if self._conn is None:
            if self._database_path != ":memory:":
                Path(self._database_path).parent.mkdir(parents=True, exist_ok=True)
            # The startup hook and request handling may run on
            # different threads; access itself stays serialized on
            # the event loop.
            conn = sqlite3.connect(self._database_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            self._conn = conn
            logger.info("Connected to SQLite database at %s", self._database_path)
        self._conn.executescript(SCHEMA)
        self._conn.commit()
        logger.info("Tables ready")

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("Closed SQLite database at %s", self._database_path)

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise StorageFailure("Database is not open")
        try:
            cursor = self._conn.execute(sql, params)
            self._conn.commit()
            return cursor
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            raise IntegrityFailure(f"Constraint violation: {exc}") from exc
        except sqlite3.Error as exc:
            self._conn.rollback()
            raise StorageFailure(f"Database error: {exc}") from exc

    # -- users ---------------------------------------------------------

    def find_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        row = self._execute(
            "SELECT id, email, password FROM users WHERE email = ?", (email,)
        ).fetchone()
        return dict(row) if row else None

    def insert_user(self, email: str, password: str) -> int:
        """Insert a user and return the assigned id.

        The UNIQUE constraint on ``email`` is the final guard against
        duplicates; a violation surfaces as ``IntegrityFailure``.
        """
        cursor = self._execute(
            "INSERT INTO users (email, password) VALUES (?, ?)", (email, password)
        )
        return cursor.lastrowid

    # -- posts ---------------------------------------------------------

    def insert_post(self, fields: Dict[str, Any]) -> int:
        """Insert a post from a mapping of column values and return its id.

        Keys missing from ``fields`` are stored as NULL.
        """
        cursor = self._execute(
            "INSERT INTO posts (title, content, author, category, image, date) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            tuple(fields.get(column) for column in POST_COLUMNS),
        )
        return cursor.lastrowid

    def list_posts_descending(self) -> List[Dict[str, Any]]:
        rows = self._execute("SELECT * FROM posts ORDER BY id DESC").fetchall()
        return [dict(row) for row in rows]

    def delete_post(self, post_id: Union[int, str]) -> int:
        """Delete a post by id and return the number of rows removed.

        A textual id is compared through the column's INTEGER affinity,
        so ``"2"`` matches post 2 and ``"abc"`` matches nothing.
        """
        cursor = self._execute("DELETE FROM posts WHERE id = ?", (post_id,))
        return cursor.rowcount
