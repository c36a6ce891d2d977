"""
User repository - CRUD operations for user accounts.
"""

from .connection import DatabaseConnection
from .converters import row_to_user
from .models import DBUser


class UserRepository:
    """Repository for user operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(
        self,
        username: str,
        password: str,
        email: str,
        avatar_url: str | None = None,
    ) -> int:
        """Create a new user. Returns user ID."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                """INSERT INTO users (username, password, email, avatar_url)
                   VALUES (?, ?, ?, ?)""",
                (username, password, email, avatar_url)
            )
            return cursor.lastrowid

    def get(self, user_id: int) -> DBUser | None:
        """Get user by ID."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return row_to_user(row) if row else None

    def get_by_username(self, username: str) -> DBUser | None:
        """Get user by username."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE username = ?", (username,)
            ).fetchone()
            return row_to_user(row) if row else None

    def get_or_create(
        self,
        username: str,
        password: str,
        email: str,
        avatar_url: str | None = None,
    ) -> DBUser | None:
        """
        Return the user with this username, creating it if absent.

        Returns None only when the email already belongs to another user.
        """
        with self._db.conn() as conn:
            conn.execute(
                """INSERT OR IGNORE INTO users (username, password, email, avatar_url)
                   VALUES (?, ?, ?, ?)""",
                (username, password, email, avatar_url)
            )
            row = conn.execute(
                "SELECT * FROM users WHERE username = ?", (username,)
            ).fetchone()
            return row_to_user(row) if row else None
