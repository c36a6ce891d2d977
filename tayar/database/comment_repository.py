"""
Comment repository - append-only article comments.
"""

from datetime import datetime

from .connection import DatabaseConnection
from .converters import row_to_comment, to_db_timestamp, utc_now
from .models import DBComment


class CommentRepository:
    """Repository for comment operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(
        self,
        user_id: int,
        article_id: int,
        content: str,
        created_at: datetime | None = None,
    ) -> DBComment:
        """Append a comment. Returns the stored row."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                """INSERT INTO comments (user_id, article_id, content, created_at)
                   VALUES (?, ?, ?, ?)""",
                (user_id, article_id, content, to_db_timestamp(created_at or utc_now()))
            )
            row = conn.execute(
                "SELECT * FROM comments WHERE id = ?", (cursor.lastrowid,)
            ).fetchone()
            return row_to_comment(row)

    def get_for_article(self, article_id: int) -> list[DBComment]:
        """Get an article's comments with their authors, newest first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT c.*,
                          u.username AS author_username,
                          u.password AS author_password,
                          u.email AS author_email,
                          u.avatar_url AS author_avatar_url
                   FROM comments c
                   JOIN users u ON u.id = c.user_id
                   WHERE c.article_id = ?
                   ORDER BY c.created_at DESC, c.id DESC""",
                (article_id,)
            ).fetchall()
            return [row_to_comment(row) for row in rows]
