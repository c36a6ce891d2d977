"""
Repository for per-user bookmarks.
"""

from datetime import datetime

from .connection import DatabaseConnection
from .converters import row_to_article, row_to_bookmark, to_db_timestamp, utc_now
from .models import DBArticle, DBBookmark


class BookmarkRepository:
    """Repository for bookmark operations. At most one bookmark per user+article."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(
        self,
        user_id: int,
        article_id: int,
        created_at: datetime | None = None,
    ) -> DBBookmark:
        """Bookmark an article. Returns the existing bookmark if already present."""
        with self._db.conn() as conn:
            conn.execute(
                """INSERT OR IGNORE INTO bookmarks (user_id, article_id, created_at)
                   VALUES (?, ?, ?)""",
                (user_id, article_id, to_db_timestamp(created_at or utc_now()))
            )
            row = conn.execute(
                "SELECT * FROM bookmarks WHERE user_id = ? AND article_id = ?",
                (user_id, article_id)
            ).fetchone()
            return row_to_bookmark(row)

    def remove(self, user_id: int, article_id: int) -> bool:
        """Remove a bookmark. Returns False if there was nothing to remove."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                "DELETE FROM bookmarks WHERE user_id = ? AND article_id = ?",
                (user_id, article_id)
            )
            return cursor.rowcount > 0

    def exists(self, user_id: int, article_id: int) -> bool:
        """Check whether the user has bookmarked the article."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT 1 FROM bookmarks WHERE user_id = ? AND article_id = ?",
                (user_id, article_id)
            ).fetchone()
            return row is not None

    def get_for_user(self, user_id: int) -> list[DBBookmark]:
        """Get a user's bookmarks, newest first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT * FROM bookmarks WHERE user_id = ?
                   ORDER BY created_at DESC, id DESC""",
                (user_id,)
            ).fetchall()
            return [row_to_bookmark(row) for row in rows]

    def get_articles_for_user(self, user_id: int) -> list[DBArticle]:
        """Get the articles a user has bookmarked, most recently bookmarked first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT a.* FROM articles a
                   JOIN bookmarks b ON b.article_id = a.id
                   WHERE b.user_id = ?
                   ORDER BY b.created_at DESC, b.id DESC""",
                (user_id,)
            ).fetchall()
            return [row_to_article(row) for row in rows]
