"""
Repository for reading history (one latest-view row per user+article).
"""

from datetime import datetime

from .connection import DatabaseConnection
from .converters import row_to_article, row_to_reading_history, to_db_timestamp, utc_now
from .models import DBArticle, DBReadingHistory


class HistoryRepository:
    """Repository for reading history operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def record_view(
        self,
        user_id: int,
        article_id: int,
        viewed_at: datetime | None = None,
    ) -> DBReadingHistory:
        """
        Record that a user viewed an article.

        An existing row for the pair has its viewed_at overwritten;
        otherwise a new row is inserted.
        """
        with self._db.conn() as conn:
            conn.execute(
                """INSERT INTO reading_history (user_id, article_id, viewed_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(user_id, article_id) DO UPDATE SET
                   viewed_at = excluded.viewed_at""",
                (user_id, article_id, to_db_timestamp(viewed_at or utc_now()))
            )
            row = conn.execute(
                "SELECT * FROM reading_history WHERE user_id = ? AND article_id = ?",
                (user_id, article_id)
            ).fetchone()
            return row_to_reading_history(row)

    def get_for_user(self, user_id: int) -> list[DBReadingHistory]:
        """Get a user's history rows, most recent view first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT * FROM reading_history WHERE user_id = ?
                   ORDER BY viewed_at DESC, id DESC""",
                (user_id,)
            ).fetchall()
            return [row_to_reading_history(row) for row in rows]

    def get_articles_for_user(self, user_id: int) -> list[DBArticle]:
        """Get the articles a user has viewed, most recent view first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT a.* FROM articles a
                   JOIN reading_history h ON h.article_id = a.id
                   WHERE h.user_id = ?
                   ORDER BY h.viewed_at DESC, h.id DESC""",
                (user_id,)
            ).fetchall()
            return [row_to_article(row) for row in rows]

    def clear(self, user_id: int) -> int:
        """Delete all of a user's history. Returns number of rows removed."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                "DELETE FROM reading_history WHERE user_id = ?", (user_id,)
            )
            return cursor.rowcount
