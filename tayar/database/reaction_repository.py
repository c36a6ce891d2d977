"""
Repository for article reactions and the engagement summary.
"""

from .connection import DatabaseConnection
from .converters import row_to_reaction
from .models import DBReaction, ReactionSummary

LIKE = "like"


class ReactionRepository:
    """Repository for reaction operations. One reaction per user+article+type."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(self, user_id: int, article_id: int, reaction_type: str) -> DBReaction:
        """Add a reaction. Returns the existing one if already present."""
        with self._db.conn() as conn:
            conn.execute(
                """INSERT OR IGNORE INTO reactions (user_id, article_id, type)
                   VALUES (?, ?, ?)""",
                (user_id, article_id, reaction_type)
            )
            row = conn.execute(
                """SELECT * FROM reactions
                   WHERE user_id = ? AND article_id = ? AND type = ?""",
                (user_id, article_id, reaction_type)
            ).fetchone()
            return row_to_reaction(row)

    def remove(self, user_id: int, article_id: int, reaction_type: str) -> bool:
        """Remove a reaction. Returns False if there was nothing to remove."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                """DELETE FROM reactions
                   WHERE user_id = ? AND article_id = ? AND type = ?""",
                (user_id, article_id, reaction_type)
            )
            return cursor.rowcount > 0

    def get_for_article(self, article_id: int) -> list[DBReaction]:
        """Get all reactions on an article."""
        with self._db.conn() as conn:
            rows = conn.execute(
                "SELECT * FROM reactions WHERE article_id = ? ORDER BY id",
                (article_id,)
            ).fetchall()
            return [row_to_reaction(row) for row in rows]

    def summarize(self, article_id: int) -> ReactionSummary:
        """
        Count likes and comments for an article.

        Likes come from reactions of type "like"; comments are counted from
        the comments table. Other reaction types are not included.
        """
        with self._db.conn() as conn:
            row = conn.execute(
                """SELECT
                   (SELECT COUNT(*) FROM reactions WHERE article_id = ? AND type = ?) AS likes,
                   (SELECT COUNT(*) FROM comments WHERE article_id = ?) AS comments""",
                (article_id, LIKE, article_id)
            ).fetchone()
            return ReactionSummary(likes=row["likes"], comments=row["comments"])
