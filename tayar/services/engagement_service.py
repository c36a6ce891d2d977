"""
Engagement service: bookmarks, reading history, reactions and comments.

Every mutation checks that the user and article exist before writing.
Creating a bookmark or reaction twice returns the original row; removing
one that does not exist is a 404.
"""

from datetime import datetime

from ..database import Database
from ..database.models import DBBookmark, DBComment, DBReaction, DBReadingHistory
from ..exceptions import require_article, require_removed, require_user
from .enrichment_service import ArticleWithRelations, EnrichmentService


class EngagementService:
    """Service for per-user engagement with articles."""

    def __init__(self, db: Database, enrichment: EnrichmentService | None = None):
        self.db = db
        self.enrichment = enrichment or EnrichmentService(db)

    def _require_user_and_article(self, user_id: int, article_id: int):
        require_user(self.db.get_user(user_id))
        require_article(self.db.get_article(article_id))

    # ─────────────────────────────────────────────────────────────
    # Bookmarks
    # ─────────────────────────────────────────────────────────────

    def list_bookmarks(self, user_id: int) -> list[ArticleWithRelations]:
        """Get a user's bookmarked articles, most recently bookmarked first."""
        articles = self.db.get_bookmarked_articles(user_id)
        return self.enrichment.enrich_many(articles, user_id)

    def add_bookmark(self, user_id: int, article_id: int) -> DBBookmark:
        self._require_user_and_article(user_id, article_id)
        return self.db.bookmark_article(user_id, article_id)

    def remove_bookmark(self, user_id: int, article_id: int) -> None:
        require_removed(self.db.remove_bookmark(user_id, article_id), "Bookmark not found")

    # ─────────────────────────────────────────────────────────────
    # Reading history
    # ─────────────────────────────────────────────────────────────

    def list_history(self, user_id: int) -> list[ArticleWithRelations]:
        """Get a user's viewed articles, most recent view first."""
        articles = self.db.get_history_articles(user_id)
        return self.enrichment.enrich_many(articles, user_id)

    def record_view(
        self,
        user_id: int,
        article_id: int,
        viewed_at: datetime | None = None,
    ) -> DBReadingHistory:
        """Record a view, replacing the timestamp of any earlier view."""
        self._require_user_and_article(user_id, article_id)
        return self.db.update_reading_history(user_id, article_id, viewed_at)

    def clear_history(self, user_id: int) -> bool:
        return self.db.clear_reading_history(user_id)

    # ─────────────────────────────────────────────────────────────
    # Reactions
    # ─────────────────────────────────────────────────────────────

    def add_reaction(self, user_id: int, article_id: int, reaction_type: str) -> DBReaction:
        self._require_user_and_article(user_id, article_id)
        return self.db.add_reaction(user_id, article_id, reaction_type)

    def remove_reaction(self, user_id: int, article_id: int, reaction_type: str) -> None:
        require_removed(
            self.db.remove_reaction(user_id, article_id, reaction_type),
            "Reaction not found"
        )

    # ─────────────────────────────────────────────────────────────
    # Comments
    # ─────────────────────────────────────────────────────────────

    def add_comment(
        self,
        user_id: int,
        article_id: int,
        content: str,
        created_at: datetime | None = None,
    ) -> DBComment:
        """Append a comment, returned with its author attached."""
        author = require_user(self.db.get_user(user_id))
        require_article(self.db.get_article(article_id))
        comment = self.db.add_comment(user_id, article_id, content, created_at)
        comment.user = author
        return comment
