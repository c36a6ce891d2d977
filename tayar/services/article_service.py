"""
Article service: business logic for article reads and direct authoring.

Handles listing, search, detail views (recording the view), tag listings,
per-article engagement reads and article creation outside of ingestion.
"""

import logging
from datetime import datetime

from fastapi import HTTPException

from ..database import Database
from ..database.converters import utc_now
from ..database.models import DBComment, DBSource, DBTag, ReactionSummary
from ..database.article_repository import DEFAULT_PAGE_SIZE
from ..exceptions import require_article, require_source
from ..extractors import estimate_read_time, make_description, pick_image_url
from ..ingestion import ensure_tags
from .enrichment_service import ArticleWithRelations, EnrichmentService

logger = logging.getLogger(__name__)


class ArticleService:
    """Service for article-related business logic."""

    def __init__(self, db: Database, enrichment: EnrichmentService | None = None):
        self.db = db
        self.enrichment = enrichment or EnrichmentService(db)

    # ─────────────────────────────────────────────────────────────
    # Listing & Search
    # ─────────────────────────────────────────────────────────────

    def list_articles(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        search: str | None = None,
        viewer_id: int | None = None,
    ) -> list[ArticleWithRelations]:
        """
        Get enriched articles, newest first.

        Args:
            limit: Maximum articles to return
            offset: Pagination offset
            search: Optional case-insensitive term matched against
                title, description and content
            viewer_id: Optional user for the bookmarked flag

        Returns:
            Enriched articles
        """
        search = search.strip() if search else None
        articles = self.db.get_articles(limit=limit, offset=offset, search=search or None)
        return self.enrichment.enrich_many(articles, viewer_id)

    def list_articles_for_tag(
        self,
        tag_name: str,
        viewer_id: int | None = None,
    ) -> list[ArticleWithRelations]:
        """Get enriched articles carrying a tag. Unknown tags yield an empty list."""
        articles = self.db.get_articles_by_tag_name(tag_name)
        return self.enrichment.enrich_many(articles, viewer_id)

    def list_tags(self) -> list[DBTag]:
        return self.db.get_tags()

    def list_sources(self) -> list[DBSource]:
        return self.db.get_sources()

    # ─────────────────────────────────────────────────────────────
    # Detail
    # ─────────────────────────────────────────────────────────────

    def get_article(self, article_id: int, viewer_id: int | None = None) -> ArticleWithRelations:
        """
        Get a single enriched article.

        When a viewer is given, the view is recorded in their reading
        history (updating the timestamp of an earlier view). Views by
        unknown users are not recorded.

        Raises:
            HTTPException: 404 if the article does not exist
        """
        article = require_article(self.db.get_article(article_id))

        if viewer_id is not None:
            if self.db.get_user(viewer_id) is None:
                logger.debug(f"Not recording view of article {article_id}: unknown user {viewer_id}")
            else:
                self.db.update_reading_history(viewer_id, article_id, utc_now())

        return self.enrichment.enrich(article, viewer_id)

    def get_reactions(self, article_id: int) -> ReactionSummary:
        """Get the like/comment counts for an article."""
        require_article(self.db.get_article(article_id))
        return self.db.get_reactions_by_article_id(article_id)

    def get_comments(self, article_id: int) -> list[DBComment]:
        """Get an article's comments with authors, newest first."""
        require_article(self.db.get_article(article_id))
        return self.db.get_comments_by_article_id(article_id)

    # ─────────────────────────────────────────────────────────────
    # Authoring
    # ─────────────────────────────────────────────────────────────

    def create_article(
        self,
        title: str,
        content: str,
        source_id: int,
        url: str,
        description: str | None = None,
        image_url: str | None = None,
        read_time: int | None = None,
        tags: list[str] | None = None,
        published_at: datetime | None = None,
    ) -> ArticleWithRelations:
        """
        Create an article directly, bypassing ingestion.

        Missing description, image and read time are derived from the
        content the same way ingestion derives them. Each tag name is
        get-or-created.

        Raises:
            HTTPException: 404 for an unknown source, 409 for a duplicate URL
        """
        require_source(self.db.get_source(source_id))

        article = self.db.create_article(
            title=title,
            description=description or make_description(None, content),
            content=content,
            image_url=image_url or pick_image_url(None, None, content),
            source_id=source_id,
            url=url,
            published_at=published_at or utc_now(),
            read_time=read_time or estimate_read_time(content),
        )
        if article is None:
            raise HTTPException(status_code=409, detail="Article with this URL already exists")

        ensure_tags(self.db, article.id, tags or [])
        return self.enrichment.enrich(article)
