"""
Enrichment service: builds the article read model served by every endpoint.

An enriched article bundles the stored article with its source, tags,
engagement counts and the viewer's bookmark flag. It is rebuilt from the
store on every request, since reactions and bookmarks change independently
of the article itself.
"""

from dataclasses import dataclass, field

from ..database import Database
from ..database.models import DBArticle, DBSource, DBTag, ReactionSummary


@dataclass
class ArticleWithRelations:
    """Denormalized article view."""
    article: DBArticle
    source: DBSource
    tags: list[DBTag] = field(default_factory=list)
    reactions: ReactionSummary = field(default_factory=ReactionSummary)
    bookmarked: bool = False


class EnrichmentService:
    """Service that assembles ArticleWithRelations from current store state."""

    def __init__(self, db: Database):
        self.db = db

    def enrich(self, article: DBArticle, viewer_id: int | None = None) -> ArticleWithRelations:
        """
        Resolve an article's relations.

        Args:
            article: Stored article
            viewer_id: Optional user whose bookmark state is reported

        Returns:
            The composed read model

        Raises:
            LookupError: If the article's source no longer exists
        """
        source = self.db.get_source(article.source_id)
        if source is None:
            raise LookupError(
                f"Article {article.id} references missing source {article.source_id}"
            )

        bookmarked = False
        if viewer_id is not None:
            bookmarked = self.db.is_article_bookmarked(viewer_id, article.id)

        return ArticleWithRelations(
            article=article,
            source=source,
            tags=self.db.get_tags_by_article_id(article.id),
            reactions=self.db.get_reactions_by_article_id(article.id),
            bookmarked=bookmarked,
        )

    def enrich_many(
        self,
        articles: list[DBArticle],
        viewer_id: int | None = None,
    ) -> list[ArticleWithRelations]:
        """Enrich each article, preserving order."""
        return [self.enrich(article, viewer_id) for article in articles]
