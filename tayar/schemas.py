"""
Pydantic models for API request/response validation.

JSON keys are camelCase (``userId``, ``imageUrl``); Python attributes stay
snake_case. Either form is accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .database.models import (
    DBBookmark,
    DBComment,
    DBReaction,
    DBReadingHistory,
    DBSource,
    DBTag,
    DBUser,
    ReactionSummary,
)
from .ingestion import IngestionReport, SourceReport
from .services.enrichment_service import ArticleWithRelations


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─────────────────────────────────────────────────────────────
# Catalog Schemas
# ─────────────────────────────────────────────────────────────

class SourceResponse(CamelModel):
    id: int
    name: str
    logo_url: str | None = None

    @classmethod
    def from_db(cls, source: DBSource) -> "SourceResponse":
        return cls(id=source.id, name=source.name, logo_url=source.logo_url)


class TagResponse(CamelModel):
    id: int
    name: str
    color: str

    @classmethod
    def from_db(cls, tag: DBTag) -> "TagResponse":
        return cls(id=tag.id, name=tag.name, color=tag.color)


class UserResponse(CamelModel):
    """Public user profile (never includes the password)."""
    id: int
    username: str
    email: str
    avatar_url: str | None = None

    @classmethod
    def from_db(cls, user: DBUser) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            avatar_url=user.avatar_url,
        )


# ─────────────────────────────────────────────────────────────
# Article Schemas
# ─────────────────────────────────────────────────────────────

class ReactionSummaryResponse(CamelModel):
    likes: int
    comments: int

    @classmethod
    def from_db(cls, summary: ReactionSummary) -> "ReactionSummaryResponse":
        return cls(likes=summary.likes, comments=summary.comments)


class ArticleResponse(CamelModel):
    """Article with its source, tags, engagement counts and bookmark flag."""
    id: int
    title: str
    description: str
    content: str
    image_url: str
    source_id: int
    url: str
    published_at: str
    read_time: int
    source: SourceResponse
    tags: list[TagResponse]
    reactions: ReactionSummaryResponse
    bookmarked: bool = False

    @classmethod
    def from_enriched(cls, enriched: ArticleWithRelations) -> "ArticleResponse":
        article = enriched.article
        return cls(
            id=article.id,
            title=article.title,
            description=article.description,
            content=article.content,
            image_url=article.image_url,
            source_id=article.source_id,
            url=article.url,
            published_at=article.published_at.isoformat(),
            read_time=article.read_time,
            source=SourceResponse.from_db(enriched.source),
            tags=[TagResponse.from_db(t) for t in enriched.tags],
            reactions=ReactionSummaryResponse.from_db(enriched.reactions),
            bookmarked=enriched.bookmarked,
        )


class CreateArticleRequest(CamelModel):
    """Request to author an article directly."""
    title: str = Field(min_length=1)
    description: str | None = None
    content: str = ""
    image_url: str | None = None
    source_id: int
    url: str = Field(min_length=1)
    read_time: int | None = Field(default=None, ge=1)
    tags: list[str] = Field(default_factory=list)
    published_at: datetime | None = None


# ─────────────────────────────────────────────────────────────
# Engagement Schemas
# ─────────────────────────────────────────────────────────────

class BookmarkRequest(CamelModel):
    user_id: int
    article_id: int


class BookmarkResponse(CamelModel):
    id: int
    user_id: int
    article_id: int
    created_at: str

    @classmethod
    def from_db(cls, bookmark: DBBookmark) -> "BookmarkResponse":
        return cls(
            id=bookmark.id,
            user_id=bookmark.user_id,
            article_id=bookmark.article_id,
            created_at=bookmark.created_at.isoformat(),
        )


class HistoryRequest(CamelModel):
    user_id: int
    article_id: int
    viewed_at: datetime | None = None


class HistoryResponse(CamelModel):
    id: int
    user_id: int
    article_id: int
    viewed_at: str

    @classmethod
    def from_db(cls, entry: DBReadingHistory) -> "HistoryResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            article_id=entry.article_id,
            viewed_at=entry.viewed_at.isoformat(),
        )


class ReactionRequest(CamelModel):
    user_id: int
    article_id: int
    type: str = Field(min_length=1, max_length=32)


class ReactionResponse(CamelModel):
    id: int
    user_id: int
    article_id: int
    type: str

    @classmethod
    def from_db(cls, reaction: DBReaction) -> "ReactionResponse":
        return cls(
            id=reaction.id,
            user_id=reaction.user_id,
            article_id=reaction.article_id,
            type=reaction.type,
        )


class CommentRequest(CamelModel):
    user_id: int
    article_id: int
    content: str = Field(min_length=1)
    created_at: datetime | None = None


class CommentResponse(CamelModel):
    id: int
    user_id: int
    article_id: int
    content: str
    created_at: str
    user: UserResponse | None = None

    @classmethod
    def from_db(cls, comment: DBComment) -> "CommentResponse":
        return cls(
            id=comment.id,
            user_id=comment.user_id,
            article_id=comment.article_id,
            content=comment.content,
            created_at=comment.created_at.isoformat(),
            user=UserResponse.from_db(comment.user) if comment.user else None,
        )


# ─────────────────────────────────────────────────────────────
# Ingestion Schemas
# ─────────────────────────────────────────────────────────────

class SourceReportResponse(CamelModel):
    name: str
    status: str
    added: int
    skipped: int
    error: str | None = None

    @classmethod
    def from_report(cls, report: SourceReport) -> "SourceReportResponse":
        return cls(
            name=report.name,
            status=report.status,
            added=report.added,
            skipped=report.skipped,
            error=report.error,
        )


class IngestionReportResponse(CamelModel):
    """Summary of a completed ingestion run."""
    success: bool = True
    articles_added: int
    articles_skipped: int
    sources_failed: int
    sources: list[SourceReportResponse]

    @classmethod
    def from_report(cls, report: IngestionReport) -> "IngestionReportResponse":
        return cls(
            articles_added=report.added,
            articles_skipped=report.skipped,
            sources_failed=report.failed,
            sources=[SourceReportResponse.from_report(s) for s in report.sources],
        )


# ─────────────────────────────────────────────────────────────
# Status Schema
# ─────────────────────────────────────────────────────────────

class StatusResponse(CamelModel):
    status: str = "ok"
    version: str
    articles: int
    ingestion_in_progress: bool
