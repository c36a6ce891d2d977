"""
Article routes: list/search, detail, authoring, per-article engagement reads.
"""

from fastapi import APIRouter, Query

from ..schemas import (
    ArticleResponse,
    CommentResponse,
    CreateArticleRequest,
    ReactionSummaryResponse,
)
from ..services import ArticleServiceDep

router = APIRouter(prefix="/api/articles", tags=["articles"])


# ─────────────────────────────────────────────────────────────
# List & Create (static paths first)
# ─────────────────────────────────────────────────────────────

@router.get("")
async def list_articles(
    service: ArticleServiceDep,
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    search: str | None = None,
    user_id: int | None = Query(default=None, alias="userId"),
) -> list[ArticleResponse]:
    """Get articles newest first, optionally searched.

    Args:
        search: Case-insensitive term matched in title, description or content
        userId: Viewer whose bookmark state is reported on each article
    """
    articles = service.list_articles(
        limit=limit,
        offset=offset,
        search=search,
        viewer_id=user_id,
    )
    return [ArticleResponse.from_enriched(a) for a in articles]


@router.post("", status_code=201)
async def create_article(
    request: CreateArticleRequest,
    service: ArticleServiceDep,
) -> ArticleResponse:
    """Author an article directly. Tags are created as needed."""
    article = service.create_article(
        title=request.title,
        description=request.description,
        content=request.content,
        image_url=request.image_url,
        source_id=request.source_id,
        url=request.url,
        read_time=request.read_time,
        tags=request.tags,
        published_at=request.published_at,
    )
    return ArticleResponse.from_enriched(article)


# ─────────────────────────────────────────────────────────────
# Single Article Operations (parameterized paths last)
# ─────────────────────────────────────────────────────────────

@router.get("/{article_id}")
async def get_article(
    article_id: int,
    service: ArticleServiceDep,
    user_id: int | None = Query(default=None, alias="userId"),
) -> ArticleResponse:
    """Get a single article. With userId, the view is added to reading history."""
    article = service.get_article(article_id, viewer_id=user_id)
    return ArticleResponse.from_enriched(article)


@router.get("/{article_id}/reactions")
async def get_article_reactions(
    article_id: int,
    service: ArticleServiceDep,
) -> ReactionSummaryResponse:
    """Get like and comment counts for an article."""
    return ReactionSummaryResponse.from_db(service.get_reactions(article_id))


@router.get("/{article_id}/comments")
async def get_article_comments(
    article_id: int,
    service: ArticleServiceDep,
) -> list[CommentResponse]:
    """Get comments with their authors, newest first."""
    return [CommentResponse.from_db(c) for c in service.get_comments(article_id)]
