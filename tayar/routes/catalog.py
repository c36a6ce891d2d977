"""
Catalog routes: tags, sources and tag listings.
"""

from fastapi import APIRouter, Query

from ..schemas import ArticleResponse, SourceResponse, TagResponse
from ..services import ArticleServiceDep

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/tags")
async def list_tags(service: ArticleServiceDep) -> list[TagResponse]:
    """List all tags."""
    return [TagResponse.from_db(t) for t in service.list_tags()]


@router.get("/tags/{tag_name}/articles")
async def list_tag_articles(
    tag_name: str,
    service: ArticleServiceDep,
    user_id: int | None = Query(default=None, alias="userId"),
) -> list[ArticleResponse]:
    """List articles carrying a tag (matched case-insensitively)."""
    articles = service.list_articles_for_tag(tag_name, viewer_id=user_id)
    return [ArticleResponse.from_enriched(a) for a in articles]


@router.get("/sources")
async def list_sources(service: ArticleServiceDep) -> list[SourceResponse]:
    """List all sources."""
    return [SourceResponse.from_db(s) for s in service.list_sources()]
