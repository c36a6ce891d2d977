"""
User routes: a user's bookmarks and reading history.
"""

from fastapi import APIRouter

from ..schemas import ArticleResponse
from ..services import EngagementServiceDep

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}/bookmarks")
async def list_bookmarks(
    user_id: int,
    service: EngagementServiceDep,
) -> list[ArticleResponse]:
    """Bookmarked articles, most recently bookmarked first."""
    return [ArticleResponse.from_enriched(a) for a in service.list_bookmarks(user_id)]


@router.get("/{user_id}/history")
async def list_history(
    user_id: int,
    service: EngagementServiceDep,
) -> list[ArticleResponse]:
    """Viewed articles, most recent view first."""
    return [ArticleResponse.from_enriched(a) for a in service.list_history(user_id)]


@router.delete("/{user_id}/history")
async def clear_history(
    user_id: int,
    service: EngagementServiceDep,
) -> dict:
    """Clear a user's reading history."""
    return {"success": service.clear_history(user_id)}
