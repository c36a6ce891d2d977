"""
Engagement routes: bookmark, history, reaction and comment mutations.
"""

from fastapi import APIRouter

from ..schemas import (
    BookmarkRequest,
    BookmarkResponse,
    CommentRequest,
    CommentResponse,
    HistoryRequest,
    HistoryResponse,
    ReactionRequest,
    ReactionResponse,
)
from ..services import EngagementServiceDep

router = APIRouter(prefix="/api", tags=["engagement"])


# ─────────────────────────────────────────────────────────────
# Bookmarks
# ─────────────────────────────────────────────────────────────

@router.post("/bookmarks", status_code=201)
async def add_bookmark(
    request: BookmarkRequest,
    service: EngagementServiceDep,
) -> BookmarkResponse:
    """Bookmark an article. Repeating the call returns the same bookmark."""
    bookmark = service.add_bookmark(request.user_id, request.article_id)
    return BookmarkResponse.from_db(bookmark)


@router.delete("/bookmarks")
async def remove_bookmark(
    request: BookmarkRequest,
    service: EngagementServiceDep,
) -> dict:
    """Remove a bookmark."""
    service.remove_bookmark(request.user_id, request.article_id)
    return {"success": True, "message": "Bookmark removed successfully"}


# ─────────────────────────────────────────────────────────────
# Reading History
# ─────────────────────────────────────────────────────────────

@router.post("/history", status_code=201)
async def record_view(
    request: HistoryRequest,
    service: EngagementServiceDep,
) -> HistoryResponse:
    """Record a view. A repeat view of the same article updates its timestamp."""
    entry = service.record_view(request.user_id, request.article_id, request.viewed_at)
    return HistoryResponse.from_db(entry)


# ─────────────────────────────────────────────────────────────
# Reactions
# ─────────────────────────────────────────────────────────────

@router.post("/reactions", status_code=201)
async def add_reaction(
    request: ReactionRequest,
    service: EngagementServiceDep,
) -> ReactionResponse:
    """Add a reaction. Repeating the call returns the same reaction."""
    reaction = service.add_reaction(request.user_id, request.article_id, request.type)
    return ReactionResponse.from_db(reaction)


@router.delete("/reactions")
async def remove_reaction(
    request: ReactionRequest,
    service: EngagementServiceDep,
) -> dict:
    """Remove a reaction."""
    service.remove_reaction(request.user_id, request.article_id, request.type)
    return {"success": True, "message": "Reaction removed successfully"}


# ─────────────────────────────────────────────────────────────
# Comments
# ─────────────────────────────────────────────────────────────

@router.post("/comments", status_code=201)
async def add_comment(
    request: CommentRequest,
    service: EngagementServiceDep,
) -> CommentResponse:
    """Append a comment to an article."""
    comment = service.add_comment(
        request.user_id,
        request.article_id,
        request.content,
        request.created_at,
    )
    return CommentResponse.from_db(comment)
