"""
HTTP exception utilities for common error patterns.

Provides helper functions to reduce boilerplate for common 404 errors.
"""

from typing import TypeVar

from fastapi import HTTPException

T = TypeVar("T")


def require_resource(resource: T | None, detail: str = "Resource not found") -> T:
    """
    Raise 404 if resource is None, otherwise return the resource.

    Usage:
        article = require_resource(db.get_article(id), "Article not found")
    """
    if resource is None:
        raise HTTPException(status_code=404, detail=detail)
    return resource


def require_article(article: T | None) -> T:
    """Raise 404 if article is None."""
    return require_resource(article, "Article not found")


def require_user(user: T | None) -> T:
    """Raise 404 if user is None."""
    return require_resource(user, "User not found")


def require_source(source: T | None) -> T:
    """Raise 404 if source is None."""
    return require_resource(source, "Source not found")


def require_removed(removed: bool, detail: str) -> None:
    """Raise 404 if a delete matched nothing."""
    if not removed:
        raise HTTPException(status_code=404, detail=detail)
