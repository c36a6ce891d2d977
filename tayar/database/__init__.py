"""
Database module - SQLite operations for articles, sources, tags and engagement.

Uses repository pattern for better separation of concerns.
"""

from .connection import DatabaseConnection
from .models import (
    DBArticle,
    DBArticleTag,
    DBBookmark,
    DBComment,
    DBReaction,
    DBReadingHistory,
    DBSource,
    DBTag,
    DBUser,
    ReactionSummary,
)
from .database import Database

__all__ = [
    "Database",
    "DatabaseConnection",
    "DBArticle",
    "DBArticleTag",
    "DBBookmark",
    "DBComment",
    "DBReaction",
    "DBReadingHistory",
    "DBSource",
    "DBTag",
    "DBUser",
    "ReactionSummary",
]
