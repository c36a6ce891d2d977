"""
Database row converters - convert SQLite rows to dataclasses.
"""

import sqlite3
from datetime import datetime, timezone

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
)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_db_timestamp(value: datetime) -> str:
    """
    Serialize a datetime for storage.

    Naive values are taken to be UTC. Fixed microsecond precision keeps
    lexical order identical to chronological order in ORDER BY clauses.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_db_timestamp(value: str | None) -> datetime:
    """Parse a stored timestamp, falling back to now for missing values."""
    if not value:
        return utc_now()
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def row_to_user(row: sqlite3.Row) -> DBUser:
    """Convert a database row to a DBUser."""
    return DBUser(
        id=row["id"],
        username=row["username"],
        password=row["password"],
        email=row["email"],
        avatar_url=row["avatar_url"],
    )


def row_to_source(row: sqlite3.Row) -> DBSource:
    """Convert a database row to a DBSource."""
    return DBSource(id=row["id"], name=row["name"], logo_url=row["logo_url"])


def row_to_tag(row: sqlite3.Row) -> DBTag:
    """Convert a database row to a DBTag."""
    return DBTag(id=row["id"], name=row["name"], color=row["color"])


def row_to_article(row: sqlite3.Row) -> DBArticle:
    """Convert a database row to a DBArticle."""
    return DBArticle(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        content=row["content"],
        image_url=row["image_url"],
        source_id=row["source_id"],
        url=row["url"],
        published_at=from_db_timestamp(row["published_at"]),
        read_time=int(row["read_time"]),
    )


def row_to_article_tag(row: sqlite3.Row) -> DBArticleTag:
    """Convert a database row to a DBArticleTag."""
    return DBArticleTag(id=row["id"], article_id=row["article_id"], tag_id=row["tag_id"])


def row_to_bookmark(row: sqlite3.Row) -> DBBookmark:
    """Convert a database row to a DBBookmark."""
    return DBBookmark(
        id=row["id"],
        user_id=row["user_id"],
        article_id=row["article_id"],
        created_at=from_db_timestamp(row["created_at"]),
    )


def row_to_reading_history(row: sqlite3.Row) -> DBReadingHistory:
    """Convert a database row to a DBReadingHistory."""
    return DBReadingHistory(
        id=row["id"],
        user_id=row["user_id"],
        article_id=row["article_id"],
        viewed_at=from_db_timestamp(row["viewed_at"]),
    )


def row_to_reaction(row: sqlite3.Row) -> DBReaction:
    """Convert a database row to a DBReaction."""
    return DBReaction(
        id=row["id"],
        user_id=row["user_id"],
        article_id=row["article_id"],
        type=row["type"],
    )


def row_to_comment(row: sqlite3.Row) -> DBComment:
    """
    Convert a database row to a DBComment.

    Rows selected with the author columns (aliased ``author_*``) also get
    their ``user`` populated.
    """
    user = None
    if "author_username" in row.keys() and row["author_username"] is not None:
        user = DBUser(
            id=row["user_id"],
            username=row["author_username"],
            password=row["author_password"],
            email=row["author_email"],
            avatar_url=row["author_avatar_url"],
        )

    return DBComment(
        id=row["id"],
        user_id=row["user_id"],
        article_id=row["article_id"],
        content=row["content"],
        created_at=from_db_timestamp(row["created_at"]),
        user=user,
    )
