"""
Database models - dataclasses for database entities.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class DBUser:
    id: int
    username: str
    password: str
    email: str
    avatar_url: str | None = None


@dataclass
class DBSource:
    id: int
    name: str
    logo_url: str | None = None


@dataclass
class DBTag:
    id: int
    name: str
    color: str


@dataclass
class DBArticle:
    id: int
    title: str
    description: str
    content: str
    image_url: str
    source_id: int
    url: str
    published_at: datetime
    read_time: int


@dataclass
class DBArticleTag:
    id: int
    article_id: int
    tag_id: int


@dataclass
class DBBookmark:
    id: int
    user_id: int
    article_id: int
    created_at: datetime


@dataclass
class DBReadingHistory:
    id: int
    user_id: int
    article_id: int
    viewed_at: datetime


@dataclass
class DBReaction:
    id: int
    user_id: int
    article_id: int
    type: str


@dataclass
class DBComment:
    id: int
    user_id: int
    article_id: int
    content: str
    created_at: datetime
    user: DBUser | None = None  # Author, populated by joined queries


@dataclass
class ReactionSummary:
    """Aggregate engagement counts shown on article cards."""
    likes: int = 0
    comments: int = 0
