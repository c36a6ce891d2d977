"""
Database facade - provides unified access to all repositories.

Routes, services and the ingestion pipeline talk to this class; the
repositories behind it each own one table family.
"""

from datetime import datetime
from pathlib import Path

from .connection import DatabaseConnection
from .article_repository import ArticleRepository, DEFAULT_PAGE_SIZE
from .bookmark_repository import BookmarkRepository
from .comment_repository import CommentRepository
from .history_repository import HistoryRepository
from .reaction_repository import ReactionRepository
from .source_repository import SourceRepository
from .tag_repository import TagRepository
from .user_repository import UserRepository
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


class Database:
    """Unified database access facade."""

    def __init__(self, db_path: Path):
        self._connection = DatabaseConnection(db_path)

        # Initialize repositories
        self.users = UserRepository(self._connection)
        self.sources = SourceRepository(self._connection)
        self.tags = TagRepository(self._connection)
        self.articles = ArticleRepository(self._connection)
        self.bookmarks = BookmarkRepository(self._connection)
        self.history = HistoryRepository(self._connection)
        self.reactions = ReactionRepository(self._connection)
        self.comments = CommentRepository(self._connection)

    # ─────────────────────────────────────────────────────────────
    # User operations
    # ─────────────────────────────────────────────────────────────

    def create_user(
        self,
        username: str,
        password: str,
        email: str,
        avatar_url: str | None = None,
    ) -> DBUser:
        user_id = self.users.add(username, password, email, avatar_url)
        return self.users.get(user_id)

    def get_user(self, user_id: int) -> DBUser | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> DBUser | None:
        return self.users.get_by_username(username)

    def ensure_user(
        self,
        username: str,
        password: str,
        email: str,
        avatar_url: str | None = None,
    ) -> DBUser | None:
        return self.users.get_or_create(username, password, email, avatar_url)

    # ─────────────────────────────────────────────────────────────
    # Source operations
    # ─────────────────────────────────────────────────────────────

    def create_source(self, name: str, logo_url: str | None = None) -> DBSource:
        source_id = self.sources.add(name, logo_url)
        return self.sources.get(source_id)

    def get_source(self, source_id: int) -> DBSource | None:
        return self.sources.get(source_id)

    def get_source_by_name(self, name: str) -> DBSource | None:
        return self.sources.get_by_name(name)

    def get_sources(self) -> list[DBSource]:
        return self.sources.get_all()

    def get_or_create_source(self, name: str, logo_url: str | None = None) -> DBSource:
        return self.sources.get_or_create(name, logo_url)

    # ─────────────────────────────────────────────────────────────
    # Tag operations
    # ─────────────────────────────────────────────────────────────

    def create_tag(self, name: str, color: str) -> DBTag:
        tag_id = self.tags.add(name, color)
        return self.tags.get(tag_id)

    def get_tag(self, tag_id: int) -> DBTag | None:
        return self.tags.get(tag_id)

    def get_tag_by_name(self, name: str) -> DBTag | None:
        return self.tags.get_by_name(name)

    def get_tags(self) -> list[DBTag]:
        return self.tags.get_all()

    def get_or_create_tag(self, name: str, color: str) -> DBTag:
        return self.tags.get_or_create(name, color)

    def create_article_tag(self, article_id: int, tag_id: int) -> DBArticleTag:
        return self.tags.link(article_id, tag_id)

    def get_tags_by_article_id(self, article_id: int) -> list[DBTag]:
        return self.tags.get_for_article(article_id)

    # ─────────────────────────────────────────────────────────────
    # Article operations
    # ─────────────────────────────────────────────────────────────

    def create_article(
        self,
        title: str,
        description: str,
        content: str,
        image_url: str,
        source_id: int,
        url: str,
        published_at: datetime,
        read_time: int,
    ) -> DBArticle | None:
        """Create an article. Returns None if an article with this URL exists."""
        article_id = self.articles.add(
            title, description, content, image_url, source_id, url,
            published_at, read_time
        )
        if article_id is None:
            return None
        return self.articles.get(article_id)

    def get_article(self, article_id: int) -> DBArticle | None:
        return self.articles.get(article_id)

    def get_article_by_url(self, url: str) -> DBArticle | None:
        return self.articles.get_by_url(url)

    def get_articles(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        search: str | None = None,
    ) -> list[DBArticle]:
        return self.articles.get_many(limit, offset, search)

    def get_articles_by_tag_id(self, tag_id: int) -> list[DBArticle]:
        return self.articles.get_by_tag(tag_id)

    def get_articles_by_tag_name(self, tag_name: str) -> list[DBArticle]:
        tag = self.tags.get_by_name(tag_name)
        if tag is None:
            return []
        return self.articles.get_by_tag(tag.id)

    def count_articles(self) -> int:
        return self.articles.count()

    # ─────────────────────────────────────────────────────────────
    # Bookmark operations
    # ─────────────────────────────────────────────────────────────

    def bookmark_article(
        self,
        user_id: int,
        article_id: int,
        created_at: datetime | None = None,
    ) -> DBBookmark:
        return self.bookmarks.add(user_id, article_id, created_at)

    def remove_bookmark(self, user_id: int, article_id: int) -> bool:
        return self.bookmarks.remove(user_id, article_id)

    def is_article_bookmarked(self, user_id: int, article_id: int) -> bool:
        return self.bookmarks.exists(user_id, article_id)

    def get_bookmarks(self, user_id: int) -> list[DBBookmark]:
        return self.bookmarks.get_for_user(user_id)

    def get_bookmarked_articles(self, user_id: int) -> list[DBArticle]:
        return self.bookmarks.get_articles_for_user(user_id)

    # ─────────────────────────────────────────────────────────────
    # Reading history operations
    # ─────────────────────────────────────────────────────────────

    def get_reading_history(self, user_id: int) -> list[DBReadingHistory]:
        return self.history.get_for_user(user_id)

    def get_history_articles(self, user_id: int) -> list[DBArticle]:
        return self.history.get_articles_for_user(user_id)

    def add_to_reading_history(
        self,
        user_id: int,
        article_id: int,
        viewed_at: datetime | None = None,
    ) -> DBReadingHistory:
        # The (user, article) pair is unique, so adding is an upsert too.
        return self.history.record_view(user_id, article_id, viewed_at)

    def update_reading_history(
        self,
        user_id: int,
        article_id: int,
        viewed_at: datetime | None = None,
    ) -> DBReadingHistory:
        return self.history.record_view(user_id, article_id, viewed_at)

    def clear_reading_history(self, user_id: int) -> bool:
        self.history.clear(user_id)
        return True

    # ─────────────────────────────────────────────────────────────
    # Reaction operations
    # ─────────────────────────────────────────────────────────────

    def get_reactions_by_article_id(self, article_id: int) -> ReactionSummary:
        return self.reactions.summarize(article_id)

    def add_reaction(self, user_id: int, article_id: int, reaction_type: str) -> DBReaction:
        return self.reactions.add(user_id, article_id, reaction_type)

    def remove_reaction(self, user_id: int, article_id: int, reaction_type: str) -> bool:
        return self.reactions.remove(user_id, article_id, reaction_type)

    # ─────────────────────────────────────────────────────────────
    # Comment operations
    # ─────────────────────────────────────────────────────────────

    def get_comments_by_article_id(self, article_id: int) -> list[DBComment]:
        return self.comments.get_for_article(article_id)

    def add_comment(
        self,
        user_id: int,
        article_id: int,
        content: str,
        created_at: datetime | None = None,
    ) -> DBComment:
        return self.comments.add(user_id, article_id, content, created_at)
