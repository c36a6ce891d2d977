"""
Database connection management and schema initialization.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def _fold(value: str | None) -> str | None:
    """Unicode case folding, registered in SQL as fold()."""
    return value.casefold() if value else value


class DatabaseConnection:
    """Manages database connection and schema."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    @contextmanager
    def conn(self) -> Iterator[sqlite3.Connection]:
        """Get database connection with row factory."""
        connection = sqlite3.connect(self.db_path, timeout=30)
        connection.row_factory = sqlite3.Row
        connection.create_function("fold", 1, _fold, deterministic=True)
        connection.execute("PRAGMA foreign_keys = ON")
        try:
            yield connection
            connection.commit()
        finally:
            connection.close()

    def _init_schema(self):
        """Initialize database schema."""
        with self.conn() as connection:
            connection.executescript("""
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT UNIQUE NOT NULL,
                    password TEXT NOT NULL,
                    email TEXT UNIQUE NOT NULL,
                    avatar_url TEXT
                );

                CREATE TABLE IF NOT EXISTS sources (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT UNIQUE NOT NULL,
                    logo_url TEXT
                );

                CREATE TABLE IF NOT EXISTS tags (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    name_key TEXT UNIQUE NOT NULL,
                    color TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS articles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    content TEXT NOT NULL,
                    image_url TEXT NOT NULL,
                    source_id INTEGER NOT NULL REFERENCES sources(id),
                    url TEXT UNIQUE NOT NULL,
                    published_at TIMESTAMP NOT NULL,
                    read_time INTEGER NOT NULL
                );

                CREATE TABLE IF NOT EXISTS article_tags (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    article_id INTEGER NOT NULL REFERENCES articles(id),
                    tag_id INTEGER NOT NULL REFERENCES tags(id)
                );

                CREATE TABLE IF NOT EXISTS bookmarks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL REFERENCES users(id),
                    article_id INTEGER NOT NULL REFERENCES articles(id),
                    created_at TIMESTAMP NOT NULL,
                    UNIQUE(user_id, article_id)
                );

                CREATE TABLE IF NOT EXISTS reading_history (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL REFERENCES users(id),
                    article_id INTEGER NOT NULL REFERENCES articles(id),
                    viewed_at TIMESTAMP NOT NULL,
                    UNIQUE(user_id, article_id)
                );

                CREATE TABLE IF NOT EXISTS reactions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL REFERENCES users(id),
                    article_id INTEGER NOT NULL REFERENCES articles(id),
                    type TEXT NOT NULL,
                    UNIQUE(user_id, article_id, type)
                );

                CREATE TABLE IF NOT EXISTS comments (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL REFERENCES users(id),
                    article_id INTEGER NOT NULL REFERENCES articles(id),
                    content TEXT NOT NULL,
                    created_at TIMESTAMP NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_articles_published ON articles(published_at DESC);
                CREATE INDEX IF NOT EXISTS idx_article_tags_article ON article_tags(article_id);
                CREATE INDEX IF NOT EXISTS idx_article_tags_tag ON article_tags(tag_id);
                CREATE INDEX IF NOT EXISTS idx_bookmarks_user ON bookmarks(user_id, created_at DESC);
                CREATE INDEX IF NOT EXISTS idx_history_user ON reading_history(user_id, viewed_at DESC);
                CREATE INDEX IF NOT EXISTS idx_reactions_article ON reactions(article_id, type);
                CREATE INDEX IF NOT EXISTS idx_comments_article ON comments(article_id, created_at DESC);
            """)
