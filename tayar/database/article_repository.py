"""
Article repository - CRUD and listing operations for articles.
"""

import sqlite3
from datetime import datetime

from .connection import DatabaseConnection
from .converters import row_to_article, to_db_timestamp
from .models import DBArticle

DEFAULT_PAGE_SIZE = 10


class ArticleRepository:
    """Repository for article operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(
        self,
        title: str,
        description: str,
        content: str,
        image_url: str,
        source_id: int,
        url: str,
        published_at: datetime,
        read_time: int,
    ) -> int | None:
        """Add a new article. Returns article ID or None if the URL already exists."""
        with self._db.conn() as conn:
            try:
                cursor = conn.execute(
                    """INSERT INTO articles
                       (title, description, content, image_url, source_id, url,
                        published_at, read_time)
                       VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                    (title, description, content, image_url, source_id, url,
                     to_db_timestamp(published_at), read_time)
                )
                return cursor.lastrowid
            except sqlite3.IntegrityError as e:
                if "UNIQUE" not in str(e):
                    raise
                return None

    def get(self, article_id: int) -> DBArticle | None:
        """Get single article by ID."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM articles WHERE id = ?", (article_id,)
            ).fetchone()
            return row_to_article(row) if row else None

    def get_by_url(self, url: str) -> DBArticle | None:
        """Get article by its canonical URL."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM articles WHERE url = ?", (url,)
            ).fetchone()
            return row_to_article(row) if row else None

    def get_many(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        search: str | None = None,
    ) -> list[DBArticle]:
        """
        Get articles newest first, optionally filtered by a search term.

        The term matches anywhere in the title, description or content,
        compared after Unicode case folding. Wildcard characters in the
        term have no special meaning.
        """
        query = "SELECT * FROM articles WHERE 1=1"
        params: list = []

        if search:
            term = search.casefold()
            query += """ AND (instr(fold(title), ?) > 0
                         OR instr(fold(description), ?) > 0
                         OR instr(fold(content), ?) > 0)"""
            params.extend([term, term, term])

        query += " ORDER BY published_at DESC, id DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        with self._db.conn() as conn:
            rows = conn.execute(query, params).fetchall()
            return [row_to_article(row) for row in rows]

    def get_by_tag(self, tag_id: int) -> list[DBArticle]:
        """Get articles carrying a tag, newest first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT DISTINCT a.* FROM articles a
                   JOIN article_tags atag ON atag.article_id = a.id
                   WHERE atag.tag_id = ?
                   ORDER BY a.published_at DESC, a.id DESC""",
                (tag_id,)
            ).fetchall()
            return [row_to_article(row) for row in rows]

    def count(self) -> int:
        """Total number of stored articles."""
        with self._db.conn() as conn:
            row = conn.execute("SELECT COUNT(*) AS total FROM articles").fetchone()
            return row["total"]
