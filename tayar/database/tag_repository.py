"""
Tag repository - tags and article/tag links.
"""

from .connection import DatabaseConnection
from .converters import row_to_article_tag, row_to_tag
from .models import DBArticleTag, DBTag


class TagRepository:
    """Repository for tags and the article_tags join table."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(self, name: str, color: str) -> int:
        """Add a new tag. Returns tag ID."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                "INSERT INTO tags (name, name_key, color) VALUES (?, ?, ?)",
                (name, name.casefold(), color)
            )
            return cursor.lastrowid

    def get(self, tag_id: int) -> DBTag | None:
        """Get single tag by ID."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM tags WHERE id = ?", (tag_id,)
            ).fetchone()
            return row_to_tag(row) if row else None

    def get_by_name(self, name: str) -> DBTag | None:
        """Get tag by name (case-insensitive)."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM tags WHERE name_key = ?", (name.casefold(),)
            ).fetchone()
            return row_to_tag(row) if row else None

    def get_all(self) -> list[DBTag]:
        """Get all tags in creation order."""
        with self._db.conn() as conn:
            rows = conn.execute("SELECT * FROM tags ORDER BY id").fetchall()
            return [row_to_tag(row) for row in rows]

    def get_or_create(self, name: str, color: str) -> DBTag:
        """
        Return the tag with this name (any casing), creating it if absent.

        The color is only applied when the tag is created.
        """
        with self._db.conn() as conn:
            conn.execute(
                "INSERT OR IGNORE INTO tags (name, name_key, color) VALUES (?, ?, ?)",
                (name, name.casefold(), color)
            )
            row = conn.execute(
                "SELECT * FROM tags WHERE name_key = ?", (name.casefold(),)
            ).fetchone()
            return row_to_tag(row)

    # ─────────────────────────────────────────────────────────────
    # Article links
    # ─────────────────────────────────────────────────────────────

    def link(self, article_id: int, tag_id: int) -> DBArticleTag:
        """Attach a tag to an article."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                "INSERT INTO article_tags (article_id, tag_id) VALUES (?, ?)",
                (article_id, tag_id)
            )
            row = conn.execute(
                "SELECT * FROM article_tags WHERE id = ?", (cursor.lastrowid,)
            ).fetchone()
            return row_to_article_tag(row)

    def get_for_article(self, article_id: int) -> list[DBTag]:
        """Get the distinct tags linked to an article."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT DISTINCT t.* FROM tags t
                   JOIN article_tags atag ON atag.tag_id = t.id
                   WHERE atag.article_id = ?
                   ORDER BY t.id""",
                (article_id,)
            ).fetchall()
            return [row_to_tag(row) for row in rows]
