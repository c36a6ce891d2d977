"""
Source repository - publishers that articles belong to.
"""

from .connection import DatabaseConnection
from .converters import row_to_source
from .models import DBSource


class SourceRepository:
    """Repository for source operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(self, name: str, logo_url: str | None = None) -> int:
        """Add a new source. Returns source ID."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                "INSERT INTO sources (name, logo_url) VALUES (?, ?)",
                (name, logo_url)
            )
            return cursor.lastrowid

    def get(self, source_id: int) -> DBSource | None:
        """Get single source by ID."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM sources WHERE id = ?", (source_id,)
            ).fetchone()
            return row_to_source(row) if row else None

    def get_by_name(self, name: str) -> DBSource | None:
        """Get source by its unique name."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM sources WHERE name = ?", (name,)
            ).fetchone()
            return row_to_source(row) if row else None

    def get_all(self) -> list[DBSource]:
        """Get all sources in creation order."""
        with self._db.conn() as conn:
            rows = conn.execute("SELECT * FROM sources ORDER BY id").fetchall()
            return [row_to_source(row) for row in rows]

    def get_or_create(self, name: str, logo_url: str | None = None) -> DBSource:
        """
        Return the source with this name, creating it if absent.

        The logo URL is only applied when the source is created.
        """
        with self._db.conn() as conn:
            conn.execute(
                "INSERT OR IGNORE INTO sources (name, logo_url) VALUES (?, ?)",
                (name, logo_url)
            )
            row = conn.execute(
                "SELECT * FROM sources WHERE name = ?", (name,)
            ).fetchone()
            return row_to_source(row)
