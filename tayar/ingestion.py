"""
Feed ingestion: turn configured syndication feeds into stored articles.

Each run walks the configured sources in order. A source whose fetch or
processing fails is logged and reported, and the run moves on to the next
source. Runs are serialized so a manual trigger never overlaps a scheduled
one.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .database.converters import utc_now
from .extractors import estimate_read_time, make_description, pick_image_url, tag_color
from .feed_sources import FeedSource

if TYPE_CHECKING:
    from .database import Database, DBArticle, DBTag
    from .feeds import FeedItem, FeedParser

logger = logging.getLogger(__name__)

MAX_ITEMS_PER_FEED = 10


@dataclass
class SourceReport:
    """Outcome of ingesting one configured source."""
    name: str
    status: str = "ok"  # ok | error
    added: int = 0
    skipped: int = 0
    error: str | None = None


@dataclass
class IngestionReport:
    """Outcome of one full ingestion run."""
    sources: list[SourceReport] = field(default_factory=list)

    @property
    def added(self) -> int:
        return sum(s.added for s in self.sources)

    @property
    def skipped(self) -> int:
        return sum(s.skipped for s in self.sources)

    @property
    def failed(self) -> int:
        return sum(1 for s in self.sources if s.status == "error")


def ensure_tags(db: "Database", article_id: int, tag_names: list[str] | tuple[str, ...]) -> list["DBTag"]:
    """
    Get-or-create each named tag and link it to the article.

    Names are linked once each, compared case-insensitively.
    """
    linked: list["DBTag"] = []
    seen: set[str] = set()
    for name in tag_names:
        name = name.strip()
        if not name or name.casefold() in seen:
            continue
        seen.add(name.casefold())
        tag = db.get_or_create_tag(name, tag_color(name))
        db.create_article_tag(article_id, tag.id)
        linked.append(tag)
    return linked


class FeedIngestor:
    """Fetches configured feeds and stores their new items as articles."""

    def __init__(
        self,
        db: "Database",
        feed_parser: "FeedParser",
        sources: list[FeedSource],
        max_items: int = MAX_ITEMS_PER_FEED,
    ):
        self.db = db
        self.feed_parser = feed_parser
        self.sources = sources
        self.max_items = max_items
        self._lock = asyncio.Lock()
        self.last_report: IngestionReport | None = None

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    async def run(self) -> IngestionReport:
        """
        Ingest every configured source once.

        If a run is already in progress, waits for it to finish first.
        """
        async with self._lock:
            logger.info(f"Starting feed ingestion for {len(self.sources)} sources")
            report = IngestionReport()

            for source in self.sources:
                report.sources.append(await self.ingest_source(source))

            logger.info(
                f"Feed ingestion completed: {report.added} added, "
                f"{report.skipped} skipped, {report.failed} sources failed"
            )
            self.last_report = report
            return report

    async def ingest_source(self, source: FeedSource) -> SourceReport:
        """Fetch one source and store its new items. Never raises."""
        result = SourceReport(name=source.name)

        try:
            logger.info(f"Fetching feed: {source.name}")
            feed = await self.feed_parser.fetch(source.url)
            db_source = self.db.get_or_create_source(source.name, source.logo_url)

            items = feed.items[:self.max_items]
            logger.info(f"Processing {len(items)} items from {source.name}")

            for item in items:
                article = self._store_item(item, db_source.id, source.tags)
                if article is None:
                    result.skipped += 1
                else:
                    result.added += 1
                    logger.debug(f"Added article: {article.title}")

        except Exception as e:
            result.status = "error"
            result.error = str(e) or e.__class__.__name__
            logger.error(f"Error fetching feed {source.name}: {result.error}")

        return result

    def _store_item(
        self,
        item: "FeedItem",
        source_id: int,
        tag_names: tuple[str, ...],
    ) -> "DBArticle | None":
        """Normalize a feed item and persist it. Returns None when skipped."""
        if not item.url:
            return None

        # Check if article already exists
        if self.db.get_article_by_url(item.url):
            return None

        content = item.content_encoded or item.summary or ""

        article = self.db.create_article(
            title=item.title or "Untitled",
            description=make_description(item.summary, content),
            content=content,
            image_url=pick_image_url(
                item.media_url, item.enclosure_url, item.summary, item.content_encoded
            ),
            source_id=source_id,
            url=item.url,
            published_at=item.published or utc_now(),
            read_time=estimate_read_time(content),
        )
        if article is None:
            # Stored concurrently between the check and the insert
            return None

        ensure_tags(self.db, article.id, tag_names)
        return article
