"""
Feed Parser - Fetch and parse RSS/Atom feeds.

Handles:
- RSS 2.0 and Atom 1.0 formats
- Media, enclosure and encoded-content fields
- Per-request timeouts
- Rate limiting per domain
"""

import feedparser
import aiohttp
import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import urlparse


@dataclass
class FeedItem:
    """Represents a single item/entry from a feed, with raw optional fields."""
    url: str
    title: str | None
    summary: str | None
    content_encoded: str | None
    media_url: str | None
    enclosure_url: str | None
    published: datetime | None


@dataclass
class Feed:
    """Represents a parsed feed."""
    url: str
    title: str
    description: str | None
    items: list[FeedItem]
    last_fetched: datetime


class FeedParser:
    """Parses RSS/Atom feeds with rate limiting."""

    def __init__(self, timeout: float = 10, user_agent: str | None = None):
        self.timeout = timeout
        self.user_agent = user_agent or "Tayar RSS Reader/1.0"
        self._domain_last_fetch: dict[str, float] = {}
        self._min_interval = 1.0  # Minimum seconds between requests to same domain

    async def fetch(self, url: str) -> Feed:
        """Fetch and parse a feed URL."""
        # Rate limit per domain
        domain = urlparse(url).netloc
        await self._rate_limit(domain)

        headers = {"User-Agent": self.user_agent}

        async with aiohttp.ClientSession() as session:
            async with session.get(
                url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as resp:
                resp.raise_for_status()
                content = await resp.read()

        return self._parse(url, content)

    def _parse(self, url: str, content: str | bytes) -> Feed:
        """Parse feed content using feedparser."""
        parsed = feedparser.parse(content)

        # Check for parse errors
        if parsed.bozo and not parsed.entries:
            raise ValueError(f"Failed to parse feed: {parsed.bozo_exception}")

        items = []
        for entry in parsed.entries:
            # content:encoded (RSS) or <content> (Atom)
            content_encoded = None
            if entry.get("content"):
                content_encoded = entry.content[0].get("value") or None

            # feedparser copies content into summary when an entry has none
            summary = entry.get("summary") or None
            if summary == content_encoded:
                summary = None

            # Get URL
            item_url = entry.get("link", "")
            if not item_url and hasattr(entry, "links"):
                for link in entry.links:
                    if link.get("rel") == "alternate" or link.get("type") == "text/html":
                        item_url = link.get("href", "")
                        break

            items.append(FeedItem(
                url=item_url,
                title=entry.get("title") or None,
                summary=summary,
                content_encoded=content_encoded,
                media_url=self._media_url(entry),
                enclosure_url=self._enclosure_url(entry),
                published=self._published(entry),
            ))

        # Get feed metadata
        feed_title = parsed.feed.get("title", "Unknown Feed")
        feed_description = parsed.feed.get("description") or parsed.feed.get("subtitle")

        return Feed(
            url=url,
            title=feed_title,
            description=feed_description,
            items=items,
            last_fetched=datetime.now(timezone.utc)
        )

    @staticmethod
    def _media_url(entry) -> str | None:
        """URL of the first media:content (or media:thumbnail) attachment."""
        for key in ("media_content", "media_thumbnail"):
            for media in entry.get(key) or []:
                if media.get("url"):
                    return media["url"]
        return None

    @staticmethod
    def _enclosure_url(entry) -> str | None:
        """URL of the first enclosure."""
        for enclosure in entry.get("enclosures") or []:
            href = enclosure.get("href") or enclosure.get("url")
            if href:
                return href
        return None

    @staticmethod
    def _published(entry) -> datetime | None:
        """Published (or updated) date as an aware UTC datetime."""
        for key in ("published_parsed", "updated_parsed"):
            value = entry.get(key)
            if value:
                try:
                    return datetime(*value[:6], tzinfo=timezone.utc)
                except (TypeError, ValueError):
                    continue
        return None

    async def _rate_limit(self, domain: str):
        """Ensure minimum interval between requests to same domain."""
        now = time.time()
        if domain in self._domain_last_fetch:
            elapsed = now - self._domain_last_fetch[domain]
            if elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
        self._domain_last_fetch[domain] = time.time()


def parse_feed_sync(content: str | bytes, url: str = "") -> Feed:
    """
    Synchronous feed parsing (for use when content is already fetched).

    Useful for testing or when you already have the feed content.
    """
    parser = FeedParser()
    return parser._parse(url, content)
