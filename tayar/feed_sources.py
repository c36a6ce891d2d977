"""
Configured syndication feeds polled by the ingestion pipeline.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FeedSource:
    """An external feed: display name, feed URL, logo and default tags."""
    name: str
    url: str
    logo_url: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)


DEFAULT_FEED_SOURCES: list[FeedSource] = [
    FeedSource(
        name="CSS-Tricks",
        url="https://css-tricks.com/feed/",
        logo_url="https://css-tricks.com/favicon.ico",
        tags=("css", "webdev", "frontend"),
    ),
    FeedSource(
        name="freeCodeCamp",
        url="https://www.freecodecamp.org/news/rss/",
        logo_url="https://www.freecodecamp.org/favicon-32x32.png",
        tags=("webdev", "tutorial", "programming"),
    ),
    FeedSource(
        name="Dev.to",
        url="https://dev.to/feed/",
        logo_url="https://dev.to/favicon.ico",
        tags=("webdev", "programming", "development"),
    ),
    FeedSource(
        name="The GitHub Blog",
        url="https://github.blog/feed/",
        logo_url="https://github.githubassets.com/favicons/favicon.png",
        tags=("github", "opensource", "development"),
    ),
    FeedSource(
        name="Smashing Magazine",
        url="https://www.smashingmagazine.com/feed/",
        logo_url="https://www.smashingmagazine.com/images/favicon/favicon.png",
        tags=("design", "webdev", "ux"),
    ),
    FeedSource(
        name="JavaScript Weekly",
        url="https://cprss.s3.amazonaws.com/javascriptweekly.com.xml",
        logo_url="https://javascriptweekly.com/favicon.png",
        tags=("javascript", "webdev", "frontend"),
    ),
]


def parse_feed_sources(data: list[dict]) -> list[FeedSource]:
    """
    Build FeedSource entries from decoded JSON.

    Each entry needs ``name`` and ``url``; ``logoUrl`` (or ``logo_url``)
    and ``tags`` are optional.

    Raises:
        ValueError: If the data is not a list of objects with name and url
    """
    if not isinstance(data, list):
        raise ValueError("Feed source list must be a JSON array")

    sources = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict) or not entry.get("name") or not entry.get("url"):
            raise ValueError(f"Feed source #{index} needs a name and a url")
        sources.append(FeedSource(
            name=entry["name"],
            url=entry["url"],
            logo_url=entry.get("logoUrl") or entry.get("logo_url"),
            tags=tuple(entry.get("tags") or ()),
        ))
    return sources


def load_feed_sources(path: Path | None) -> list[FeedSource]:
    """Load feed sources from a JSON file, or return the defaults if no path."""
    if path is None:
        return list(DEFAULT_FEED_SOURCES)
    with open(path, encoding="utf-8") as f:
        return parse_feed_sources(json.load(f))
