"""
Pytest fixtures for backend tests.
"""

import os

# Must be set before tayar.config is imported
os.environ["RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["ENABLE_SCHEDULER"] = "false"

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tayar.config import state
from tayar.database import Database
from tayar.feeds import Feed, parse_feed_sync
from tayar.ingestion import FeedIngestor
from tayar.server import app

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def rss_document(*items: dict, title: str = "Example Blog") -> str:
    """Build a small RSS 2.0 document from item dicts (title, link, description, ...)."""
    parts = []
    for item in items:
        fields = []
        if "title" in item:
            fields.append(f"<title>{item['title']}</title>")
        if "link" in item:
            fields.append(f"<link>{item['link']}</link>")
        if "description" in item:
            fields.append(f"<description><![CDATA[{item['description']}]]></description>")
        if "content" in item:
            fields.append(f"<content:encoded><![CDATA[{item['content']}]]></content:encoded>")
        if "pubDate" in item:
            fields.append(f"<pubDate>{item['pubDate']}</pubDate>")
        if "enclosure" in item:
            fields.append(f'<enclosure url="{item["enclosure"]}" type="image/jpeg" length="0"/>')
        parts.append("<item>" + "".join(fields) + "</item>")

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">'
        f"<channel><title>{title}</title><link>https://example.com</link>"
        "<description>Posts</description>"
        + "".join(parts)
        + "</channel></rss>"
    )


class FakeFeedParser:
    """Serves canned feed documents instead of fetching over the network."""

    def __init__(self, documents: dict[str, str | Exception] | None = None):
        self.documents = documents or {}
        self.fetched: list[str] = []

    async def fetch(self, url: str) -> Feed:
        self.fetched.append(url)
        document = self.documents.get(url)
        if document is None:
            raise ConnectionError(f"No route to {url}")
        if isinstance(document, Exception):
            raise document
        return parse_feed_sync(document, url)


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        yield Path(f.name)
    # Cleanup
    if os.path.exists(f.name):
        os.unlink(f.name)


@pytest.fixture
def test_db(temp_db_path):
    """Create a test database instance."""
    db = Database(temp_db_path)
    yield db


@pytest.fixture
def rss():
    """Factory for inline RSS documents."""
    return rss_document


@pytest.fixture
def fake_parser():
    return FakeFeedParser()


def _swap_state(db, parser):
    original = (state.db, state.feed_parser, state.ingestor, state.scheduler)
    state.db = db
    state.feed_parser = parser
    state.ingestor = FeedIngestor(db, parser, [])
    state.scheduler = None
    return original


def _restore_state(original):
    state.db, state.feed_parser, state.ingestor, state.scheduler = original


@pytest.fixture
def client(test_db, fake_parser):
    """Create a test client with an isolated database and no network."""
    original = _swap_state(test_db, fake_parser)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    _restore_state(original)


@pytest.fixture
def client_with_data(test_db, fake_parser):
    """Test client with a user, a source and four tagged articles."""
    original = _swap_state(test_db, fake_parser)

    user = test_db.create_user("reader", "secret", "reader@example.com")
    other = test_db.create_user("writer", "secret", "writer@example.com")
    source = test_db.create_source("ExampleBlog", "https://example.com/logo.png")
    python_tag = test_db.create_tag("python", "#3776AB")
    devops_tag = test_db.create_tag("devops", "#F29111")

    # Published one hour apart; the last one is the newest
    articles = []
    rows = [
        ("Getting started with Python", "A gentle intro", "Variables and loops.", [python_tag]),
        ("Kubernetes in production", "Running clusters", "Pods, nodes and services.", [devops_tag]),
        ("Typing tips", "Better annotations", "Protocols beat ABCs for KUBERNETES clients.", [python_tag]),
        ("Release notes", "What changed", "Bug fixes only.", []),
    ]
    for index, (title, description, content, tags) in enumerate(rows):
        article = test_db.create_article(
            title=title,
            description=description,
            content=content,
            image_url="https://example.com/image.png",
            source_id=source.id,
            url=f"https://example.com/posts/{index + 1}",
            published_at=BASE_TIME + timedelta(hours=index),
            read_time=1,
        )
        for tag in tags:
            test_db.create_article_tag(article.id, tag.id)
        articles.append(article)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client, {
            "db": test_db,
            "user_id": user.id,
            "other_user_id": other.id,
            "source_id": source.id,
            "article_ids": [a.id for a in articles],
        }

    _restore_state(original)
