"""
Tests for the manual ingestion trigger.
"""

from tayar.config import state
from tayar.feed_sources import FeedSource

FEED_URL = "https://example.com/feed.xml"


class TestFetchFeeds:
    """Tests for POST /api/rss/fetch."""

    def test_fetch_with_no_sources(self, client):
        response = client.post("/api/rss/fetch")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["articlesAdded"] == 0
        assert body["sources"] == []

    def test_fetch_reports_each_source(self, client, fake_parser, rss):
        fake_parser.documents[FEED_URL] = rss(
            {"title": "Hello World", "link": "https://example.com/hello"},
        )
        state.ingestor.sources = [
            FeedSource(name="ExampleBlog", url=FEED_URL, tags=("python",)),
            FeedSource(name="Offline", url="https://offline.example.com/feed"),
        ]

        response = client.post("/api/rss/fetch")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["articlesAdded"] == 1
        assert body["sourcesFailed"] == 1
        assert [s["status"] for s in body["sources"]] == ["ok", "error"]
        assert body["sources"][1]["error"]

        articles = client.get("/api/articles").json()
        assert [a["title"] for a in articles] == ["Hello World"]
        assert articles[0]["source"]["name"] == "ExampleBlog"
        assert [t["name"] for t in articles[0]["tags"]] == ["python"]

    def test_fetch_twice_adds_nothing_new(self, client, fake_parser, rss):
        fake_parser.documents[FEED_URL] = rss({"title": "Once", "link": "https://example.com/once"})
        state.ingestor.sources = [FeedSource(name="ExampleBlog", url=FEED_URL)]

        client.post("/api/rss/fetch")
        body = client.post("/api/rss/fetch").json()
        assert body["articlesAdded"] == 0
        assert body["articlesSkipped"] == 1
        assert client.get("/api/status").json()["articles"] == 1

    def test_fetch_without_ingestor(self, client):
        state.ingestor = None
        response = client.post("/api/rss/fetch")
        assert response.status_code == 503
