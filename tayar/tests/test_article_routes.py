"""
Tests for article routes.
"""

from datetime import datetime


class TestListArticles:
    """Tests for GET /api/articles endpoint."""

    def test_list_articles_empty(self, client):
        """Should return empty list when no articles."""
        response = client.get("/api/articles")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_articles_newest_first(self, client_with_data):
        client, data = client_with_data
        response = client.get("/api/articles")
        assert response.status_code == 200
        ids = [a["id"] for a in response.json()]
        assert ids == list(reversed(data["article_ids"]))

    def test_list_articles_has_enriched_fields(self, client_with_data):
        """Each article carries its source, tags, counts and bookmark flag."""
        client, data = client_with_data
        article = client.get("/api/articles").json()[0]
        for key in (
            "id", "title", "description", "content", "imageUrl", "sourceId",
            "url", "publishedAt", "readTime", "source", "tags", "reactions", "bookmarked",
        ):
            assert key in article
        assert article["source"]["name"] == "ExampleBlog"
        assert article["reactions"] == {"likes": 0, "comments": 0}
        assert article["bookmarked"] is False

    def test_pagination_returns_third_and_fourth_newest(self, client_with_data):
        client, data = client_with_data
        response = client.get("/api/articles?limit=2&offset=2")
        assert response.status_code == 200
        ids = [a["id"] for a in response.json()]
        assert ids == [data["article_ids"][1], data["article_ids"][0]]

    def test_default_page_size_is_ten(self, client_with_data):
        client, data = client_with_data
        db = data["db"]
        for i in range(12):
            db.create_article(
                title=f"Filler {i}",
                description="",
                content="",
                image_url="https://example.com/i.png",
                source_id=data["source_id"],
                url=f"https://example.com/filler/{i}",
                published_at=datetime(2023, 1, 1, i),
                read_time=1,
            )
        assert len(client.get("/api/articles").json()) == 10

    def test_search_is_case_insensitive_across_fields(self, client_with_data):
        """Search matches title, description or content, ignoring case."""
        client, data = client_with_data
        response = client.get("/api/articles?search=kubernetes")
        assert response.status_code == 200
        titles = {a["title"] for a in response.json()}
        assert titles == {"Kubernetes in production", "Typing tips"}

    def test_search_matches_description(self, client_with_data):
        client, data = client_with_data
        titles = [a["title"] for a in client.get("/api/articles?search=gentle").json()]
        assert titles == ["Getting started with Python"]

    def test_search_no_match(self, client_with_data):
        client, data = client_with_data
        assert client.get("/api/articles?search=haskell").json() == []

    def test_search_treats_wildcards_literally(self, client_with_data):
        client, data = client_with_data
        assert client.get("/api/articles?search=%25").json() == []

    def test_bookmark_flag_reflects_viewer(self, client_with_data):
        client, data = client_with_data
        article_id = data["article_ids"][0]
        data["db"].bookmark_article(data["user_id"], article_id)

        mine = client.get(f"/api/articles?userId={data['user_id']}&limit=10").json()
        flags = {a["id"]: a["bookmarked"] for a in mine}
        assert flags[article_id] is True
        assert sum(flags.values()) == 1

        theirs = client.get(f"/api/articles?userId={data['other_user_id']}").json()
        assert not any(a["bookmarked"] for a in theirs)

    def test_invalid_limit_is_rejected(self, client):
        response = client.get("/api/articles?limit=0")
        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Invalid request data"
        assert body["errors"]


class TestGetArticle:
    """Tests for GET /api/articles/{id} endpoint."""

    def test_get_article(self, client_with_data):
        client, data = client_with_data
        article_id = data["article_ids"][1]
        response = client.get(f"/api/articles/{article_id}")
        assert response.status_code == 200
        article = response.json()
        assert article["title"] == "Kubernetes in production"
        assert [t["name"] for t in article["tags"]] == ["devops"]

    def test_get_article_not_found(self, client):
        response = client.get("/api/articles/99999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Article not found"

    def test_get_article_invalid_id(self, client):
        response = client.get("/api/articles/not-a-number")
        assert response.status_code == 400

    def test_viewing_records_history(self, client_with_data):
        client, data = client_with_data
        user_id = data["user_id"]
        article_id = data["article_ids"][2]

        client.get(f"/api/articles/{article_id}?userId={user_id}")
        client.get(f"/api/articles/{article_id}?userId={user_id}")

        history = data["db"].get_reading_history(user_id)
        assert [h.article_id for h in history] == [article_id]

    def test_viewing_without_user_records_nothing(self, client_with_data):
        client, data = client_with_data
        client.get(f"/api/articles/{data['article_ids'][0]}")
        assert data["db"].get_reading_history(data["user_id"]) == []

    def test_viewing_as_unknown_user_still_returns_article(self, client_with_data):
        client, data = client_with_data
        article_id = data["article_ids"][0]
        response = client.get(f"/api/articles/{article_id}?userId=4242")
        assert response.status_code == 200
        assert response.json()["id"] == article_id
        assert response.json()["bookmarked"] is False
        assert data["db"].get_reading_history(4242) == []


class TestArticleEngagementReads:
    """Tests for GET /api/articles/{id}/reactions and /comments."""

    def test_reaction_summary_counts_likes_and_comments(self, client_with_data):
        client, data = client_with_data
        db = data["db"]
        article_id = data["article_ids"][0]

        likers = [data["user_id"], data["other_user_id"]]
        likers.append(db.create_user("third", "x", "third@example.com").id)
        for user_id in likers:
            db.add_reaction(user_id, article_id, "like")
        db.add_reaction(data["user_id"], article_id, "dislike")
        for i in range(5):
            db.add_comment(data["user_id"], article_id, f"Comment {i}")

        response = client.get(f"/api/articles/{article_id}/reactions")
        assert response.status_code == 200
        assert response.json() == {"likes": 3, "comments": 5}

    def test_reactions_unknown_article(self, client):
        assert client.get("/api/articles/123/reactions").status_code == 404

    def test_comments_newest_first_with_author(self, client_with_data):
        client, data = client_with_data
        db = data["db"]
        article_id = data["article_ids"][0]
        db.add_comment(data["user_id"], article_id, "first")
        db.add_comment(data["other_user_id"], article_id, "second")

        response = client.get(f"/api/articles/{article_id}/comments")
        assert response.status_code == 200
        comments = response.json()
        assert [c["content"] for c in comments] == ["second", "first"]
        assert comments[0]["user"]["username"] == "writer"
        assert "password" not in comments[0]["user"]

    def test_comments_unknown_article(self, client):
        assert client.get("/api/articles/123/comments").status_code == 404


class TestCreateArticle:
    """Tests for POST /api/articles endpoint."""

    def test_create_article_with_new_and_existing_tags(self, client_with_data):
        client, data = client_with_data
        response = client.post("/api/articles", json={
            "title": "Async Python",
            "content": "<p>Event loops explained.</p>",
            "sourceId": data["source_id"],
            "url": "https://example.com/posts/async",
            "tags": ["Python", "asyncio"],
        })
        assert response.status_code == 201
        article = response.json()
        assert article["title"] == "Async Python"
        assert article["readTime"] == 1
        assert article["description"].startswith("Event loops explained.")
        assert sorted(t["name"] for t in article["tags"]) == ["asyncio", "python"]

        # "Python" reused the existing "python" tag
        names = [t["name"].lower() for t in client.get("/api/tags").json()]
        assert names.count("python") == 1

    def test_create_article_keeps_given_fields(self, client_with_data):
        client, data = client_with_data
        response = client.post("/api/articles", json={
            "title": "Given",
            "description": "Hand written",
            "content": "Body",
            "imageUrl": "https://example.com/given.png",
            "sourceId": data["source_id"],
            "url": "https://example.com/posts/given",
            "readTime": 7,
            "publishedAt": "2020-01-02T03:04:05Z",
        })
        assert response.status_code == 201
        article = response.json()
        assert article["description"] == "Hand written"
        assert article["imageUrl"] == "https://example.com/given.png"
        assert article["readTime"] == 7
        assert article["publishedAt"].startswith("2020-01-02T03:04:05")

    def test_create_article_duplicate_url(self, client_with_data):
        client, data = client_with_data
        response = client.post("/api/articles", json={
            "title": "Copy",
            "sourceId": data["source_id"],
            "url": "https://example.com/posts/1",
        })
        assert response.status_code == 409

    def test_create_article_unknown_source(self, client):
        response = client.post("/api/articles", json={
            "title": "Orphan",
            "sourceId": 999,
            "url": "https://example.com/orphan",
        })
        assert response.status_code == 404
        assert response.json()["detail"] == "Source not found"

    def test_create_article_missing_fields(self, client):
        response = client.post("/api/articles", json={"content": "no title"})
        assert response.status_code == 400
        fields = {tuple(e["loc"])[-1] for e in response.json()["errors"]}
        assert {"title", "sourceId", "url"} <= fields
