"""Tests for the server-rendered pages."""


def test_index_lists_destinations(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    for name in ("Paris", "New York", "Tokyo"):
        assert name in resp.text


def test_index_filters_by_name(client):
    resp = client.get("/", params={"name": "TOK"})
    assert "Tokyo" in resp.text
    assert "Paris" not in resp.text


def test_destination_page_shows_its_comments(client):
    resp = client.get("/destination/1")
    assert resp.status_code == 200
    assert "Paris" in resp.text
    assert "Amazing city!" in resp.text
    assert "I love the skyscrapers!" not in resp.text


def test_destination_page_not_found(client):
    resp = client.get("/destination/42")
    assert resp.status_code == 404


def test_users_page(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert "john_doe" in resp.text
    assert "jane_smith" in resp.text


def test_comments_page_reflects_api_changes(client):
    client.post("/api/comment", json={"destinationId": 3, "userId": 1, "text": "Sushi everywhere"})
    resp = client.get("/comments")
    assert resp.status_code == 200
    assert "Sushi everywhere" in resp.text


def test_pages_escape_user_content(client):
    client.post("/api/destination", json={"name": "<script>alert(1)</script>"})
    resp = client.get("/")
    assert "<script>alert(1)</script>" not in resp.text
    assert "&lt;script&gt;" in resp.text
