"""Tests for the user endpoints."""


def test_list_users(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "username": "john_doe", "email": "john@example.com"},
        {"id": 2, "username": "jane_smith", "email": "jane@example.com"},
    ]


def test_get_user(client):
    resp = client.get("/api/user/2")
    assert resp.status_code == 200
    assert resp.json()["username"] == "jane_smith"


def test_get_user_not_found(client):
    resp = client.get("/api/user/7")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_create_user(client):
    resp = client.post("/api/user", json={"username": "max", "email": "max@example.com"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 3, "username": "max", "email": "max@example.com"}
    assert client.get("/api/user/3").json() == resp.json()


def test_create_user_without_fields(client):
    resp = client.post("/api/user", json={})
    assert resp.status_code == 201
    assert resp.json() == {"id": 3}


def test_patch_user(client):
    resp = client.patch("/api/user/1", json={"email": "john@travel.example"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "username": "john_doe", "email": "john@travel.example"}


def test_patch_user_empty_string_is_ignored(client):
    resp = client.patch("/api/user/1", json={"username": "", "email": ""})
    assert resp.json() == {"id": 1, "username": "john_doe", "email": "john@example.com"}


def test_patch_user_not_found(client):
    resp = client.patch("/api/user/9", json={"username": "ghost"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_delete_user_keeps_their_comments(client):
    assert client.delete("/api/user/1").status_code == 204
    assert client.get("/api/user/1").status_code == 404
    comments = client.get("/api/comments").json()
    assert comments[0]["userId"] == 1


def test_delete_user_not_found(client):
    resp = client.delete("/api/user/9")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_create_user_without_body(client):
    resp = client.post("/api/user")
    assert resp.status_code == 201
    assert resp.json() == {"id": 3}


def test_patch_user_without_body(client):
    resp = client.patch("/api/user/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "username": "john_doe", "email": "john@example.com"}
