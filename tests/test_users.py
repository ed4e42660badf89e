"""
Tests for user endpoints.

This test suite covers:
- GET /users        list every user
- GET /users/{id}   lookup by id (null when missing, never 404)
- POST /users       create with generated id, empty 201 body
"""

import uuid

from test_fixtures import client, create_user, unique_email


EXAMPLE_USER_FLOW = """
User Flow
======================================

1. CREATE USER
   POST /users
   {"name": "Alice", "email": "alice@example.com"}

   Response: 201 Created (empty body)

2. LIST USERS
   GET /users

   Response: 200 OK
   {"users": [{"id": "<uuid>", "name": "Alice", "email": "alice@example.com",
               "created_at": "2026-10-19T10:00:00"}]}

3. GET USER
   GET /users/<uuid>

   Response: 200 OK
   {"user": {...}}            or {"user": null} for unknown ids
"""


def test_list_users_empty(client):
    r = client.get("/users")
    assert r.status_code == 200
    assert r.json() == {"users": []}


def test_create_user_then_list(client):
    """Creating Alice yields 201 and she shows up with a generated id."""
    r = client.post("/users", json={"name": "Alice", "email": "alice@example.com"})
    assert r.status_code == 201
    assert r.content == b""

    users = client.get("/users").json()["users"]
    assert len(users) == 1
    alice = users[0]
    assert alice["name"] == "Alice"
    assert alice["email"] == "alice@example.com"
    assert str(uuid.UUID(alice["id"])) == alice["id"]
    assert alice["created_at"]


def test_get_user_by_id_matches_created(client):
    created = create_user(client, profile_type="athlete")

    r = client.get(f"/users/{created['id']}")
    assert r.status_code == 200
    user = r.json()["user"]
    assert user["id"] == created["id"]
    assert user["name"] == "Michael Chen"
    assert user["email"] == created["email"]


def test_get_unknown_user_returns_null(client):
    r = client.get(f"/users/{uuid.uuid4()}")
    assert r.status_code == 200
    assert r.json() == {"user": None}


def test_get_user_rejects_non_uuid(client):
    r = client.get("/users/not-a-uuid")
    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"][0]["loc"] == ["path", "user_id"]


def test_create_user_requires_fields(client):
    r = client.post("/users", json={"name": "No Email"})
    assert r.status_code == 422
    fields = [e["loc"][-1] for e in r.json()["error"]["details"]]
    assert fields == ["email"]


def test_create_user_rejects_non_string(client):
    r = client.post("/users", json={"name": 42, "email": "num@example.com"})
    assert r.status_code == 422
    assert client.get("/users").json() == {"users": []}


def test_duplicate_email_is_allowed(client):
    email = unique_email("twin")
    assert client.post("/users", json={"name": "One", "email": email}).status_code == 201
    assert client.post("/users", json={"name": "Two", "email": email}).status_code == 201

    users = client.get("/users").json()["users"]
    assert sorted(u["name"] for u in users if u["email"] == email) == ["One", "Two"]
    assert users[0]["id"] != users[1]["id"]


def test_user_routes_ignore_identity_header(client):
    r = client.get("/users", headers={"user_id": str(uuid.uuid4())})
    assert r.status_code == 200


def test_get_user_requires_canonical_uuid(client):
    created = create_user(client)

    r = client.get(f"/users/{created['id'].replace('-', '')}")
    assert r.status_code == 422
    assert r.json()["error"]["details"][0]["loc"] == ["path", "user_id"]

    assert client.get(f"/users/urn:uuid:{created['id']}").status_code == 422
    assert client.get(f"/users/{created['id'].upper()}").status_code == 200
