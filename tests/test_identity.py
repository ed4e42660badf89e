"""
Tests for caller identity resolution.

Verifies the header resolver on raw requests and that a different resolver
can be installed without touching any route.
"""

from typing import Optional

from fastapi.testclient import TestClient
from starlette.requests import Request

from api.identity import HeaderIdentityResolver, IdentityResolver
from main import create_app
from test_fixtures import make_settings, meal_body


def make_request(headers: dict) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/meals",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


def test_header_resolver_returns_raw_value():
    resolver = HeaderIdentityResolver()
    request = make_request({"user_id": "not-even-a-uuid"})
    assert resolver.resolve(request) == "not-even-a-uuid"


def test_header_resolver_missing_or_empty():
    resolver = HeaderIdentityResolver()
    assert resolver.resolve(make_request({})) is None
    assert resolver.resolve(make_request({"user_id": ""})) is None


def test_header_resolver_custom_header_name():
    resolver = HeaderIdentityResolver("x-caller")
    request = make_request({"X-Caller": "abc", "user_id": "ignored"})
    assert resolver.resolve(request) == "abc"


class FixedIdentityResolver(IdentityResolver):
    """Stands in for a real authentication mechanism"""

    def __init__(self, caller_id: Optional[str]):
        self.caller_id = caller_id

    def resolve(self, request: Request) -> Optional[str]:
        return self.caller_id


def test_routes_use_installed_resolver():
    app = create_app(make_settings(), identity_resolver=FixedIdentityResolver("u-1"))

    with TestClient(app) as client:
        # No header sent; identity comes from the resolver
        r = client.post("/meals", json=meal_body(name="Bagel"))
        assert r.status_code == 201

        meals = client.get("/meals").json()["meals"]
        assert [(m["name"], m["user_id"]) for m in meals] == [("Bagel", "u-1")]


def test_resolver_returning_none_closes_the_gate():
    app = create_app(make_settings(), identity_resolver=FixedIdentityResolver(None))

    with TestClient(app) as client:
        r = client.get("/meals/metrics", headers={"user_id": "present-but-ignored"})
        assert r.status_code == 401
        assert r.json() == {"error": "Unauthorized."}


def test_identity_header_setting_is_honoured():
    app = create_app(make_settings(identity_header="x-user"))

    with TestClient(app) as client:
        assert client.get("/meals/metrics", headers={"user_id": "a"}).status_code == 401
        assert client.get("/meals/metrics", headers={"x-user": "a"}).status_code == 200
