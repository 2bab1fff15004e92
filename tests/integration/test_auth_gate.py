"""
Integration tests for the Basic Auth gate, through the full app.

Every rejection must be the same 401 with `WWW-Authenticate: Basic`;
exempt requests (OPTIONS, Swagger UI) are never challenged.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from main import create_app
from book_manager.storage.storage import BookStore


def _assert_challenge(response):
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Basic"
    assert response.json() == {"detail": "Unauthorized"}


@pytest.mark.parametrize(
    "path",
    ["/api/books", "/api/books/1", "/api/auth/me", "/does-not-exist"],
)
def test_missing_header_is_challenged(client, path):
    _assert_challenge(client.get(path))


def test_write_methods_are_challenged(client):
    _assert_challenge(client.post("/api/books", json={"title": "x", "author": "y", "year": 2000}))
    _assert_challenge(client.delete("/api/books/1"))
    _assert_challenge(client.patch("/api/books/1/availability", json={"isAvailable": False}))


def test_valid_credentials_forward_with_principal(client, basic_header):
    resp = client.get("/api/auth/me", headers=basic_header("admin", "password123"))
    assert resp.status_code == 200
    assert resp.json() == {"username": "admin", "message": "Authenticated"}

    resp = client.get("/api/auth/me", headers=basic_header("user", "userpass"))
    assert resp.json()["username"] == "user"


def test_valid_credentials_reach_books(client, basic_header):
    resp = client.get("/api/books", headers=basic_header("admin", "password123"))
    assert resp.status_code == 200
    assert len(resp.json()) == 3


def test_wrong_password_indistinguishable_from_unknown_user(client, basic_header):
    wrong_password = client.get("/api/books", headers=basic_header("admin", "nope"))
    unknown_user = client.get("/api/books", headers=basic_header("ghost", "password123"))
    _assert_challenge(wrong_password)
    _assert_challenge(unknown_user)
    assert wrong_password.content == unknown_user.content
    assert wrong_password.headers["www-authenticate"] == unknown_user.headers["www-authenticate"]


@pytest.mark.parametrize(
    "value",
    [
        "",
        "Basic",
        "Basic !!!not-base64!!!",
        "Basic YWRtaW46cGFzc3dvcmQxMjM",   # padding stripped
        "Basic " + base64.b64encode(b"adminpassword123").decode(),   # no colon
        "Basic " + base64.b64encode(b"\xff\xfe:\xff").decode(),       # not UTF-8
        "Bearer " + base64.b64encode(b"admin:password123").decode(),  # wrong scheme
        "Digest username=admin",
    ],
)
def test_malformed_headers_are_challenged(client, value):
    _assert_challenge(client.get("/api/books", headers={"Authorization": value}))


def test_scheme_is_case_insensitive(client, basic_header):
    resp = client.get("/api/auth/me", headers=basic_header("admin", "password123", scheme="bAsIc"))
    assert resp.status_code == 200


def test_password_containing_colons():
    app = create_app(users={"admin": "pa:ss:wd"}, storage=BookStore())
    client = TestClient(app)
    token = base64.b64encode(b"admin:pa:ss:wd").decode()
    resp = client.get("/api/auth/me", headers={"Authorization": f"Basic {token}"})
    assert resp.status_code == 200
    assert resp.json()["username"] == "admin"


def test_injected_table_replaces_default():
    app = create_app(users={"alice": "wonderland"}, storage=BookStore())
    client = TestClient(app)
    admin = base64.b64encode(b"admin:password123").decode()
    alice = base64.b64encode(b"alice:wonderland").decode()
    _assert_challenge(client.get("/api/books", headers={"Authorization": f"Basic {admin}"}))
    assert client.get("/api/books", headers={"Authorization": f"Basic {alice}"}).status_code == 200


def test_options_bypasses_gate(client):
    resp = client.options("/api/books")
    assert resp.status_code != 401
    assert "www-authenticate" not in resp.headers

    resp = client.options("/api/books/1", headers={"Authorization": "Basic garbage"})
    assert resp.status_code != 401


def test_cors_preflight_succeeds_without_credentials(client):
    resp = client.options(
        "/api/books",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"


@pytest.mark.parametrize("path", ["/swagger", "/swagger/v1/swagger.json"])
def test_docs_are_exempt(client, path):
    resp = client.get(path)
    assert resp.status_code == 200


def test_docs_prefix_is_segment_based(client):
    # "/swaggerish" is not under "/swagger"
    _assert_challenge(client.get("/swaggerish"))
