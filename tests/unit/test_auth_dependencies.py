"""
Unit tests for the get_current_user dependency outside the gate.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from auth.dependencies import get_current_user


def _app(set_user=None):
    app = FastAPI()

    @app.middleware("http")
    async def attach(request: Request, call_next):
        if set_user:
            request.state.user = set_user
        return await call_next(request)

    @app.get("/who")
    def who(user: str = Depends(get_current_user)):
        return {"user": user}

    return app


def test_returns_attached_principal():
    resp = TestClient(_app("admin")).get("/who")
    assert resp.status_code == 200
    assert resp.json() == {"user": "admin"}


def test_missing_principal_is_401():
    resp = TestClient(_app()).get("/who")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Basic"
