import pytest
from fastapi import HTTPException

from app.routers import health


def test_health_ok(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_health_db_ok(client):
    resp = client.get("/health/db")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_health_db_maps_failure_to_500():
    class _DeadSession:
        def exec(self, stmt):
            raise RuntimeError("server closed the connection")

    with pytest.raises(HTTPException) as excinfo:
        health.health_db(db=_DeadSession())

    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == "Database connection failed"


def test_cors_allows_configured_origin(client):
    resp = client.options(
        "/tasks",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
