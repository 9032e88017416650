"""Health & Auth — verifies public probes and staff-token enforcement.

Tests:
    - Health probes need no token
    - Missing, invalid and expired tokens → 401 AUTHENTICATION_REQUIRED
    - Token accepted from the Authorization header or the auth cookie
"""

from datetime import datetime, timedelta, timezone

from jose import jwt

from app.config import get_settings


async def test_health_is_public(anon_client):
    res = await anon_client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_checks_database(anon_client):
    res = await anon_client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_missing_token_returns_401(anon_client):
    res = await anon_client.get("/api/v1/artworks")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_invalid_token_returns_401(anon_client):
    res = await anon_client.get(
        "/api/v1/exhibitions", headers={"Authorization": "Bearer not.a.jwt"},
    )
    assert res.status_code == 401


async def test_wrong_secret_returns_401(anon_client):
    token = jwt.encode({"email": "x@museum.test"}, "other-secret", algorithm="HS256")
    res = await anon_client.get(
        "/api/v1/events", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401


async def test_expired_token_returns_401(anon_client):
    settings = get_settings()
    expired = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode(
        {"email": "x@museum.test", "exp": expired}, settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    res = await anon_client.get(
        "/api/v1/posts", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401


async def test_cookie_token_accepted(anon_client, staff_token):
    settings = get_settings()
    anon_client.cookies.set(settings.auth_cookie_name, staff_token)
    res = await anon_client.get("/api/v1/artworks")
    assert res.status_code == 200


async def test_bearer_token_accepted(client):
    res = await client.get("/api/v1/artworks")
    assert res.status_code == 200
    assert res.json() == {"artworks": [], "count": 0}


async def test_auth_error_envelope_has_no_null_context(anon_client):
    error = (await anon_client.get("/api/v1/artworks")).json()["error"]
    assert "context" not in error
