"""Service test fixtures — async DB, repositories and an authenticated FastAPI client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - client carries a valid staff token; anon_client carries none

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for sync and route tests
      (PostgreSQL-specific features not exercised here)
    - Route tests assert through API responses: a separate test_db session would read
      stale identity-map state after the client's commits
"""

import pytest
from jose import jwt
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import app
from app.services.catalog_repository import CatalogRepository
from tests.services.payloads import STAFF_EMAIL


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def catalog(test_db):
    return CatalogRepository(test_db)


@pytest.fixture
def staff_token():
    settings = get_settings()
    return jwt.encode(
        {"userId": "staff-1", "email": STAFF_EMAIL, "role": "admin"},
        settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


@pytest.fixture
async def anon_client(test_engine, test_session_factory):
    """FastAPI test client on the test DB, no credentials.

    Sessions come from DatabaseSessionManager.session(), so route tests see the
    same rollback and DATABASE_ERROR mapping as production.
    """
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(anon_client, staff_token):
    anon_client.headers["Authorization"] = f"Bearer {staff_token}"
    return anon_client


@pytest.fixture
def strict_references():
    """Switch the reference policy to strict for one test."""
    strict = get_settings().model_copy(update={"strict_references": True})
    app.dependency_overrides[get_settings] = lambda: strict
    yield
    app.dependency_overrides.pop(get_settings, None)
