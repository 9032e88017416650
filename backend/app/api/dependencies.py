"""API Dependencies — staff authentication and per-request repository construction.

Invariants:
    - require_staff runs before any resource handler body (router-level dependency)
    - Token read from Authorization: Bearer first, then the auth cookie
    - Repositories are built per request on the request's DB session

Design Decisions:
    - Path ids parsed leniently: a malformed id resolves to nothing (404), same as a missing record
"""

from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.errors import AuthenticationError, ResourceNotFoundError
from app.core.references import parse_reference
from app.infrastructure.auth_tokens import StaffIdentity, decode_staff_token
from app.infrastructure.database import get_db
from app.services.catalog_repository import CatalogRepository
from app.services.event_repository import EventRepository
from app.services.post_repository import PostRepository


def _extract_token(request: Request, cookie_name: str) -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get(cookie_name)


async def require_staff(
    request: Request, settings: Settings = Depends(get_settings),
) -> StaffIdentity:
    """Verified staff identity or 401."""
    token = _extract_token(request, settings.auth_cookie_name)
    if not token:
        raise AuthenticationError("no token provided")
    return decode_staff_token(token, settings.jwt_secret, settings.jwt_algorithm)


def parse_path_id(resource_type: str, raw_id: str) -> UUID:
    resource_id = parse_reference(raw_id)
    if resource_id is None:
        raise ResourceNotFoundError(resource_type, raw_id)
    return resource_id


async def get_catalog(db: AsyncSession = Depends(get_db)) -> CatalogRepository:
    return CatalogRepository(db)


async def get_event_repository(
    db: AsyncSession = Depends(get_db),
) -> EventRepository:
    return EventRepository(db)


async def get_post_repository(
    db: AsyncSession = Depends(get_db),
) -> PostRepository:
    return PostRepository(db)
