"""Artwork Routes — CRUD for artworks; exhibition link kept in sync by the repository.

Invariants:
    - Every route requires a staff identity (router-level dependency)
    - Body validated by Pydantic before reaching the handler (400 on failure)
    - exhibition parsed under the configured reference policy before any store access

Design Decisions:
    - Thin routes: slug, sync and persistence live in CatalogRepository
    - PUT is a full replacement, mirroring the admin form that always sends every field
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_catalog, parse_path_id, require_staff
from app.config import Settings, get_settings
from app.core.domain_types import ArtworkId
from app.core.references import parse_reference
from app.schemas.artwork import ArtworkList, ArtworkResponse, ArtworkWrite
from app.services.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/artworks", tags=["artworks"],
    dependencies=[Depends(require_staff)],
)


@router.get("", response_model=ArtworkList)
async def list_artworks(
    search: str | None = Query(None, max_length=200),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """List artworks, newest first, optionally filtered by title/slug."""
    artworks = await catalog.list_artworks(search)
    return ArtworkList(
        artworks=[ArtworkResponse.model_validate(a) for a in artworks],
        count=len(artworks),
    )


@router.post(
    "", response_model=ArtworkResponse, status_code=status.HTTP_201_CREATED,
)
async def create_artwork(
    body: ArtworkWrite,
    catalog: CatalogRepository = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    exhibition_id = parse_reference(
        body.exhibition, "exhibition", settings.strict_references,
    )
    artwork = await catalog.create_artwork(body.document_fields(), exhibition_id)
    return ArtworkResponse.model_validate(artwork)


@router.get("/{artwork_id}", response_model=ArtworkResponse)
async def get_artwork(
    artwork_id: str, catalog: CatalogRepository = Depends(get_catalog),
):
    artwork = await catalog.get_artwork(
        ArtworkId(parse_path_id("Artwork", artwork_id)),
    )
    return ArtworkResponse.model_validate(artwork)


@router.put("/{artwork_id}", response_model=ArtworkResponse)
async def update_artwork(
    artwork_id: str,
    body: ArtworkWrite,
    catalog: CatalogRepository = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Replace the artwork; a changed exhibition moves it between exhibitions."""
    exhibition_id = parse_reference(
        body.exhibition, "exhibition", settings.strict_references,
    )
    artwork = await catalog.update_artwork(
        ArtworkId(parse_path_id("Artwork", artwork_id)),
        body.document_fields(),
        exhibition_id,
    )
    return ArtworkResponse.model_validate(artwork)


@router.delete("/{artwork_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artwork(
    artwork_id: str, catalog: CatalogRepository = Depends(get_catalog),
):
    await catalog.delete_artwork(ArtworkId(parse_path_id("Artwork", artwork_id)))
