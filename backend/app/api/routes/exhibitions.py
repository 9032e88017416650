"""Exhibition Routes — CRUD for exhibitions with artwork-set diff-and-sync.

Invariants:
    - Every route requires a staff identity (router-level dependency)
    - artworks parsed and de-duplicated under the reference policy before any store access
    - /{id}/artworks never fails on dangling references, it reports how many were skipped
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_catalog, parse_path_id, require_staff
from app.config import Settings, get_settings
from app.core.domain_types import ExhibitionId
from app.core.references import parse_references
from app.schemas.artwork import ArtworkResponse
from app.schemas.exhibition import (
    ExhibitionArtworks, ExhibitionList, ExhibitionResponse, ExhibitionWrite,
)
from app.services.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/exhibitions", tags=["exhibitions"],
    dependencies=[Depends(require_staff)],
)


@router.get("", response_model=ExhibitionList)
async def list_exhibitions(
    search: str | None = Query(None, max_length=200),
    catalog: CatalogRepository = Depends(get_catalog),
):
    exhibitions = await catalog.list_exhibitions(search)
    return ExhibitionList(
        exhibitions=[ExhibitionResponse.model_validate(e) for e in exhibitions],
        count=len(exhibitions),
    )


@router.post(
    "", response_model=ExhibitionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_exhibition(
    body: ExhibitionWrite,
    catalog: CatalogRepository = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Create and point every listed artwork at the new exhibition."""
    artwork_ids = parse_references(
        body.artworks, "artworks", settings.strict_references,
    )
    exhibition = await catalog.create_exhibition(
        body.document_fields(), artwork_ids,
    )
    return ExhibitionResponse.model_validate(exhibition)


@router.get("/{exhibition_id}", response_model=ExhibitionResponse)
async def get_exhibition(
    exhibition_id: str, catalog: CatalogRepository = Depends(get_catalog),
):
    exhibition = await catalog.get_exhibition(
        ExhibitionId(parse_path_id("Exhibition", exhibition_id)),
    )
    return ExhibitionResponse.model_validate(exhibition)


@router.get("/{exhibition_id}/artworks", response_model=ExhibitionArtworks)
async def get_exhibition_artworks(
    exhibition_id: str, catalog: CatalogRepository = Depends(get_catalog),
):
    """Resolved member artworks; references to deleted artworks are skipped."""
    exhibition = await catalog.get_exhibition(
        ExhibitionId(parse_path_id("Exhibition", exhibition_id)),
    )
    artworks, missing = await catalog.resolve_exhibition_artworks(exhibition)
    if missing:
        logger.warning(
            f"Exhibition lists {missing} unresolved artwork reference(s)",
            extra={"exhibition_id": exhibition.id},
        )
    return ExhibitionArtworks(
        exhibition_id=exhibition.id,
        artworks=[ArtworkResponse.model_validate(a) for a in artworks],
        missing=missing,
    )


@router.put("/{exhibition_id}", response_model=ExhibitionResponse)
async def update_exhibition(
    exhibition_id: str,
    body: ExhibitionWrite,
    catalog: CatalogRepository = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Replace the exhibition; added artworks gain the link, removed ones lose it."""
    artwork_ids = parse_references(
        body.artworks, "artworks", settings.strict_references,
    )
    exhibition = await catalog.update_exhibition(
        ExhibitionId(parse_path_id("Exhibition", exhibition_id)),
        body.document_fields(),
        artwork_ids,
    )
    return ExhibitionResponse.model_validate(exhibition)


@router.delete("/{exhibition_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exhibition(
    exhibition_id: str, catalog: CatalogRepository = Depends(get_catalog),
):
    await catalog.delete_exhibition(
        ExhibitionId(parse_path_id("Exhibition", exhibition_id)),
    )
