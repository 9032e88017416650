"""Relationship Synchronizer — keeps Artwork.exhibition and Exhibition.artworks consistent.

Invariants:
    - artwork.exhibition == E  <=>  str(artwork.id) in E.artworks, after every committed write
    - An artwork belongs to at most one exhibition: assigning it to E removes it from
      its previous exhibition's list first
    - Exhibition-side writes are issued before the artwork's own field write
    - Missing targets (dangling references) are skipped with a warning, never raised

Design Decisions:
    - Operates on the caller's AsyncSession and never commits: the caller commits once,
      so each sync sequence is a single transaction (ADR: atomic where the store allows)
    - Lists are always reassigned, never mutated in place (JSON columns do not track mutation)
    - Clearing is guarded: an artwork is released only if it still points at the releasing exhibition
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ArtworkId, ExhibitionId
from app.models.artwork import Artwork
from app.models.exhibition import Exhibition

logger = logging.getLogger(__name__)


class RelationshipSync:
    """Applies one side's change to the opposite collection."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Exhibition side ─────────────────────────────────────────

    async def add_to_exhibition(self, exhibition_id: ExhibitionId, artwork_id: ArtworkId) -> None:
        """Idempotent add of artwork_id into exhibition.artworks."""
        exhibition = await self.db.get(Exhibition, exhibition_id)
        if exhibition is None:
            logger.warning(
                "Exhibition not found, artwork keeps a dangling reference",
                extra={"exhibition_id": exhibition_id, "artwork_id": artwork_id},
            )
            return
        ref = str(artwork_id)
        if ref not in exhibition.artworks:
            exhibition.artworks = [*exhibition.artworks, ref]

    async def remove_from_exhibition(
        self, exhibition_id: ExhibitionId, artwork_id: ArtworkId,
    ) -> None:
        exhibition = await self.db.get(Exhibition, exhibition_id)
        if exhibition is None:
            logger.warning(
                "Exhibition not found, nothing to remove",
                extra={"exhibition_id": exhibition_id, "artwork_id": artwork_id},
            )
            return
        ref = str(artwork_id)
        if ref in exhibition.artworks:
            exhibition.artworks = [a for a in exhibition.artworks if a != ref]

    async def move_artwork(
        self, artwork: Artwork, new_exhibition_id: ExhibitionId | None,
    ) -> None:
        """Artwork-driven change: old exhibition loses it, new one gains it, then the field."""
        old_exhibition_id = artwork.exhibition
        if old_exhibition_id == new_exhibition_id:
            return
        if old_exhibition_id is not None:
            await self.remove_from_exhibition(old_exhibition_id, artwork.id)
        if new_exhibition_id is not None:
            await self.add_to_exhibition(new_exhibition_id, artwork.id)
        artwork.exhibition = new_exhibition_id
        logger.info(
            f"Artwork moved {old_exhibition_id} -> {new_exhibition_id}",
            extra={"artwork_id": artwork.id, "exhibition_id": new_exhibition_id},
        )

    # ─── Artwork side ────────────────────────────────────────────

    async def assign_artworks(
        self, exhibition_id: ExhibitionId, artwork_ids: Iterable[ArtworkId],
    ) -> None:
        """Exhibition-driven add: point each existing artwork at exhibition_id."""
        artworks = await self._load_artworks(artwork_ids)
        for artwork in artworks:
            previous = artwork.exhibition
            if previous is not None and previous != exhibition_id:
                await self.remove_from_exhibition(previous, artwork.id)
            artwork.exhibition = exhibition_id

    async def release_artworks(
        self, exhibition_id: ExhibitionId, artwork_ids: Iterable[ArtworkId],
    ) -> None:
        """Exhibition-driven removal: clear the back-reference where it still points here."""
        artworks = await self._load_artworks(artwork_ids)
        for artwork in artworks:
            if artwork.exhibition == exhibition_id:
                artwork.exhibition = None

    async def release_all(self, exhibition_id: ExhibitionId) -> int:
        """Clear every artwork pointing at exhibition_id (exhibition delete)."""
        result = await self.db.execute(
            select(Artwork).where(Artwork.exhibition == exhibition_id),
        )
        artworks = result.scalars().all()
        for artwork in artworks:
            artwork.exhibition = None
        return len(artworks)

    async def _load_artworks(self, artwork_ids: Iterable[ArtworkId]) -> list[Artwork]:
        ids = list(artwork_ids)
        if not ids:
            return []
        result = await self.db.execute(
            select(Artwork).where(Artwork.id.in_(ids)),
        )
        artworks = list(result.scalars().all())
        if len(artworks) < len(ids):
            logger.warning(
                f"{len(ids) - len(artworks)} referenced artwork(s) not found, skipped",
            )
        return artworks
