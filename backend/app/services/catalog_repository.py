"""Catalog Repository — the single write path for artworks and exhibitions.

Invariants:
    - Every write method runs its slug resolution, relationship sync and own-record write
      in one session and commits exactly once (one transaction per operation)
    - Slugs assigned on create; regenerated on update only when the title changed
    - Not-found targets raise ResourceNotFoundError before any sync side effect
    - No caller can change Artwork.exhibition or Exhibition.artworks except through here

Design Decisions:
    - Repository wraps both collections so the cross-aggregate invariant has one owner
      (ADR: no write path may bypass RelationshipSync)
    - Ids generated here (uuid4) before the insert: the empty-slug fallback needs the id
    - Reads never fail on dangling references; resolve_exhibition_artworks skips them
"""

import logging
import uuid
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ArtworkId, ExhibitionId
from app.core.errors import ResourceNotFoundError
from app.core.references import diff_references, unique_references
from app.core.slugs import slug_or_fallback
from app.models.artwork import Artwork
from app.models.exhibition import Exhibition
from app.services.relationship_sync import RelationshipSync
from app.services.slug_resolver import SqlSlugIndex, ensure_unique_slug

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _search_clause(model, search: str):
    pattern = f"%{search}%"
    return or_(model.title.ilike(pattern), model.slug.ilike(pattern))


class CatalogRepository:
    """Artwork + Exhibition persistence with built-in relationship synchronization."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.links = RelationshipSync(db)

    # ─── Reads ───────────────────────────────────────────────────

    async def list_artworks(self, search: str | None = None) -> list[Artwork]:
        query = select(Artwork).order_by(Artwork.created_at.desc())
        if search:
            query = query.where(_search_clause(Artwork, search))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_artwork(self, artwork_id: ArtworkId) -> Artwork:
        artwork = await self.db.get(Artwork, artwork_id)
        if artwork is None:
            raise ResourceNotFoundError("Artwork", str(artwork_id))
        return artwork

    async def list_exhibitions(self, search: str | None = None) -> list[Exhibition]:
        query = select(Exhibition).order_by(Exhibition.created_at.desc())
        if search:
            query = query.where(_search_clause(Exhibition, search))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_exhibition(self, exhibition_id: ExhibitionId) -> Exhibition:
        exhibition = await self.db.get(Exhibition, exhibition_id)
        if exhibition is None:
            raise ResourceNotFoundError("Exhibition", str(exhibition_id))
        return exhibition

    async def resolve_exhibition_artworks(
        self, exhibition: Exhibition,
    ) -> tuple[list[Artwork], int]:
        """Artworks referenced by the exhibition, in stored order, plus the dangling count."""
        ids = exhibition.artwork_ids
        if not ids:
            return [], 0
        result = await self.db.execute(select(Artwork).where(Artwork.id.in_(ids)))
        found = {artwork.id: artwork for artwork in result.scalars().all()}
        artworks = [found[i] for i in ids if i in found]
        return artworks, len(exhibition.artworks) - len(artworks)

    # ─── Artwork writes ──────────────────────────────────────────

    async def create_artwork(
        self, fields: dict, exhibition_id: ExhibitionId | None = None,
    ) -> Artwork:
        """Insert with a fresh unique slug; add to the exhibition if one is given."""
        artwork_id = ArtworkId(uuid.uuid4())
        slug = await self._unique_slug(Artwork, fields["title"], artwork_id)
        artwork = Artwork(
            id=artwork_id, slug=slug, exhibition=exhibition_id, **fields,
        )
        self.db.add(artwork)
        if exhibition_id is not None:
            await self.links.add_to_exhibition(exhibition_id, artwork_id)
        await self.db.commit()
        logger.info(
            f"Artwork created: {slug}",
            extra={"artwork_id": artwork_id, "slug": slug},
        )
        return artwork

    async def update_artwork(
        self, artwork_id: ArtworkId, fields: dict,
        exhibition_id: ExhibitionId | None = None,
    ) -> Artwork:
        """Full replacement; exhibition_id=None takes the artwork out of any exhibition."""
        artwork = await self.get_artwork(artwork_id)
        if fields["title"] != artwork.title:
            artwork.slug = await self._unique_slug(
                Artwork, fields["title"], artwork.id, exclude_id=artwork.id,
            )
        await self.links.move_artwork(artwork, exhibition_id)
        for key, value in fields.items():
            setattr(artwork, key, value)
        artwork.updated_at = _now()
        await self.db.commit()
        logger.info(
            f"Artwork updated: {artwork.slug}",
            extra={"artwork_id": artwork.id, "slug": artwork.slug},
        )
        return artwork

    async def delete_artwork(self, artwork_id: ArtworkId) -> None:
        """Pull the artwork from its exhibition, then delete the record."""
        artwork = await self.get_artwork(artwork_id)
        if artwork.exhibition is not None:
            await self.links.remove_from_exhibition(artwork.exhibition, artwork.id)
        await self.db.delete(artwork)
        await self.db.commit()
        logger.info("Artwork deleted", extra={"artwork_id": artwork_id})

    # ─── Exhibition writes ───────────────────────────────────────

    async def create_exhibition(
        self, fields: dict, artwork_ids: list[ArtworkId] | None = None,
    ) -> Exhibition:
        """Insert and forward-sync: every listed artwork points at the new exhibition."""
        exhibition_id = ExhibitionId(uuid.uuid4())
        slug = await self._unique_slug(Exhibition, fields["title"], exhibition_id)
        ids = unique_references(artwork_ids or [])
        exhibition = Exhibition(
            id=exhibition_id, slug=slug,
            artworks=[str(i) for i in ids], **fields,
        )
        self.db.add(exhibition)
        await self.links.assign_artworks(exhibition_id, ids)
        await self.db.commit()
        logger.info(
            f"Exhibition created: {slug} ({len(ids)} artworks)",
            extra={"exhibition_id": exhibition_id, "slug": slug},
        )
        return exhibition

    async def update_exhibition(
        self, exhibition_id: ExhibitionId, fields: dict,
        artwork_ids: list[ArtworkId] | None = None,
    ) -> Exhibition:
        """Full replacement of the artwork set with diff-and-sync on the artwork side."""
        exhibition = await self.get_exhibition(exhibition_id)
        if fields["title"] != exhibition.title:
            exhibition.slug = await self._unique_slug(
                Exhibition, fields["title"], exhibition.id,
                exclude_id=exhibition.id,
            )
        new_ids = unique_references(artwork_ids or [])
        diff = diff_references(exhibition.artwork_ids, new_ids)
        await self.links.release_artworks(exhibition.id, diff.removed)
        await self.links.assign_artworks(exhibition.id, diff.added)
        for key, value in fields.items():
            setattr(exhibition, key, value)
        exhibition.artworks = [str(i) for i in new_ids]
        exhibition.updated_at = _now()
        await self.db.commit()
        logger.info(
            f"Exhibition updated: +{len(diff.added)} -{len(diff.removed)} artworks",
            extra={"exhibition_id": exhibition.id, "slug": exhibition.slug},
        )
        return exhibition

    async def delete_exhibition(self, exhibition_id: ExhibitionId) -> None:
        """Clear the back-reference on every member artwork, then delete the record."""
        exhibition = await self.get_exhibition(exhibition_id)
        released = await self.links.release_all(exhibition.id)
        await self.db.delete(exhibition)
        await self.db.commit()
        logger.info(
            f"Exhibition deleted, {released} artwork(s) released",
            extra={"exhibition_id": exhibition_id},
        )

    # ─── Helpers ─────────────────────────────────────────────────

    async def _unique_slug(
        self, model, title: str, record_id: UUID,
        exclude_id: UUID | None = None,
    ) -> str:
        candidate = slug_or_fallback(title, record_id)
        return await ensure_unique_slug(
            candidate, SqlSlugIndex(self.db, model), exclude_id,
        )
