"""Slug Uniqueness Resolver — appends -1, -2, ... until a slug is free in its collection.

Invariants:
    - Returned slug is not used by any record other than exclude_id at check time
    - Candidate unchanged when free; otherwise the lowest free numeric suffix
    - Terminates for any finite collection (suffix strictly increases)

Design Decisions:
    - Sequential check-then-set, one query per candidate: low-frequency admin writes
    - Not race-free on its own: two concurrent creates may pick the same slug.
      The unique slug index makes the loser fail with DatabaseError instead of
      persisting a duplicate (ADR: eventual, not atomic, uniqueness)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repository_protocols import SlugIndex
from app.core.slugs import slug_candidates

logger = logging.getLogger(__name__)


class SqlSlugIndex:
    """SlugIndex over one ORM model with `id` and `slug` columns."""

    def __init__(self, db: AsyncSession, model):
        self.db = db
        self.model = model

    async def slug_taken(self, slug: str, exclude_id: UUID | None = None) -> bool:
        query = select(self.model.id).where(self.model.slug == slug)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.first() is not None


async def ensure_unique_slug(
    candidate: str, index: SlugIndex, exclude_id: UUID | None = None,
) -> str:
    """Return candidate, or candidate-N with the smallest N that is free."""
    candidates = slug_candidates(candidate)
    slug = next(candidates)
    while await index.slug_taken(slug, exclude_id):
        slug = next(candidates)
    if slug != candidate:
        logger.info(
            f"Slug '{candidate}' taken, using '{slug}'",
            extra={"slug": slug},
        )
    return slug
