"""Artwork ORM — a catalogued work with its description blocks, media and exhibition link.

Invariants:
    - id is a UUID primary key generated by the application (uuid4)
    - slug is unique within the artworks table
    - exhibition holds at most one exhibition id; if set, that exhibition's
      artworks list contains this artwork's id (maintained by RelationshipSync)

Design Decisions:
    - JSON columns for description/audio_urls/gallery: document-shaped fields stored as-is
    - exhibition_id has NO foreign key: dangling back-references are tolerated at write time
      and skipped at read time
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.core.domain_types import AudioLanguage
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _empty_audio_urls() -> dict:
    return {language.value: None for language in AudioLanguage}


class Artwork(Base):
    """Artwork record — one side of the Artwork↔Exhibition relationship."""
    __tablename__ = "artworks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    slug: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    image: Mapped[str] = mapped_column(Text, nullable=False)
    audio_urls: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=_empty_audio_urls,
    )
    gallery: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    exhibition: Mapped[uuid.UUID | None] = mapped_column(
        "exhibition_id", UUID(as_uuid=True), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
