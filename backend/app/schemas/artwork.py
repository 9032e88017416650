"""Artwork Schemas — Pydantic models with field-level validation for the artwork resource.

Invariants:
    - ArtworkWrite.title and .image: non-blank, stripped
    - ArtworkWrite.description: at least one block, each block typed heading|paragraph
      with non-blank content
    - exhibition is the raw client value of any JSON type, parsed later under the
      reference policy (a malformed value never fails validation here)

Design Decisions:
    - Same schema for create and update: PUT is a full replacement, so an absent
      exhibition means "not in any exhibition"
    - audioUrls defaults to all three languages unset
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from app.core.domain_types import DescriptionBlockKind
from app.schemas.common import CamelModel, NonBlankStr


class DescriptionBlock(CamelModel):
    """One heading or paragraph of an artwork description."""
    type: DescriptionBlockKind
    content: NonBlankStr


class GalleryImage(CamelModel):
    url: NonBlankStr
    alt: str = ""


class AudioUrls(CamelModel):
    """Audio guide URL per language; None means not recorded.

    One field per AudioLanguage member.
    """
    en: str | None = None
    fr: str | None = None
    wo: str | None = None


class ArtworkWrite(CamelModel):
    """Artwork create/update payload."""
    title: NonBlankStr
    description: list[DescriptionBlock] = Field(min_length=1)
    image: NonBlankStr
    audio_urls: AudioUrls = Field(default_factory=AudioUrls)
    gallery: list[GalleryImage] = Field(default_factory=list)
    exhibition: Any = None

    def document_fields(self) -> dict:
        """Fields stored on the artwork record (exhibition handled by the synchronizer)."""
        return {
            "title": self.title,
            "description": [
                block.model_dump(mode="json") for block in self.description
            ],
            "image": self.image,
            "audio_urls": self.audio_urls.model_dump(mode="json"),
            "gallery": [item.model_dump(mode="json") for item in self.gallery],
        }


class ArtworkResponse(CamelModel):
    """Artwork as returned by the API."""
    id: UUID
    slug: str
    title: str
    description: list[DescriptionBlock]
    image: str
    audio_urls: AudioUrls
    gallery: list[GalleryImage]
    exhibition: UUID | None = None
    created_at: datetime
    updated_at: datetime


class ArtworkList(CamelModel):
    artworks: list[ArtworkResponse]
    count: int
