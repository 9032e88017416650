"""Exhibition Schemas — request/response models for the exhibition resource.

Invariants:
    - ExhibitionWrite.title, .subtitle, .image: non-blank, stripped
    - artworks is the raw client list (entries of any JSON type), parsed and
      de-duplicated under the reference policy; null or a non-list means empty
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.artwork import ArtworkResponse
from app.schemas.common import CamelModel, NonBlankStr


class ExhibitionWrite(CamelModel):
    """Exhibition create/update payload (update replaces the artwork set)."""
    title: NonBlankStr
    subtitle: NonBlankStr
    image: NonBlankStr
    artworks: list[Any] = Field(default_factory=list)

    @field_validator("artworks", mode="before")
    @classmethod
    def _absent_list_is_empty(cls, value: Any) -> Any:
        """null or a non-list artworks value means no artworks."""
        return value if isinstance(value, list) else []

    def document_fields(self) -> dict:
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "image": self.image,
        }


class ExhibitionResponse(CamelModel):
    id: UUID
    slug: str
    title: str
    subtitle: str
    image: str
    artworks: list[str]
    created_at: datetime
    updated_at: datetime


class ExhibitionList(CamelModel):
    exhibitions: list[ExhibitionResponse]
    count: int


class ExhibitionArtworks(CamelModel):
    """Resolved artworks of an exhibition; dangling references are skipped."""
    exhibition_id: UUID
    artworks: list[ArtworkResponse]
    missing: int = 0
