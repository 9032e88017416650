"""Post Schemas — request/response models for the blog post resource.

Invariants:
    - PostCreate: title, author, content, category required and non-blank
    - images truncated to MAX_POST_IMAGES on both create and update
    - PostUpdate is partial: unset fields are left untouched
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field

from app.schemas.common import CamelModel, NonBlankStr

MAX_POST_IMAGES = 3


def _truncate_images(images: list[str]) -> list[str]:
    return images[:MAX_POST_IMAGES]


PostImages = Annotated[list[str], AfterValidator(_truncate_images)]


class PostCreate(CamelModel):
    title: NonBlankStr
    author: NonBlankStr
    content: NonBlankStr
    category: NonBlankStr
    status: NonBlankStr = "draft"
    images: PostImages = Field(default_factory=list)


class PostUpdate(CamelModel):
    title: NonBlankStr | None = None
    author: NonBlankStr | None = None
    content: NonBlankStr | None = None
    category: NonBlankStr | None = None
    status: NonBlankStr | None = None
    images: PostImages | None = None

    def changed_fields(self) -> dict:
        """Only the fields the client actually sent with a value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class PostResponse(CamelModel):
    id: UUID
    title: str
    author: str
    content: str
    category: str
    status: str
    images: list[str]
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


class PostList(CamelModel):
    posts: list[PostResponse]
    count: int
