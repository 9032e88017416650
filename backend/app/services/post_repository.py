"""Post Repository — CRUD for blog posts.

Invariants:
    - Partial update: only the supplied fields change, updated_at always refreshed
    - list_posts filters: category ("all" = no filter), status, free-text search on title/author
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import PostId
from app.core.errors import ResourceNotFoundError
from app.models.post import Post

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class PostRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_posts(
        self,
        category: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> list[Post]:
        query = select(Post).order_by(Post.created_at.desc())
        if category and category != ALL_CATEGORIES:
            query = query.where(Post.category == category)
        if status:
            query = query.where(Post.status == status)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(Post.title.ilike(pattern), Post.author.ilike(pattern)),
            )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_post(self, post_id: PostId) -> Post:
        post = await self.db.get(Post, post_id)
        if post is None:
            raise ResourceNotFoundError("Post", str(post_id))
        return post

    async def create_post(self, fields: dict, created_by: str | None) -> Post:
        post = Post(created_by=created_by, **fields)
        self.db.add(post)
        await self.db.commit()
        logger.info(f"Post created: {post.title}", extra={"post_id": post.id})
        return post

    async def update_post(self, post_id: PostId, changes: dict) -> Post:
        post = await self.get_post(post_id)
        for key, value in changes.items():
            setattr(post, key, value)
        post.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        logger.info(
            f"Post updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"post_id": post.id},
        )
        return post

    async def delete_post(self, post_id: PostId) -> None:
        post = await self.get_post(post_id)
        await self.db.delete(post)
        await self.db.commit()
        logger.info("Post deleted", extra={"post_id": post_id})
