"""Post Routes — CRUD for blog posts.

Invariants:
    - Every route requires a staff identity; created_by is taken from it, never from the body
    - PUT is partial (PostUpdate): omitted fields keep their stored value
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_post_repository, parse_path_id, require_staff
from app.core.domain_types import PostId
from app.infrastructure.auth_tokens import StaffIdentity
from app.schemas.post import PostCreate, PostList, PostResponse, PostUpdate
from app.services.post_repository import PostRepository

router = APIRouter(
    prefix="/api/v1/posts", tags=["posts"],
    dependencies=[Depends(require_staff)],
)


@router.get("", response_model=PostList)
async def list_posts(
    category: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    search: str | None = Query(None, max_length=200),
    repo: PostRepository = Depends(get_post_repository),
):
    posts = await repo.list_posts(category, status_filter, search)
    return PostList(
        posts=[PostResponse.model_validate(p) for p in posts],
        count=len(posts),
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostCreate,
    staff: StaffIdentity = Depends(require_staff),
    repo: PostRepository = Depends(get_post_repository),
):
    post = await repo.create_post(body.model_dump(), created_by=staff.email)
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str, repo: PostRepository = Depends(get_post_repository),
):
    post = await repo.get_post(PostId(parse_path_id("Post", post_id)))
    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    body: PostUpdate,
    repo: PostRepository = Depends(get_post_repository),
):
    post = await repo.update_post(
        PostId(parse_path_id("Post", post_id)), body.changed_fields(),
    )
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str, repo: PostRepository = Depends(get_post_repository),
):
    await repo.delete_post(PostId(parse_path_id("Post", post_id)))
