"""README (post) routes, nested under a project."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from praxis.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsResponse,
    ListPostsUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from praxis.interface.api.session import CurrentAccount

router = APIRouter(prefix="/projects", tags=["posts"], route_class=DishkaRoute)


@router.get("/{slug}/posts", response_model=ListPostsResponse)
async def list_posts(
    slug: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """List a project's READMEs, highest score first."""
    return await list_posts_use_case.execute(slug)


@router.post(
    "/{slug}/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    slug: str,
    author: CurrentAccount,
    body: CreatePostRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostResponse:
    """Publish the caller's README on a project.

    One README per author and project; a second attempt answers 409 with
    the existing post id in ``details.existingId``.
    """
    return await create_post_use_case.execute(slug, body, author)


@router.patch("/{slug}/posts/{post_id}", response_model=PostResponse)
async def update_post(
    slug: str,
    post_id: str,
    actor: CurrentAccount,
    body: UpdatePostRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostResponse:
    """Edit the caller's own README."""
    return await update_post_use_case.execute(slug, post_id, body, actor)


@router.delete("/{slug}/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    slug: str,
    post_id: str,
    actor: CurrentAccount,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> Response:
    """Delete the caller's own README together with its votes."""
    await delete_post_use_case.execute(slug, post_id, actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
