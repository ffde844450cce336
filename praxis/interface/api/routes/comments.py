"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status

from praxis.application.usecase.base import CamelModel
from praxis.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    render_comment_tree,
)
from praxis.interface.api.session import CurrentAccount

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment: ``{content, parentCommentId?}``."""

    content: str
    parent_comment_id: str | None = None


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    project_slug: str = Query(alias="projectSlug"),
) -> Response:
    """Get the comment tree of a project.

    Top-level comments and every reply list are ordered by descending score.
    Threads may nest to any depth. Public endpoint.

    Raises:
        NotFoundError: If the project does not exist (404)
    """
    tree = await get_comments_use_case.execute(
        GetCommentsRequest(project_slug=project_slug)
    )
    return Response(render_comment_tree(tree), media_type="application/json")


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    author: CurrentAccount,
    body: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    project_slug: str = Query(alias="projectSlug"),
) -> CreateCommentResponse:
    """Comment on a project or reply to a comment.

    Requires authentication, checked before the body is validated.

    Raises:
        UnauthenticatedError: No valid session (401)
        NotFoundError: Unknown project or parent (404)
        ValidationError: Empty or oversized content, bad parent (400)
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            project_slug=project_slug,
            content=body.content,
            parent_comment_id=body.parent_comment_id,
        ),
        author,
    )
