"""Post (README) use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostResponse
from .delete_post import DeletePostUseCase
from .list_posts import ListPostsResponse, ListPostsUseCase, PostItem
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostUseCase",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
