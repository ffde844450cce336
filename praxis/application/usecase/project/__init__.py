"""Project use cases."""

from .categorize_project import (
    CategorizeProjectRequest,
    CategorizeProjectResponse,
    CategorizeProjectUseCase,
)
from .get_project import GetProjectResponse, GetProjectUseCase, ProjectDetail
from .list_projects import (
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    ProjectItem,
)

__all__ = [
    "CategorizeProjectRequest",
    "CategorizeProjectResponse",
    "CategorizeProjectUseCase",
    "GetProjectResponse",
    "GetProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "ProjectDetail",
    "ProjectItem",
]
