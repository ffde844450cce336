"""Unit tests for ProjectService."""

import pytest

from praxis.domain.error import NotFoundError, ValidationError
from praxis.domain.repository import ProjectRepository
from praxis.domain.service import DiscoveredProject, ProjectService
from praxis.domain.value import ProjectCategory
from tests.conftest import make_project
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed(project_repo: ProjectRepository) -> None:
    for slug, title, forty_two_id, category in [
        ("libft", "Libft", 1314, ProjectCategory.NEW_CORE),
        ("ft_printf", "ft_printf", 1316, ProjectCategory.NEW_CORE),
        ("minishell", "minishell", 1331, ProjectCategory.NEW_CORE),
        ("c-piscine-shell-00", "C Piscine Shell 00", 1255, ProjectCategory.PISCINE),
        ("ft_ls", "ft_ls", 1, ProjectCategory.OLD_CORE),
    ]:
        await project_repo.save(
            make_project(
                slug=slug,
                title=title,
                forty_two_project_id=forty_two_id,
                category=category,
            )
        )


class TestListProjects:
    @pytest.mark.asyncio
    async def test_filters_by_category(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        await _seed(await unit_env.get(ProjectRepository))

        projects, total = await project_service.list_projects(
            ProjectCategory.NEW_CORE, None, page=1, per_page=50
        )

        assert total == 3
        assert {p.slug.root for p in projects} == {"libft", "ft_printf", "minishell"}

    @pytest.mark.asyncio
    async def test_search_matches_title_case_insensitively(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        await _seed(await unit_env.get(ProjectRepository))

        projects, total = await project_service.list_projects(
            None, "  PISCINE ", page=1, per_page=50
        )

        assert total == 1
        assert projects[0].slug.root == "c-piscine-shell-00"

    @pytest.mark.asyncio
    async def test_pagination_reports_full_total(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        await _seed(await unit_env.get(ProjectRepository))

        first, total = await project_service.list_projects(None, None, 1, 2)
        third, _ = await project_service.list_projects(None, None, 3, 2)

        assert total == 5
        assert len(first) == 2
        assert len(third) == 1


class TestCategorize:
    @pytest.mark.asyncio
    async def test_sets_category_and_circle(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        await project_repo.save(make_project(slug="libft"))

        project = await project_service.categorize(
            "libft", ProjectCategory.NEW_CORE, 0
        )

        assert project.category == ProjectCategory.NEW_CORE
        assert project.circle == 0
        stored = await project_repo.find_by_slug("libft")
        assert stored.circle == 0

    @pytest.mark.asyncio
    async def test_circle_alone_keeps_category(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        await project_repo.save(
            make_project(slug="libft", category=ProjectCategory.NEW_CORE)
        )

        project = await project_service.categorize("libft", None, 13)

        assert project.category == ProjectCategory.NEW_CORE
        assert project.circle == 13

    @pytest.mark.asyncio
    @pytest.mark.parametrize("circle", [7, 12, -2, 100])
    async def test_invalid_circle_is_rejected(self, unit_env, circle):
        project_service = await unit_env.get(ProjectService)
        await (await unit_env.get(ProjectRepository)).save(make_project(slug="libft"))

        with pytest.raises(ValidationError):
            await project_service.categorize("libft", None, circle)

    @pytest.mark.asyncio
    async def test_empty_update_is_rejected(self, unit_env):
        project_service = await unit_env.get(ProjectService)

        with pytest.raises(ValidationError):
            await project_service.categorize("libft", None, None)

    @pytest.mark.asyncio
    async def test_unknown_slug_is_not_found(self, unit_env):
        project_service = await unit_env.get(ProjectService)

        with pytest.raises(NotFoundError):
            await project_service.categorize("nope", ProjectCategory.OTHER, None)


class TestSyncDiscovered:
    @pytest.mark.asyncio
    async def test_adds_only_unknown_projects(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        await project_repo.save(make_project(slug="libft", forty_two_project_id=1314))

        result = await project_service.sync_discovered(
            [
                DiscoveredProject(1314, "Libft", "libft"),
                DiscoveredProject(1316, "ft_printf", "ft_printf"),
                DiscoveredProject(1316, "ft_printf", "ft_printf"),
            ]
        )

        assert result.added == 1
        assert result.existing == 1
        added = await project_repo.find_by_slug("ft_printf")
        assert added.category == ProjectCategory.OTHER
        assert added.forty_two_project_id == 1316

    @pytest.mark.asyncio
    async def test_second_sync_adds_nothing(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        discovered = [DiscoveredProject(1331, "minishell", "minishell")]

        await project_service.sync_discovered(discovered)
        result = await project_service.sync_discovered(discovered)

        assert result.added == 0
        assert result.existing == 1

    @pytest.mark.asyncio
    async def test_unusable_slug_is_skipped(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        await project_repo.save(make_project(slug="libft", forty_two_project_id=1314))

        result = await project_service.sync_discovered(
            [
                DiscoveredProject(9999, "Libft again", "libft"),
                DiscoveredProject(1000, "Bad", "Not A Slug"),
                DiscoveredProject(1331, "minishell", "minishell"),
            ]
        )

        assert result.added == 1
        assert await project_repo.count() == 2

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        project_service = await unit_env.get(ProjectService)

        result = await project_service.sync_discovered([])

        assert (result.added, result.existing) == (0, 0)
