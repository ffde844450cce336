"""Integration tests for the PostgreSQL repositories.

These verify the behavior the services rely on: conflict-tolerant inserts,
unique constraints surfacing as IntegrityError, and score aggregation.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import Post, Vote
from praxis.domain.repository import (
    AccountRepository,
    AuthIdentityRepository,
    PostRepository,
    ProjectRepository,
    VoteRepository,
)
from praxis.domain.value import PostId, ProjectCategory, TargetType, VoteId
from tests.conftest import make_account, make_auth_identity, make_project
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text("TRUNCATE TABLE votes, comments, posts, projects, auth_identities CASCADE")
    )
    await session.commit()
    yield


async def _account(integration_env, login: str = "jdoe", intra_id: int = 4242):
    account = make_account(login=login, intra_id=intra_id)
    identity_repo = await integration_env.get(AuthIdentityRepository)
    await identity_repo.create(make_auth_identity(account))
    account_repo = await integration_env.get(AccountRepository)
    return await account_repo.insert_if_absent(account)


class TestAccountRepository:
    @pytest.mark.asyncio
    async def test_insert_if_absent_yields_none_on_conflict(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)
        account = await _account(integration_env)

        again = await account_repo.insert_if_absent(account)

        assert again is None
        assert await account_repo.count() == 1

    @pytest.mark.asyncio
    async def test_login_clash_raises_integrity_error(self, integration_env):
        account_repo = await integration_env.get(AccountRepository)
        await _account(integration_env, login="taken", intra_id=1)
        mine = await _account(integration_env, login="mine", intra_id=2)

        with pytest.raises(IntegrityError):
            await account_repo.update(
                mine.model_copy(update={"login": make_account(login="taken").login})
            )

        # The savepoint keeps the session usable
        assert (await account_repo.find_by_intra_id(2)).login.root == "mine"


class TestProjectRepository:
    @pytest.mark.asyncio
    async def test_search_and_paginate(self, integration_env):
        project_repo = await integration_env.get(ProjectRepository)
        for slug, forty_two_id in [
            ("libft", 1314),
            ("ft_printf", 1316),
            ("get_next_line", 1327),
        ]:
            await project_repo.save(
                make_project(
                    slug=slug,
                    forty_two_project_id=forty_two_id,
                    category=ProjectCategory.NEW_CORE,
                )
            )

        found = await project_repo.find_all(search="PRINTF")
        page = await project_repo.find_all(offset=1, limit=1)

        assert [p.slug.root for p in found] == ["ft_printf"]
        assert len(page) == 1
        assert await project_repo.count(category=ProjectCategory.NEW_CORE) == 3
        assert await project_repo.find_forty_two_ids([1314, 9]) == {1314}


class TestPostAndVoteRepository:
    @pytest.mark.asyncio
    async def test_one_post_per_author_and_project(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        project = await (await integration_env.get(ProjectRepository)).save(
            make_project(slug="libft")
        )
        author = await _account(integration_env)

        def _post(title: str) -> Post:
            return Post(
                id=PostId(uuid4()),
                project_id=project.id,
                author_id=author.id,
                title=title,
                content="Body",
            )

        await post_repo.save(_post("First"))
        with pytest.raises(IntegrityError):
            await post_repo.save(_post("Second"))

    @pytest.mark.asyncio
    async def test_score_is_sum_of_values(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        target_id = uuid4()
        for index, value in enumerate((1, 1, -1)):
            voter = await _account(integration_env, f"voter{index}", 100 + index)
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=voter.id,
                    target_type=TargetType.COMMENT,
                    target_id=target_id,
                    value=value,
                )
            )

        assert await vote_repo.sum_by_target(target_id) == 1

        await vote_repo.delete_by_target(target_id)
        assert await vote_repo.sum_by_target(target_id) == 0
