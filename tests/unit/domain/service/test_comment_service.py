"""Unit tests for comment threading and CommentService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from praxis.domain.error import NotFoundError, ValidationError
from praxis.domain.model import Comment
from praxis.domain.service import CommentNode, CommentService, build_comment_tree
from praxis.domain.value import AccountId, CommentId, ProjectId
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PROJECT_ID = ProjectId(uuid4())
BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _comment(
    content: str,
    parent: Comment | None = None,
    minutes: int = 0,
    author_id: AccountId | None = None,
) -> Comment:
    created = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        project_id=PROJECT_ID,
        author_id=author_id or AccountId(uuid4()),
        content=content,
        parent_id=parent.id if parent else None,
        created_at=created,
        updated_at=created,
    )


def _flatten(nodes: list[CommentNode]) -> list[CommentId]:
    ids = []
    for node in nodes:
        ids.append(node.comment.id)
        ids.extend(_flatten(node.replies))
    return ids


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_roots_are_ordered_by_descending_score(self):
        a = _comment("A", minutes=0)
        b = _comment("B", minutes=1)
        c = _comment("C", minutes=2)
        votes = {a.id: [1] * 5, b.id: [1] * 10, c.id: [-1]}

        tree = build_comment_tree([a, b, c], votes)

        assert [node.comment.content for node in tree] == ["B", "A", "C"]
        assert [node.score for node in tree] == [10, 5, -1]

    def test_replies_nest_and_flatten_back_to_input(self):
        root = _comment("R")
        x = _comment("X", parent=root, minutes=1)
        y = _comment("Y", parent=root, minutes=2)
        z = _comment("Z", parent=x, minutes=3)
        votes = {y.id: [1, 1], x.id: [1]}

        tree = build_comment_tree([root, x, y, z], votes)

        assert len(tree) == 1
        assert [n.comment.id for n in tree[0].replies] == [y.id, x.id]
        x_node = tree[0].replies[1]
        assert [n.comment.id for n in x_node.replies] == [z.id]

        flattened = _flatten(tree)
        assert sorted(flattened) == sorted([root.id, x.id, y.id, z.id])
        assert len(flattened) == len(set(flattened))

    def test_ties_keep_input_order(self):
        first = _comment("first", minutes=0)
        second = _comment("second", minutes=1)
        third = _comment("third", minutes=2)

        tree = build_comment_tree([first, second, third], {})

        assert [n.comment.content for n in tree] == ["first", "second", "third"]

    def test_vote_count_counts_rows_not_score(self):
        comment = _comment("balanced")

        tree = build_comment_tree([comment], {comment.id: [1, -1]})

        assert tree[0].score == 0
        assert tree[0].vote_count == 2

    def test_orphans_are_dropped(self):
        root = _comment("root")
        missing_parent = _comment("gone")
        orphan = _comment("orphan", parent=missing_parent, minutes=1)
        orphan_reply = _comment("orphan reply", parent=orphan, minutes=2)

        tree = build_comment_tree([root, orphan, orphan_reply], {})

        assert _flatten(tree) == [root.id]

    def test_reply_chains_deeper_than_the_call_stack_are_built(self):
        comments = [_comment("level 0")]
        for depth in range(1, 1500):
            comments.append(
                _comment(f"level {depth}", parent=comments[-1], minutes=depth)
            )

        tree = build_comment_tree(comments, {})

        node = tree[0]
        depth = 0
        while node.replies:
            node = node.replies[0]
            depth += 1
        assert depth == 1499
        assert node.comment.content == "level 1499"

    def test_authors_are_attached(self):
        author = make_account(login="alice")
        comment = _comment("hello", author_id=author.id)

        tree = build_comment_tree([comment], {}, {author.id: author})

        assert tree[0].author == author

    def test_empty_input_gives_empty_tree(self):
        assert build_comment_tree([], {}) == []


class TestCreateComment:
    """Tests for CommentService.create_comment."""

    @pytest.mark.asyncio
    async def test_create_root_comment_trims_content(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        comment = await comment_service.create_comment(
            project_id=PROJECT_ID,
            author_id=AccountId(uuid4()),
            content="  Use valgrind early.  ",
        )

        assert comment.content == "Use valgrind early."
        assert comment.parent_id is None
        assert comment.created_at == comment.updated_at

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            project_id=PROJECT_ID, author_id=AccountId(uuid4()), content="Question?"
        )

        reply = await comment_service.create_comment(
            project_id=PROJECT_ID,
            author_id=AccountId(uuid4()),
            content="Answer.",
            parent_id=parent.id,
        )

        assert reply.parent_id == parent.id
        comments = await comment_service.get_comments_for_project(PROJECT_ID)
        assert {c.id for c in comments} == {parent.id, reply.id}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "x" * 10001])
    async def test_invalid_content_is_rejected(self, unit_env, content):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                project_id=PROJECT_ID, author_id=AccountId(uuid4()), content=content
            )

    @pytest.mark.asyncio
    async def test_unknown_parent_is_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                project_id=PROJECT_ID,
                author_id=AccountId(uuid4()),
                content="Reply to nothing",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_parent_from_another_project_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            project_id=ProjectId(uuid4()),
            author_id=AccountId(uuid4()),
            content="Elsewhere",
        )

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                project_id=PROJECT_ID,
                author_id=AccountId(uuid4()),
                content="Cross-project reply",
                parent_id=parent.id,
            )
