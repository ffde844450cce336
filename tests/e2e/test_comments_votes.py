"""End-to-end tests for project discussions and votes."""

import re
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from praxis.config import AuthSettings
from praxis.domain.model import Comment
from praxis.domain.repository import (
    AccountRepository,
    CommentRepository,
    ProjectRepository,
)
from praxis.domain.value import CommentId
from praxis.util.jwt import create_token
from tests.conftest import make_project
from tests.harness import bearer, create_api_fixture

# E2E test fixture
api = create_api_fixture()


@pytest.fixture
def libft(api):
    """Seeded project every test here discusses."""
    return api.run(api.get(ProjectRepository).save, make_project(slug="libft"))


def _comment(api, token: str, content: str, parent_id: str | None = None) -> dict:
    body = {"content": content}
    if parent_id:
        body["parentCommentId"] = parent_id
    response = api.client.post(
        "/comments", params={"projectSlug": "libft"}, json=body, headers=bearer(token)
    )
    assert response.status_code == 201, response.text
    return response.json()["comment"]


def _vote(api, token: str, target_type: str, target_id: str, value: int):
    return api.client.post(
        "/votes",
        json={"targetType": target_type, "targetId": target_id, "value": value},
        headers=bearer(token),
    )


class TestComments:
    def test_anonymous_comment_is_rejected_without_writing(self, api, libft):
        response = api.client.post(
            "/comments", params={"projectSlug": "libft"}, json={"content": "hi"}
        )

        assert response.status_code == 401
        comments = api.run(api.get(CommentRepository).find_by_project, libft.id)
        assert comments == []

    @pytest.mark.parametrize("body", [{}, {"content": 42}, {"parentCommentId": "x"}])
    def test_anonymous_caller_is_401_before_body_checks(self, api, libft, body):
        response = api.client.post(
            "/comments", params={"projectSlug": "libft"}, json=body
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized", "details": None}

    def test_signed_in_caller_gets_400_for_bad_body(self, api, libft):
        response = api.client.post(
            "/comments",
            params={"projectSlug": "libft"},
            json={},
            headers=bearer(api.login()),
        )

        assert response.status_code == 400

    def test_expired_session_is_treated_as_absent(self, api, libft):
        api.login()
        account = api.run(api.get(AccountRepository).find_by_intra_id, 4242)
        expired = create_token(
            str(account.id),
            account.login.root,
            account.email,
            api.get(AuthSettings),
            now=datetime.now(timezone.utc) - timedelta(days=7, seconds=1),
        )

        response = api.client.post(
            "/comments",
            params={"projectSlug": "libft"},
            json={"content": "hi"},
            headers=bearer(expired),
        )

        assert response.status_code == 401
        comments = api.run(api.get(CommentRepository).find_by_project, libft.id)
        assert comments == []

    def test_tree_is_ordered_by_score(self, api, libft):
        alice = api.login(intra_id=1, login="alice")
        bob = api.login(intra_id=2, login="bob")
        carol = api.login(intra_id=3, login="carol")

        first = _comment(api, alice, "Read the subject twice.")
        second = _comment(api, bob, "Write your own tests.")
        reply_a = _comment(api, carol, "Agreed.", parent_id=first["id"])
        reply_b = _comment(api, bob, "Also check leaks.", parent_id=first["id"])
        for voter in (alice, carol):
            assert _vote(api, voter, "COMMENT", second["id"], 1).status_code == 200
        _vote(api, alice, "COMMENT", reply_b["id"], 1)
        _vote(api, bob, "COMMENT", first["id"], -1)

        response = api.client.get("/comments", params={"projectSlug": "libft"})

        assert response.status_code == 200
        roots = response.json()["comments"]
        assert [c["id"] for c in roots] == [second["id"], first["id"]]
        assert [c["score"] for c in roots] == [2, -1]
        assert [r["id"] for r in roots[1]["replies"]] == [reply_b["id"], reply_a["id"]]
        assert roots[0]["author"]["login"] == "bob"

    def test_long_reply_chain_is_served(self, api, libft):
        token = api.login()
        account = api.run(api.get(AccountRepository).find_by_intra_id, 4242)
        comment_repo = api.get(CommentRepository)
        chain: list[Comment] = []
        for depth in range(1000):
            chain.append(
                Comment(
                    id=CommentId(uuid4()),
                    project_id=libft.id,
                    author_id=account.id,
                    content=f"level {depth}",
                    parent_id=chain[-1].id if chain else None,
                )
            )

        async def seed():
            for comment in chain:
                await comment_repo.save(comment)

        api.run(seed)
        _comment(api, token, "level 1000", parent_id=str(chain[-1].id))

        response = api.client.get("/comments", params={"projectSlug": "libft"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        body = response.text
        levels = [int(n) for n in re.findall(r'"content":"level (\d+)"', body)]
        assert levels == list(range(1001))
        assert body.endswith('"replies":[]}' + "]}" * 1001)

    def test_created_comment_is_a_leaf(self, api, libft):
        token = api.login()

        comment = _comment(api, token, "  First!  ")

        assert comment["content"] == "First!"
        assert comment["score"] == 0
        assert comment["voteCount"] == 0
        assert comment["replies"] == []

    def test_empty_comment_is_400(self, api, libft):
        response = api.client.post(
            "/comments",
            params={"projectSlug": "libft"},
            json={"content": "   "},
            headers=bearer(api.login()),
        )

        assert response.status_code == 400

    def test_reply_to_unknown_parent_is_404(self, api, libft):
        response = api.client.post(
            "/comments",
            params={"projectSlug": "libft"},
            json={"content": "Hello?", "parentCommentId": str(uuid4())},
            headers=bearer(api.login()),
        )

        assert response.status_code == 404

    def test_unknown_project_is_404(self, api):
        response = api.client.get("/comments", params={"projectSlug": "nope"})

        assert response.status_code == 404

    def test_missing_project_slug_is_400(self, api):
        response = api.client.get("/comments")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"


class TestVotes:
    def test_vote_sequence(self, api, libft):
        token = api.login()
        comment = _comment(api, token, "Vote on me")

        results = [
            _vote(api, token, "COMMENT", comment["id"], value).json()
            for value in (1, 1, -1, 0)
        ]

        assert results == [
            {"action": "created", "newScore": 1, "userVote": 1},
            {"action": "none", "newScore": 1, "userVote": 1},
            {"action": "updated", "newScore": -1, "userVote": -1},
            {"action": "removed", "newScore": 0, "userVote": None},
        ]

    def test_anonymous_vote_is_401(self, api, libft):
        comment = _comment(api, api.login(), "Vote on me")

        response = api.client.post(
            "/votes",
            json={"targetType": "COMMENT", "targetId": comment["id"], "value": 1},
        )

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "body",
        [{}, {"targetType": "COMMENT", "value": 2}, {"targetType": "USER", "value": 1}],
    )
    def test_anonymous_caller_is_401_before_body_checks(self, api, body):
        response = api.client.post("/votes", json=body)

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "body,status_code",
        [
            ({"targetType": "COMMENT", "targetId": str(uuid4()), "value": 1}, 404),
            ({"targetType": "COMMENT", "targetId": "not-a-uuid", "value": 1}, 400),
            ({"targetType": "USER", "targetId": str(uuid4()), "value": 1}, 400),
        ],
    )
    def test_bad_targets(self, api, body, status_code):
        response = api.client.post("/votes", json=body, headers=bearer(api.login()))

        assert response.status_code == status_code

    def test_out_of_range_value_is_400(self, api, libft):
        token = api.login()
        comment = _comment(api, token, "Vote on me")

        assert _vote(api, token, "COMMENT", comment["id"], 2).status_code == 400

    def test_my_votes(self, api, libft):
        token = api.login()
        liked = _comment(api, token, "Liked")
        disliked = _comment(api, token, "Disliked")
        ignored = _comment(api, token, "Ignored")
        _vote(api, token, "COMMENT", liked["id"], 1)
        _vote(api, token, "COMMENT", disliked["id"], -1)
        target_ids = ",".join([liked["id"], disliked["id"], ignored["id"], "junk"])

        mine = api.client.get(
            "/votes",
            params={"targetType": "COMMENT", "targetIds": target_ids},
            headers=bearer(token),
        )
        anonymous = api.client.get(
            "/votes", params={"targetType": "COMMENT", "targetIds": target_ids}
        )

        assert mine.json() == {"votes": {liked["id"]: 1, disliked["id"]: -1}}
        assert anonymous.json() == {"votes": {}}
