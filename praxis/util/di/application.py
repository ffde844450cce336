"""Application layer DI providers."""

from dishka import Scope, provide

from praxis.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from praxis.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from praxis.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from praxis.application.usecase.profile import GetProfileUseCase
from praxis.application.usecase.project import (
    CategorizeProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
)
from praxis.application.usecase.vote import CastVoteUseCase, GetMyVotesUseCase
from praxis.domain.service import (
    AccountService,
    AuthService,
    CommentService,
    JWTService,
    PostService,
    ProfileService,
    ProjectService,
    VoteService,
)
from praxis.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self,
        auth_service: AuthService,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            account_service=account_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, account_service: AccountService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, account_service=account_service
        )

    # Comment use cases
    @provide
    def get_get_comments_use_case(
        self,
        project_service: ProjectService,
        comment_service: CommentService,
        vote_service: VoteService,
        account_service: AccountService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            project_service=project_service,
            comment_service=comment_service,
            vote_service=vote_service,
            account_service=account_service,
        )

    @provide
    def get_create_comment_use_case(
        self, project_service: ProjectService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            project_service=project_service, comment_service=comment_service
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_my_votes_use_case(self, vote_service: VoteService) -> GetMyVotesUseCase:
        """Provide get my votes use case."""
        return GetMyVotesUseCase(vote_service=vote_service)

    # Project use cases
    @provide
    def get_list_projects_use_case(
        self, project_service: ProjectService
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(project_service=project_service)

    @provide
    def get_get_project_use_case(
        self,
        project_service: ProjectService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(
            project_service=project_service,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_categorize_project_use_case(
        self, project_service: ProjectService
    ) -> CategorizeProjectUseCase:
        """Provide categorize project use case."""
        return CategorizeProjectUseCase(project_service=project_service)

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self,
        project_service: ProjectService,
        post_service: PostService,
        vote_service: VoteService,
        account_service: AccountService,
        profile_service: ProfileService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            project_service=project_service,
            post_service=post_service,
            vote_service=vote_service,
            account_service=account_service,
            profile_service=profile_service,
        )

    @provide
    def get_create_post_use_case(
        self, project_service: ProjectService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            project_service=project_service, post_service=post_service
        )

    @provide
    def get_update_post_use_case(
        self,
        project_service: ProjectService,
        post_service: PostService,
        vote_service: VoteService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            project_service=project_service,
            post_service=post_service,
            vote_service=vote_service,
        )

    @provide
    def get_delete_post_use_case(
        self,
        project_service: ProjectService,
        post_service: PostService,
        vote_service: VoteService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            project_service=project_service,
            post_service=post_service,
            vote_service=vote_service,
        )

    # Profile use cases
    @provide
    def get_profile_use_case(self, profile_service: ProfileService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)
