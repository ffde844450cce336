"""Domain layer DI providers."""

from dishka import Scope, provide

from praxis.config import AuthSettings, FortyTwoSettings, Settings
from praxis.domain.repository import (
    AccountRepository,
    AuthIdentityRepository,
    CommentRepository,
    PostRepository,
    ProjectRepository,
    VoteRepository,
)
from praxis.domain.service import (
    AccountService,
    AuthService,
    CommentService,
    CreateAccountResolver,
    EmailResolver,
    FortyTwoApiClient,
    IntraIdResolver,
    JWTService,
    OAuthClient,
    PostService,
    ProfileService,
    ProjectService,
    VoteService,
)
from praxis.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, oauth_client: OAuthClient) -> AuthService:
        """Provide 42 authentication domain service."""
        return AuthService(oauth_client=oauth_client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        auth_identity_repository: AuthIdentityRepository,
        settings: Settings,
    ) -> AccountService:
        """Provide account service with resolvers in precedence order."""
        return AccountService(
            account_repository=account_repository,
            resolvers=[
                IntraIdResolver(account_repository),
                EmailResolver(account_repository),
                CreateAccountResolver(
                    account_repository,
                    auth_identity_repository,
                    admin_enabled=settings.identity_store.admin_enabled,
                ),
            ],
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_project_service(
        self, project_repository: ProjectRepository
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(project_repository=project_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_profile_service(
        self,
        api_client: FortyTwoApiClient,
        project_service: ProjectService,
        fortytwo_settings: FortyTwoSettings,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            api_client=api_client,
            project_service=project_service,
            main_cursus_id=fortytwo_settings.main_cursus_id,
        )
