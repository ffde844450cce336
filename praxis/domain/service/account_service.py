"""Account domain service.

Maps a 42 identity onto exactly one local account. Resolution runs an ordered
list of strategies and stops at the first that yields an account:

1. ``IntraIdResolver``: account already linked to the intra id
2. ``EmailResolver``: account recorded under the same email, not yet linked
3. ``CreateAccountResolver``: brand-new account, created conflict-tolerantly

Whatever branch matched, the remote-sourced fields are refreshed afterwards.
"""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from praxis.domain.error import AuthProfileUpsertFailed, AuthServiceMisconfigured
from praxis.domain.model import Account, AuthIdentity
from praxis.domain.repository import AccountRepository, AuthIdentityRepository
from praxis.domain.value import AccountId, FortyTwoIdentity
from praxis.domain.value.types import Login, student_email

from .base import Service


class AccountResolver(ABC):
    """One step of the account resolution chain."""

    name: str

    @abstractmethod
    async def resolve(self, identity: FortyTwoIdentity) -> Account | None:
        """Return the matching account, or None to fall through."""
        pass


class IntraIdResolver(AccountResolver):
    """Match on the intra id recorded at a previous login."""

    name = "intra_id"

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def resolve(self, identity: FortyTwoIdentity) -> Account | None:
        return await self.account_repository.find_by_intra_id(identity.intra_id)


class EmailResolver(AccountResolver):
    """Match on email for accounts that predate intra id linking.

    The intra id is backfilled by the refresh that follows resolution.
    """

    name = "email"

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def resolve(self, identity: FortyTwoIdentity) -> Account | None:
        if not identity.email:
            return None
        account = await self.account_repository.find_by_email(identity.email)
        if account and account.intra_id not in (None, identity.intra_id):
            # Email now belongs to a different intra user; never merge those
            logfire.warn(
                "Email match linked to another intra id",
                account_id=str(account.id),
                intra_id=identity.intra_id,
            )
            return None
        return account


class CreateAccountResolver(AccountResolver):
    """Create the account and its identity-store entry.

    Two first logins for the same intra user may race. The insert swallows the
    conflict and the loser re-reads the winner's row. If no row can be
    produced, an identity entry created by this attempt is deleted again.
    """

    name = "create"

    def __init__(
        self,
        account_repository: AccountRepository,
        auth_identity_repository: AuthIdentityRepository,
        admin_enabled: bool,
    ) -> None:
        self.account_repository = account_repository
        self.auth_identity_repository = auth_identity_repository
        self.admin_enabled = admin_enabled

    async def resolve(self, identity: FortyTwoIdentity) -> Account | None:
        if not self.admin_enabled:
            raise AuthServiceMisconfigured(
                "Identity store admin access is disabled",
                code="service_role_required",
            )

        auth_identity, created = await self._obtain_auth_identity(identity)

        account = Account(
            id=auth_identity.id,
            intra_id=identity.intra_id,
            login=Login(identity.login),
            display_name=identity.display_name,
            avatar_url=identity.avatar_url,
            email=identity.email,
            campus=identity.campus,
        )

        try:
            inserted = await self.account_repository.insert_if_absent(account)
        except SQLAlchemyError as e:
            logfire.error("Account insert failed", error=str(e))
            inserted = None

        if inserted:
            logfire.info(
                "Account created",
                account_id=str(inserted.id),
                intra_id=identity.intra_id,
            )
            return inserted

        existing = await self.account_repository.find_by_id(auth_identity.id)
        if existing is not None and existing.intra_id not in (None, identity.intra_id):
            # Identity row is held by another intra user's account
            existing = None
        if existing is None:
            existing = await self.account_repository.find_by_intra_id(
                identity.intra_id
            )
        if existing:
            logfire.info(
                "Concurrent account creation resolved by re-read",
                account_id=str(existing.id),
                intra_id=identity.intra_id,
            )
            return existing

        if created:
            await self.auth_identity_repository.delete(auth_identity.id)
            logfire.warn(
                "Removed orphaned auth identity", identity_id=str(auth_identity.id)
            )
        raise AuthProfileUpsertFailed(
            f"Could not create account for intra user {identity.intra_id}",
            code="profile_creation_failed",
        )

    async def _obtain_auth_identity(
        self, identity: FortyTwoIdentity
    ) -> tuple[AuthIdentity, bool]:
        """Reuse the identity-store entry for this email, or create one."""
        email = identity.email or student_email(identity.login)

        existing = await self.auth_identity_repository.find_by_email(email)
        if existing:
            logfire.info("Reusing auth identity", identity_id=str(existing.id))
            return existing, False

        try:
            return await self.auth_identity_repository.create(
                AuthIdentity(id=AccountId(uuid4()), email=email)
            )
        except (SQLAlchemyError, LookupError) as e:
            logfire.error("Auth identity creation failed", error=str(e))
            raise AuthProfileUpsertFailed(
                "Could not create auth identity", code="auth_creation_failed"
            )


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        resolvers: Sequence[AccountResolver],
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            resolvers: Resolution strategies, in precedence order
        """
        self.account_repository = account_repository
        self.resolvers = list(resolvers)

    async def get_by_id(self, account_id: AccountId) -> Account | None:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account if found, None otherwise
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            return await self.account_repository.find_by_id(account_id)

    async def get_by_ids(
        self, account_ids: Sequence[AccountId]
    ) -> dict[AccountId, Account]:
        """Get several accounts keyed by ID."""
        if not account_ids:
            return {}
        accounts = await self.account_repository.find_by_ids(list(set(account_ids)))
        return {account.id: account for account in accounts}

    async def resolve(self, identity: FortyTwoIdentity) -> Account:
        """Resolve a 42 identity to exactly one account and refresh it.

        Args:
            identity: Identity reported by the intra

        Returns:
            The resolved account with fresh remote data

        Raises:
            AuthServiceMisconfigured: service_role_required
            AuthProfileUpsertFailed: update_failed, auth_creation_failed or
                profile_creation_failed
        """
        with logfire.span(
            "account_service.resolve",
            intra_id=identity.intra_id,
            login=identity.login,
        ):
            for resolver in self.resolvers:
                account = await resolver.resolve(identity)
                if account is not None:
                    logfire.info(
                        "Account resolved",
                        strategy=resolver.name,
                        account_id=str(account.id),
                    )
                    return await self.refresh(account, identity)

            # The create strategy either returns or raises
            raise AuthProfileUpsertFailed("No resolver produced an account")

    async def refresh(self, account: Account, identity: FortyTwoIdentity) -> Account:
        """Write the freshest intra data onto an account.

        Raises:
            AuthProfileUpsertFailed: update_failed
        """
        refreshed = account.refreshed_from(identity)
        if refreshed.model_dump(exclude={"updated_at"}) == account.model_dump(
            exclude={"updated_at"}
        ):
            return account

        try:
            return await self.account_repository.update(refreshed)
        except SQLAlchemyError as e:
            logfire.error(
                "Account refresh failed", account_id=str(account.id), error=str(e)
            )
            raise AuthProfileUpsertFailed(
                "Could not update account", code="update_failed"
            )
