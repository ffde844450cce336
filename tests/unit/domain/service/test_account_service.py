"""Unit tests for account resolution."""

import pytest

from praxis.domain.error import AuthProfileUpsertFailed, AuthServiceMisconfigured
from praxis.domain.model import Account
from praxis.domain.repository import AccountRepository, AuthIdentityRepository
from praxis.domain.service import (
    AccountService,
    CreateAccountResolver,
    EmailResolver,
    IntraIdResolver,
)
from praxis.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryAuthIdentityRepository,
)
from tests.conftest import make_account, make_auth_identity, make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _service(
    account_repo: AccountRepository,
    identity_repo: AuthIdentityRepository,
    admin_enabled: bool = True,
) -> AccountService:
    return AccountService(
        account_repository=account_repo,
        resolvers=[
            IntraIdResolver(account_repo),
            EmailResolver(account_repo),
            CreateAccountResolver(account_repo, identity_repo, admin_enabled),
        ],
    )


class LosingRaceAccountRepository(InMemoryAccountRepository):
    """Simulates a concurrent login that inserts the row first."""

    def __init__(self, winner: Account | None) -> None:
        super().__init__()
        self.winner = winner

    async def insert_if_absent(self, account: Account) -> Account | None:
        if self.winner is not None:
            self._accounts[self.winner.id] = self.winner
        return None


class TestResolve:
    """Tests for AccountService.resolve."""

    @pytest.mark.asyncio
    async def test_first_login_creates_account_then_relogin_refreshes_it(
        self, unit_env
    ):
        """Same intra id with a new login updates the one existing row."""
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)

        created = await account_service.resolve(
            make_identity(intra_id=555, login="abc", email="abc@x.com")
        )
        assert created.intra_id == 555
        assert created.login.root == "abc"

        again = await account_service.resolve(
            make_identity(intra_id=555, login="abc2", email="abc@x.com")
        )

        assert again.id == created.id
        assert again.login.root == "abc2"
        assert again.intra_id == 555
        assert await account_repo.count() == 1
        stored = await account_repo.find_by_id(created.id)
        assert stored.login.root == "abc2"

    @pytest.mark.asyncio
    async def test_repeated_logins_keep_a_single_account(self, unit_env):
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)

        ids = set()
        for login in ("abc", "abc", "abc3", "abc"):
            account = await account_service.resolve(
                make_identity(intra_id=777, login=login, email="same@x.com")
            )
            ids.add(account.id)

        assert len(ids) == 1
        assert await account_repo.count() == 1

    @pytest.mark.asyncio
    async def test_email_match_backfills_intra_id_on_same_row(self, unit_env):
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        legacy = make_account(login="legacy", intra_id=None, email="old@x.com")
        await account_repo.insert_if_absent(legacy)

        resolved = await account_service.resolve(
            make_identity(intra_id=901, login="legacy", email="old@x.com")
        )

        assert resolved.id == legacy.id
        assert resolved.intra_id == 901
        assert await account_repo.count() == 1

    @pytest.mark.asyncio
    async def test_refresh_copies_remote_fields(self, unit_env):
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        existing = make_account(login="jdoe", intra_id=4242)
        await account_repo.insert_if_absent(existing)

        resolved = await account_service.resolve(
            make_identity(
                intra_id=4242,
                login="jdoe",
                display_name="Jane Doe",
                avatar_url="https://cdn.intra.42.fr/new.jpg",
                campus="Lyon",
            )
        )

        assert resolved.display_name == "Jane Doe"
        assert resolved.avatar_url == "https://cdn.intra.42.fr/new.jpg"
        assert resolved.campus == "Lyon"

    @pytest.mark.asyncio
    async def test_creation_reuses_identity_with_same_email(self, unit_env):
        account_service = await unit_env.get(AccountService)
        identity_repo = await unit_env.get(AuthIdentityRepository)
        orphan = make_account(login="ghost", email="ghost@x.com")
        await identity_repo.create(make_auth_identity(orphan))

        resolved = await account_service.resolve(
            make_identity(intra_id=31, login="ghost", email="ghost@x.com")
        )

        assert resolved.id == orphan.id

    @pytest.mark.asyncio
    async def test_missing_email_uses_student_address(self, unit_env):
        account_service = await unit_env.get(AccountService)
        identity_repo = await unit_env.get(AuthIdentityRepository)

        resolved = await account_service.resolve(
            make_identity(intra_id=32, login="nomail", email=None)
        )

        identity = await identity_repo.find_by_id(resolved.id)
        assert identity.email == "nomail@student.42.fr"


class TestCreateBranch:
    """Failure paths of the create strategy."""

    @pytest.mark.asyncio
    async def test_admin_capability_is_required(self):
        service = _service(
            InMemoryAccountRepository(),
            InMemoryAuthIdentityRepository(),
            admin_enabled=False,
        )

        with pytest.raises(AuthServiceMisconfigured) as exc_info:
            await service.resolve(make_identity())

        assert exc_info.value.code == "service_role_required"

    @pytest.mark.asyncio
    async def test_existing_accounts_log_in_without_admin_capability(self):
        account_repo = InMemoryAccountRepository()
        await account_repo.insert_if_absent(make_account(intra_id=4242))
        service = _service(
            account_repo, InMemoryAuthIdentityRepository(), admin_enabled=False
        )

        resolved = await service.resolve(make_identity(intra_id=4242))

        assert resolved.intra_id == 4242

    @pytest.mark.asyncio
    async def test_lost_race_rereads_winner(self):
        identity = make_identity(intra_id=600, login="racer")
        winner = make_account(login="racer", intra_id=600)
        service = _service(
            LosingRaceAccountRepository(winner), InMemoryAuthIdentityRepository()
        )

        resolved = await service.resolve(identity)

        assert resolved.id == winner.id

    @pytest.mark.asyncio
    async def test_no_row_deletes_created_identity(self):
        identity_repo = InMemoryAuthIdentityRepository()
        service = _service(LosingRaceAccountRepository(None), identity_repo)

        with pytest.raises(AuthProfileUpsertFailed) as exc_info:
            await service.resolve(make_identity(intra_id=601, email="lost@x.com"))

        assert exc_info.value.code == "profile_creation_failed"
        assert len(identity_repo.deleted) == 1
        assert await identity_repo.find_by_email("lost@x.com") is None

    @pytest.mark.asyncio
    async def test_reused_identity_is_not_deleted_on_failure(self):
        identity_repo = InMemoryAuthIdentityRepository()
        await identity_repo.create(
            make_auth_identity(make_account(email="kept@x.com"))
        )
        service = _service(LosingRaceAccountRepository(None), identity_repo)

        with pytest.raises(AuthProfileUpsertFailed):
            await service.resolve(make_identity(intra_id=602, email="kept@x.com"))

        assert identity_repo.deleted == []
        assert await identity_repo.find_by_email("kept@x.com") is not None

    @pytest.mark.asyncio
    async def test_email_held_by_other_intra_user_is_not_merged(self):
        account_repo = InMemoryAccountRepository()
        identity_repo = InMemoryAuthIdentityRepository()
        other = make_account(login="other", intra_id=1, email="shared@x.com")
        await identity_repo.create(make_auth_identity(other))
        await account_repo.insert_if_absent(other)
        service = _service(account_repo, identity_repo)

        with pytest.raises(AuthProfileUpsertFailed):
            await service.resolve(
                make_identity(intra_id=2, login="newcomer", email="shared@x.com")
            )

        stored = await account_repo.find_by_id(other.id)
        assert stored.intra_id == 1
        assert stored.login.root == "other"


class TestRefreshFailure:
    @pytest.mark.asyncio
    async def test_update_conflict_is_update_failed(self):
        account_repo = InMemoryAccountRepository()
        await account_repo.insert_if_absent(make_account(login="taken", intra_id=10))
        await account_repo.insert_if_absent(make_account(login="mine", intra_id=11))
        service = _service(account_repo, InMemoryAuthIdentityRepository())

        with pytest.raises(AuthProfileUpsertFailed) as exc_info:
            # Intra renamed user 11 to a login still held locally by user 10
            await service.resolve(make_identity(intra_id=11, login="taken"))

        assert exc_info.value.code == "update_failed"
