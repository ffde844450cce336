"""Account aggregate root.

Accounts are created lazily on the first successful 42 login and refreshed
with the freshest intra data on every login after that.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from praxis.domain.model.common import DomainModel, utcnow
from praxis.domain.value import AccountId, FortyTwoIdentity, Role
from praxis.domain.value.types import Login, student_email


class Account(DomainModel):
    """Local identity record linked to a 42 intra user.

    Business rules:
    - At most one account per intra id (unique constraint)
    - Login is unique and case-sensitive
    - ``id`` is the id of the AuthIdentity the account was created for
    """

    id: AccountId
    intra_id: Optional[int] = None
    login: Login
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    campus: Optional[str] = None
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def derived_email(self) -> str:
        """Email, or the student address derived from the login."""
        return self.email or student_email(self.login.root)

    def refreshed_from(self, identity: FortyTwoIdentity) -> "Account":
        """Copy of this account carrying the remote-sourced fields of ``identity``.

        Backfills ``intra_id`` when the account was matched by email.
        """
        return self.model_copy(
            update={
                "intra_id": identity.intra_id,
                "login": Login(identity.login),
                "display_name": identity.display_name or self.display_name,
                "avatar_url": identity.avatar_url or self.avatar_url,
                "email": identity.email or self.email,
                "campus": identity.campus or self.campus,
                "updated_at": utcnow(),
            }
        )
