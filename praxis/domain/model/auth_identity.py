"""Auth identity entity.

Record in the identity store that mediates login. Accounts carry a foreign
key to it, so one must exist before an account can be inserted.
"""

from datetime import datetime

from pydantic import Field

from praxis.domain.model.common import DomainModel, utcnow
from praxis.domain.value import AccountId


class AuthIdentity(DomainModel):
    """Identity-store entry keyed by email."""

    id: AccountId
    email: str
    created_at: datetime = Field(default_factory=utcnow)
