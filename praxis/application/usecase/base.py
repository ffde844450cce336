"""Shared use case request and response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from praxis.domain.model import Account


class CamelModel(BaseModel):
    """Request/response model exchanged with the frontend in camelCase.

    Fields are declared in snake_case and accept either spelling on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountSummary(CamelModel):
    """Public view of an account attached to content."""

    id: str
    login: str
    display_name: str | None
    avatar_url: str | None

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            id=str(account.id),
            login=account.login.root,
            display_name=account.display_name,
            avatar_url=account.avatar_url,
        )


class AccountInfo(AccountSummary):
    """Account as seen by its owner."""

    email: str | None
    campus: str | None
    role: str
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountInfo":
        return cls(
            id=str(account.id),
            login=account.login.root,
            display_name=account.display_name,
            avatar_url=account.avatar_url,
            email=account.email,
            campus=account.campus,
            role=account.role.value,
            created_at=account.created_at,
        )
