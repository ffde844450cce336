"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


def utcnow() -> datetime:
    """Timezone-aware current time used for entity timestamps."""
    return datetime.now(timezone.utc)
