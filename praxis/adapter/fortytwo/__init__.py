"""42 intra adapter."""

from .api import MockFortyTwoApiClient, RealFortyTwoApiClient
from .oauth import (
    FortyTwoOAuthClient,
    MockFortyTwoOAuthClient,
    RealFortyTwoOAuthClient,
    identity_from_payload,
)
from .token_cache import TokenCache

__all__ = [
    "FortyTwoOAuthClient",
    "MockFortyTwoApiClient",
    "MockFortyTwoOAuthClient",
    "RealFortyTwoApiClient",
    "RealFortyTwoOAuthClient",
    "TokenCache",
    "identity_from_payload",
]
