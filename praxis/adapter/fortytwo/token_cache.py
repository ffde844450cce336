"""Client-credentials token cache."""

import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class CachedToken:
    access_token: str
    expires_at: float


class TokenCache:
    """Holds one app token until shortly before it expires.

    Args:
        margin: Seconds before expiry at which a token counts as stale
        clock: Returns the current time in seconds
    """

    def __init__(
        self, margin: int = 60, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.margin = margin
        self.clock = clock
        self._token: Optional[CachedToken] = None

    def get(self) -> Optional[str]:
        """Return the cached token, or None when absent or stale."""
        if self._token is None:
            return None
        if self.clock() >= self._token.expires_at - self.margin:
            self._token = None
            return None
        return self._token.access_token

    def put(self, access_token: str, expires_in: int) -> None:
        """Store a token that the intra says lives for ``expires_in`` seconds."""
        self._token = CachedToken(
            access_token=access_token, expires_at=self.clock() + expires_in
        )

    def clear(self) -> None:
        self._token = None
