import asyncio
import time
from typing import Awaitable, Callable, Optional, Tuple

# Tokens are treated as expired this long before the provider says they are
EXPIRY_BUFFER_SECONDS = 60


def epoch_ms() -> int:
    return int(time.time() * 1000)


def expiry_with_buffer(now_ms: int, expires_in_seconds: float) -> int:
    safe_seconds = max(expires_in_seconds - EXPIRY_BUFFER_SECONDS, 0)
    return now_ms + int(safe_seconds * 1000)


class TokenCache:
    """
    Single-slot access token cache for one provider account.

    Refreshes are serialized: callers that miss the cache while another
    refresh is in flight wait for it and then reuse its token.
    """

    def __init__(self, clock: Callable[[], int] = epoch_ms):
        self._clock = clock
        self._token: Optional[str] = None
        self._expires_at_ms: int = 0
        self._lock = asyncio.Lock()

    @property
    def expires_at_ms(self) -> int:
        return self._expires_at_ms

    def get(self) -> Optional[str]:
        """Cached token if still valid, else None."""
        if self._token and self._clock() < self._expires_at_ms:
            return self._token
        return None

    def store(self, token: str, expires_in_seconds: float) -> None:
        self._token = token
        self._expires_at_ms = expiry_with_buffer(self._clock(), expires_in_seconds)

    def invalidate(self) -> None:
        self._token = None
        self._expires_at_ms = 0

    async def refresh(self, fetch: Callable[[], Awaitable[Tuple[str, float]]]) -> str:
        """
        Return the cached token, or call `fetch` for a new (token, expires_in)
        pair and cache it. Nothing is cached if `fetch` raises.
        """
        token = self.get()
        if token:
            return token
        async with self._lock:
            token = self.get()
            if token:
                return token
            token, expires_in = await fetch()
            self.store(token, expires_in)
            return token
