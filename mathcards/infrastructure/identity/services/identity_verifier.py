"""Bearer token verification against the external identity service."""

from typing import Protocol

import httpx
import structlog
from cachetools import TTLCache

logger = structlog.get_logger(__name__)


class IdentityVerifierProtocol(Protocol):
    async def verify(self, token: str) -> bool: ...


class IdentityVerifier:
    """
    Validates bearer tokens by calling the identity service's userinfo endpoint.

    A token is valid when the endpoint answers 2xx with a JSON body carrying
    a truthy "id". Successful verifications can be memoized per token for
    cache_ttl seconds; failures are never cached.
    """

    def __init__(
        self,
        service_url: str,
        timeout: float = 10.0,
        cache_ttl: int = 0,
        cache_max_size: int = 1024,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.service_url = service_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self._cache: TTLCache[str, bool] | None = (
            TTLCache(maxsize=cache_max_size, ttl=cache_ttl) if cache_ttl > 0 else None
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def verify(self, token: str) -> bool:
        """Return True if the identity service accepts the token."""
        if self._cache is not None and token in self._cache:
            return True

        try:
            response = await self._client.get(
                self.service_url,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            logger.warning("identity_service_unreachable", error=str(e))
            return False

        if not response.is_success:
            logger.info("token_rejected", status_code=response.status_code)
            return False

        try:
            data = response.json()
        except ValueError:
            logger.warning("identity_service_invalid_body")
            return False

        if not isinstance(data, dict) or not data.get("id"):
            logger.info("token_without_identity")
            return False

        if self._cache is not None:
            self._cache[token] = True
        return True
