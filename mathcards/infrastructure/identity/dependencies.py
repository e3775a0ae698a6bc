"""FastAPI dependencies for authentication."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from mathcards.config import Settings, get_settings
from mathcards.domain.common.value_objects import OwnerId
from mathcards.exceptions import AuthenticationError
from mathcards.infrastructure.identity.services import (
    IdentityVerifier,
    IdentityVerifierProtocol,
)

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_identity_verifier() -> IdentityVerifier:
    """Get the application-wide identity verifier."""
    settings = get_settings()
    return IdentityVerifier(
        service_url=settings.IDENTITY_SERVICE_URL,
        timeout=settings.IDENTITY_SERVICE_TIMEOUT_SECONDS,
        cache_ttl=settings.IDENTITY_CACHE_TTL_SECONDS,
        cache_max_size=settings.IDENTITY_CACHE_MAX_SIZE,
    )


async def get_current_owner(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
    verifier: Annotated[IdentityVerifierProtocol, Depends(get_identity_verifier)],
) -> OwnerId:
    """
    Resolve the owner of the request.

    Requires the owner identity header and a bearer token accepted by the
    identity service. The owner id is taken from the header.

    Raises:
        AuthenticationError: If the header or token is missing or the token is rejected
    """
    owner_header = request.headers.get(settings.OWNER_ID_HEADER, "").strip()
    if not owner_header:
        raise AuthenticationError

    if credentials is None or not credentials.credentials:
        raise AuthenticationError

    if not await verifier.verify(credentials.credentials):
        raise AuthenticationError

    return OwnerId(owner_header)


CurrentOwner = Annotated[OwnerId, Depends(get_current_owner)]
