"""Identity services."""

from mathcards.infrastructure.identity.services.identity_verifier import (
    IdentityVerifier,
    IdentityVerifierProtocol,
)

__all__ = ["IdentityVerifier", "IdentityVerifierProtocol"]
