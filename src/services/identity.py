"""Read-only access to the identity of the local viewer (owned by the session/key management layer)."""

from typing import Protocol

from src.core.models import PublicKey


class IdentityProvider(Protocol):
    def get_public_key(self) -> PublicKey:
        """Public key of whoever is looking at the gameroom right now."""
        ...


class StaticIdentityProvider:
    """Viewer identity fixed at construction (a single signed-in user, or tests)."""

    def __init__(self, public_key: PublicKey) -> None:
        self._public_key = public_key

    def get_public_key(self) -> PublicKey:
        return self._public_key
