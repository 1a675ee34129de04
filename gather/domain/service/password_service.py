"""Password hashing domain service."""

import asyncio

import logfire
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from .base import Service


class PasswordService(Service):
    """One-way salted hashing of user secrets with argon2.

    argon2 is deliberately slow, so hashing and verification run in a worker
    thread and never hold up the event loop.
    """

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        """Initialize password service.

        Args:
            hasher: argon2 hasher (library defaults when omitted)
        """
        self.hasher = hasher or PasswordHasher()
        self._placeholder_hashes: dict[str, str] = {}

    async def hash(self, plaintext: str) -> str:
        """Hash a secret.

        Args:
            plaintext: Secret as submitted by the user

        Returns:
            Encoded argon2 hash, salted per call
        """
        return await asyncio.to_thread(self.hasher.hash, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a secret against a stored hash.

        Args:
            plaintext: Secret as submitted by the user
            hashed: Stored argon2 hash

        Returns:
            True if the secret matches, False otherwise
        """
        try:
            return await asyncio.to_thread(self.hasher.verify, hashed, plaintext)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as e:
            logfire.warn("Stored password hash could not be verified", error=str(e))
            return False

    async def placeholder_hash(self, secret: str) -> str:
        """Hash of a provider's fixed placeholder secret.

        Computed on first use and reused for every later federated account.

        Args:
            secret: Placeholder secret from the provider settings

        Returns:
            Encoded argon2 hash of the secret
        """
        cached = self._placeholder_hashes.get(secret)
        if cached is None:
            cached = await self.hash(secret)
            self._placeholder_hashes[secret] = cached
        return cached
