"""JWT token domain service."""

import logfire

from gather.config import AuthSettings
from gather.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    span_prefix = "jwt_service"

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, stable_id: str) -> str:
        """Create JWT token for user.

        Args:
            stable_id: User stable id

        Returns:
            JWT token string
        """
        with self.span("create_token", stable_id=stable_id):
            token = create_token(stable_id, self.auth_settings)
            logfire.info("JWT token created", stable_id=stable_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with self.span("verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", stable_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_stable_id_from_token(self, token: str | None) -> str | None:
        """Extract the stable id from a JWT token without raising exceptions.

        Used by routes that need to optionally authenticate users without
        failing on invalid tokens.

        Args:
            token: JWT token string (optional)

        Returns:
            Stable id if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).sub
        except JWTError:
            return None
