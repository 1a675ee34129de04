"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from gather.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Stable id of the authenticated user
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(stable_id: str, settings: AuthSettings) -> str:
    """Create a signed, time-bounded JWT for the user.

    Args:
        stable_id: User stable id, stored as the ``sub`` claim
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": stable_id,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
