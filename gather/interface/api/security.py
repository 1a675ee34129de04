"""Bearer token extraction for authenticated routes."""

from gather.domain.service import JWTService
from gather.interface.error import MissingCredentialsError


def bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        MissingCredentialsError: If the header is absent or not a bearer token
    """
    if not authorization:
        raise MissingCredentialsError()
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise MissingCredentialsError("Authorization header must be 'Bearer <token>'")
    return token.strip()


def authenticate(authorization: str | None, jwt_service: JWTService) -> str:
    """Return the stable id of the authenticated requester.

    Raises:
        MissingCredentialsError: If no bearer token was sent
        JWTError: If the token is invalid or expired
    """
    return jwt_service.verify_token(bearer_token(authorization)).sub
