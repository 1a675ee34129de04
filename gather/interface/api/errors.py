"""Exception handlers mapping domain and adapter errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from gather.adapter.error import (
    MalformedUpstreamResponseError,
    ProviderError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)
from gather.domain.error import (
    CredentialMismatchError,
    DuplicateHandleError,
    DuplicateStableIdError,
    IdentityExtractionError,
    NotAuthorizedError,
    ProviderAccountConflictError,
    RecordNotFoundError,
    RequiredProfileFieldMissingError,
    UnsupportedProviderError,
    ValidationError,
)
from gather.interface.error import MissingCredentialsError
from gather.util.jwt import JWTError

# Exception type, HTTP status and error code sent to the client
ERROR_RESPONSES: list[tuple[type[Exception], int, str]] = [
    (UpstreamRejectedError, status.HTTP_502_BAD_GATEWAY, "upstream_rejected"),
    (
        MalformedUpstreamResponseError,
        status.HTTP_502_BAD_GATEWAY,
        "upstream_malformed",
    ),
    (
        UpstreamUnavailableError,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "upstream_unavailable",
    ),
    (
        IdentityExtractionError,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "identity_extraction_failed",
    ),
    (
        RequiredProfileFieldMissingError,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "required_profile_field_missing",
    ),
    (DuplicateHandleError, status.HTTP_409_CONFLICT, "duplicate_handle"),
    (DuplicateStableIdError, status.HTTP_409_CONFLICT, "duplicate_stable_id"),
    (
        ProviderAccountConflictError,
        status.HTTP_409_CONFLICT,
        "provider_account_conflict",
    ),
    (RecordNotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (CredentialMismatchError, status.HTTP_401_UNAUTHORIZED, "credential_mismatch"),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN, "not_authorized"),
    (JWTError, status.HTTP_401_UNAUTHORIZED, "invalid_token"),
    (MissingCredentialsError, status.HTTP_401_UNAUTHORIZED, "not_authenticated"),
    (UnsupportedProviderError, status.HTTP_400_BAD_REQUEST, "unsupported_provider"),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error"),
    (
        PydanticValidationError,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation_error",
    ),
]


def _make_handler(status_code: int, error_code: str):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        attributes = {
            "path": request.url.path,
            "status_code": status_code,
            "error": error_code,
        }
        if isinstance(exc, ProviderError):
            attributes["provider"] = exc.provider
            attributes["phase"] = exc.phase
        if status_code >= 500:
            logfire.error("Request failed", detail=str(exc), **attributes)
        else:
            logfire.info("Request rejected", detail=str(exc), **attributes)

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": error_code, "detail": str(exc)},
            headers=headers,
        )

    return handler


def register_error_handlers(app: FastAPI) -> None:
    """Register one handler per mapped exception type.

    Args:
        app: FastAPI application instance
    """
    for exc_type, status_code, error_code in ERROR_RESPONSES:
        app.add_exception_handler(exc_type, _make_handler(status_code, error_code))
