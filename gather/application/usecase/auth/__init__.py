"""Authentication use cases."""

from .authorize import AuthorizeUseCase
from .federated_login import FederatedLoginUseCase
from .get_current_user import GetCurrentUserUseCase
from .login import LocalLoginUseCase
from .register import RegisterUseCase
from .response import AuthResponse

__all__ = [
    "AuthResponse",
    "AuthorizeUseCase",
    "FederatedLoginUseCase",
    "GetCurrentUserUseCase",
    "LocalLoginUseCase",
    "RegisterUseCase",
]
