"""User use cases."""

from .change_handle import ChangeHandleUseCase
from .check_availability import CheckAvailabilityUseCase
from .delete_account import DeleteAccountUseCase
from .get_user import GetUserUseCase
from .response import UserResponse
from .update_user_profile import UpdateUserProfileUseCase

__all__ = [
    "ChangeHandleUseCase",
    "CheckAvailabilityUseCase",
    "DeleteAccountUseCase",
    "GetUserUseCase",
    "UpdateUserProfileUseCase",
    "UserResponse",
]
