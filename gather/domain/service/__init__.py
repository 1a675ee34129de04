"""Domain services."""

from .auth_service import AuthService, ProviderGateway
from .base import Service
from .jwt_service import JWTService
from .nickname import NicknameGenerator, generate_nickname
from .password_service import PasswordService
from .profile_normalizer import (
    GoogleProfileNormalizer,
    KakaoProfileNormalizer,
    ProfileNormalizer,
)
from .user_service import UserService

__all__ = [
    "AuthService",
    "GoogleProfileNormalizer",
    "JWTService",
    "KakaoProfileNormalizer",
    "NicknameGenerator",
    "PasswordService",
    "ProfileNormalizer",
    "ProviderGateway",
    "Service",
    "UserService",
    "generate_nickname",
]
