"""Authentication response model."""

from pydantic import BaseModel

from gather.application.usecase.user.response import UserResponse


class AuthResponse(BaseModel):
    """Bearer token plus the user it was issued for."""

    token: str
    user: UserResponse
