"""User account routes.

Every route except the availability check acts on the requester's own
account only.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from gather.application.usecase.user import (
    ChangeHandleUseCase,
    CheckAvailabilityUseCase,
    DeleteAccountUseCase,
    GetUserUseCase,
    UpdateUserProfileUseCase,
    UserResponse,
)
from gather.application.usecase.user.change_handle import ChangeHandleRequest
from gather.application.usecase.user.check_availability import (
    CheckAvailabilityRequest,
    CheckAvailabilityResponse,
)
from gather.application.usecase.user.delete_account import DeleteAccountRequest
from gather.application.usecase.user.get_user import GetUserRequest
from gather.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from gather.domain.service import JWTService
from gather.domain.value.types import Handle
from gather.interface.api.security import authenticate

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating a user profile."""

    display_name: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=1)


class ChangeHandleAPIRequest(BaseModel):
    """API request for changing a handle."""

    handle: Handle


@router.get("/availability", response_model=CheckAvailabilityResponse)
async def check_availability(
    check_availability_use_case: FromDishka[CheckAvailabilityUseCase],
    handle: str | None = Query(default=None),
    stable_id: str | None = Query(default=None),
) -> CheckAvailabilityResponse:
    """Check whether a handle or stable id is taken.

    Example:
        GET /users/availability?handle=alice

        Response:
        {"handle": "alice", "stable_id": null, "taken": false}
    """
    return await check_availability_use_case.execute(
        CheckAvailabilityRequest(
            handle=handle,
            stable_id=stable_id,
        )
    )


@router.get("/{stable_id}", response_model=UserResponse)
async def get_user(
    stable_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Get the requester's own account."""
    requester = authenticate(authorization, jwt_service)
    return await get_user_use_case.execute(
        GetUserRequest(stable_id=stable_id, requester=requester)
    )


@router.patch("/{stable_id}", response_model=UserResponse)
async def update_user_profile(
    stable_id: str,
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Update display name and/or password.

    Example:
        PATCH /users/1234567890
        Authorization: Bearer ...

        Request:
        {"display_name": "Kim"}
    """
    requester = authenticate(authorization, jwt_service)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            stable_id=stable_id,
            requester=requester,
            display_name=request.display_name,
            password=request.password,
        )
    )


@router.put("/{stable_id}/handle", response_model=UserResponse)
async def change_handle(
    stable_id: str,
    request: ChangeHandleAPIRequest,
    change_handle_use_case: FromDishka[ChangeHandleUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Replace the account handle."""
    requester = authenticate(authorization, jwt_service)
    return await change_handle_use_case.execute(
        ChangeHandleRequest(
            stable_id=stable_id, requester=requester, handle=request.handle
        )
    )


@router.delete("/{stable_id}", response_model=UserResponse)
async def delete_account(
    stable_id: str,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Delete the account and every record it owns.

    Returns the account as it was before deletion.
    """
    requester = authenticate(authorization, jwt_service)
    return await delete_account_use_case.execute(
        DeleteAccountRequest(stable_id=stable_id, requester=requester)
    )
