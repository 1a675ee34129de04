"""Check availability use case."""

from pydantic import BaseModel, model_validator

from gather.domain.service import UserService
from gather.domain.value import StableId
from gather.domain.value.types import Handle


class CheckAvailabilityRequest(BaseModel):
    """Availability check for exactly one of handle or stable id."""

    handle: Handle | None = None
    stable_id: str | None = None

    @model_validator(mode="after")
    def exactly_one(self) -> "CheckAvailabilityRequest":
        if (self.handle is None) == (self.stable_id is None):
            raise ValueError("Provide exactly one of handle or stable_id")
        return self


class CheckAvailabilityResponse(BaseModel):
    """Availability check result."""

    handle: str | None = None
    stable_id: str | None = None
    taken: bool


class CheckAvailabilityUseCase:
    """Use case for duplicate checks before signup or a handle change."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def is_handle_taken(self, handle: Handle) -> bool:
        return await self.user_service.is_handle_taken(handle)

    async def is_stable_id_taken(self, stable_id: str) -> bool:
        return await self.user_service.is_stable_id_taken(StableId(stable_id))

    async def execute(
        self, request: CheckAvailabilityRequest
    ) -> CheckAvailabilityResponse:
        if request.handle is not None:
            return CheckAvailabilityResponse(
                handle=request.handle.root,
                taken=await self.is_handle_taken(request.handle),
            )
        return CheckAvailabilityResponse(
            stable_id=request.stable_id,
            taken=await self.is_stable_id_taken(request.stable_id),
        )
