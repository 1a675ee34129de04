"""Scripted provider gateway for tests."""

from copy import deepcopy
from typing import Any

from gather.adapter.error import ProviderError
from gather.domain.service.auth_service import ProviderGateway

from .client import PROFILE_FETCH, TOKEN_EXCHANGE


class ScriptedProviderGateway(ProviderGateway):
    """Gateway returning a primed profile without making real API calls.

    Prime a failure with ``prime_failure``; it is raised in the phase the
    error names (token exchange when it names none).
    """

    default_profile: dict[str, Any] = {}
    authorize_url: str = ""

    def __init__(self, profile: dict[str, Any] | None = None) -> None:
        self.profile = deepcopy(profile if profile is not None else self.default_profile)
        self.failure: ProviderError | None = None
        self.codes: list[str] = []

    def prime_profile(self, profile: dict[str, Any]) -> None:
        """Return this payload from the next profile fetches."""
        self.profile = deepcopy(profile)

    def prime_failure(self, error: ProviderError | None) -> None:
        """Raise this error from the next calls (None clears it)."""
        self.failure = error

    def authorization_url(self, state: str | None = None) -> str:
        url = f"{self.authorize_url}?mock=true"
        return f"{url}&state={state}" if state else url

    async def exchange_code_for_token(self, code: str) -> str:
        self.codes.append(code)
        if self.failure and self.failure.phase in (None, TOKEN_EXCHANGE):
            raise self.failure
        return f"mock-{self.provider.value}-token-{code}"

    async def fetch_profile(self, access_token: str) -> dict:
        if self.failure and self.failure.phase == PROFILE_FETCH:
            raise self.failure
        return deepcopy(self.profile)
