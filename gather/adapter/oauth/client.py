"""OAuth 2.0 authorization code gateway over HTTP.

Shared by every provider: the code-for-token exchange is a form-encoded
POST and the profile fetch a bearer-authenticated GET. Provider clients
only supply their settings.
"""

from urllib.parse import urlencode

import httpx
import logfire

from gather.adapter.error import (
    MalformedUpstreamResponseError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)
from gather.config import ProviderSettings
from gather.domain.service.auth_service import ProviderGateway
from gather.domain.value.types import AuthProvider

TOKEN_EXCHANGE = "token_exchange"
PROFILE_FETCH = "profile_fetch"


class HttpProviderGateway(ProviderGateway):
    """Provider gateway making one httpx round-trip per call.

    A fresh client is opened for each call, so nothing is shared between
    concurrent logins.
    """

    def __init__(
        self,
        provider: AuthProvider,
        settings: ProviderSettings,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize gateway.

        Args:
            provider: Provider this gateway talks to
            settings: Provider credentials and endpoints
            timeout: Per-call timeout in seconds
            transport: httpx transport override (tests use ``httpx.MockTransport``)
        """
        self.provider = provider
        self.settings = settings
        self.timeout = timeout
        self.transport = transport

    def authorization_url(self, state: str | None = None) -> str:
        params = {
            "client_id": self.settings.client_id,
            "redirect_uri": self.settings.redirect_uri,
            "response_type": "code",
        }
        if self.settings.scope:
            params["scope"] = self.settings.scope
        if state:
            params["state"] = state
        return f"{self.settings.authorize_url}?{urlencode(params)}"

    async def exchange_code_for_token(self, code: str) -> str:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "redirect_uri": self.settings.redirect_uri,
            "code": code,
        }

        with logfire.span(
            "oauth.exchange_code_for_token", provider=self.provider.value
        ):
            body = await self._request(
                TOKEN_EXCHANGE,
                "POST",
                self.settings.token_url,
                data=data,
                headers={"Accept": "application/json"},
            )

            access_token = body.get("access_token")
            if not isinstance(access_token, str) or not access_token:
                raise MalformedUpstreamResponseError(
                    "Token response has no access_token",
                    provider=self.provider.value,
                    phase=TOKEN_EXCHANGE,
                )
            return access_token

    async def fetch_profile(self, access_token: str) -> dict:
        with logfire.span("oauth.fetch_profile", provider=self.provider.value):
            return await self._request(
                PROFILE_FETCH,
                "GET",
                self.settings.userinfo_url,
                headers={"Authorization": f"Bearer {access_token}"},
            )

    async def _request(self, phase: str, method: str, url: str, **kwargs) -> dict:
        """Send one request and return its JSON object body.

        Raises:
            UpstreamUnavailableError: On timeout or any other request failure
            UpstreamRejectedError: On a non-2xx status
            MalformedUpstreamResponseError: If the body cannot be decoded or is
                not a JSON object
        """
        provider = self.provider.value

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logfire.error("Provider request timed out", provider=provider, phase=phase)
            raise UpstreamUnavailableError(
                f"Provider did not answer within {self.timeout}s",
                provider=provider,
                phase=phase,
            ) from e
        except httpx.DecodingError as e:
            logfire.error(
                "Provider response could not be decoded",
                provider=provider,
                phase=phase,
                error=str(e),
            )
            raise MalformedUpstreamResponseError(
                f"Provider response could not be decoded: {e}",
                provider=provider,
                phase=phase,
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logfire.error(
                "Provider request failed", provider=provider, phase=phase, error=str(e)
            )
            raise UpstreamUnavailableError(
                f"Provider unreachable: {e}", provider=provider, phase=phase
            ) from e

        if not response.is_success:
            logfire.error(
                "Provider rejected request",
                provider=provider,
                phase=phase,
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamRejectedError(
                response.status_code, response.text, provider=provider, phase=phase
            )

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedUpstreamResponseError(
                "Provider response is not JSON", provider=provider, phase=phase
            ) from e

        if not isinstance(body, dict):
            raise MalformedUpstreamResponseError(
                "Provider response is not a JSON object", provider=provider, phase=phase
            )
        return body
