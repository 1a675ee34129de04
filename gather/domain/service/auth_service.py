"""Authentication domain service."""

import logfire

from gather.domain.error import UnsupportedProviderError
from gather.domain.value import AuthProvider, CanonicalProfile

from .base import Service
from .profile_normalizer import ProfileNormalizer


class ProviderGateway:
    """Generic identity provider interface.

    Implementations perform one HTTP round-trip per call with no retry and
    keep no state between calls.
    """

    provider: AuthProvider

    def authorization_url(self, state: str | None = None) -> str:
        """Build the provider consent screen URL.

        Args:
            state: Opaque value echoed back to the callback (optional)

        Returns:
            Authorization URL to redirect the user to
        """
        raise NotImplementedError

    async def exchange_code_for_token(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the provider callback

        Returns:
            Access token

        Raises:
            UpstreamRejectedError: If the provider answers non-2xx
            MalformedUpstreamResponseError: If the body has no access token
            UpstreamUnavailableError: On timeout or transport failure
        """
        raise NotImplementedError

    async def fetch_profile(self, access_token: str) -> dict:
        """Fetch the raw profile of the token's owner.

        Args:
            access_token: Token returned by ``exchange_code_for_token``

        Returns:
            Raw profile JSON object

        Raises:
            UpstreamRejectedError: If the provider answers non-2xx
            MalformedUpstreamResponseError: If the body is not a JSON object
            UpstreamUnavailableError: On timeout or transport failure
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for multi-provider authentication.

    Runs the code-for-profile round-trip against the provider's gateway and
    normalizes the result.
    """

    span_prefix = "auth_service"

    def __init__(
        self,
        gateways: dict[AuthProvider, ProviderGateway],
        normalizers: dict[AuthProvider, ProfileNormalizer],
    ) -> None:
        """Initialize auth service.

        Args:
            gateways: Map of provider to gateway implementation
            normalizers: Map of provider to profile normalizer
        """
        self.gateways = gateways
        self.normalizers = normalizers

    def authorization_url(
        self, provider: AuthProvider, state: str | None = None
    ) -> str:
        """Build the consent screen URL for a provider.

        Raises:
            UnsupportedProviderError: If provider not supported
        """
        return self._gateway(provider).authorization_url(state)

    def backfills_missing_handle(self, provider: AuthProvider) -> bool:
        """Whether returning users of this provider get a missing handle generated."""
        return self._normalizer(provider).backfill_missing_handle

    async def fetch_profile(self, provider: AuthProvider, code: str) -> CanonicalProfile:
        """Exchange a code and return the normalized profile.

        Args:
            provider: Provider that issued the code
            code: Authorization code from the callback

        Returns:
            Canonical profile

        Raises:
            UnsupportedProviderError: If provider not supported
            ProviderError: If either round-trip fails
            IdentityExtractionError: If the profile has no stable id
            RequiredProfileFieldMissingError: If the profile has no email
        """
        gateway = self._gateway(provider)
        normalizer = self._normalizer(provider)

        with self.span("fetch_profile", provider=provider.value):
            access_token = await gateway.exchange_code_for_token(code)
            payload = await gateway.fetch_profile(access_token)
            profile = normalizer.normalize(payload)
            logfire.info(
                "Provider profile fetched",
                provider=provider.value,
                stable_id=profile.stable_id,
            )
            return profile

    def _gateway(self, provider: AuthProvider) -> ProviderGateway:
        gateway = self.gateways.get(provider)
        if not gateway:
            raise UnsupportedProviderError(provider.value)
        return gateway

    def _normalizer(self, provider: AuthProvider) -> ProfileNormalizer:
        normalizer = self.normalizers.get(provider)
        if not normalizer:
            raise UnsupportedProviderError(provider.value)
        return normalizer
