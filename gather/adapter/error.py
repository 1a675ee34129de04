"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External identity provider error.

    Carries which provider failed and in which phase of the flow
    (``token_exchange`` or ``profile_fetch``).
    """

    def __init__(
        self, message: str, provider: str | None = None, phase: str | None = None
    ):
        self.provider = provider
        self.phase = phase
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.provider and self.phase:
            return f"[{self.provider}:{self.phase}] {message}"
        return message


class UpstreamRejectedError(ProviderError):
    """Provider answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        provider: str | None = None,
        phase: str | None = None,
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Provider rejected request with status {status_code}: {body}",
            provider=provider,
            phase=phase,
        )


class MalformedUpstreamResponseError(ProviderError):
    """Provider response body is absent, unparsable or lacks expected fields."""

    pass


class UpstreamUnavailableError(ProviderError):
    """Provider could not be reached or did not answer in time."""

    pass
