"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class IdentityExtractionError(DomainError):
    """Raised when a provider profile carries no stable user id."""

    def __init__(self, provider: str, field: str):
        self.provider = provider
        self.field = field
        super().__init__(f"{provider} profile has no '{field}' identifier")


class RequiredProfileFieldMissingError(DomainError):
    """Raised when a provider profile lacks a field the provider mandates."""

    def __init__(self, provider: str, field: str):
        self.provider = provider
        self.field = field
        super().__init__(f"{provider} profile is missing required field '{field}'")


class DuplicateHandleError(DomainError):
    """Raised when a handle is already taken by another user."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"Handle already taken: {handle}")


class DuplicateStableIdError(DomainError):
    """Raised when inserting a user whose stable id already exists."""

    def __init__(self, stable_id: str):
        self.stable_id = stable_id
        super().__init__(f"User already exists: {stable_id}")


class RecordNotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CredentialMismatchError(DomainError):
    """Raised when a secret does not match the stored hash."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__("Invalid handle or password")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to act on an account they don't own."""

    def __init__(self, resource: str, resource_id: str, requester: str):
        self.resource = resource
        self.resource_id = resource_id
        self.requester = requester
        super().__init__(
            f"User {requester} is not authorized to modify {resource} {resource_id}"
        )


class UnsupportedProviderError(DomainError):
    """Raised for a provider with no configured gateway."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class ProviderAccountConflictError(DomainError):
    """Raised when a stable id already belongs to another provider's account."""

    def __init__(self, stable_id: str, account_provider: str, login_provider: str):
        self.stable_id = stable_id
        self.account_provider = account_provider
        self.login_provider = login_provider
        super().__init__(
            f"Account {stable_id} is a {account_provider} account, "
            f"not {login_provider}"
        )
