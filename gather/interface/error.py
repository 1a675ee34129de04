"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class MissingCredentialsError(InterfaceError):
    """Request carries no usable bearer token."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
