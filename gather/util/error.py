"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Raised at startup when a required setting is missing.

    ``setting`` is the environment variable that must be set, e.g.
    ``KAKAO__CLIENT_ID``.
    """

    def __init__(self, setting: str, reason: str = "must be configured"):
        self.setting = setting
        super().__init__(f"{setting} {reason}")
