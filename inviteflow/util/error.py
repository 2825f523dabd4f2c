"""Setup-time errors."""


class UtilError(Exception):
    """Base error for wiring and configuration problems."""


class ConfigurationError(UtilError):
    """Settings are missing or contradict each other.

    Raised while building services, never while serving a request.
    """

    def __init__(self, message: str, setting: str | None = None):
        self.setting = setting
        super().__init__(f"{message} ({setting})" if setting else message)
