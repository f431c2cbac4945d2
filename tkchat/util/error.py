"""Errors raised while wiring the application."""


class ConfigurationError(Exception):
    """A required setting is missing or unusable.

    Attributes:
        setting: Environment variable that needs fixing
    """

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        super().__init__(f"{message} (set {setting})")
