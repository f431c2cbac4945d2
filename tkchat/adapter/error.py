"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class IdentityServiceError(AdapterError):
    """Identity service request failed."""

    pass


class InvalidCredentialsError(IdentityServiceError):
    """Email and password were rejected."""

    pass


class AccountExistsError(IdentityServiceError):
    """An account already exists for the email."""

    pass


class NotificationError(AdapterError):
    """Notification could not be delivered."""

    pass
