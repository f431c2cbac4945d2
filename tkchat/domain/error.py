"""Domain layer errors.

Every error here is recoverable by the caller: correct the input, ask
for a new invite, or ask someone with more privilege.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tkchat.domain.model.invite import Invite


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class RegistrationError(DomainError):
    """Base for failures of the invite-only registration flow."""

    pass


class InviteRequiredError(RegistrationError):
    """Raised when registration is attempted without an invite token."""

    def __init__(self) -> None:
        super().__init__(
            "Registration is invite-only. Contact an administrator to receive an invite."
        )


class InvalidOrExpiredInviteError(RegistrationError):
    """Raised when a token is unknown, already used or expired.

    The three causes are deliberately indistinguishable.
    """

    def __init__(self) -> None:
        super().__init__("Invite is invalid, expired or already used.")


class InviteEmailMismatchError(RegistrationError):
    """Raised when the submitted email differs from the invited one."""

    def __init__(self) -> None:
        super().__init__("Email does not match the invited address.")


class WeakPasswordError(RegistrationError):
    """Raised when a password fails one or more complexity rules."""

    def __init__(self, unmet: list[str]):
        self.unmet = unmet
        super().__init__(
            "Password does not meet the requirements: " + ", ".join(unmet)
        )


class AlreadyRegisteredError(DomainError):
    """Raised when inviting an email that already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email is already registered: {email}")


class DuplicateInviteError(DomainError):
    """Raised when an active invite already exists for the email.

    Carries the existing invite so the caller can resend its link.
    """

    def __init__(self, invite: "Invite"):
        self.invite = invite
        super().__init__(f"Email already has a pending invite: {invite.email}")


class UnauthorizedError(DomainError):
    """Raised when the actor's capability set does not allow an action."""

    def __init__(self, action: str, user_id: str, target_id: str | None = None):
        self.action = action
        self.user_id = user_id
        self.target_id = target_id
        target = f" on {target_id}" if target_id else ""
        super().__init__(f"User {user_id} is not allowed to {action}{target}")


class AccountInactiveError(DomainError):
    """Raised when an inactive account attempts to sign in."""

    def __init__(self, user_id: str):
        super().__init__(f"Account {user_id} is inactive")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
