"""Invite use cases."""

from tkchat.application.usecase.invite.issue_invite import (
    IssueInviteRequest,
    IssueInviteResponse,
    IssueInviteUseCase,
)
from tkchat.application.usecase.invite.list_invites import (
    InviteItem,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from tkchat.application.usecase.invite.revoke_invite import (
    RevokeInviteRequest,
    RevokeInviteUseCase,
)
from tkchat.application.usecase.invite.validate_invite import (
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)

__all__ = [
    "InviteItem",
    "IssueInviteRequest",
    "IssueInviteResponse",
    "IssueInviteUseCase",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "RevokeInviteRequest",
    "RevokeInviteUseCase",
    "ValidateInviteRequest",
    "ValidateInviteResponse",
    "ValidateInviteUseCase",
]
