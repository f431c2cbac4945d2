"""Invite routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from tkchat.application.usecase.invite import (
    IssueInviteRequest,
    IssueInviteResponse,
    IssueInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    RevokeInviteRequest,
    RevokeInviteUseCase,
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)
from tkchat.domain.service import JWTService, RoleService
from tkchat.interface.api.session import require_actor

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class IssueInviteAPIRequest(BaseModel):
    """API request for inviting an email."""

    email: str


@router.get("/validate", response_model=ValidateInviteResponse)
async def validate_invite(
    validate_invite_use_case: FromDishka[ValidateInviteUseCase],
    token: str = Query(default=""),
) -> ValidateInviteResponse:
    """Check whether an invite token admits registration.

    Anonymous. Returns only validity and the invited email.

    Example:
        GET /invites/validate?token=2b0c...
        {"is_valid": true, "email": "alice@example.com"}
    """
    return await validate_invite_use_case.execute(ValidateInviteRequest(token=token))


@router.post(
    "/", response_model=IssueInviteResponse, status_code=status.HTTP_201_CREATED
)
async def issue_invite(
    request: IssueInviteAPIRequest,
    issue_invite_use_case: FromDishka[IssueInviteUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> IssueInviteResponse:
    """Invite an email address.

    Responds 409 with the existing link when an active invite exists, or
    when the email already has an account.
    """
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await issue_invite_use_case.execute(
        IssueInviteRequest(actor=actor, email=request.email)
    )


@router.get("/", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> ListInvitesResponse:
    """List invites with their effective status."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    return await list_invites_use_case.execute(
        ListInvitesRequest(actor=actor, limit=limit, offset=offset)
    )


@router.delete("/{invite_id}", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_invite(
    invite_id: UUID,
    revoke_invite_use_case: FromDishka[RevokeInviteUseCase],
    jwt_service: FromDishka[JWTService],
    role_service: FromDishka[RoleService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete an invite."""
    actor = await require_actor(auth_token, jwt_service, role_service)
    await revoke_invite_use_case.execute(
        RevokeInviteRequest(actor=actor, invite_id=str(invite_id))
    )
