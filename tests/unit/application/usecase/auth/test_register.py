"""Unit tests for RegisterUseCase."""

from datetime import timedelta

import pytest

from tkchat.adapter.error import IdentityServiceError
from tkchat.adapter.identity.client import MockIdentityClient
from tkchat.application.usecase.auth import RegisterRequest, RegisterUseCase
from tkchat.domain.error import (
    InvalidOrExpiredInviteError,
    InviteEmailMismatchError,
    InviteRequiredError,
    WeakPasswordError,
)
from tkchat.domain.repository import InviteRepository, ProfileRepository
from tkchat.domain.service import InviteService, JWTService, RoleService
from tkchat.domain.value import AppRole, InviteStatus
from tests.conftest import STRONG_PASSWORD, seed_invite
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _request(token: str | None, **overrides) -> RegisterRequest:
    fields = {
        "token": token,
        "password": STRONG_PASSWORD,
        "confirm_password": STRONG_PASSWORD,
        "full_name": "Maria Silva",
        "phone": "+55 11 99999-0000",
    }
    fields.update(overrides)
    return RegisterRequest(**fields)


class TestRegisterSuccess:
    """Tests for a successful registration."""

    @pytest.mark.asyncio
    async def test_register_creates_account_profile_and_grant(self, unit_env):
        """A valid invite yields an account holding exactly the user role."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        identity = await unit_env.get(MockIdentityClient)
        role_service = await unit_env.get(RoleService)
        invite = await seed_invite(unit_env, "maria@example.com")

        # Act
        response = await use_case.execute(_request(invite.token.root))

        # Assert
        account = response.account
        assert account.email == "maria@example.com"
        assert account.full_name == "Maria Silva"
        assert account.phone == "+55 11 99999-0000"
        assert account.roles == [AppRole.USER]
        assert account.is_admin is False
        assert "maria@example.com" in identity.accounts
        assert identity.metadata[identity.accounts["maria@example.com"][0].id] == {
            "full_name": "Maria Silva",
            "phone": "+55 11 99999-0000",
        }
        assert await role_service.roles_of(
            identity.accounts["maria@example.com"][0].id
        ) == {AppRole.USER}

    @pytest.mark.asyncio
    async def test_register_consumes_invite(self, unit_env):
        """The invite is accepted and linked to the new account."""
        use_case = await unit_env.get(RegisterUseCase)
        invite_repo = await unit_env.get(InviteRepository)
        invite = await seed_invite(unit_env, "maria@example.com")

        response = await use_case.execute(_request(invite.token.root))

        stored = await invite_repo.find_by_id(invite.id)
        assert stored.status == InviteStatus.ACCEPTED
        assert stored.accepted_at is not None
        assert str(stored.accepted_by_user_id) == response.account.user_id

    @pytest.mark.asyncio
    async def test_register_returns_session_token(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)
        invite = await seed_invite(unit_env, "maria@example.com")

        response = await use_case.execute(_request(invite.token.root))

        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.account.user_id
        assert payload.email == "maria@example.com"

    @pytest.mark.asyncio
    async def test_matching_email_in_other_case_is_accepted(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        invite = await seed_invite(unit_env, "maria@example.com")

        response = await use_case.execute(
            _request(invite.token.root, email=" Maria@Example.com ")
        )

        assert response.account.email == "maria@example.com"

    @pytest.mark.asyncio
    async def test_second_registration_with_same_token_fails(self, unit_env):
        """A token admits exactly one account."""
        use_case = await unit_env.get(RegisterUseCase)
        invite = await seed_invite(unit_env, "maria@example.com")
        await use_case.execute(_request(invite.token.root))

        with pytest.raises(InvalidOrExpiredInviteError):
            await use_case.execute(_request(invite.token.root))


class TestRegisterRejections:
    """Tests for rejected registrations."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "   "])
    async def test_missing_token_is_invite_required(self, unit_env, token):
        use_case = await unit_env.get(RegisterUseCase)
        identity = await unit_env.get(MockIdentityClient)

        with pytest.raises(InviteRequiredError):
            await use_case.execute(_request(token, email="who@example.com"))

        assert identity.sign_up_calls == []

    @pytest.mark.asyncio
    async def test_unknown_token_is_rejected(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(InvalidOrExpiredInviteError):
            await use_case.execute(_request("not-a-real-token"))

    @pytest.mark.asyncio
    async def test_expired_invite_is_rejected(self, unit_env):
        """Expired invites fail and stay pending in storage."""
        use_case = await unit_env.get(RegisterUseCase)
        invite_repo = await unit_env.get(InviteRepository)
        invite = await seed_invite(
            unit_env, "late@example.com", expires_in=timedelta(hours=-1)
        )

        with pytest.raises(InvalidOrExpiredInviteError):
            await use_case.execute(_request(invite.token.root))

        stored = await invite_repo.find_by_id(invite.id)
        assert stored.status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_email_mismatch_is_rejected(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        identity = await unit_env.get(MockIdentityClient)
        invite = await seed_invite(unit_env, "maria@example.com")

        with pytest.raises(InviteEmailMismatchError):
            await use_case.execute(
                _request(invite.token.root, email="someone.else@example.com")
            )

        assert identity.sign_up_calls == []

    @pytest.mark.asyncio
    async def test_weak_password_never_reaches_identity_service(self, unit_env):
        """Policy failures list every unmet rule and leave the invite usable."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        identity = await unit_env.get(MockIdentityClient)
        invite_service = await unit_env.get(InviteService)
        invite = await seed_invite(unit_env, "maria@example.com")

        # Act
        with pytest.raises(WeakPasswordError) as exc_info:
            await use_case.execute(
                _request(invite.token.root, password="short", confirm_password="short")
            )

        # Assert
        assert exc_info.value.unmet == [
            "At least 8 characters",
            "Uppercase letter (A-Z)",
            "Number (0-9)",
            "Special character (!@#$%^&*)",
        ]
        assert identity.sign_up_calls == []
        assert await invite_service.validate(invite.token) is not None

    @pytest.mark.asyncio
    async def test_confirmation_mismatch_is_reported(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        invite = await seed_invite(unit_env, "maria@example.com")

        with pytest.raises(WeakPasswordError) as exc_info:
            await use_case.execute(
                _request(invite.token.root, confirm_password="Different1!")
            )

        assert exc_info.value.unmet == ["Passwords match"]

    @pytest.mark.asyncio
    async def test_identity_failure_leaves_invite_pending(self, unit_env):
        """The claim is released so the invitee can retry."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        identity = await unit_env.get(MockIdentityClient)
        invite_service = await unit_env.get(InviteService)
        profile_repo = await unit_env.get(ProfileRepository)
        invite = await seed_invite(unit_env, "maria@example.com")
        identity.fail_sign_up = True

        # Act
        with pytest.raises(IdentityServiceError):
            await use_case.execute(_request(invite.token.root))

        # Assert
        assert identity.sign_up_calls == ["maria@example.com"]
        assert await invite_service.validate(invite.token) is not None
        assert await profile_repo.list_all() == []

        # Retry once the identity service recovers
        identity.fail_sign_up = False
        response = await use_case.execute(_request(invite.token.root))
        assert response.account.email == "maria@example.com"
