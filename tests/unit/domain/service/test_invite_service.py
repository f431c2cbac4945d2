"""Unit tests for InviteService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tkchat.domain.error import DuplicateInviteError, NotFoundError
from tkchat.domain.repository import InviteRepository
from tkchat.domain.service import InviteService
from tkchat.domain.value import Email, InviteId, InviteStatus, InviteToken, UserId
from tests.conftest import seed_invite
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestIssue:
    """Tests for issue method."""

    @pytest.mark.asyncio
    async def test_issue_creates_pending_invite(self, unit_env):
        """Issuing should store a pending invite expiring in seven days."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        admin_id = UserId(uuid4())

        # Act
        invite = await invite_service.issue(admin_id, Email("New@Example.com"))

        # Assert
        assert invite.status == InviteStatus.PENDING
        assert invite.email.root == "new@example.com"
        assert invite.invited_by == admin_id
        assert invite.accepted_at is None
        assert invite.expires_at - invite.created_at == timedelta(days=7)
        assert await invite_repo.find_by_token(invite.token) == invite

    @pytest.mark.asyncio
    async def test_issue_generates_distinct_tokens(self, unit_env):
        """Every invite gets its own unguessable token."""
        invite_service = await unit_env.get(InviteService)
        admin_id = UserId(uuid4())

        first = await invite_service.issue(admin_id, Email("a@example.com"))
        second = await invite_service.issue(admin_id, Email("b@example.com"))

        assert first.token != second.token
        assert len(first.token.root) >= 32

    @pytest.mark.asyncio
    async def test_duplicate_active_invite_raises(self, unit_env):
        """A second invite for the same email carries the existing one."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        existing = await invite_service.issue(
            UserId(uuid4()), Email("dup@example.com")
        )

        # Act / Assert
        with pytest.raises(DuplicateInviteError) as exc_info:
            await invite_service.issue(UserId(uuid4()), Email("DUP@example.com"))

        assert exc_info.value.invite.id == existing.id

    @pytest.mark.asyncio
    async def test_expired_invite_does_not_block_reissue(self, unit_env):
        """Stale pending invites are ignored by the duplicate check."""
        invite_service = await unit_env.get(InviteService)
        await seed_invite(unit_env, "late@example.com", expires_in=timedelta(days=-1))

        invite = await invite_service.issue(UserId(uuid4()), Email("late@example.com"))

        assert invite.is_active()


class TestValidate:
    """Tests for validate method."""

    @pytest.mark.asyncio
    async def test_active_token_resolves(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(unit_env, "ok@example.com")

        invite = await invite_service.validate(seeded.token)

        assert invite is not None
        assert invite.email.root == "ok@example.com"

    @pytest.mark.asyncio
    async def test_unknown_token_is_rejected(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        assert await invite_service.validate(InviteToken(str(uuid4()))) is None

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(
            unit_env, "old@example.com", expires_in=timedelta(seconds=-1)
        )

        assert await invite_service.validate(seeded.token) is None

    @pytest.mark.asyncio
    async def test_accepted_token_is_rejected(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(
            unit_env, "used@example.com", status=InviteStatus.ACCEPTED
        )

        assert await invite_service.validate(seeded.token) is None

    @pytest.mark.asyncio
    async def test_validate_does_not_modify_invite(self, unit_env):
        """Validation is read-only, even for expired invites."""
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        seeded = await seed_invite(
            unit_env, "old@example.com", expires_in=timedelta(days=-2)
        )

        await invite_service.validate(seeded.token)

        stored = await invite_repo.find_by_id(seeded.id)
        assert stored == seeded
        assert stored.status == InviteStatus.PENDING
        assert stored.effective_status() == InviteStatus.EXPIRED


class TestClaim:
    """Tests for claim, release and record_acceptance."""

    @pytest.mark.asyncio
    async def test_claim_succeeds_once(self, unit_env):
        """Only the first claim wins."""
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(unit_env, "race@example.com")

        first = await invite_service.claim(seeded.id)
        second = await invite_service.claim(seeded.id)

        assert first is True
        assert second is False

    @pytest.mark.asyncio
    async def test_claim_expired_invite_fails(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(
            unit_env, "old@example.com", expires_in=timedelta(minutes=-5)
        )

        assert await invite_service.claim(seeded.id) is False

    @pytest.mark.asyncio
    async def test_release_returns_claimed_invite_to_pending(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(unit_env, "retry@example.com")
        await invite_service.claim(seeded.id)

        await invite_service.release(seeded.id)

        invite = await invite_service.validate(seeded.token)
        assert invite is not None
        assert invite.accepted_at is None

    @pytest.mark.asyncio
    async def test_release_keeps_completed_acceptance(self, unit_env):
        """An invite linked to an account is never put back."""
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        seeded = await seed_invite(unit_env, "done@example.com")
        user_id = UserId(uuid4())
        await invite_service.claim(seeded.id)
        await invite_service.record_acceptance(seeded.id, user_id)

        await invite_service.release(seeded.id)

        stored = await invite_repo.find_by_id(seeded.id)
        assert stored.status == InviteStatus.ACCEPTED
        assert stored.accepted_by_user_id == user_id
        assert stored.accepted_at is not None

    @pytest.mark.asyncio
    async def test_record_acceptance_accepts_other_pending_invites(self, unit_env):
        """Every pending invite for the same email is closed out with the account."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        used = await seed_invite(unit_env, "twice@example.com")
        sibling = await seed_invite(unit_env, "twice@example.com")
        stranger = await seed_invite(unit_env, "other@example.com")
        user_id = UserId(uuid4())
        await invite_service.claim(used.id)

        # Act
        await invite_service.record_acceptance(used.id, user_id)

        # Assert
        stored_sibling = await invite_repo.find_by_id(sibling.id)
        assert stored_sibling.status == InviteStatus.ACCEPTED
        assert stored_sibling.accepted_by_user_id == user_id
        assert stored_sibling.accepted_at is not None
        assert await invite_service.validate(sibling.token) is None
        stored_stranger = await invite_repo.find_by_id(stranger.id)
        assert stored_stranger.status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_record_acceptance_unknown_invite_raises(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(NotFoundError):
            await invite_service.record_acceptance(
                InviteId(uuid4()), UserId(uuid4())
            )


class TestListAndRevoke:
    """Tests for list_invites and revoke."""

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_repo = await unit_env.get(InviteRepository)
        first = await seed_invite(unit_env, "one@example.com")
        second = await seed_invite(unit_env, "two@example.com")
        await invite_repo.save(
            second.model_copy(update={"created_at": first.created_at + timedelta(seconds=1)})
        )

        invites = await invite_service.list_invites()

        assert [i.id for i in invites] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_revoke_deletes_invite(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        seeded = await seed_invite(unit_env, "gone@example.com")

        await invite_service.revoke(seeded.id)

        assert await invite_service.validate(seeded.token) is None

    @pytest.mark.asyncio
    async def test_revoke_unknown_invite_raises(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(NotFoundError):
            await invite_service.revoke(InviteId(uuid4()))
