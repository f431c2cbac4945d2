"""Invite link construction."""

from urllib.parse import quote

from tkchat.domain.model.invite import Invite


def build_invite_url(frontend_url: str, invite: Invite) -> str:
    """Registration link carrying the token and the invited email."""
    return (
        f"{frontend_url}/register?token={invite.token.root}"
        f"&email={quote(invite.email.root, safe='')}"
    )
