"""Authorization policy.

One decision table, consulted both when rendering the admin console
(per-row permission flags) and by the services that mutate roles and
accounts. Role sets are capability sets: owner is not derived from
admin by hierarchy, the rules below simply grant owners more.
"""

from collections.abc import Iterable
from enum import Enum

from tkchat.domain.error import UnauthorizedError
from tkchat.domain.value import Actor, AppRole, ProfileRole, UserId


class Action(str, Enum):
    """Actions performed by one user on another."""

    CHANGE_ROLE = "change_role"
    DELETE_USER = "delete_user"
    SET_ACCOUNT_STATUS = "set_account_status"


class Capability(str, Enum):
    """Target-less console capabilities."""

    MANAGE_INVITES = "manage_invites"
    MANAGE_USERS = "manage_users"
    MANAGE_BUG_REPORTS = "manage_bug_reports"


_ELEVATED = frozenset({AppRole.ADMIN, AppRole.OWNER})


def is_elevated(roles: Iterable[AppRole]) -> bool:
    """Whether a role set contains admin or owner."""
    return not _ELEVATED.isdisjoint(roles)


def can_act_on(
    actor_roles: Iterable[AppRole],
    actor_id: UserId,
    target_id: UserId,
    target_roles: Iterable[AppRole],
    action: Action,
) -> bool:
    """Decide whether an actor may perform an action on a target user.

    Deny by default. Nobody acts on themselves; owners act on anyone
    else; admins may change role or status of plain users only and never
    delete.

    Args:
        actor_roles: Role set of the acting user
        actor_id: Acting user's ID
        target_id: Target user's ID
        target_roles: Role set of the target user
        action: Requested action

    Returns:
        True if allowed
    """
    actor = frozenset(actor_roles)
    target = frozenset(target_roles)

    if actor_id == target_id:
        return False

    if AppRole.OWNER in actor:
        return True

    if AppRole.ADMIN in actor:
        if action == Action.DELETE_USER:
            return False
        return not is_elevated(target)

    return False


def has_capability(actor_roles: Iterable[AppRole], capability: Capability) -> bool:
    """Whether a role set grants a console capability.

    Every capability currently belongs to admins and owners.
    """
    _ = capability
    return is_elevated(actor_roles)


def can_assign_role(actor_roles: Iterable[AppRole], role: AppRole) -> bool:
    """Whether an actor may hand out a given role.

    Only owners mint owners.
    """
    actor = frozenset(actor_roles)
    if AppRole.OWNER in actor:
        return True
    if AppRole.ADMIN in actor:
        return role in (AppRole.USER, AppRole.ADMIN)
    return False


def profile_role_for(roles: Iterable[AppRole]) -> ProfileRole:
    """Denormalized label cached on the profile row."""
    return ProfileRole.ADMIN if is_elevated(roles) else ProfileRole.USER


def require_capability(actor: Actor, capability: Capability) -> None:
    """Raise unless the actor holds a console capability.

    Raises:
        UnauthorizedError: If the capability is missing
    """
    if not has_capability(actor.roles, capability):
        raise UnauthorizedError(capability.value, str(actor.user_id))
