"""
Role checks that return an explicit allow/deny decision.

Guards in app.dependencies evaluate these before any handler logic runs and
turn a deny into ForbiddenException(reason).
"""

from dataclasses import dataclass
from typing import Iterable

from app.models.profile import Profile
from app.models.role import UserRole, ROLE_HIERARCHY, role_rank


@dataclass(frozen=True)
class AuthorizationDecision:
    allowed: bool
    reason: str = ""

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "AuthorizationDecision":
        return cls(allowed=False, reason=reason)


def effective_role(profile: Profile) -> UserRole:
    """The admin flag outranks whatever role the profile carries"""
    if profile.is_admin:
        return UserRole.ADMIN
    return profile.role


def has_permission(user_role: UserRole, required_role: UserRole) -> bool:
    """
    Check if user_role meets or exceeds required_role.

    Role hierarchy: ADMIN (3) > LANDLORD (2) > TENANT (1). Roles outside
    the hierarchy only satisfy a requirement for that exact role.
    """
    if required_role not in ROLE_HIERARCHY:
        return user_role == required_role
    return role_rank(user_role) >= role_rank(required_role)


def authorize_role(profile: Profile | None, required_role: UserRole) -> AuthorizationDecision:
    if profile is None:
        return AuthorizationDecision.deny("No profile for the authenticated user")

    role = effective_role(profile)
    if has_permission(role, required_role):
        return AuthorizationDecision.allow()
    return AuthorizationDecision.deny(
        f"Role '{role.value}' does not have '{required_role.value}' permissions"
    )


def authorize_any(profile: Profile | None, allowed_roles: Iterable[UserRole]) -> AuthorizationDecision:
    """Allow-list check: the profile's role must be one of allowed_roles"""
    if profile is None:
        return AuthorizationDecision.deny("No profile for the authenticated user")

    allowed = set(allowed_roles)
    role = effective_role(profile)
    if role in allowed:
        return AuthorizationDecision.allow()
    names = ", ".join(sorted(r.value for r in allowed))
    return AuthorizationDecision.deny(f"Role '{role.value}' is not one of: {names}")
