"""User role enum for role-based access control."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Profile roles.

    Role Hierarchy (highest to lowest):
    1. ADMIN - Moderates listings and assigns roles
    2. LANDLORD - Manages own properties, units, tenants and payments
    3. TENANT - Views own statement and payments

    SELLER and BLOCKER are listing-side variants outside the hierarchy;
    they rank below TENANT and only pass checks that name them explicitly.
    """

    ADMIN = "admin"
    LANDLORD = "landlord"
    TENANT = "tenant"
    SELLER = "seller"
    BLOCKER = "blocker"


# Higher number = more permissions
ROLE_HIERARCHY: dict[UserRole, int] = {
    UserRole.ADMIN: 3,
    UserRole.LANDLORD: 2,
    UserRole.TENANT: 1,
}


def role_rank(role: UserRole) -> int:
    return ROLE_HIERARCHY.get(role, 0)
