import logging

from sqlalchemy.orm import Session

from app.config import settings
from app.core.result import Result, ErrorCode, failure
from app.core.security import AuthIdentity
from app.models.profile import Profile
from app.models.role import UserRole
from app.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


def derive_names(identity: AuthIdentity) -> tuple[str, str]:
    """
    Pick display names for a new profile.

    First name: explicit first_name, else first word of full_name, else the
    email's local part, else "User". Last name: explicit last_name, else
    second word of full_name, else "".
    """
    metadata = identity.metadata
    full_name = (metadata.get("full_name") or "").split()
    email_local = identity.email.split("@")[0] if identity.email else ""

    first_name = (
        metadata.get("first_name")
        or (full_name[0] if full_name else "")
        or email_local
        or "User"
    )
    last_name = metadata.get("last_name") or (full_name[1] if len(full_name) > 1 else "")
    return first_name, last_name


class ProfileService:
    """Service for profile resolution and role management"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProfileRepository(db)

    def get_current_profile(self, identity: AuthIdentity) -> Profile | None:
        """Look up the caller's profile without creating one"""
        result = self.repo.get_by_id(identity.user_id)
        return result.unwrap_or(None)

    def ensure_profile(self, identity: AuthIdentity) -> Profile | None:
        """
        Get the caller's profile, creating it on first access.

        New profiles get the configured default role and is_admin False.

        Returns:
            The profile, or None if it could not be read or persisted
        """
        existing = self.repo.get_by_id(identity.user_id)
        if not existing.is_ok:
            logger.error("Failed to load profile %s: %s", identity.user_id, existing.error.message)
            return None
        if existing.value is not None:
            return existing.value

        first_name, last_name = derive_names(identity)
        profile = Profile(
            id=identity.user_id,
            email=identity.email,
            first_name=first_name,
            last_name=last_name,
            role=UserRole(settings.DEFAULT_PROFILE_ROLE),
            is_admin=False,
        )
        created = self.repo.create(profile)
        if not created.is_ok:
            logger.error("Failed to create profile %s: %s", identity.user_id, created.error.message)
            return None

        logger.info("Created profile %s with role %s", profile.id, profile.role.value)
        return created.value

    def list_profiles(self, role: UserRole | None = None) -> Result[list[Profile]]:
        return self.repo.list_all(role)

    def update_role(self, profile_id: str, role: UserRole, acting_profile: Profile) -> Result[Profile]:
        """
        Assign a new role to a profile (admin only, enforced by the route guard).

        The admin flag follows the role. An admin cannot change their own role.
        """
        if profile_id == acting_profile.id:
            return failure(ErrorCode.FORBIDDEN, "Cannot change your own role")

        found = self.repo.get_by_id(profile_id)
        if not found.is_ok:
            return found
        profile = found.value
        if profile is None:
            return failure(ErrorCode.NOT_FOUND, "Profile not found", profile_id=profile_id)

        profile.role = role
        profile.is_admin = role == UserRole.ADMIN
        logger.info("Profile %s role set to %s by %s", profile_id, role.value, acting_profile.id)
        return self.repo.update(profile)
