from sqlalchemy.orm import Session
from app.models.profile import Profile
from app.models.role import UserRole
from app.repositories.base import returns_result


class ProfileRepository:
    """Repository for Profile model operations"""

    def __init__(self, db: Session):
        self.db = db

    @returns_result
    def get_by_id(self, profile_id: str) -> Profile | None:
        """Get profile by identity provider user id"""
        return self.db.query(Profile).filter(Profile.id == profile_id).first()

    @returns_result
    def list_all(self, role: UserRole | None = None) -> list[Profile]:
        """List profiles, newest first, optionally filtered by role"""
        query = self.db.query(Profile)
        if role is not None:
            query = query.filter(Profile.role == role)
        return query.order_by(Profile.created_at.desc()).all()

    @returns_result
    def create(self, profile: Profile) -> Profile:
        """Insert a new profile"""
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    @returns_result
    def update(self, profile: Profile) -> Profile:
        """Persist changes to an existing profile"""
        self.db.commit()
        self.db.refresh(profile)
        return profile
