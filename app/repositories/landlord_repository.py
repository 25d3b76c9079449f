from sqlalchemy.orm import Session
from app.models.landlord import Landlord
from app.repositories.base import returns_result


class LandlordRepository:
    """Repository for Landlord model operations"""

    def __init__(self, db: Session):
        self.db = db

    @returns_result
    def get_by_id(self, landlord_id: int) -> Landlord | None:
        return self.db.query(Landlord).filter(Landlord.id == landlord_id).first()

    @returns_result
    def create(self, landlord: Landlord) -> Landlord:
        self.db.add(landlord)
        self.db.commit()
        self.db.refresh(landlord)
        return landlord
