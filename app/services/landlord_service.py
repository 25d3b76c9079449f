from sqlalchemy.orm import Session
from app.core.result import Result, ErrorCode, failure
from app.models.landlord import Landlord
from app.repositories.landlord_repository import LandlordRepository
from app.schemas.landlord_schemas import LandlordCreate


class LandlordService:
    """Service for landlord records"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = LandlordRepository(db)

    def get_landlord(self, landlord_id: int) -> Result[Landlord]:
        result = self.repo.get_by_id(landlord_id)
        if result.is_ok and result.value is None:
            return failure(ErrorCode.NOT_FOUND, "Landlord not found", landlord_id=landlord_id)
        return result

    def create_landlord(self, data: LandlordCreate) -> Result[Landlord]:
        landlord = Landlord(
            name=data.name,
            email=data.email,
            phone=data.phone,
            address=data.address,
            profile_id=data.profile_id,
        )
        return self.repo.create(landlord)
