from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_role
from app.models.profile import Profile
from app.models.role import UserRole
from app.services.landlord_service import LandlordService
from app.schemas.landlord_schemas import LandlordCreate, LandlordResponse

router = APIRouter()


@router.post("/", response_model=LandlordResponse, status_code=status.HTTP_201_CREATED)
def create_landlord(
    data: LandlordCreate,
    profile: Profile = Depends(require_role(UserRole.LANDLORD)),
    db: Session = Depends(get_db),
):
    """Create a landlord record"""
    service = LandlordService(db)
    return service.create_landlord(data).unwrap()


@router.get("/{landlord_id}", response_model=LandlordResponse)
def get_landlord(
    landlord_id: int,
    profile: Profile = Depends(require_role(UserRole.LANDLORD)),
    db: Session = Depends(get_db),
):
    """Get landlord details"""
    service = LandlordService(db)
    return service.get_landlord(landlord_id).unwrap()
