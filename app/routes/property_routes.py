from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_any_role
from app.models.profile import Profile
from app.models.role import UserRole
from app.services.property_service import PropertyService
from app.schemas.property_schemas import PropertyCreate, PropertyResponse

router = APIRouter()


@router.post("/", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def submit_listing(
    data: PropertyCreate,
    profile: Profile = Depends(
        require_any_role(UserRole.ADMIN, UserRole.LANDLORD, UserRole.SELLER)
    ),
    db: Session = Depends(get_db),
):
    """
    Submit a property listing for moderation.

    - Open to admins, landlords and sellers
    - The listing starts as pending until an admin approves or rejects it
    - Land listings take no bedrooms/bathrooms; other types require both
    """
    service = PropertyService(db)
    return service.submit_listing(data, profile).unwrap()
