from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_role
from app.models.profile import Profile
from app.models.property import PropertyStatus
from app.models.role import UserRole
from app.services.profile_service import ProfileService
from app.services.property_service import PropertyService
from app.schemas.profile_schemas import ProfileResponse, ProfileListResponse, ProfileRoleUpdate
from app.schemas.property_schemas import (
    PropertyResponse,
    PropertyListResponse,
    PropertyStatusUpdate,
)

router = APIRouter()


@router.get("/users", response_model=ProfileListResponse)
def list_users(
    role: Optional[UserRole] = Query(None, description="Filter by role"),
    admin: Profile = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    """List user profiles, newest first"""
    service = ProfileService(db)
    profiles = service.list_profiles(role).unwrap()
    return ProfileListResponse(profiles=profiles, total=len(profiles))


@router.patch("/users/{profile_id}/role", response_model=ProfileResponse)
def update_user_role(
    profile_id: str,
    role_update: ProfileRoleUpdate,
    admin: Profile = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    """
    Assign a role to a user.

    - **Requires ADMIN**
    - Cannot change your own role
    """
    service = ProfileService(db)
    return service.update_role(profile_id, role_update.role, admin).unwrap()


@router.get("/properties", response_model=PropertyListResponse)
def list_properties(
    status: Optional[PropertyStatus] = Query(None, description="Filter by moderation status"),
    admin: Profile = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    """List property listings for moderation"""
    service = PropertyService(db)
    properties = service.list_properties(status).unwrap()
    return PropertyListResponse(properties=properties, total=len(properties))


@router.patch("/properties/{property_id}/status", response_model=PropertyResponse)
def moderate_property(
    property_id: int,
    status_update: PropertyStatusUpdate,
    admin: Profile = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    """Approve or reject a property listing"""
    service = PropertyService(db)
    return service.set_status(property_id, status_update.status).unwrap()
