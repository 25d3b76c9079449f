from datetime import datetime
from pydantic import BaseModel, Field
from app.models.role import UserRole


class ProfileResponse(BaseModel):
    """Profile details"""

    id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    role: UserRole
    is_admin: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProfileListResponse(BaseModel):
    profiles: list[ProfileResponse]
    total: int


class ProfileRoleUpdate(BaseModel):
    """Assign a new role (admin only)"""

    role: UserRole = Field(..., description="New role to assign")
