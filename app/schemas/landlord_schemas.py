from datetime import datetime
from pydantic import BaseModel, Field


class LandlordCreate(BaseModel):
    """Schema for creating a landlord record"""

    name: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=500)
    profile_id: str | None = Field(None, max_length=255)


class LandlordResponse(BaseModel):
    """Schema for landlord response"""

    id: int
    profile_id: str | None
    name: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
