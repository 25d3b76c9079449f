from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator
from app.models.property import Currency, ListingType, PropertyStatus, PropertyType
from app.models.unit import UnitStatus


class PropertyResponse(BaseModel):
    """Property listing details"""

    model_config = {"from_attributes": True}

    id: int
    landlord_id: int | None
    title: str
    description: str | None
    property_type: PropertyType
    listing_type: ListingType
    address: str | None
    city: str | None
    state: str | None
    zip_code: str | None
    bedrooms: int | None
    bathrooms: int | None
    square_feet: int | None
    rent_amount: float | None
    sale_price: float | None
    deposit_amount: float | None
    currency: Currency
    parking: bool
    furnished: bool
    status: PropertyStatus
    amenities: list[str] | None
    images: list[str] | None
    created_at: datetime
    updated_at: datetime


class PropertyCreate(BaseModel):
    """Schema for submitting a listing"""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    property_type: PropertyType = PropertyType.HOUSE
    listing_type: ListingType = ListingType.RENT
    landlord_id: int | None = None
    address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    bedrooms: int | None = Field(None, ge=0, le=50)
    bathrooms: int | None = Field(None, ge=0, le=50)
    square_feet: int | None = Field(None, ge=0, le=10_000_000)
    rent_amount: Decimal | None = Field(None, ge=0, le=1_000_000_000)
    sale_price: Decimal | None = Field(None, ge=0, le=1_000_000_000)
    deposit_amount: Decimal | None = Field(None, ge=0, le=1_000_000_000)
    currency: Currency = Currency.UGX
    parking: bool = False
    furnished: bool = False
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_rooms(self):
        if self.property_type == PropertyType.LAND:
            if self.bedrooms is not None or self.bathrooms is not None:
                raise ValueError("Land listings cannot have bedrooms or bathrooms")
        elif self.bedrooms is None or self.bathrooms is None:
            raise ValueError("Bedrooms and bathrooms are required for non-land properties")
        return self


class PropertyListResponse(BaseModel):
    properties: list[PropertyResponse]
    total: int


class PropertyStatusUpdate(BaseModel):
    """Moderation decision for a listing"""

    status: PropertyStatus = Field(..., description="approved, rejected or pending")


class UnitResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    property_id: int
    unit_number: str
    bedrooms: int | None
    rent_amount: float | None
    status: UnitStatus
    created_at: datetime
    updated_at: datetime
