from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from app.models.property import Currency
from app.models.tenant import TenantStatus, TenantPaymentStatus
from app.schemas.payment_schemas import PaymentResponse
from app.schemas.property_schemas import PropertyResponse, UnitResponse


class TenantResponse(BaseModel):
    """Tenant details response"""

    id: int
    first_name: str
    last_name: str | None
    email: str | None
    phone: str | None
    property_id: int | None
    unit_id: int | None
    monthly_rent: float | None
    balance: float | None
    prepaid_balance: float | None
    total_paid: float | None
    rent_due_day: int | None
    payment_status: TenantPaymentStatus | None
    last_due_processed: datetime | None
    last_payment_date: date | None
    status: TenantStatus
    currency: Currency
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TenantStatementResponse(BaseModel):
    """Tenant with payment history (newest first), property and unit"""

    tenant: TenantResponse
    payments: list[PaymentResponse]
    property: PropertyResponse | None
    unit: UnitResponse | None

    model_config = {"from_attributes": True}


class MonthlyDuesResponse(BaseModel):
    """Result of triggering the monthly dues run"""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    tenants_affected: int = Field(..., alias="tenantsAffected")
    tenants_due: int = Field(..., alias="tenantsDue")
    processed_at: datetime = Field(..., alias="processedAt")
