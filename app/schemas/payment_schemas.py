from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel
from app.models.payment import AllocationType, PaymentStatus
from app.models.property import Currency
from app.schemas.property_schemas import PropertyResponse, UnitResponse


class PaymentResponse(BaseModel):
    """Schema for payment response"""

    model_config = {"from_attributes": True}

    id: int
    tenant_id: int
    amount: float
    currency: Currency
    due_date: Optional[date]
    payment_date: Optional[date]
    payment_method: Optional[str]
    payment_period: Optional[str]
    status: PaymentStatus
    receipt_number: Optional[str]
    external_reference: Optional[str]
    overpayment_credit: Optional[float]
    created_at: datetime
    updated_at: datetime


class ReceiptTenant(BaseModel):
    """Tenant fields printed on a receipt"""

    model_config = {"from_attributes": True}

    id: int
    first_name: str
    last_name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    currency: Currency
    monthly_rent: Optional[float]
    balance: Optional[float]
    prepaid_balance: Optional[float]
    property_id: Optional[int]
    unit_id: Optional[int]


class PaymentAllocationResponse(BaseModel):
    """Share of a payment applied to one rent month"""

    model_config = {"from_attributes": True}

    month: str
    amount: float
    type: AllocationType


class PaymentReceiptResponse(BaseModel):
    """Schema for a printable payment receipt"""

    model_config = {"from_attributes": True}

    payment: PaymentResponse
    tenant: ReceiptTenant
    amount_in_words: str
    balance_at_payment: float
    payment_breakdown: list[PaymentAllocationResponse]
    property: PropertyResponse | None
    unit: UnitResponse | None
