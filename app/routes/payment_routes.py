from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_role
from app.models.profile import Profile
from app.models.role import UserRole
from app.services.payment_service import PaymentService
from app.schemas.payment_schemas import PaymentResponse, PaymentReceiptResponse

router = APIRouter()


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(
    payment_id: int,
    profile: Profile = Depends(require_role(UserRole.LANDLORD)),
    db: Session = Depends(get_db),
):
    """
    Get a specific payment by ID.

    - Returns 404 if the payment doesn't exist
    - Requires LANDLORD or higher
    """
    service = PaymentService(db)
    return service.get_payment(payment_id).unwrap()


@router.get("/{payment_id}/receipt", response_model=PaymentReceiptResponse)
def get_payment_receipt(
    payment_id: int,
    profile: Profile = Depends(require_role(UserRole.LANDLORD)),
    db: Session = Depends(get_db),
):
    """
    Get a printable receipt for a payment.

    - Includes the tenant, its property and unit, and the amount in words
    - balance_at_payment and payment_breakdown show how the payment settled
      its rent period and what was credited to the next month
    - Returns 404 if the payment or its tenant doesn't exist
    """
    service = PaymentService(db)
    receipt = service.build_receipt(payment_id).unwrap()
    return PaymentReceiptResponse.model_validate(receipt)
