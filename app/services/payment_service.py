import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.result import Ok, Result, ErrorCode, failure
from app.models.payment import AllocationType, Payment
from app.models.property import Property
from app.models.tenant import Tenant
from app.models.unit import Unit
from app.repositories.payment_repository import PaymentRepository
from app.repositories.property_repository import PropertyRepository
from app.repositories.tenant_repository import TenantRepository
from app.services.statement_service import load_tenancy
from app.utils.number_to_words import amount_to_words

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class PaymentAllocation:
    """Share of a payment applied to one rent month (YYYY-MM)"""

    month: str
    amount: Decimal
    type: AllocationType


@dataclass
class PaymentReceipt:
    payment: Payment
    tenant: Tenant
    amount_in_words: str
    balance_at_payment: Decimal = ZERO
    payment_breakdown: list[PaymentAllocation] = field(default_factory=list)
    property: Property | None = None
    unit: Unit | None = None


def _money(value) -> Decimal:
    return Decimal(str(value)) if value is not None else ZERO


def next_period(period: str) -> str | None:
    """'2026-12' -> '2027-01'; None if period is not YYYY-MM"""
    try:
        start = datetime.strptime(period, "%Y-%m")
    except (TypeError, ValueError):
        return None
    if start.month == 12:
        return f"{start.year + 1:04d}-01"
    return f"{start.year:04d}-{start.month + 1:02d}"


def allocate_payment(
    amount: Decimal, monthly_rent: Decimal, paid_before: Decimal, period: str | None
) -> list[PaymentAllocation]:
    """
    Split a payment across its rent period and the following month.

    The payment first settles what is still owed for `period` (monthly rent
    less earlier payments). Anything left over is credited to the next month.
    Non-positive amounts and payments without a valid period are not split.
    """
    credit_month = next_period(period) if period else None
    if credit_month is None or amount <= ZERO:
        return []

    allocations = []
    remaining = amount
    outstanding = max(ZERO, monthly_rent - paid_before)

    if outstanding > ZERO:
        applied = min(remaining, outstanding)
        kind = (
            AllocationType.FULL_PAYMENT if applied == outstanding else AllocationType.PARTIAL_PAYMENT
        )
        allocations.append(PaymentAllocation(month=period, amount=applied, type=kind))
        remaining -= applied

    if remaining > ZERO:
        allocations.append(
            PaymentAllocation(
                month=credit_month, amount=remaining, type=AllocationType.OVERPAYMENT_CREDIT
            )
        )

    return allocations


class PaymentService:
    """Service for payment lookups and receipts"""

    def __init__(self, db: Session):
        self.db = db
        self.payment_repo = PaymentRepository(db)
        self.tenant_repo = TenantRepository(db)
        self.property_repo = PropertyRepository(db)

    def get_payment(self, payment_id: int) -> Result[Payment]:
        """Get a payment by ID; Err(NOT_FOUND) if it doesn't exist"""
        result = self.payment_repo.get_by_id(payment_id)
        if result.is_ok and result.value is None:
            return failure(ErrorCode.NOT_FOUND, "Payment not found", payment_id=payment_id)
        return result

    def build_receipt(self, payment_id: int) -> Result[PaymentReceipt]:
        """
        Receipt for a payment.

        Besides the payment and its tenant, the receipt carries:
        - amount_in_words (negative amounts are prefixed with "minus")
        - balance_at_payment: monthly rent less every payment up to and
          including this one, floored at 0
        - payment_breakdown: how this payment settles its period, with any
          excess credited to the following month
        - the tenant's property and unit (None when unlinked or unreadable)

        Returns Err(NOT_FOUND) if the payment or its tenant is missing.
        """
        payment_result = self.get_payment(payment_id)
        if not payment_result.is_ok:
            return payment_result
        payment = payment_result.value

        tenant_result = self.tenant_repo.get_by_id(payment.tenant_id)
        if not tenant_result.is_ok:
            return tenant_result
        if tenant_result.value is None:
            return failure(ErrorCode.NOT_FOUND, "Tenant not found", tenant_id=payment.tenant_id)
        tenant = tenant_result.value

        history_result = self._history_through(payment)
        if not history_result.is_ok:
            return history_result
        history = history_result.value

        amount = _money(payment.amount)
        monthly_rent = _money(tenant.monthly_rent)
        paid_through = sum((_money(p.amount) for p in history), ZERO)
        paid_before = paid_through - amount

        property, unit = load_tenancy(self.property_repo, tenant)

        return Ok(
            PaymentReceipt(
                payment=payment,
                tenant=tenant,
                amount_in_words=amount_to_words(amount),
                balance_at_payment=max(ZERO, monthly_rent - paid_through),
                payment_breakdown=allocate_payment(
                    amount, monthly_rent, paid_before, payment.payment_period
                ),
                property=property,
                unit=unit,
            )
        )

    def _history_through(self, payment: Payment) -> Result[list[Payment]]:
        """
        The tenant's payments up to and including this one, oldest first.

        Payments sharing this payment's date count as earlier only when they
        were recorded first. An undated payment stands alone.
        """
        if payment.payment_date is None:
            return Ok([payment])

        result = self.payment_repo.get_by_tenant_through(payment.tenant_id, payment.payment_date)
        if not result.is_ok:
            logger.error(
                "Payment history lookup failed for receipt %s: %s",
                payment.id,
                result.error.message,
                extra={"payment_id": payment.id},
            )
            return result

        return Ok(
            [
                p
                for p in result.value
                if p.payment_date < payment.payment_date or p.id <= payment.id
            ]
        )
