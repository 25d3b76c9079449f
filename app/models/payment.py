from datetime import date
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Date, Enum, Index
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, TimestampMixin
from app.models.property import Currency


class PaymentStatus(str, PyEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class AllocationType(str, PyEnum):
    """How part of a payment was applied on a receipt"""

    FULL_PAYMENT = "full_payment"
    PARTIAL_PAYMENT = "partial_payment"
    OVERPAYMENT_CREDIT = "overpayment_credit"


class Payment(Base, TimestampMixin):
    """
    Rent payment made by a tenant.

    payment_date is the paid date; payment_period is the rent month it
    covers (YYYY-MM). external_reference holds the payment-provider id.
    """

    __tablename__ = "tenant_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[float] = mapped_column(Numeric(precision=15, scale=2), nullable=False)
    currency: Mapped[Currency] = mapped_column(
        Enum(Currency, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Currency.UGX,
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    payment_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    payment_period: Mapped[str | None] = mapped_column(String(7), nullable=True)
    status: Mapped[PaymentStatus] = mapped_column(
        Enum(PaymentStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=PaymentStatus.PENDING,
    )
    receipt_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    external_reference: Mapped[str | None] = mapped_column(String(255), nullable=True)
    overpayment_credit: Mapped[float | None] = mapped_column(
        Numeric(precision=15, scale=2), nullable=True, default=0
    )

    __table_args__ = (
        Index("ix_tenant_payments_tenant_date", "tenant_id", "payment_date"),
    )
