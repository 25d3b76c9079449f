"""Tenant model: a renter tracked against a property and unit."""

from datetime import date, datetime
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Enum, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, TimestampMixin
from app.models.property import Currency


class TenantStatus(str, PyEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TenantPaymentStatus(str, PyEnum):
    """Rent standing of a tenant (not of an individual payment)"""

    PENDING = "pending"
    PAID = "paid"


class Tenant(Base, TimestampMixin):
    """
    Renter with a running rent balance.

    balance is a ledger: the monthly dues run adds monthly_rent once per
    calendar month, payment recording subtracts from it.
    last_due_processed records when the dues run last accrued rent.
    """

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    property_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    unit_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    monthly_rent: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    balance: Mapped[float | None] = mapped_column(
        Numeric(precision=15, scale=2), nullable=True, default=0
    )
    prepaid_balance: Mapped[float | None] = mapped_column(
        Numeric(precision=15, scale=2), nullable=True, default=0
    )
    total_paid: Mapped[float | None] = mapped_column(
        Numeric(precision=15, scale=2), nullable=True, default=0
    )
    rent_due_day: Mapped[int | None] = mapped_column(Integer, nullable=True, default=1)
    payment_status: Mapped[TenantPaymentStatus | None] = mapped_column(
        Enum(TenantPaymentStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    last_due_processed: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    last_payment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[TenantStatus] = mapped_column(
        Enum(TenantStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=TenantStatus.ACTIVE,
        index=True,
    )
    currency: Mapped[Currency] = mapped_column(
        Enum(Currency, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Currency.UGX,
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name='{self.first_name}', status={self.status.value})>"
