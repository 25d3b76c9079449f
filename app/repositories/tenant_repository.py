"""Repository for Tenant model operations."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import case, update, or_, func
from sqlalchemy.orm import Session

from app.models.tenant import Tenant, TenantStatus, TenantPaymentStatus
from app.repositories.base import returns_result


class TenantRepository:
    """Repository for Tenant model operations"""

    def __init__(self, db: Session):
        self.db = db

    @returns_result
    def get_by_id(self, tenant_id: int) -> Tenant | None:
        """
        Get tenant by ID.

        Args:
            tenant_id: Tenant ID

        Returns:
            Tenant object or None if not found
        """
        return self.db.query(Tenant).filter(Tenant.id == tenant_id).first()

    @returns_result
    def get_active(self) -> list[Tenant]:
        """
        Get all tenants with status ACTIVE.

        Returns:
            List of active Tenant objects ordered by ID
        """
        return (
            self.db.query(Tenant)
            .filter(Tenant.status == TenantStatus.ACTIVE)
            .order_by(Tenant.id)
            .all()
        )

    @returns_result
    def accrue_monthly_due(
        self,
        tenant_id: int,
        processed_at: datetime,
        period_start: datetime,
        next_period_start: datetime,
    ) -> bool:
        """
        Add one month of rent to a tenant's balance and commit.

        The UPDATE only matches while last_due_processed lies outside
        [period_start, next_period_start), so a tenant already accrued for
        the period by another run is left untouched.

        Args:
            tenant_id: Tenant ID
            processed_at: Timestamp stored in last_due_processed
            period_start: First instant of the current month
            next_period_start: First instant of the following month

        Returns:
            True if the row was updated, False if it was already accrued
        """
        stmt = (
            update(Tenant)
            .where(
                Tenant.id == tenant_id,
                or_(
                    Tenant.last_due_processed.is_(None),
                    Tenant.last_due_processed < period_start,
                    Tenant.last_due_processed >= next_period_start,
                ),
            )
            .values(
                balance=func.coalesce(Tenant.balance, 0) + func.coalesce(Tenant.monthly_rent, 0),
                payment_status=TenantPaymentStatus.PENDING,
                last_due_processed=processed_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount == 1

    @returns_result
    def active_totals(self) -> tuple[Decimal, Decimal, int]:
        """
        Aggregate figures over ACTIVE tenants.

        Returns:
            (sum of balances, sum of total_paid, tenants with a positive balance)
        """
        outstanding, collected, delayed = (
            self.db.query(
                func.coalesce(func.sum(Tenant.balance), 0),
                func.coalesce(func.sum(Tenant.total_paid), 0),
                func.count(case((Tenant.balance > 0, 1))),
            )
            .filter(Tenant.status == TenantStatus.ACTIVE)
            .one()
        )
        return Decimal(str(outstanding)), Decimal(str(collected)), delayed
