from datetime import date
from sqlalchemy.orm import Session
from app.models.payment import Payment
from app.repositories.base import returns_result


class PaymentRepository:
    """Repository for Payment data access"""

    def __init__(self, db: Session):
        self.db = db

    @returns_result
    def get_by_id(self, payment_id: int) -> Payment | None:
        """Get payment by ID"""
        return self.db.query(Payment).filter(Payment.id == payment_id).first()

    @returns_result
    def get_by_tenant(self, tenant_id: int) -> list[Payment]:
        """Full payment history for a tenant, newest first"""
        return (
            self.db.query(Payment)
            .filter(Payment.tenant_id == tenant_id)
            .order_by(Payment.payment_date.desc().nulls_last(), Payment.id.desc())
            .all()
        )

    @returns_result
    def get_by_tenant_through(self, tenant_id: int, through: date) -> list[Payment]:
        """Payments for a tenant dated on or before `through`, oldest first"""
        return (
            self.db.query(Payment)
            .filter(Payment.tenant_id == tenant_id, Payment.payment_date <= through)
            .order_by(Payment.payment_date.asc(), Payment.id.asc())
            .all()
        )
