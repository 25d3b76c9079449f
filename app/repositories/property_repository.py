from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.property import Property, PropertyStatus
from app.models.unit import Unit, UnitStatus
from app.repositories.base import returns_result


class PropertyRepository:
    """Repository for Property and Unit lookups"""

    def __init__(self, db: Session):
        self.db = db

    @returns_result
    def get_by_id(self, property_id: int) -> Property | None:
        return self.db.query(Property).filter(Property.id == property_id).first()

    @returns_result
    def get_unit_by_id(self, unit_id: int) -> Unit | None:
        return self.db.query(Unit).filter(Unit.id == unit_id).first()

    @returns_result
    def list_all(self, status: PropertyStatus | None = None) -> list[Property]:
        """List properties newest first, optionally filtered by moderation status"""
        query = self.db.query(Property)
        if status is not None:
            query = query.filter(Property.status == status)
        return query.order_by(Property.created_at.desc(), Property.id.desc()).all()

    @returns_result
    def update(self, property: Property) -> Property:
        self.db.commit()
        self.db.refresh(property)
        return property

    @returns_result
    def count(self, status: PropertyStatus | None = None) -> int:
        query = self.db.query(func.count(Property.id))
        if status is not None:
            query = query.filter(Property.status == status)
        return query.scalar()

    @returns_result
    def unit_status_counts(self) -> dict[UnitStatus, int]:
        """Number of units per status; statuses without units are absent"""
        rows = self.db.query(Unit.status, func.count(Unit.id)).group_by(Unit.status).all()
        return {status: count for status, count in rows}

    @returns_result
    def create(self, property: Property) -> Property:
        self.db.add(property)
        self.db.commit()
        self.db.refresh(property)
        return property
