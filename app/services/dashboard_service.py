from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.result import Ok, Result
from app.models.property import PropertyStatus
from app.models.unit import UnitStatus
from app.repositories.property_repository import PropertyRepository
from app.repositories.tenant_repository import TenantRepository


@dataclass(frozen=True)
class DashboardStats:
    """Portfolio-wide figures for the landlord dashboard"""

    total_properties: int
    approved_properties: int
    total_units: int
    occupied_units: int
    vacant_units: int
    maintenance_units: int
    occupancy_rate: int
    rent_collected: Decimal
    outstanding_balance: Decimal
    delayed_payments: int


def occupancy_rate(occupied: int, total: int) -> int:
    """Occupied share of units as a whole percentage, halves rounded up"""
    if total <= 0:
        return 0
    return (200 * occupied + total) // (2 * total)


class DashboardService:
    """Service computing dashboard statistics"""

    def __init__(self, db: Session):
        self.db = db
        self.property_repo = PropertyRepository(db)
        self.tenant_repo = TenantRepository(db)

    def get_stats(self) -> Result[DashboardStats]:
        """
        Property, unit and tenant aggregates.

        Rent and balance figures cover ACTIVE tenants only; a tenant with a
        positive balance counts as a delayed payment. Any failed query is
        returned as its Err.
        """
        total_result = self.property_repo.count()
        if not total_result.is_ok:
            return total_result

        approved_result = self.property_repo.count(PropertyStatus.APPROVED)
        if not approved_result.is_ok:
            return approved_result

        units_result = self.property_repo.unit_status_counts()
        if not units_result.is_ok:
            return units_result
        units = units_result.value

        totals_result = self.tenant_repo.active_totals()
        if not totals_result.is_ok:
            return totals_result
        outstanding, collected, delayed = totals_result.value

        total_units = sum(units.values())
        occupied = units.get(UnitStatus.OCCUPIED, 0)

        return Ok(
            DashboardStats(
                total_properties=total_result.value,
                approved_properties=approved_result.value,
                total_units=total_units,
                occupied_units=occupied,
                vacant_units=units.get(UnitStatus.VACANT, 0),
                maintenance_units=units.get(UnitStatus.UNDER_MAINTENANCE, 0),
                occupancy_rate=occupancy_rate(occupied, total_units),
                rent_collected=collected,
                outstanding_balance=outstanding,
                delayed_payments=delayed,
            )
        )
