import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.result import Ok, Result, ErrorCode, failure
from app.models.tenant import Tenant
from app.models.payment import Payment
from app.models.property import Property
from app.models.unit import Unit
from app.repositories.tenant_repository import TenantRepository
from app.repositories.payment_repository import PaymentRepository
from app.repositories.property_repository import PropertyRepository

logger = logging.getLogger(__name__)


@dataclass
class TenantStatement:
    """Consolidated read-only view of a tenant"""

    tenant: Tenant
    payments: list[Payment]
    property: Property | None
    unit: Unit | None


class StatementService:
    """Service that assembles tenant statements"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)
        self.payment_repo = PaymentRepository(db)
        self.property_repo = PropertyRepository(db)

    def assemble(self, tenant_id: int) -> Result[TenantStatement]:
        """
        Build the statement for a tenant.

        Only the tenant lookup is mandatory. Payment history degrades to an
        empty list and the property/unit to None when their lookups fail.

        Raises nothing; returns Err(NOT_FOUND) if the tenant is missing or
        cannot be read.
        """
        tenant_result = self.tenant_repo.get_by_id(tenant_id)
        if not tenant_result.is_ok or tenant_result.value is None:
            return failure(ErrorCode.NOT_FOUND, "Tenant not found", tenant_id=tenant_id)

        tenant = tenant_result.value

        payments_result = self.payment_repo.get_by_tenant(tenant_id)
        if payments_result.is_ok:
            payments = payments_result.value
        else:
            logger.warning(
                "Payment history lookup failed for tenant %s: %s",
                tenant_id,
                payments_result.error.message,
            )
            payments = []

        property, unit = load_tenancy(self.property_repo, tenant)

        return Ok(TenantStatement(tenant=tenant, payments=payments, property=property, unit=unit))


def load_tenancy(property_repo: PropertyRepository, tenant: Tenant) -> tuple[Property | None, Unit | None]:
    """
    Property and unit a tenant is linked to.

    Either side is None when unlinked, missing or unreadable; lookup
    failures are logged and never propagated.
    """
    property = None
    if tenant.property_id is not None:
        property = _optional_lookup(
            "Property", tenant.property_id, property_repo.get_by_id(tenant.property_id)
        )

    unit = None
    if tenant.unit_id is not None:
        unit = _optional_lookup(
            "Unit", tenant.unit_id, property_repo.get_unit_by_id(tenant.unit_id)
        )

    return property, unit


def _optional_lookup(label: str, record_id: int, result: Result):
    if not result.is_ok:
        logger.warning("%s %s lookup failed: %s", label, record_id, result.error.message)
        return None
    if result.value is None:
        logger.warning("%s %s referenced by tenant does not exist", label, record_id)
    return result.value
