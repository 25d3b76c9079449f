import logging
from dataclasses import dataclass
from datetime import datetime, UTC

from sqlalchemy.orm import Session

from app.core.result import Ok, Result
from app.models.tenant import Tenant
from app.repositories.tenant_repository import TenantRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuesRun:
    """Outcome of one monthly dues run"""

    tenants_affected: int
    tenants_due: int
    processed_at: datetime

    @property
    def message(self) -> str:
        return f"Generated dues for {self.tenants_affected} tenants"


def month_bounds(moment: datetime) -> tuple[datetime, datetime]:
    """Return (first instant of moment's month, first instant of the next month)"""
    start = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        return start, start.replace(year=start.year + 1, month=1)
    return start, start.replace(month=start.month + 1)


def is_due(tenant: Tenant, today: datetime) -> bool:
    """
    Decide whether a tenant's rent should be accrued today.

    Due once the tenant's due day (default 1) has been reached this month,
    unless rent was already accrued in this calendar month. A tenant that
    was never processed is due regardless of when they signed up.
    """
    due_day = tenant.rent_due_day or 1
    if due_day > today.day:
        return False

    last = tenant.last_due_processed
    if last is None:
        return True
    return (last.year, last.month) != (today.year, today.month)


class DuesService:
    """Service for the monthly rent accrual batch"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)

    def generate_monthly_dues(self, now: datetime | None = None) -> Result[DuesRun]:
        """
        Accrue one month of rent onto every active tenant that is due.

        Tenants are updated one at a time and each update commits on its
        own. A failure reading tenants aborts before any write; a failure
        writing a tenant stops the run and is returned, leaving earlier
        updates committed.

        Args:
            now: Run timestamp (defaults to the current UTC time)

        Returns:
            Ok(DuesRun) or the Err of the failing data access
        """
        now = now or datetime.now(UTC)
        logger.info("Starting monthly dues run for %s", now.date().isoformat())

        tenants_result = self.tenant_repo.get_active()
        if not tenants_result.is_ok:
            logger.error("Monthly dues run aborted: %s", tenants_result.error.message)
            return tenants_result

        due_ids = [tenant.id for tenant in tenants_result.value if is_due(tenant, now)]
        period_start, next_period_start = month_bounds(now)

        affected = 0
        for tenant_id in due_ids:
            result = self.tenant_repo.accrue_monthly_due(
                tenant_id, now, period_start, next_period_start
            )
            if not result.is_ok:
                logger.error(
                    "Monthly dues run halted at tenant %s after %d updates: %s",
                    tenant_id,
                    affected,
                    result.error.message,
                    extra={"tenant_id": tenant_id},
                )
                return result
            if result.value:
                affected += 1
            else:
                logger.info(
                    "Tenant %s already accrued for %s",
                    tenant_id,
                    period_start.strftime("%Y-%m"),
                    extra={"tenant_id": tenant_id},
                )

        logger.info(
            "Monthly dues run finished: %d of %d due tenants updated",
            affected,
            len(due_ids),
            extra={"tenants_affected": affected},
        )
        return Ok(DuesRun(tenants_affected=affected, tenants_due=len(due_ids), processed_at=now))
