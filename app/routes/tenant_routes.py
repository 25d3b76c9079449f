from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_role, require_dues_trigger
from app.models.profile import Profile
from app.models.role import UserRole
from app.services.dues_service import DuesService
from app.services.statement_service import StatementService
from app.schemas.tenant_schemas import TenantStatementResponse, MonthlyDuesResponse

router = APIRouter()


@router.get("/{tenant_id}/statement", response_model=TenantStatementResponse)
def get_tenant_statement(
    tenant_id: int,
    profile: Profile = Depends(require_role(UserRole.LANDLORD)),
    db: Session = Depends(get_db),
):
    """
    Get a tenant's consolidated statement.

    - Payments are ordered newest first (empty list if none or unavailable)
    - property / unit are null when unlinked or when their lookup fails
    - Returns 404 if the tenant doesn't exist
    """
    service = StatementService(db)
    statement = service.assemble(tenant_id).unwrap()
    return TenantStatementResponse.model_validate(statement)


@router.post(
    "/generate-monthly-dues",
    response_model=MonthlyDuesResponse,
    dependencies=[Depends(require_dues_trigger)],
)
def generate_monthly_dues(db: Session = Depends(get_db)):
    """
    Accrue this month's rent onto every active tenant that is due.

    - A tenant is due once its rent_due_day (default 1) has been reached
    - Each tenant is accrued at most once per calendar month
    - tenantsDue counts tenants selected; tenantsAffected those actually updated
    - Requires the X-Dues-Token header or an ADMIN bearer token
    """
    service = DuesService(db)
    run = service.generate_monthly_dues().unwrap()
    return MonthlyDuesResponse(
        success=True,
        message=run.message,
        tenants_affected=run.tenants_affected,
        tenants_due=run.tenants_due,
        processed_at=run.processed_at,
    )
