from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_role
from app.models.profile import Profile
from app.models.role import UserRole
from app.services.dashboard_service import DashboardService
from app.schemas.dashboard_schemas import DashboardStatsResponse

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(
    profile: Profile = Depends(require_role(UserRole.LANDLORD)),
    db: Session = Depends(get_db),
):
    """
    Portfolio statistics.

    - Property and unit counts, unit occupancy by status
    - Rent collected, outstanding balance and delayed payments over active tenants
    - Requires LANDLORD or higher
    """
    service = DashboardService(db)
    stats = service.get_stats().unwrap()
    return DashboardStatsResponse.model_validate(stats)
