from fastapi import APIRouter, Depends

from app.core.exceptions import DataAccessException
from app.dependencies import get_current_profile
from app.models.profile import Profile
from app.schemas.profile_schemas import ProfileResponse

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(profile: Profile | None = Depends(get_current_profile)):
    """
    Get the authenticated user's profile.

    The profile is created with the default role on first access.
    """
    if profile is None:
        raise DataAccessException("Profile could not be loaded or created")
    return profile
