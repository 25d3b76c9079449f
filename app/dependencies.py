import hmac

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.config import settings
from app.core.authorization import AuthorizationDecision, authorize_any, authorize_role
from app.core.security import AuthIdentity, extract_identity
from app.core.exceptions import UnauthorizedException, ForbiddenException
from app.database import get_db
from app.middleware.request_context import bind_profile
from app.models.profile import Profile
from app.models.role import UserRole
from app.services.profile_service import ProfileService

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def _identity_from_credentials(credentials: HTTPAuthorizationCredentials) -> AuthIdentity:
    try:
        return extract_identity(credentials.credentials)
    except UnauthorizedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthIdentity:
    """
    FastAPI dependency to validate the bearer JWT.

    Raises:
        HTTPException 401: If token invalid or expired
    """
    return _identity_from_credentials(credentials)


async def get_current_profile(
    request: Request,
    identity: AuthIdentity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> Profile | None:
    """
    FastAPI dependency resolving the caller's profile.

    Flow:
    1. Validate JWT and extract the identity ('sub', email, user_metadata)
    2. Get the profile, or create it with the default role on first access
    3. Bind the profile id to the request for logging
    4. Return None if the profile could not be loaded or created
    """
    profile = ProfileService(db).ensure_profile(identity)
    if profile is not None:
        bind_profile(request, profile.id)
    return profile


def enforce(decision: AuthorizationDecision) -> None:
    """Turn a deny decision into ForbiddenException"""
    if not decision.allowed:
        raise ForbiddenException(decision.reason)


def require_role(required_role: UserRole):
    """Guard: caller must hold required_role or a role above it"""

    async def guard(profile: Profile | None = Depends(get_current_profile)) -> Profile:
        enforce(authorize_role(profile, required_role))
        return profile

    return guard


def require_any_role(*allowed_roles: UserRole):
    """Guard: caller's role must be one of allowed_roles"""

    async def guard(profile: Profile | None = Depends(get_current_profile)) -> Profile:
        enforce(authorize_any(profile, allowed_roles))
        return profile

    return guard


async def require_dues_trigger(
    x_dues_token: str | None = Header(None),
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_security),
    db: Session = Depends(get_db),
) -> None:
    """
    Guard for the monthly dues trigger.

    A scheduler may authenticate with the X-Dues-Token header when
    DUES_TRIGGER_TOKEN is configured; otherwise an admin bearer token is
    required.
    """
    if settings.DUES_TRIGGER_TOKEN and x_dues_token is not None:
        if hmac.compare_digest(x_dues_token, settings.DUES_TRIGGER_TOKEN):
            return
        raise ForbiddenException("Invalid dues trigger token")

    if credentials is None:
        raise UnauthorizedException("Not authenticated")

    identity = _identity_from_credentials(credentials)
    profile = ProfileService(db).get_current_profile(identity)
    enforce(authorize_role(profile, UserRole.ADMIN))
