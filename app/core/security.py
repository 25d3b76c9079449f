from dataclasses import dataclass, field
from typing import Any

from jose import JWTError, jwt
from app.config import settings
from app.core.exceptions import UnauthorizedException


@dataclass(frozen=True)
class AuthIdentity:
    """
    Authenticated identity extracted from the bearer token.

    user_id is the 'sub' claim; metadata mirrors the identity provider's
    user_metadata claim (first_name, last_name, full_name).
    """

    user_id: str
    email: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using shared SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub' (user_id), 'exp', etc.

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_aud": False},
        )

        # Validate expiration (jose checks this automatically)
        exp = payload.get("exp")
        if exp is None:
            raise UnauthorizedException("Token missing expiration")

        # Extract user_id from 'sub' claim
        user_id: str = payload.get("sub")
        if user_id is None:
            raise UnauthorizedException("Token missing user identifier")

        return payload

    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")


def extract_identity(token: str) -> AuthIdentity:
    """Build an AuthIdentity from a validated JWT"""
    payload = decode_jwt(token)
    metadata = payload.get("user_metadata") or {}
    if not isinstance(metadata, dict):
        metadata = {}
    return AuthIdentity(user_id=str(payload["sub"]), email=payload.get("email"), metadata=metadata)
