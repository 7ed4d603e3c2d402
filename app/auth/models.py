# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, ConfigDict

from core.models.user import UserRole


class AuthUser(BaseModel):
    """
    Authenticated user extracted from the access token.

    This is the minimal user info available from the token itself,
    without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    email: Optional[str] = None
    role: UserRole


class TokenPayload(BaseModel):
    """
    Decoded access token payload.

    Standard JWT claims plus the email and role of the user.
    """
    sub: str  # User ID
    email: Optional[str] = None
    role: UserRole
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
