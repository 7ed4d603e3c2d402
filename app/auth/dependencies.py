# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication and role checks.
#
# The access token is read from the Authorization header (Bearer) or, for
# browser clients, from the session cookie set by POST /auth/login.
#
# Usage:
#   from app.auth import get_current_user, require_roles, AuthUser
#
#   @router.delete("/{id}")
#   def delete(user: AuthUser = Depends(require_roles(UserRole.CLIENT))):
#       ...
# =============================================================================

import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, ExpiredSignatureError
from pydantic import ValidationError

from app.config import settings
from app.auth.models import AuthUser, TokenPayload
from core.models.user import UserRole
from lib.security import decode_access_token

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor. auto_error is off so a missing header can
# fall back to the cookie and a missing token becomes 401, not 403.
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def user_from_token(token: str) -> AuthUser:
    """
    Validate an access token and build the AuthUser it describes.

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    try:
        claims = TokenPayload(**decode_access_token(token))
        user_id = int(claims.sub)
    except ExpiredSignatureError:
        logger.warning("Access token has expired")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"Access token validation failed: {e}")
        raise _unauthorized(f"Invalid token: {str(e)}")
    except (ValidationError, ValueError) as e:
        logger.warning(f"Access token has malformed claims: {e}")
        raise _unauthorized("Invalid token: malformed claims")

    logger.debug(f"Authenticated user: {user_id}")
    return AuthUser(id=user_id, email=claims.email, role=claims.role)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate the user from the request.

    This dependency:
    1. Takes the Bearer token, or the session cookie when no header is sent
    2. Verifies the signature and expiry
    3. Returns an AuthUser with the user's id, email and role

    Raises:
        HTTPException: 401 if no token is present, or it is invalid/expired
    """
    token = credentials.credentials if credentials else request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise _unauthorized("User not authenticated")
    return user_from_token(token)


def require_roles(*roles: UserRole) -> Callable[..., AuthUser]:
    """
    Build a dependency that admits only the given roles.

    Authentication runs first, so a missing token is still a 401.

    Raises:
        HTTPException: 403 if the user's role is not allowed
    """
    allowed = frozenset(roles)

    async def dependency(user: AuthUser = Depends(get_current_user)) -> AuthUser:
        if user.role not in allowed:
            logger.warning(f"User {user.id} with role {user.role.value} denied; needs one of {sorted(r.value for r in allowed)}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User not authorized",
            )
        return user

    return dependency
